from fastapi import APIRouter

from deezer_resolver.api import resolve, search

api_router = APIRouter()


@api_router.get("/health", tags=["health"])
def api_health_check():
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "ok", "service": "api"}


api_router.include_router(resolve.router, prefix="/resolve", tags=["resolve"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
