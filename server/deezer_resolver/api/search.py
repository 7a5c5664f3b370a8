from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from deezer_resolver.schemas.deezer import SearchError, SearchOptions, SearchResult, SearchType
from deezer_resolver.services.search import search

router = APIRouter()


@router.get(
    "",
    response_model=SearchResult,
    responses={502: {"model": SearchError}},
)
async def search_deezer(
    q: str = Query(..., min_length=1, max_length=200),
    type: SearchType = SearchType.ALL,
    limit: int | None = Query(None, ge=1),
    index: int = Query(0, ge=0),
) -> SearchResult | JSONResponse:
    result = await search(q, SearchOptions(type=type, limit=limit, index=index))
    if result is None:
        raise HTTPException(status_code=503, detail="Deezer search is currently unavailable")
    if isinstance(result, SearchError):
        return JSONResponse(status_code=502, content=result.model_dump())
    return result
