from fastapi import APIRouter, HTTPException, Query

from deezer_resolver.schemas.common import ClassifyResponse
from deezer_resolver.schemas.deezer import Playlist, Track
from deezer_resolver.services.resolver import resolve
from deezer_resolver.services.url_classifier import classify

router = APIRouter()


@router.get("", response_model=Track | Playlist)
async def resolve_link(url: str = Query(..., min_length=1, max_length=500)) -> Track | Playlist:
    result = await resolve(url)
    if result is None:
        raise HTTPException(status_code=404, detail="Could not resolve Deezer link")
    return result


@router.get("/classify", response_model=ClassifyResponse)
def classify_link(url: str = Query(..., min_length=1, max_length=500)) -> ClassifyResponse:
    """Report which kind of Deezer link ``url`` is, without fetching anything."""
    return ClassifyResponse(url=url, type=classify(url.strip()))
