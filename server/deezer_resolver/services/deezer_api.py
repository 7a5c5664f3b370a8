"""Resolution of canonical deezer.com links through the public JSON API."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from deezer_resolver.core.config import get_settings
from deezer_resolver.core.errors import ExtractionError, ResolverError
from deezer_resolver.schemas.deezer import LinkType, Playlist, Track
from deezer_resolver.schemas.raw import ApiAlbum, ApiEntity, ApiPlaylist, ApiTrack
from deezer_resolver.services.http_client import fetch_json, open_client
from deezer_resolver.services.normalization import normalize_api_entity
from deezer_resolver.services.url_classifier import API_KEYWORDS, extract_id

logger = logging.getLogger(__name__)

_API_MODELS: dict[LinkType, type[ApiTrack] | type[ApiPlaylist] | type[ApiAlbum]] = {
    LinkType.SONG: ApiTrack,
    LinkType.PLAYLIST: ApiPlaylist,
    LinkType.ALBUM: ApiAlbum,
}


def api_url(kind: LinkType, entity_id: str) -> str:
    return f"{get_settings().deezer_api_base_url}/{API_KEYWORDS[kind]}/{entity_id}"


async def fetch_entity(client: httpx.AsyncClient, kind: LinkType, entity_id: str) -> ApiEntity:
    """GET one track, playlist or album and validate it against the expected shape.

    The endpoint decides which shape is expected; the response's own
    ``type`` field has to agree with it.
    """
    url = api_url(kind, entity_id)
    payload = await fetch_json(client, url)
    if not isinstance(payload, dict):
        raise ExtractionError(f"{url} returned {type(payload).__name__}, expected an object")
    if payload.get("error"):
        # The API reports missing entities with a 200 and an error body
        raise ExtractionError(f"{url} returned an error: {payload['error']}")
    try:
        return _API_MODELS[kind].model_validate(payload)
    except ValidationError as e:
        raise ExtractionError(f"{url} returned an unexpected {API_KEYWORDS[kind]} payload") from e


async def resolve_by_canonical_url(
    url: str, request_options: dict[str, Any] | None = None
) -> Track | Playlist | None:
    """Resolve a canonical track/playlist/album link. Returns None on any failure."""
    match = extract_id(url)
    if match is None:
        logger.debug("No Deezer ID in %s", url)
        return None
    kind, entity_id = match

    try:
        async with open_client(request_options) as client:
            raw = await fetch_entity(client, kind, entity_id)
        result = normalize_api_entity(raw)
    except (ResolverError, ValidationError) as e:
        logger.warning("Deezer API lookup failed for %s: %s", url, e)
        return None

    logger.info("Resolved %s %s via API", result.kind, entity_id)
    return result
