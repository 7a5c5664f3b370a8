"""Resolution of share links by reading the state embedded in deezer.com pages.

A share link redirects to a regular deezer.com page whose HTML carries a
``window.__DZR_APP_STATE__ = {...}`` script. Its ``DATA`` object names the
entity. Playlists and albums in that state do not include their full
track list, so those take a second request to the public API.
"""

import json
import logging
import re
from typing import Any

from bs4 import BeautifulSoup
from pydantic import ValidationError

from deezer_resolver.core.errors import ExtractionError, ResolverError
from deezer_resolver.schemas.deezer import LinkType, Playlist, Track
from deezer_resolver.schemas.raw import PageAlbum, PageEntity, PagePlaylist, PageSong
from deezer_resolver.services.deezer_api import fetch_entity
from deezer_resolver.services.http_client import fetch_text, open_client
from deezer_resolver.services.normalization import (
    album_shell_from_page,
    playlist_shell_from_page,
    track_from_collection,
    track_from_page,
)

logger = logging.getLogger(__name__)

APP_STATE_MARKER = "window.__DZR_APP_STATE__"
_ASSIGNMENT_RE = re.compile(r"^\s*window\.__DZR_APP_STATE__\s*=\s*")

_PAGE_MODELS: dict[str, type[PageSong] | type[PagePlaylist] | type[PageAlbum]] = {
    "song": PageSong,
    "playlist": PagePlaylist,
    "album": PageAlbum,
}


def extract_app_state(html: str) -> dict[str, Any]:
    """Return the ``DATA`` object of the embedded application state."""
    soup = BeautifulSoup(html, "lxml")
    script = next(
        (s for s in soup.find_all("script") if s.string and APP_STATE_MARKER in s.string),
        None,
    )
    if script is None:
        raise ExtractionError("page has no application state script")

    text = _ASSIGNMENT_RE.sub("", script.string, count=1).strip().rstrip(";").rstrip()
    if not text:
        raise ExtractionError("application state script is empty")

    try:
        state = json.loads(text)
    except json.JSONDecodeError as e:
        raise ExtractionError(f"application state is not valid JSON: {e}") from e

    data = state.get("DATA") if isinstance(state, dict) else None
    if not isinstance(data, dict) or not data:
        raise ExtractionError("application state has no DATA")
    return data


def parse_page_entity(data: dict[str, Any]) -> PageEntity:
    entity_type = data.get("__TYPE__")
    model = _PAGE_MODELS.get(entity_type)
    if model is None:
        raise ExtractionError(f"unsupported page entity type {entity_type!r}")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ExtractionError(f"malformed {entity_type} in application state") from e


async def resolve_by_scrape(
    url: str, request_options: dict[str, Any] | None = None
) -> Track | Playlist | None:
    """Resolve a share link (or any deezer.com page). Returns None on any failure."""
    page_url = url if "://" in url else f"https://{url}"

    try:
        async with open_client(request_options) as client:
            raw = parse_page_entity(extract_app_state(await fetch_text(client, page_url)))

            if isinstance(raw, PageSong):
                result: Track | Playlist = track_from_page(raw)
            else:
                if isinstance(raw, PagePlaylist):
                    shell = playlist_shell_from_page(raw)
                    full = await fetch_entity(client, LinkType.PLAYLIST, raw.playlist_id)
                else:
                    shell = album_shell_from_page(raw)
                    full = await fetch_entity(client, LinkType.ALBUM, raw.alb_id)
                tracks = [track_from_collection(t) for t in full.tracks.data]
                result = shell.model_copy(update={"tracks": tracks})
    except (ResolverError, ValidationError) as e:
        logger.warning("Deezer page resolution failed for %s: %s", url, e)
        return None

    logger.info("Resolved %s from page %s", result.kind, url)
    return result
