"""Entry point for resolving any Deezer link."""

import logging
from typing import Any

from deezer_resolver.schemas.deezer import Playlist, Track
from deezer_resolver.services.deezer_api import resolve_by_canonical_url
from deezer_resolver.services.page_state import resolve_by_scrape
from deezer_resolver.services.url_classifier import canonical_type, is_share_link

logger = logging.getLogger(__name__)


async def resolve(url: str, request_options: dict[str, Any] | None = None) -> Track | Playlist | None:
    """Resolve a Deezer track, playlist or album link.

    Canonical links go straight to the public API; share links are
    dereferenced through the page they redirect to. Returns None for
    unrecognized links and for every failure along the way.
    """
    url = url.strip()
    if canonical_type(url) is not None:
        return await resolve_by_canonical_url(url, request_options)
    if is_share_link(url):
        return await resolve_by_scrape(url, request_options)
    logger.info("Not a Deezer link: %s", url)
    return None
