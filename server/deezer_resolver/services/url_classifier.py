"""Deezer URL classification.

Canonical links carry the entity type and numeric ID in the path
(``deezer.com/en/track/3135556``). Share links (``deezer.page.link/...``)
are opaque and have to be dereferenced before their target is known.
"""

import re

from deezer_resolver.schemas.deezer import LinkType

# Optional scheme, optional www., fixed host, optional locale segment
_CANONICAL_PREFIX = r"^(?:https?://)?(?:www\.)?deezer\.com/(?:[a-z]+/)?"

TRACK_RE = re.compile(_CANONICAL_PREFIX + r"track/(\d+)")
PLAYLIST_RE = re.compile(_CANONICAL_PREFIX + r"playlist/(\d+)")
ALBUM_RE = re.compile(_CANONICAL_PREFIX + r"album/(\d+)")
SHARE_LINK_RE = re.compile(r"^(?:https?://)?(?:deezer\.)?page\.link/([a-zA-Z0-9]+)")

# Evaluated in order; first match wins
_CANONICAL_PATTERNS: tuple[tuple[re.Pattern[str], LinkType], ...] = (
    (TRACK_RE, LinkType.SONG),
    (PLAYLIST_RE, LinkType.PLAYLIST),
    (ALBUM_RE, LinkType.ALBUM),
)
_PATTERNS = _CANONICAL_PATTERNS + ((SHARE_LINK_RE, LinkType.SHARE_LINK),)

# Path keyword used by api.deezer.com for each canonical type
API_KEYWORDS = {
    LinkType.SONG: "track",
    LinkType.PLAYLIST: "playlist",
    LinkType.ALBUM: "album",
}


def classify(url: str) -> LinkType | None:
    """Return the kind of Deezer link ``url`` is, or None if it is not one."""
    for pattern, kind in _PATTERNS:
        if pattern.match(url):
            return kind
    return None


def canonical_type(url: str) -> LinkType | None:
    """Like classify(), but only recognizes links that embed a numeric ID."""
    match = extract_id(url)
    return match[0] if match else None


def extract_id(url: str) -> tuple[LinkType, str] | None:
    """Return (type, numeric id) for a canonical link, None otherwise."""
    for pattern, kind in _CANONICAL_PATTERNS:
        match = pattern.match(url)
        if match:
            return kind, match.group(1)
    return None


def is_share_link(url: str) -> bool:
    return SHARE_LINK_RE.match(url) is not None
