from deezer_resolver.schemas.deezer import (
    Artist,
    LinkType,
    Playlist,
    SearchError,
    SearchErrorDetail,
    SearchOptions,
    SearchResult,
    SearchType,
    Thumbnail,
    Track,
)

__all__ = [
    "Artist",
    "LinkType",
    "Playlist",
    "SearchError",
    "SearchErrorDetail",
    "SearchOptions",
    "SearchResult",
    "SearchType",
    "Thumbnail",
    "Track",
]
