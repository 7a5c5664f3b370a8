"""Resolve Deezer links into normalized track/playlist/album descriptions."""

from deezer_resolver.schemas import (
    Artist,
    LinkType,
    Playlist,
    SearchError,
    SearchOptions,
    SearchResult,
    SearchType,
    Thumbnail,
    Track,
)
from deezer_resolver.services.resolver import resolve
from deezer_resolver.services.search import search
from deezer_resolver.services.url_classifier import classify

__all__ = [
    "Artist",
    "LinkType",
    "Playlist",
    "SearchError",
    "SearchOptions",
    "SearchResult",
    "SearchType",
    "Thumbnail",
    "Track",
    "classify",
    "resolve",
    "search",
]
