"""Normalized Deezer entities returned by the resolvers and the search passthrough."""

import math
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

THUMBNAIL_SIZES = (500, 250, 56)


class LinkType(str, Enum):
    SONG = "song"
    PLAYLIST = "playlist"
    ALBUM = "album"
    SHARE_LINK = "share-link"


class SearchType(str, Enum):
    ALL = "all"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    PODCAST = "podcast"
    RADIO = "radio"
    TRACK = "track"
    USER = "user"


class Thumbnail(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    url: str


def _check_thumbnails(value: list[Thumbnail]) -> list[Thumbnail]:
    sizes = tuple((t.width, t.height) for t in value)
    if sizes != tuple((s, s) for s in THUMBNAIL_SIZES):
        raise ValueError(f"thumbnails must be sized {THUMBNAIL_SIZES} in order, got {sizes}")
    return value


class Artist(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    image: str | None = None


class Track(BaseModel):
    """A single song."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    duration: int = Field(..., ge=0)  # seconds
    authors: list[Artist] = Field(..., min_length=1)
    thumbnails: list[Thumbnail]
    kind: Literal["song"] = "song"

    @field_validator("thumbnails")
    @classmethod
    def three_thumbnails(cls, v: list[Thumbnail]) -> list[Thumbnail]:
        return _check_thumbnails(v)


class Playlist(BaseModel):
    """A playlist or an album: an ordered track list with a single owner."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    tracks: list[Track] = Field(default_factory=list)
    artist: Artist
    description: str = ""
    thumbnails: list[Thumbnail]
    kind: Literal["playlist", "album"]

    @field_validator("thumbnails")
    @classmethod
    def three_thumbnails(cls, v: list[Thumbnail]) -> list[Thumbnail]:
        return _check_thumbnails(v)


class SearchOptions(BaseModel):
    """Per-call search options.

    Build a fresh instance for every call; unset fields keep their defaults.
    ``request_options`` is handed to ``httpx.AsyncClient`` untouched.
    """

    model_config = ConfigDict(frozen=True)

    type: SearchType = SearchType.ALL
    limit: float | None = math.inf
    index: float | None = 0
    request_options: dict[str, Any] | None = None


class SearchResult(BaseModel):
    """Raw upstream search body. Built with ``model_construct``, so nothing is validated."""

    model_config = ConfigDict(extra="allow")

    data: list[Any] = Field(default_factory=list)
    total: int = 0
    prev: str | None = None
    next: str | None = None


class SearchErrorDetail(BaseModel):
    type: str = ""
    message: str = ""
    code: int = 0


class SearchError(BaseModel):
    error: SearchErrorDetail
