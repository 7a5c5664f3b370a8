"""Validated shapes of the two raw sources we read from Deezer.

The public JSON API (``api.deezer.com``) and the application state
embedded in deezer.com pages describe the same entities with different
field names. Each source gets its own models here; ``services.normalization``
maps both into the output types in ``schemas.deezer``.
"""

import math
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _to_seconds(value: object) -> object:
    """Accept numeric strings ("213", "213.0") as durations."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
        value = float(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"duration must be finite, got {value}")
        return int(value)
    return value


Seconds = Annotated[int, BeforeValidator(_to_seconds)]


class RawModel(BaseModel):
    # IDs arrive as ints from the API and as strings from page state
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, populate_by_name=True)


# --- api.deezer.com ---


class ApiArtist(RawModel):
    """An ``artist`` object or a ``contributors`` entry."""

    id: str | None = None
    name: str | None = None
    link: str | None = None
    type: str | None = None
    picture_big: str | None = None
    picture_medium: str | None = None


class ApiCreator(RawModel):
    id: str
    name: str


class ApiCollectionTrack(RawModel):
    """Entry of ``tracks.data`` inside a playlist or album response."""

    title: str
    link: str
    duration: Seconds = 0
    md5_image: str | None = None
    artist: ApiArtist


class ApiTrackList(RawModel):
    data: list[ApiCollectionTrack] = Field(default_factory=list)


class ApiTrack(RawModel):
    type: Literal["track"]
    title: str
    link: str
    duration: Seconds = 0
    md5_image: str | None = None
    contributors: list[ApiArtist] = Field(default_factory=list)
    artist: ApiArtist | None = None


class ApiPlaylist(RawModel):
    type: Literal["playlist"]
    title: str
    link: str
    description: str | None = None
    md5_image: str | None = None
    picture_small: str | None = None
    picture_medium: str | None = None
    picture_big: str | None = None
    creator: ApiCreator
    tracks: ApiTrackList = Field(default_factory=ApiTrackList)


class ApiAlbum(RawModel):
    type: Literal["album"]
    title: str
    link: str
    md5_image: str | None = None
    cover_small: str | None = None
    cover_medium: str | None = None
    cover_big: str | None = None
    contributors: list[ApiArtist] = Field(default_factory=list)
    artist: ApiArtist | None = None
    tracks: ApiTrackList = Field(default_factory=ApiTrackList)


ApiEntity = ApiTrack | ApiPlaylist | ApiAlbum


# --- window.__DZR_APP_STATE__ ---


class PageArtist(RawModel):
    entity_type: str | None = Field(default=None, alias="__TYPE__")
    art_id: str | None = Field(default=None, alias="ART_ID")
    art_name: str | None = Field(default=None, alias="ART_NAME")
    art_picture: str | None = Field(default=None, alias="ART_PICTURE")


class PageSong(RawModel):
    entity_type: Literal["song"] = Field(alias="__TYPE__")
    sng_id: str = Field(alias="SNG_ID")
    sng_title: str = Field(alias="SNG_TITLE")
    duration: Seconds = Field(default=0, alias="DURATION")
    artists: list[PageArtist] = Field(default_factory=list, alias="ARTISTS")
    alb_picture: str | None = Field(default=None, alias="ALB_PICTURE")


class PagePlaylist(RawModel):
    entity_type: Literal["playlist"] = Field(alias="__TYPE__")
    playlist_id: str = Field(alias="PLAYLIST_ID", min_length=1)
    title: str = Field(alias="TITLE")
    description: str | None = Field(default=None, alias="DESCRIPTION")
    playlist_picture: str | None = Field(default=None, alias="PLAYLIST_PICTURE")
    linked_artists: list[PageArtist] = Field(default_factory=list, alias="PLAYLIST_LINKED_ARTIST")
    parent_user_id: str | None = Field(default=None, alias="PARENT_USER_ID")
    parent_username: str | None = Field(default=None, alias="PARENT_USERNAME")


class PageAlbum(RawModel):
    entity_type: Literal["album"] = Field(alias="__TYPE__")
    alb_id: str = Field(alias="ALB_ID", min_length=1)
    alb_title: str = Field(alias="ALB_TITLE")
    description: str | None = Field(default=None, alias="DESCRIPTION")
    alb_picture: str | None = Field(default=None, alias="ALB_PICTURE")
    artists: list[PageArtist] = Field(default_factory=list, alias="ARTISTS")


PageEntity = PageSong | PagePlaylist | PageAlbum
