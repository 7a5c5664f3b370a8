"""Mapping from the raw Deezer shapes to the normalized output models.

Both resolution paths (public API and embedded page state) end here, so a
track looks the same whichever way it was reached.

Picture URLs are resolved the same way everywhere, per size:
an explicit URL from the response wins, otherwise one is synthesized from
the image hash, otherwise the URL is the empty string.
"""

from deezer_resolver.core.config import get_settings
from deezer_resolver.core.errors import ExtractionError
from deezer_resolver.schemas.deezer import THUMBNAIL_SIZES, Artist, Playlist, Thumbnail, Track
from deezer_resolver.schemas.raw import (
    ApiAlbum,
    ApiArtist,
    ApiCollectionTrack,
    ApiPlaylist,
    ApiTrack,
    PageAlbum,
    PageArtist,
    PagePlaylist,
    PageSong,
)

# Image categories on the Deezer CDN
COVER = "cover"
PLAYLIST = "playlist"
ARTIST = "artist"


def image_url(image_hash: str, category: str, size: int) -> str:
    """Build a CDN URL for an image hash at ``size``x``size``."""
    base = get_settings().deezer_image_base_url
    return f"{base}/{category}/{image_hash}/{size}x{size}-000000-80-0-0.jpg"


def resolve_thumbnails(
    image_hash: str | None,
    category: str,
    explicit: tuple[str | None, str | None, str | None] = (None, None, None),
) -> list[Thumbnail]:
    """Three thumbnails (500, 250, 56).

    ``explicit`` holds URLs supplied by the response for the same sizes
    (big, medium, small) and takes precedence over the hash.
    """
    thumbnails = []
    for size, given in zip(THUMBNAIL_SIZES, explicit, strict=True):
        if given:
            url = given
        elif image_hash:
            url = image_url(image_hash, category, size)
        else:
            url = ""
        thumbnails.append(Thumbnail(width=size, height=size, url=url))
    return thumbnails


def _entity_url(kind: str, entity_id: str) -> str:
    return f"{get_settings().deezer_base_url}/{kind}/{entity_id}"


# --- artists ---


def authors_from_contributors(contributors: list[ApiArtist]) -> list[Artist]:
    """Keep contributors typed "artist" that have both a name and a link."""
    return [
        Artist(name=c.name, url=c.link, image=c.picture_big)
        for c in contributors
        if c.type == "artist" and c.name and c.link
    ]


def authors_from_page(artists: list[PageArtist]) -> list[Artist]:
    """Embedded-state counterpart of authors_from_contributors()."""
    return [_page_artist(a) for a in artists if a.entity_type == "artist" and a.art_id and a.art_name]


def _page_artist(artist: PageArtist) -> Artist:
    image = image_url(artist.art_picture, ARTIST, THUMBNAIL_SIZES[0]) if artist.art_picture else None
    return Artist(name=artist.art_name, url=_entity_url("artist", artist.art_id), image=image)


def _first_page_artist(artists: list[PageArtist]) -> Artist | None:
    for artist in artists:
        if artist.art_id and artist.art_name:
            return _page_artist(artist)
    return None


def _collection_track_author(artist: ApiArtist) -> Artist:
    if not artist.name:
        raise ExtractionError("collection track has no artist name")
    url = artist.link or (_entity_url("artist", artist.id) if artist.id else "")
    return Artist(name=artist.name, url=url)


# --- tracks ---


def track_from_api(raw: ApiTrack) -> Track:
    authors = authors_from_contributors(raw.contributors)
    if not authors:
        raise ExtractionError(f"track {raw.link} has no linked artist contributors")
    return Track(
        name=raw.title,
        url=raw.link,
        duration=raw.duration,
        authors=authors,
        thumbnails=resolve_thumbnails(raw.md5_image, COVER),
    )


def track_from_collection(raw: ApiCollectionTrack) -> Track:
    """Map a ``tracks.data`` entry; its author comes from ``artist`` only."""
    return Track(
        name=raw.title,
        url=raw.link,
        duration=raw.duration,
        authors=[_collection_track_author(raw.artist)],
        thumbnails=resolve_thumbnails(raw.md5_image, COVER),
    )


def track_from_page(raw: PageSong) -> Track:
    authors = authors_from_page(raw.artists)
    if not authors:
        raise ExtractionError(f"song {raw.sng_id} has no artists")
    return Track(
        name=raw.sng_title,
        url=_entity_url("track", raw.sng_id),
        duration=raw.duration,
        authors=authors,
        thumbnails=resolve_thumbnails(raw.alb_picture, COVER),
    )


# --- playlists and albums ---


def playlist_from_api(raw: ApiPlaylist) -> Playlist:
    return Playlist(
        name=raw.title,
        url=raw.link,
        artist=Artist(name=raw.creator.name, url=_entity_url("profile", raw.creator.id)),
        description=raw.description or "",
        thumbnails=resolve_thumbnails(
            raw.md5_image,
            PLAYLIST,
            (raw.picture_big, raw.picture_medium, raw.picture_small),
        ),
        tracks=[track_from_collection(t) for t in raw.tracks.data],
        kind="playlist",
    )


def album_from_api(raw: ApiAlbum) -> Playlist:
    owner = next((c for c in raw.contributors if c.name), raw.artist)
    if owner is None or not owner.name:
        raise ExtractionError(f"album {raw.link} has no contributors")
    return Playlist(
        name=raw.title,
        url=raw.link,
        artist=Artist(
            name=owner.name,
            url=owner.link or (_entity_url("artist", owner.id) if owner.id else ""),
            image=owner.picture_medium,
        ),
        description="",
        thumbnails=resolve_thumbnails(
            raw.md5_image,
            COVER,
            (raw.cover_big, raw.cover_medium, raw.cover_small),
        ),
        tracks=[track_from_collection(t) for t in raw.tracks.data],
        kind="album",
    )


def playlist_shell_from_page(raw: PagePlaylist) -> Playlist:
    """Playlist from embedded state, without tracks (the page does not list them all)."""
    owner = _first_page_artist(raw.linked_artists)
    if owner is None and raw.parent_username and raw.parent_user_id:
        # User playlists have no linked artist; their creator owns them
        owner = Artist(name=raw.parent_username, url=_entity_url("profile", raw.parent_user_id))
    if owner is None:
        raise ExtractionError(f"playlist {raw.playlist_id} has no owner")
    return Playlist(
        name=raw.title,
        url=_entity_url("playlist", raw.playlist_id),
        artist=owner,
        description=raw.description or "",
        thumbnails=resolve_thumbnails(raw.playlist_picture, PLAYLIST),
        kind="playlist",
    )


def album_shell_from_page(raw: PageAlbum) -> Playlist:
    """Album from embedded state, without tracks."""
    owner = _first_page_artist(raw.artists)
    if owner is None:
        raise ExtractionError(f"album {raw.alb_id} has no artists")
    return Playlist(
        name=raw.alb_title,
        url=_entity_url("album", raw.alb_id),
        artist=owner,
        description=raw.description or "",
        thumbnails=resolve_thumbnails(raw.alb_picture, COVER),
        kind="album",
    )


_API_MAPPERS = {
    ApiTrack: track_from_api,
    ApiPlaylist: playlist_from_api,
    ApiAlbum: album_from_api,
}


def normalize_api_entity(raw: ApiTrack | ApiPlaylist | ApiAlbum) -> Track | Playlist:
    return _API_MAPPERS[type(raw)](raw)
