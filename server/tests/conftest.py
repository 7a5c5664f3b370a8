"""Pytest configuration and fixtures for deezer_resolver tests."""

import json
from collections.abc import Generator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from deezer_resolver.main import app


class FakeDeezer:
    """In-memory stand-in for deezer.com, plugged in through ``request_options``.

    Routes are keyed by scheme://host/path; query strings are ignored for
    matching but every request is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.routes: dict[str, dict[str, Any] | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(self, url: str, status: int = 200, **kwargs: Any) -> None:
        self.routes[url] = {"status_code": status, **kwargs}

    def fail(self, url: str, exc: Exception) -> None:
        self.routes[url] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        route = self.routes.get(key)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        return httpx.Response(**route)

    @property
    def options(self) -> dict[str, Any]:
        return {"transport": httpx.MockTransport(self.handler)}

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]


@pytest.fixture
def fake_deezer() -> FakeDeezer:
    return FakeDeezer()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


def app_state_page(data: dict[str, Any] | None, *, raw: str | None = None) -> str:
    """HTML page carrying ``window.__DZR_APP_STATE__`` the way deezer.com renders it."""
    state = raw if raw is not None else json.dumps({"DATA": data, "EXTRA": {}})
    return (
        "<html><head><title>Deezer</title>"
        '<script src="/cdn/app.js"></script>'
        "<script>window.dataLayer = [];</script>"
        f"<script>window.__DZR_APP_STATE__ = {state}</script>"
        "</head><body><div id='dzr-app'></div></body></html>"
    )


@pytest.fixture
def render_page():
    return app_state_page


# --- api.deezer.com payloads ---


def collection_track(track_id: int, title: str, md5: str, artist: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": track_id,
        "title": title,
        "link": f"https://www.deezer.com/track/{track_id}",
        "duration": "240",
        "md5_image": md5,
        "artist": artist,
        "type": "track",
    }


@pytest.fixture
def api_track() -> dict[str, Any]:
    return {
        "id": 3135556,
        "type": "track",
        "title": "Harder, Better, Faster, Stronger",
        "link": "https://www.deezer.com/track/3135556",
        "duration": "224",
        "md5_image": "2e018122cb56986277102d2041a592c8",
        "contributors": [
            {
                "id": 27,
                "name": "Daft Punk",
                "link": "https://www.deezer.com/artist/27",
                "picture_big": "https://e-cdns-images.dzcdn.net/images/artist/big.jpg",
                "type": "artist",
                "role": "Main",
            },
            {
                "id": 99,
                "name": "Session Player",
                "link": "https://www.deezer.com/artist/99",
                "type": "performer",
            },
        ],
        "artist": {"id": 27, "name": "Daft Punk", "type": "artist"},
    }


@pytest.fixture
def api_playlist() -> dict[str, Any]:
    return {
        "id": 908622995,
        "type": "playlist",
        "title": "Electro Hits",
        "link": "https://www.deezer.com/playlist/908622995",
        "description": "The biggest electro tracks",
        "md5_image": "playlisthash",
        "picture_small": "https://cdn.example/playlist/56.jpg",
        "picture_medium": "https://cdn.example/playlist/250.jpg",
        "picture_big": "https://cdn.example/playlist/500.jpg",
        "creator": {"id": 753546365, "name": "Deezer Electro"},
        "tracks": {
            "data": [
                collection_track(
                    3135556,
                    "Harder, Better, Faster, Stronger",
                    "hash1",
                    {"id": 27, "name": "Daft Punk", "link": "https://www.deezer.com/artist/27"},
                ),
                collection_track(
                    1109731,
                    "Strobe",
                    "hash2",
                    {"id": 1424821, "name": "deadmau5", "link": "https://www.deezer.com/artist/1424821"},
                ),
            ]
        },
    }


@pytest.fixture
def api_album() -> dict[str, Any]:
    return {
        "id": 302127,
        "type": "album",
        "title": "Discovery",
        "link": "https://www.deezer.com/album/302127",
        "md5_image": "albumhash",
        "cover_small": None,
        "cover_medium": None,
        "cover_big": None,
        "contributors": [
            {
                "id": 27,
                "name": "Daft Punk",
                "link": "https://www.deezer.com/artist/27",
                "picture_medium": "https://cdn.example/artist/27/250.jpg",
                "type": "artist",
            }
        ],
        "tracks": {
            "data": [
                # Album track listings omit the artist link
                collection_track(3135553, "One More Time", "hash3", {"id": 27, "name": "Daft Punk"}),
            ]
        },
    }


# --- embedded page state ---


@pytest.fixture
def page_song() -> dict[str, Any]:
    return {
        "__TYPE__": "song",
        "SNG_ID": "3135556",
        "SNG_TITLE": "Harder, Better, Faster, Stronger",
        "DURATION": "224",
        "ALB_PICTURE": "2e018122cb56986277102d2041a592c8",
        "ARTISTS": [
            {"__TYPE__": "artist", "ART_ID": "27", "ART_NAME": "Daft Punk", "ART_PICTURE": "artpic"},
            {"__TYPE__": "artist", "ART_ID": "", "ART_NAME": "No Id"},
        ],
    }


@pytest.fixture
def page_playlist() -> dict[str, Any]:
    return {
        "__TYPE__": "playlist",
        "PLAYLIST_ID": "908622995",
        "TITLE": "Electro Hits",
        "PLAYLIST_PICTURE": "playlisthash",
        "PARENT_USER_ID": "753546365",
        "PARENT_USERNAME": "Deezer Electro",
        "PLAYLIST_LINKED_ARTIST": [
            {"ART_ID": "27", "ART_NAME": "Daft Punk", "ART_PICTURE": "artpic"},
        ],
        "NB_SONG": 2,
    }


@pytest.fixture
def page_album() -> dict[str, Any]:
    return {
        "__TYPE__": "album",
        "ALB_ID": "302127",
        "ALB_TITLE": "Discovery",
        "ALB_PICTURE": "albumhash",
        "ARTISTS": [{"__TYPE__": "artist", "ART_ID": "27", "ART_NAME": "Daft Punk", "ART_PICTURE": "artpic"}],
    }
