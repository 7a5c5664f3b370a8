"""httpx plumbing shared by the resolvers and search.

Callers may pass ``request_options``: keyword arguments for
``httpx.AsyncClient`` (headers, timeout, proxy, transport, ...). They are
laid over ``CLIENT_DEFAULTS`` and otherwise not inspected; options httpx
rejects surface as ``FetchError``.
"""

import logging
from typing import Any

import httpx

from deezer_resolver.core.errors import FetchError

logger = logging.getLogger(__name__)

# Share links answer with redirects to deezer.com
CLIENT_DEFAULTS: dict[str, Any] = {"follow_redirects": True}


def open_client(request_options: dict[str, Any] | None = None) -> httpx.AsyncClient:
    try:
        return httpx.AsyncClient(**{**CLIENT_DEFAULTS, **(request_options or {})})
    except (TypeError, ValueError) as e:
        raise FetchError(f"invalid request options: {e}") from e


async def _get(client: httpx.AsyncClient, url: str, params: dict[str, Any] | None) -> httpx.Response:
    try:
        response = await client.get(url, params=params)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(f"GET {url} returned {e.response.status_code}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(f"GET {url} failed: {type(e).__name__}") from e
    return response


async def fetch_json(
    client: httpx.AsyncClient, url: str, params: dict[str, Any] | None = None
) -> Any:
    response = await _get(client, url, params)
    try:
        return response.json()
    except ValueError as e:
        raise FetchError(f"GET {url} did not return JSON") from e


async def fetch_text(client: httpx.AsyncClient, url: str) -> str:
    response = await _get(client, url, None)
    logger.debug("Fetched %s (%d bytes)", url, len(response.text))
    return response.text
