"""Passthrough to the Deezer search API.

The response body is handed back as-is; only a top-level ``error``
object is told apart from a result.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from deezer_resolver.core.config import get_settings
from deezer_resolver.core.errors import FetchError
from deezer_resolver.schemas.deezer import (
    SearchError,
    SearchErrorDetail,
    SearchOptions,
    SearchResult,
    SearchType,
)
from deezer_resolver.services.http_client import fetch_json, open_client

logger = logging.getLogger(__name__)


def search_path(search_type: SearchType) -> str:
    if search_type == SearchType.ALL:
        return "/search"
    return f"/search/{search_type.value}"


def _usable(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def _as_param(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value


def build_search_params(query: str, options: SearchOptions) -> dict[str, Any]:
    """Query string for a search: ``q``, ``limit`` always, ``index`` only past the first page."""
    params: dict[str, Any] = {"q": query}
    if _usable(options.limit):
        params["limit"] = _as_param(options.limit)
    else:
        params["limit"] = get_settings().search_default_limit
    if _usable(options.index):
        params["index"] = _as_param(options.index)
    return params


def _search_error(error: Any) -> SearchError:
    if isinstance(error, dict):
        try:
            return SearchError.model_validate({"error": error})
        except ValidationError:
            logger.debug("Unexpected search error shape: %s", error)
    return SearchError(error=SearchErrorDetail(message=str(error)))


async def search(
    query: str, options: SearchOptions | Mapping[str, Any] | None = None
) -> SearchResult | SearchError | None:
    """Search Deezer.

    ``options`` may be a SearchOptions or a mapping of its fields; missing
    fields take their defaults. Returns None when the request fails.
    """
    if not isinstance(options, SearchOptions):
        try:
            options = SearchOptions.model_validate(dict(options or {}))
        except ValidationError as e:
            logger.warning("Invalid search options %s: %s", options, e)
            return None

    url = f"{get_settings().deezer_api_base_url}{search_path(options.type)}"
    params = build_search_params(query, options)

    try:
        async with open_client(options.request_options) as client:
            payload = await fetch_json(client, url, params=params)
    except FetchError as e:
        logger.warning("Deezer search failed for %r: %s", query, e)
        return None

    if not isinstance(payload, dict):
        logger.warning("Deezer search for %r returned a non-object body", query)
        return None

    if payload.get("error"):
        logger.info("Deezer search for %r returned an error: %s", query, payload["error"])
        return _search_error(payload["error"])

    return SearchResult.model_construct(**payload)
