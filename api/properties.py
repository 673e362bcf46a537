"""Property listing endpoint: filtered queries, featured list, detail and rating."""

import json
import re
from typing import Any, Optional

from src.services.store import MemoryStore
from src.services.property_query import (
    first_value,
    get_featured_properties,
    parse_property_filter,
    query_properties,
)
from src.services.property_listing import listed_label, sort_properties, search_properties
from src.services.ratings import rate_property
from src.utils.config import AppConfig
from src.utils.errors import HomeFinderError, NotFoundError
from src.utils.logging import correlation_context, get_structured_logger, setup_logging

setup_logging()
logger = get_structured_logger(__name__)

_DETAIL_PATH = re.compile(r"^/api/properties/(\d+)$")
_RATE_PATH = re.compile(r"^/api/properties/(\d+)/rate$")

# Process-wide store for the deployed function; tests pass their own.
_default_store: Optional[MemoryStore] = None


def get_default_store() -> MemoryStore:
    global _default_store
    if _default_store is None:
        _default_store = MemoryStore()
    return _default_store


def _response(status_code: int, payload: Any) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def _parse_body(request: dict) -> dict:
    body = request.get("body") or {}
    if isinstance(body, (str, bytes)):
        try:
            body = json.loads(body) if body else {}
        except ValueError:
            return {}
    return body if isinstance(body, dict) else {}


def _list_properties(store: MemoryStore, query_params: dict) -> list[dict]:
    filters = parse_property_filter(query_params)
    results = query_properties(store, filters)
    results = search_properties(results, first_value(query_params.get("q")))
    results = sort_properties(results, first_value(query_params.get("sort")) or AppConfig.DEFAULT_SORT)
    return [p.model_dump(mode="json") for p in results]


def _route(request: dict, store: MemoryStore) -> dict:
    method = (request.get("method") or "GET").upper()
    path = (request.get("path") or "/api/properties").rstrip("/")
    query_params = request.get("query", {}) or {}

    if method == "GET" and path == "/api/properties":
        return _response(200, _list_properties(store, query_params))

    if method == "GET" and path == "/api/properties/featured":
        return _response(200, [p.model_dump(mode="json") for p in get_featured_properties(store)])

    match = _DETAIL_PATH.match(path)
    if method == "GET" and match:
        prop = store.get_property(int(match.group(1)))
        if prop is None:
            raise NotFoundError("Property not found")
        return _response(200, {**prop.model_dump(mode="json"), "listed": listed_label(prop)})

    match = _RATE_PATH.match(path)
    if method == "POST" and match:
        body = _parse_body(request)
        prop = rate_property(store, int(match.group(1)), body.get("rating"))
        return _response(200, prop.model_dump(mode="json"))

    return _response(404, {"message": "Not found"})


def handler(request: dict, store: Optional[MemoryStore] = None) -> dict:
    """Serverless entry point for /api/properties routes."""
    store = store or get_default_store()
    headers = request.get("headers", {}) or {}

    with correlation_context(headers.get("x-correlation-id")):
        try:
            return _route(request, store)
        except HomeFinderError as e:
            logger.info(
                "Request rejected",
                path=request.get("path"),
                status_code=e.status_code,
                reason=e.message
            )
            payload = {"message": e.message}
            if e.field:
                payload["field"] = e.field
            return _response(e.status_code, payload)
        except Exception as e:
            logger.error(f"Error handling property request: {e}", exc_info=True, path=request.get("path"))
            return _response(500, {"message": "Failed to process request"})
