"""Test helper functions."""

import json
from typing import Dict, Any, Optional


def create_request(
    method: str = "GET",
    path: str = "/api/properties",
    query: Optional[Dict[str, Any]] = None,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """Create a serverless request object for testing."""
    if headers is None:
        headers = {"content-type": "application/json"}

    return {
        "method": method,
        "path": path,
        "headers": headers,
        "body": json.dumps(body) if isinstance(body, dict) else body,
        "query": query or {},
    }


def response_json(response: Dict[str, Any]) -> Any:
    return json.loads(response["body"])


def ids(properties) -> list[int]:
    """IDs of a list of Property models or property dicts."""
    return [p["id"] if isinstance(p, dict) else p.id for p in properties]
