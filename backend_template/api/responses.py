"""Uniform JSON response envelope.

Every API response has the shape::

    {"success": bool, "message": str, "data": ..., "errors": [...]}

``data`` is omitted on errors and ``errors`` only appears on validation
failures.
"""

from typing import Any

from flask import jsonify
from pydantic import BaseModel


def _serialize(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if isinstance(data, list):
        return [_serialize(item) for item in data]
    return data


def send_response(data: Any = None, message: str = "Success", status: int = 200):
    """Build a success response. Pydantic models are dumped by alias."""
    return jsonify({
        "success": True,
        "message": message,
        "data": _serialize(data),
    }), status


def error_response(
    message: str,
    status: int,
    errors: list[dict] | None = None,
    details: dict | None = None,
    stack: str | None = None,
):
    """Build a failure response."""
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    if details:
        body["details"] = details
    if stack:
        body["stack"] = stack
    return jsonify(body), status
