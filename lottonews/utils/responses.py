"""Helpers for consistent JSON responses.

Successful responses carry the payload as-is; failures carry an ``error``
message plus a machine-readable ``code``.
"""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify


def ok(data: Any, status_code: int = 200) -> Response:
    """Success response."""

    return jsonify(data), status_code


def acknowledge(message: str | None = None) -> Response:
    """``{"success": true}`` acknowledgment, optionally with a message."""

    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    return ok(body)


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> Response:
    """Error response."""

    body: dict[str, Any] = {"error": message, "code": code}
    if details is not None:
        body["details"] = details
    return jsonify(body), status_code
