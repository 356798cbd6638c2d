"""Request body helpers."""

from __future__ import annotations

from typing import Any

from flask import request


def get_payload() -> Any:
    """Return the request body as a mapping.

    JSON bodies are used as-is; anything else (multipart or urlencoded forms)
    is read from ``request.form``. Files are left in ``request.files``.
    """

    if request.is_json:
        payload = request.get_json(silent=True)
        return {} if payload is None else payload
    return request.form.to_dict()
