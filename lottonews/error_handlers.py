"""Centralized error handlers."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, g
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from lottonews.errors import AppError, StorageError, ValidationError
from lottonews.utils.responses import fail

logger = logging.getLogger(__name__)


def _flatten_messages(messages: Any) -> list[str]:
    """Collect the leaf strings of a marshmallow messages structure, in order."""

    if isinstance(messages, str):
        return [messages]
    out: list[str] = []
    if isinstance(messages, dict):
        for value in messages.values():
            out.extend(_flatten_messages(value))
    elif isinstance(messages, (list, tuple)):
        for value in messages:
            out.extend(_flatten_messages(value))
    return out


def _summarize(messages: Any) -> str:
    seen: list[str] = []
    for msg in _flatten_messages(messages):
        if msg not in seen:
            seen.append(msg)
    return "; ".join(seen) or "Validation error"


def _rollback_request_session() -> None:
    # A failed flush leaves the session unusable; teardown must not commit it.
    session = getattr(g, "db", None)
    if session is not None:
        session.rollback()


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        return fail(exc.code, exc.message, exc.status_code, exc.details)

    @app.errorhandler(MarshmallowValidationError)
    def _handle_schema_error(exc: MarshmallowValidationError):
        # exc.messages is a dict of field -> list[str]
        wrapped = ValidationError(message=_summarize(exc.messages), details=exc.messages)
        return fail(wrapped.code, wrapped.message, wrapped.status_code, wrapped.details)

    @app.errorhandler(SQLAlchemyError)
    def _handle_storage_error(exc: SQLAlchemyError):
        logger.warning("Storage error", exc_info=exc)
        _rollback_request_session()
        orig = getattr(exc, "orig", None)
        wrapped = StorageError(message=str(orig) if orig else str(exc))
        return fail(wrapped.code, wrapped.message, wrapped.status_code)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        status = int(getattr(exc, "code", 500) or 500)
        if status == 404:
            return fail("not_found", "Not found", 404)

        return fail(
            "http_error",
            getattr(exc, "description", "HTTP error"),
            status,
            details={"name": getattr(exc, "name", "HTTPException")},
        )

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        _rollback_request_session()
        return fail("internal_error", "Internal server error", 500)
