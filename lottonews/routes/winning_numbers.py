"""Winning-number routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint

from lottonews.db import get_session
from lottonews.schemas.winning_numbers import (
    WinningNumbersCreatedSchema,
    WinningNumbersCreateSchema,
    WinningNumbersSchema,
)
from lottonews.services.winning_numbers_service import WinningNumbersService
from lottonews.utils.payloads import get_payload
from lottonews.utils.responses import acknowledge, ok

winning_numbers_bp = Blueprint("winning_numbers", __name__)

_create_schema = WinningNumbersCreateSchema()
_created_schema = WinningNumbersCreatedSchema()
_schema = WinningNumbersSchema()
_service = WinningNumbersService()


@winning_numbers_bp.post("/winning-numbers")
def set_winning_numbers():
    """Record a draw (admin). Prior draws are kept."""

    data = _create_schema.load(get_payload())

    session = get_session()
    row = _service.record(session, numbers=data["numbers"], draw_date=data.get("draw_date"))
    session.commit()
    return ok(_created_schema.dump(row))


@winning_numbers_bp.get("/winning-numbers/latest")
def get_latest_winning_numbers():
    session = get_session()
    row = _service.latest(session)
    if row is None:
        return ok(None)
    return ok(_schema.dump(row))


@winning_numbers_bp.delete("/winning-numbers/clear")
def clear_winning_numbers():
    session = get_session()
    _service.clear(session)
    session.commit()
    return acknowledge("All winning numbers cleared")
