"""Ticket routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request
from sqlalchemy.exc import SQLAlchemyError

from lottonews.db import get_session
from lottonews.schemas.ticket import (
    TicketCreateSchema,
    TicketListQuerySchema,
    TicketPurchaseSchema,
    TicketSchema,
)
from lottonews.services.ticket_service import TicketService
from lottonews.services.upload_service import UploadService
from lottonews.utils.payloads import get_payload
from lottonews.utils.responses import acknowledge, ok

tickets_bp = Blueprint("tickets", __name__)

_create_schema = TicketCreateSchema()
_query_schema = TicketListQuerySchema()
_purchase_schema = TicketPurchaseSchema()
_tickets_schema = TicketSchema(many=True)
_service = TicketService()


def _strict() -> bool:
    return bool(current_app.config.get("STRICT_TICKET_DECISIONS", False))


def _parse_ticket_id(raw: str) -> int | None:
    # Ids that are not integers (or overflow sqlite's INTEGER) cannot match a row.
    try:
        value = int(raw)
    except ValueError:
        return None
    if not -(2**63) <= value < 2**63:
        return None
    return value


@tickets_bp.post("/tickets")
def purchase_ticket():
    data = _create_schema.load(get_payload())

    uploads = UploadService(current_app.config["PUBLIC_DIR"], current_app.config["UPLOAD_SUBDIR"])
    receipt = uploads.save(request.files.get("receipt"), "receipt")

    session = get_session()
    try:
        ticket = _service.purchase(
            session,
            phone=str(data["phone"]),
            numbers=data["numbers"],
            receipt_image=receipt,
        )
        session.commit()
    except SQLAlchemyError:
        uploads.discard(receipt)
        raise
    return ok(_purchase_schema.dump(ticket))


@tickets_bp.get("/tickets")
def list_tickets():
    """List tickets (admin). ``?status=`` narrows to one status."""

    # An empty ?status= means no filter.
    args = {k: v for k, v in request.args.items() if v.strip()}
    query = _query_schema.load(args)

    session = get_session()
    return ok(_tickets_schema.dump(_service.list_tickets(session, status=query.get("status"))))


@tickets_bp.get("/user-tickets/<phone>")
def list_user_tickets(phone: str):
    session = get_session()
    return ok(_tickets_schema.dump(_service.list_for_phone(session, phone)))


@tickets_bp.put("/tickets/<ticket_id>/confirm")
def confirm_ticket(ticket_id: str):
    session = get_session()
    _service.confirm(session, _parse_ticket_id(ticket_id), strict=_strict())
    session.commit()
    return acknowledge()


@tickets_bp.put("/tickets/<ticket_id>/reject")
def reject_ticket(ticket_id: str):
    session = get_session()
    _service.reject(session, _parse_ticket_id(ticket_id), strict=_strict())
    session.commit()
    return acknowledge()
