"""Schemas for lottery tickets."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from lottonews.models.enums import TicketStatus
from lottonews.schemas.fields import NumberList

_REQUIRED = "Phone and numbers are required"


class TicketCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    phone = fields.Str(
        required=True,
        validate=validate.Length(min=1, error=_REQUIRED),
        error_messages={"required": _REQUIRED, "null": _REQUIRED},
    )
    numbers = NumberList(
        required=True,
        error_messages={"required": _REQUIRED, "null": _REQUIRED, "empty": _REQUIRED},
    )


class TicketListQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    # Matched verbatim; an unknown value simply matches nothing.
    status = fields.Str(required=False, load_default=None)


class TicketSchema(Schema):
    """Full ticket row, as listed for admins and by phone."""

    id = fields.Int(required=True)
    user_phone = fields.Str(required=True)
    selected_numbers = fields.List(fields.Int(), required=True)
    status = fields.Enum(TicketStatus, by_value=True)
    receipt_image = fields.Str(allow_none=True)
    purchase_date = fields.DateTime()
    confirmation_date = fields.DateTime(allow_none=True)


class TicketPurchaseSchema(Schema):
    """Response to a purchase; uses the request's field names."""

    id = fields.Int(required=True)
    phone = fields.Str(attribute="user_phone")
    numbers = fields.List(fields.Int(), attribute="selected_numbers")
    status = fields.Enum(TicketStatus, by_value=True)
    receipt = fields.Str(attribute="receipt_image", allow_none=True)
    purchase_date = fields.DateTime()
