"""Schemas for winning-number draws."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from lottonews.schemas.fields import NumberList, OptionalDate

DRAW_SIZE = 4
_EXACTLY = f"Exactly {DRAW_SIZE} numbers required"


class WinningNumbersCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    numbers = NumberList(
        required=True,
        validate=validate.Length(equal=DRAW_SIZE, error=_EXACTLY),
        error_messages={"required": _EXACTLY, "null": _EXACTLY, "empty": _EXACTLY},
    )
    draw_date = OptionalDate(data_key="drawDate", required=False, allow_none=True, load_default=None)


class WinningNumbersSchema(Schema):
    id = fields.Int(required=True)
    numbers = fields.List(fields.Int(), required=True)
    draw_date = fields.Date(allow_none=True)
    created_at = fields.DateTime()


class WinningNumbersCreatedSchema(Schema):
    id = fields.Int(required=True)
    numbers = fields.List(fields.Int(), required=True)
    draw_date = fields.Date(data_key="drawDate", allow_none=True)
