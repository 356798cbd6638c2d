"""Marshmallow schemas for Article."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

_REQUIRED = "Title and content are required"


class ArticleSchema(Schema):
    """Serialize Article."""

    id = fields.Int(required=True)
    title = fields.Str(required=True)
    content = fields.Str(required=True)
    image = fields.Str(allow_none=True)
    created_at = fields.DateTime()


class ArticleCreateSchema(Schema):
    """Validate create Article payload (form fields or JSON)."""

    class Meta:
        unknown = EXCLUDE

    title = fields.Str(
        required=True,
        validate=validate.Length(min=1, error=_REQUIRED),
        error_messages={"required": _REQUIRED, "null": _REQUIRED},
    )
    content = fields.Str(
        required=True,
        validate=validate.Length(min=1, error=_REQUIRED),
        error_messages={"required": _REQUIRED, "null": _REQUIRED},
    )
