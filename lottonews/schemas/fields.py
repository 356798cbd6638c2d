"""Custom marshmallow fields."""

from __future__ import annotations

import json

from marshmallow import fields


class NumberList(fields.Field):
    """A list of integers given either as a JSON array or as its text form.

    Multipart forms can only carry strings, so ``"[1,2,3,4]"`` and
    ``[1, 2, 3, 4]`` load to the same ``list[int]``.
    """

    default_error_messages = {
        "invalid": "Numbers must be a JSON array of integers",
        "empty": "Numbers must not be empty",
    }

    def _serialize(self, value, attr, obj, **kwargs):  # type: ignore[no-untyped-def]
        if value is None:
            return None
        return [int(n) for n in value]

    def _deserialize(self, value, attr, data, **kwargs):  # type: ignore[no-untyped-def]
        if isinstance(value, str):
            if not value.strip():
                raise self.make_error("empty")
            try:
                value = json.loads(value)
            except ValueError as e:
                raise self.make_error("invalid") from e

        if not isinstance(value, list):
            raise self.make_error("invalid")
        if not value:
            raise self.make_error("empty")

        numbers: list[int] = []
        for item in value:
            # bool is an int subclass; true/false are not lottery numbers
            if isinstance(item, bool) or not isinstance(item, int):
                raise self.make_error("invalid")
            numbers.append(item)
        return numbers


class OptionalDate(fields.Date):
    """ISO date where a blank string (an untouched form field) means None."""

    def _deserialize(self, value, attr, data, **kwargs):  # type: ignore[no-untyped-def]
        if isinstance(value, str) and not value.strip():
            return None
        return super()._deserialize(value, attr, data, **kwargs)
