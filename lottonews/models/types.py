"""Column types shared by the models."""

from __future__ import annotations

import json

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


class NumberList(TypeDecorator):
    """A list of ints persisted as JSON text, e.g. ``"[1, 2, 3, 4]"``.

    Only this type knows about the encoding; models and services see
    ``list[int]``.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):  # type: ignore[no-untyped-def]
        if value is None:
            return None
        return json.dumps([int(n) for n in value])

    def process_result_value(self, value, dialect):  # type: ignore[no-untyped-def]
        if value is None:
            return None
        return [int(n) for n in json.loads(value)]
