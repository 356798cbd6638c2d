"""Winning numbers ORM model.

One row per recorded draw; rows are only appended or cleared wholesale.
"""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from lottonews.models.base import Base, utcnow
from lottonews.models.types import NumberList


class WinningNumbers(Base):
    """An admin-recorded draw of 4 numbers."""

    __tablename__ = "winning_numbers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    numbers: Mapped[list[int]] = mapped_column(NumberList, nullable=False)
    draw_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, server_default=func.current_timestamp()
    )
