"""Lottery ticket ORM model.

A ticket starts out ``pending`` and is decided once by an admin.
``confirmation_date`` is only ever written by a confirmation.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Enum, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from lottonews.models.base import Base, utcnow
from lottonews.models.enums import TicketStatus
from lottonews.models.types import NumberList


class Ticket(Base):
    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_phone: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    selected_numbers: Mapped[list[int]] = mapped_column(NumberList, nullable=False)
    status: Mapped[TicketStatus] = mapped_column(
        Enum(TicketStatus, name="ticket_status", native_enum=False, length=16),
        nullable=False,
        default=TicketStatus.pending,
        server_default=TicketStatus.pending.value,
    )
    receipt_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    purchase_date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, server_default=func.current_timestamp()
    )
    confirmation_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
