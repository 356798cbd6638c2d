"""Repository layer for Ticket persistence."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from lottonews.models.enums import TicketStatus
from lottonews.models.ticket import Ticket


class TicketRepository:
    """Queries and single-statement updates for Ticket."""

    def _newest_first(self):  # type: ignore[no-untyped-def]
        return (Ticket.purchase_date.desc(), Ticket.id.desc())

    def create(
        self,
        session: Session,
        *,
        phone: str,
        numbers: list[int],
        receipt_image: str | None = None,
    ) -> Ticket:
        ticket = Ticket(
            user_phone=phone,
            selected_numbers=list(numbers),
            status=TicketStatus.pending,
            receipt_image=receipt_image,
        )
        session.add(ticket)
        session.flush()  # assign PK
        return ticket

    def get_by_id(self, session: Session, ticket_id: int) -> Ticket | None:
        return session.get(Ticket, ticket_id)

    def list_tickets(self, session: Session, status: TicketStatus | None = None) -> Sequence[Ticket]:
        stmt = select(Ticket)
        if status is not None:
            stmt = stmt.where(Ticket.status == status)
        stmt = stmt.order_by(*self._newest_first())
        return list(session.scalars(stmt).all())

    def list_by_phone(self, session: Session, phone: str) -> Sequence[Ticket]:
        stmt = select(Ticket).where(Ticket.user_phone == phone).order_by(*self._newest_first())
        return list(session.scalars(stmt).all())

    def set_status(
        self,
        session: Session,
        ticket_id: int,
        status: TicketStatus,
        *,
        confirmed_at: datetime | None = None,
        only_if_pending: bool = False,
    ) -> int:
        """Apply a decision in one UPDATE and return the number of rows hit."""

        values: dict[str, object] = {"status": status}
        if confirmed_at is not None:
            values["confirmation_date"] = confirmed_at

        stmt = update(Ticket).where(Ticket.id == ticket_id)
        if only_if_pending:
            stmt = stmt.where(Ticket.status == TicketStatus.pending)
        stmt = stmt.values(**values).execution_options(synchronize_session=False)

        result = session.execute(stmt)
        return int(result.rowcount or 0)
