"""Service layer for the ticket lifecycle.

Tickets are bought in ``pending`` state and later confirmed or rejected by
an admin. By default a decision is applied unconditionally (the last write
wins and unknown ids are a silent no-op). With ``strict=True`` a decision
only lands on a pending ticket; anything else raises.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from lottonews.errors import ConflictError, NotFoundError
from lottonews.models.base import utcnow
from lottonews.models.enums import TicketStatus
from lottonews.models.ticket import Ticket
from lottonews.repositories.ticket_repository import TicketRepository

logger = logging.getLogger(__name__)


class TicketService:
    def __init__(self, repository: TicketRepository | None = None) -> None:
        self._repo = repository or TicketRepository()

    def purchase(
        self,
        session: Session,
        *,
        phone: str,
        numbers: list[int],
        receipt_image: str | None = None,
    ) -> Ticket:
        ticket = self._repo.create(session, phone=phone, numbers=numbers, receipt_image=receipt_image)
        logger.info("Ticket %s purchased by %s", ticket.id, phone)
        return ticket

    def list_tickets(self, session: Session, status: str | None = None) -> Sequence[Ticket]:
        """All tickets, or only those whose status equals ``status`` exactly.

        A value that is not a known status matches no ticket.
        """

        if status is None:
            return self._repo.list_tickets(session)
        try:
            wanted = TicketStatus(status)
        except ValueError:
            return []
        return self._repo.list_tickets(session, status=wanted)

    def list_for_phone(self, session: Session, phone: str) -> Sequence[Ticket]:
        return self._repo.list_by_phone(session, phone)

    def confirm(self, session: Session, ticket_id: int | None, *, strict: bool = False) -> None:
        self._decide(session, ticket_id, TicketStatus.confirmed, strict=strict)

    def reject(self, session: Session, ticket_id: int | None, *, strict: bool = False) -> None:
        self._decide(session, ticket_id, TicketStatus.rejected, strict=strict)

    def _decide(self, session: Session, ticket_id: int | None, status: TicketStatus, *, strict: bool) -> None:
        if ticket_id is None:
            if strict:
                raise NotFoundError(message="Ticket not found")
            logger.info("Ignoring %s for a non-numeric ticket id", status.value)
            return

        confirmed_at = utcnow() if status is TicketStatus.confirmed else None
        hit = self._repo.set_status(
            session,
            ticket_id,
            status,
            confirmed_at=confirmed_at,
            only_if_pending=strict,
        )

        if strict and hit == 0:
            ticket = self._repo.get_by_id(session, ticket_id)
            if ticket is None:
                raise NotFoundError(message=f"Ticket {ticket_id} not found")
            raise ConflictError(
                message=f"Ticket {ticket_id} is already {ticket.status.value}",
                details={"status": ticket.status.value},
            )

        logger.info("Ticket %s marked %s (rows=%s)", ticket_id, status.value, hit)
