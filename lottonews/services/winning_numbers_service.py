"""Service layer for winning-number draws."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import Session

from lottonews.models.winning_numbers import WinningNumbers
from lottonews.repositories.winning_numbers_repository import WinningNumbersRepository

logger = logging.getLogger(__name__)


class WinningNumbersService:
    """Record, fetch and clear draws. Every record call appends a new row."""

    def __init__(self, repository: WinningNumbersRepository | None = None) -> None:
        self._repo = repository or WinningNumbersRepository()

    def record(self, session: Session, *, numbers: list[int], draw_date: date | None = None) -> WinningNumbers:
        row = self._repo.create(session, numbers=numbers, draw_date=draw_date)
        logger.info("Recorded winning numbers %s (draw %s)", row.numbers, row.draw_date)
        return row

    def latest(self, session: Session) -> WinningNumbers | None:
        return self._repo.get_latest(session)

    def clear(self, session: Session) -> int:
        removed = self._repo.delete_all(session)
        logger.info("Cleared %s winning number rows", removed)
        return removed
