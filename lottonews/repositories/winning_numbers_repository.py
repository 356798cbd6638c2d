"""Repository layer for winning-number draws."""

from __future__ import annotations

from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lottonews.models.winning_numbers import WinningNumbers


class WinningNumbersRepository:
    def create(self, session: Session, *, numbers: list[int], draw_date: date | None = None) -> WinningNumbers:
        row = WinningNumbers(numbers=list(numbers), draw_date=draw_date)
        session.add(row)
        session.flush()  # assign PK
        return row

    def get_latest(self, session: Session) -> WinningNumbers | None:
        stmt = (
            select(WinningNumbers)
            .order_by(WinningNumbers.created_at.desc(), WinningNumbers.id.desc())
            .limit(1)
        )
        return session.scalars(stmt).first()

    def delete_all(self, session: Session) -> int:
        result = session.execute(delete(WinningNumbers))
        return int(result.rowcount or 0)
