"""ORM models."""

from lottonews.models.article import Article
from lottonews.models.enums import TicketStatus
from lottonews.models.ticket import Ticket
from lottonews.models.winning_numbers import WinningNumbers

__all__ = ["Article", "Ticket", "TicketStatus", "WinningNumbers"]
