"""Enumerations shared by models and schemas."""

from __future__ import annotations

from enum import Enum


class TicketStatus(str, Enum):
    """Where a ticket is in its admin review."""

    pending = "pending"
    confirmed = "confirmed"
    rejected = "rejected"
