"""Liveness probe for load balancers and deploy checks."""

from __future__ import annotations

from flask import Blueprint
from sqlalchemy import text

from lottonews.db import get_session
from lottonews.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Report ok once the database answers a trivial query.

    A failing store surfaces through the storage error handler as a 500.
    """

    get_session().execute(text("SELECT 1"))
    return ok({"status": "ok"})
