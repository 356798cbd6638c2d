"""SQLAlchemy engine + session management.

Uses a session-per-request pattern. Handlers fetch the request's session with
`get_session()` and hand it to services explicitly.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from flask import Flask, current_app, g
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from lottonews.models.base import Base


def _enable_sqlite_transactions(engine: Engine) -> None:
    # pysqlite defers BEGIN until the first write; emit it ourselves so reads
    # inside a transaction see one snapshot.
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(conn):  # type: ignore[no-untyped-def]
        dbapi_connection = conn.connection.dbapi_connection
        if dbapi_connection.in_transaction:
            # A COMMIT that failed with SQLITE_BUSY leaves sqlite's transaction
            # open while SQLAlchemy already considers it finished.
            dbapi_connection.rollback()
        conn.exec_driver_sql("BEGIN")


def create_app_engine(database_url: str, busy_timeout: float | None = None) -> Engine:
    url = make_url(database_url)
    is_sqlite = url.get_backend_name() == "sqlite"

    connect_args: dict[str, object] = {}
    if is_sqlite and busy_timeout is not None:
        connect_args["timeout"] = float(busy_timeout)

    engine = create_engine(database_url, pool_pre_ping=True, future=True, connect_args=connect_args)

    if is_sqlite:
        _enable_sqlite_transactions(engine)

    return engine


def init_db(app: Flask) -> None:
    """Initialize database engine and per-request sessions."""

    engine = create_app_engine(
        str(app.config["DATABASE_URL"]),
        busy_timeout=app.config.get("DB_BUSY_TIMEOUT"),
    )
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    # Import models so they register with Base.metadata.
    from lottonews import models  # noqa: F401

    Base.metadata.create_all(bind=engine)

    app.extensions["engine"] = engine
    app.extensions["session_factory"] = session_factory

    @app.before_request
    def _open_session() -> None:
        g.db = session_factory()  # type: ignore[attr-defined]

    @app.teardown_request
    def _close_session(exc: BaseException | None) -> None:
        session: Session | None = getattr(g, "db", None)
        if session is None:
            return

        # Write routes commit inside the request so failures reach the JSON
        # error handlers; this only ends whatever is still open.
        try:
            if exc is None:
                session.commit()
            else:
                session.rollback()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


def get_session() -> Session:
    """Get the current request's SQLAlchemy session."""

    session: Session | None = getattr(g, "db", None)
    if session is None:
        raise RuntimeError("Database session not initialized")
    return session


@contextmanager
def read_snapshot(session_factory: sessionmaker | None = None) -> Iterator[Session]:
    """Open a read-only transaction for callers that need several queries
    to agree with each other (e.g. a ticket against the latest draw).

    Everything is rolled back on exit.
    """

    factory = session_factory or current_app.extensions["session_factory"]
    session: Session = factory()
    try:
        session.begin()
        yield session
    finally:
        session.rollback()
        session.close()
