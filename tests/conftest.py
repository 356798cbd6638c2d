from __future__ import annotations

import pytest

from lottonews import create_app


def _make_app(tmp_path, **overrides):
    public_dir = tmp_path / "public"
    public_dir.mkdir(exist_ok=True)
    config = {
        "TESTING": True,
        "DATABASE_URL": f"sqlite:///{tmp_path / 'test.sqlite'}",
        "PUBLIC_DIR": str(public_dir),
        "UPLOAD_SUBDIR": "uploads",
        "STRICT_TICKET_DECISIONS": False,
        "DB_BUSY_TIMEOUT": 0.2,
    }
    config.update(overrides)
    return create_app(config)


@pytest.fixture
def app(tmp_path):
    app = _make_app(tmp_path)
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture
def strict_app(tmp_path):
    app = _make_app(tmp_path, STRICT_TICKET_DECISIONS=True)
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def strict_client(strict_app):
    return strict_app.test_client()


@pytest.fixture
def session_factory(app):
    return app.extensions["session_factory"]


@pytest.fixture
def public_dir(app):
    return app.config["PUBLIC_DIR"]


@pytest.fixture
def db_path(app):
    return app.extensions["engine"].url.database
