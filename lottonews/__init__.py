"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Optional config values applied on top of the
            environment-selected config (tests use this to point the app at
            a temporary database and public directory).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from lottonews.config import get_config
    from lottonews.db import init_db
    from lottonews.error_handlers import register_error_handlers
    from lottonews.logging_config import configure_logging
    from lottonews.routes.articles import articles_bp
    from lottonews.routes.health import health_bp
    from lottonews.routes.tickets import tickets_bp
    from lottonews.routes.winning_numbers import winning_numbers_bp

    config = get_config()

    # Static files (and uploads) are served from the public dir at "/".
    app = Flask(__name__, static_folder=config.PUBLIC_DIR, static_url_path="")
    app.config.from_object(config)
    if overrides:
        app.config.update(overrides)
    app.static_folder = app.config["PUBLIC_DIR"]

    configure_logging(app)
    init_db(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(articles_bp, url_prefix="/api")
    app.register_blueprint(tickets_bp, url_prefix="/api")
    app.register_blueprint(winning_numbers_bp, url_prefix="/api")

    return app
