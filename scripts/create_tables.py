"""Create the articles/tickets/winning_numbers tables in the configured database.

Reads DATABASE_URL from .env / environment. The app also does this at
startup; this is for provisioning a database ahead of the first deploy.

Usage:
  python scripts/create_tables.py
"""

from __future__ import annotations

import pathlib
import sys

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from lottonews.models.base import Base
from lottonews.config import resolve_database_url
from lottonews.db import create_app_engine

# Import models so they register with Base.metadata
from lottonews import models  # noqa: F401


def main() -> int:
    """Create all ORM tables in the target database."""

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    database_url = resolve_database_url()

    engine = create_app_engine(database_url)
    Base.metadata.create_all(bind=engine)

    print(f"Tables created (or already exist): {', '.join(sorted(Base.metadata.tables))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
