"""Create, drop and rebuild the LFC API tables.

- create_database(): create any missing tables; existing ones are untouched
- drop_database(): drop every table and the documents in it
- reset_database(): drop, then create, leaving an empty schema

Each function takes an optional engine so tests and the seed loader can point
it at a database other than the configured one. For a SQLite file the
directory holding it is created first.
"""

import logging
from pathlib import Path

from sqlalchemy.engine import Engine

from .connection import engine as default_engine
from .models import Base

logger = logging.getLogger(__name__)


def ensure_database_directory(bind: Engine) -> None:
    """Create the parent directory of a SQLite database file if needed."""
    url = bind.url
    if url.get_backend_name() != "sqlite":
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_database(bind: Engine | None = None):
    """Create every table declared on Base.

    create_all() is idempotent - existing tables are left alone.
    """
    bind = bind or default_engine
    try:
        ensure_database_directory(bind)
        Base.metadata.create_all(bind=bind)
        logger.info("Database tables created successfully")

    except Exception:
        # Log the full exception with stack trace, then let the caller see it
        logger.exception("Failed to create database")
        raise


def drop_database(bind: Engine | None = None):
    """Drop every table. Stored documents are lost."""
    bind = bind or default_engine
    try:
        Base.metadata.drop_all(bind=bind)
        logger.info("Database tables dropped successfully")

    except Exception:
        logger.exception("Failed to drop database")
        raise


def reset_database(bind: Engine | None = None):
    """Reset database by dropping and recreating all tables."""
    logger.info("Resetting database...")
    drop_database(bind)
    create_database(bind)
    logger.info("Database reset complete")
