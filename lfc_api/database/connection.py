"""Engine and sessions for the LFC API database.

One engine is built from settings.database_url at import time. Sessions come
from three helpers:

- get_db(): FastAPI dependency used by every REST route and the GraphQL
  context; services commit their own writes, so it only closes the session
- get_session() / get_session_context(): commit on success, roll back on
  error; used by the CLI and the seed loader

SQLite only enforces FOREIGN KEY constraints when each connection turns
them on, so a connect hook issues the PRAGMA. Deleting a season that
matches still point at then fails instead of leaving orphans.
"""

import sqlite3
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ..config.settings import settings


def engine_options(database_url: str) -> dict:
    """Build create_engine keyword arguments for a database URL."""
    options = {
        "echo": settings.database_echo,  # Log all SQL queries (useful for debugging)
        "pool_pre_ping": True,  # Test connections before use (handles disconnects)
    }
    if database_url.startswith("sqlite"):
        # FastAPI may hand a session to a different worker thread than the one that opened it
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.database_pool_size
    return options


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Created once at import time and reused throughout the application
engine = create_engine(settings.database_url, **engine_options(settings.database_url))

SessionLocal = sessionmaker(
    autocommit=False,  # Require explicit session.commit() for transactions
    autoflush=False,  # Don't automatically flush changes before queries
    bind=engine,
)


def get_session() -> Generator[Session, None, None]:
    """Get database session with automatic commit/rollback and cleanup.

    If any exception occurs, the transaction is rolled back and the
    exception is re-raised.
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
    """Context manager wrapper around get_session().

    Usage:
        with get_session_context() as session:
            seed_database(session)
    """
    yield from get_session()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions.

    Services commit their own writes, so this only guarantees cleanup.
    Tests replace it through app.dependency_overrides, which also covers
    the GraphQL context.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
