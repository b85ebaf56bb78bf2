"""
Database configuration and session management.
Uses SQLAlchemy 2.0 patterns.
"""

import os
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lunch_shared.config.logging import get_logger
from lunch_shared.config.settings import DATABASE_URL

logger = get_logger(__name__)


def _calculate_pool_size() -> int:
    """(2 * CPU cores) + 1, capped at 20."""
    cores = os.cpu_count() or 4
    return min(cores * 2 + 1, 20)


def _engine_kwargs(url: str) -> dict[str, Any]:
    """Pool settings per backend. SQLite in-memory shares one connection."""
    if url.startswith("sqlite"):
        kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
        return kwargs

    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": _calculate_pool_size(),
        "max_overflow": 15,
        "pool_timeout": 30,  # Wait max 30s for connection from pool
        "pool_recycle": 1800,  # Recycle connections after 30 minutes
        "connect_args": {"connect_timeout": 10},
    }


engine = create_engine(DATABASE_URL, echo=False, **_engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Usage:
        @app.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.scalars(select(Item)).all()

    The session is closed after the request completes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """
    Context manager for database sessions outside of FastAPI.

    Usage:
        with get_db_context() as db:
            db.scalars(select(Item)).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def safe_commit(db: Session) -> None:
    """
    Commit with automatic rollback on failure.

    Raises the original exception after rolling back.
    """
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Scoped unit of work: commit on success, roll back on every error path.

    Integrity violations are translated into ConflictError naming the
    offending column when it can be identified.

    Usage:
        with transaction(db):
            db.add(order)
    """
    # Import here to avoid circular imports
    from lunch_shared.utils.exceptions import ConflictError

    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        fields = integrity_error_fields(e)
        raise ConflictError(
            "Record conflicts with existing data",
            fields=fields,
        ) from e
    except Exception:
        db.rollback()
        raise


# Column names that carry a uniqueness guarantee in the schema
_UNIQUE_COLUMNS = ("auth_token", "bootstrap_slot", "email", "name", "uid")


def integrity_error_fields(error: IntegrityError) -> list[str]:
    """Best-effort extraction of violated column names from a driver message."""
    message = str(error.orig).lower()
    return [column for column in _UNIQUE_COLUMNS if column in message]
