"""
Infrastructure module: database engine, sessions and transactions.
"""

from lunch_shared.infrastructure.db import (
    engine,
    SessionLocal,
    get_db,
    get_db_context,
    safe_commit,
    transaction,
)

__all__ = [
    "engine",
    "SessionLocal",
    "get_db",
    "get_db_context",
    "safe_commit",
    "transaction",
]
