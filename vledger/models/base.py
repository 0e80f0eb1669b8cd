"""
Database engine, session management, and base model.

This module is the foundation for all database operations.
Every model inherits from Base. Every request gets a session
from get_db().
"""

from datetime import UTC, datetime

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from vledger.config import get_settings

settings = get_settings()

# --- Engine ---
# pool_pre_ping=True tests connections before using them,
# which handles a database restart or a stale connection.
# The isolation level decides what a concurrent trial balance
# can see of a transaction that is committing; read committed
# is the floor, SERIALIZABLE avoids half-applied snapshots.
_engine_options = {"pool_pre_ping": True}
if settings.DB_ISOLATION_LEVEL:
    _engine_options["isolation_level"] = settings.DB_ISOLATION_LEVEL

engine = create_engine(settings.DATABASE_URL, **_engine_options)

# --- Session Factory ---
# autocommit=False: the caller decides when a unit of work is
# committed, so a transaction and its journal entries land
# together or not at all.
# autoflush=False: SQL is only sent on an explicit flush or
# commit.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in DateTime columns."""
    return datetime.now(UTC).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally guarantees the session is closed even when
    the endpoint raises, so connections are never leaked from
    the pool. Anything not committed by the endpoint is rolled
    back on close.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
