"""
LinkVault Backend — Database Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, scoped transactions and the
       FastAPI session dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine on a local SQLite file (aiosqlite driver) and
       provides one session per request. Writes that touch more than one row
       run inside `scoped_transaction`, which commits on a clean exit and
       rolls back if anything inside raises.
Who:   Used by services (transactions) and routes (session dependency).
When:  Engine is created at module import; sessions are created per-request.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from linkvault.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.database_url,
    # Echo SQL queries in DEBUG mode for development visibility
    echo=settings.log_level == "DEBUG",
)


# ── SQLite Transaction Control ────────────────────────────────────────────
# sqlite3 defers BEGIN until the first write, which would leave the
# max(order) read of an append outside its transaction. Every transaction
# opens with BEGIN IMMEDIATE instead; concurrent transactions wait on the busy
# timeout.
@event.listens_for(engine.sync_engine, "connect")
def _disable_driver_begin(dbapi_connection, connection_record):
    dbapi_connection.isolation_level = None


@event.listens_for(engine.sync_engine, "begin")
def _begin_immediate(conn):
    conn.exec_driver_sql("BEGIN IMMEDIATE")


# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: rows returned by a service stay readable after the
# transaction that produced them has committed
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on `Base.metadata`, which `init_db` and
    Alembic both read.
    """
    pass


# ── Scoped Transaction ────────────────────────────────────────────────────
@asynccontextmanager
async def scoped_transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Run a block of statements as one all-or-nothing unit.

    Usage:
        async with scoped_transaction(db):
            await db.execute(delete(Bookmark).where(...))
            await db.execute(delete(Category).where(...))

    Commits when the block exits normally. Any exception rolls back every
    statement issued inside the block and is re-raised unchanged.
    """
    if session.in_transaction():
        # Finish an implicit read-only transaction left open by autobegin
        await session.commit()
    async with session.begin():
        yield session


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (services open their own transactions)
        3. On error: rolls back anything still pending
        4. Always: closes the session (returns connection to pool)

    Raises:
        Database exceptions propagate to the route, which converts them into
        a DatabaseError for the global handler.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_db() -> None:
    """
    What:  Creates the database directory and any missing tables.
    When:  Called during application startup (lifespan) and by the test suite.
    How:   `metadata.create_all` only issues CREATE TABLE for absent tables,
           so existing data is never touched.
    """
    # Registers Category and Bookmark on Base.metadata
    import linkvault.models  # noqa: F401

    settings.database_path.parent.mkdir(parents=True, exist_ok=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
