"""Async PostgreSQL engine and sessions.

Each process tags its connections with ``database.application_name`` so API
and worker sessions can be told apart in ``pg_stat_activity``.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from summit.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the asyncpg engine from ``settings.database``."""
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_recycle=db.pool_recycle_seconds,
        connect_args={"server_settings": {"application_name": db.application_name}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Objects stay usable after commit because repositories commit before
    notifications are sent from the same request.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
