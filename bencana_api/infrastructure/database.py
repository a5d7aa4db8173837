"""
Database wiring — async SQLAlchemy engine and session factory.

The engine is built from Settings when the app is created and kept on
``app.state``; request handlers get a session through the ``get_db``
dependency.
"""

from typing import AsyncIterator

import structlog
from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from bencana_api.config import Settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    pass


def build_engine(settings: Settings) -> AsyncEngine:
    url = settings.DATABASE_URL
    kwargs = {"echo": settings.DB_ECHO}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory SQLite lives and dies with a single connection
        if url.endswith("://") or ":memory:" in url:
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_async_engine(url, **kwargs)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables (dev / test only — production schema is external)."""
    # Import models so they register on Base.metadata
    from bencana_api.domain.models import bencana, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created/verified")


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency: yields an async DB session per request."""
    async with request.app.state.sessionmaker() as session:
        yield session
