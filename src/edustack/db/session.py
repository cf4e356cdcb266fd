# src/edustack/db/session.py
from __future__ import annotations

import re
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from edustack.app_logger import get_logger
from edustack.core.config import Settings

log = get_logger("db")


def mask_url(url: str) -> str:
    return re.sub(r"//([^:@/]+)(?::[^@/]+)?@", r"//\1:*****@", url)


def make_engine(settings: Settings) -> AsyncEngine:
    """Build the process-wide async engine. Does not connect yet."""
    url = settings.DATABASE_URL
    log.info("DB: using DATABASE_URL=%s", mask_url(url))

    kwargs: dict = {"echo": settings.DB_ECHO}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True  # protects against stale connections
    return create_async_engine(url, **kwargs)


def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False, class_=AsyncSession)


async def create_all(engine: AsyncEngine) -> None:
    from edustack.db.base import Base
    import edustack.db.models  # noqa: F401  (registers the tables)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("DB: tables ensured (%d)", len(Base.metadata.tables))


# ---------------------------------------------------------------------------
# FastAPI dependency: one AsyncSession per request, from the app-owned factory
# ---------------------------------------------------------------------------
async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    sessionmaker: async_sessionmaker[AsyncSession] = request.app.state.sessionmaker
    async with sessionmaker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
