"""
Async engine and session factory for the onboarding tables.

Production runs on the Postgres instance whose DATABASE_URL the platform
injects; local runs and tests use a SQLite file through aiosqlite.

    DATABASE_URL           -- postgres:// or postgresql:// URLs are pointed at
                              the asyncpg driver; any other URL is used as is
    DATABASE_URL_FALLBACK  -- used when DATABASE_URL is empty
                              (default sqlite+aiosqlite:///./investify.db)
"""

from __future__ import annotations

import os

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from backend import config  # noqa: F401  (loads .env before DATABASE_URL is read)

_ASYNC_SCHEMES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
}


def resolve_database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        return os.environ.get("DATABASE_URL_FALLBACK", "sqlite+aiosqlite:///./investify.db")
    # the async engine needs an explicit driver in the scheme
    for plain, with_driver in _ASYNC_SCHEMES.items():
        if url.startswith(plain):
            return with_driver + url[len(plain):]
    return url


DATABASE_URL = resolve_database_url()

_engine_kwargs = {"echo": False}
if DATABASE_URL.startswith("sqlite"):
    # aiosqlite connections are tied to the event loop that opened them
    _engine_kwargs["poolclass"] = NullPool

engine = create_async_engine(DATABASE_URL, **_engine_kwargs)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def init_db():
    """Create missing tables; existing ones are left untouched."""
    from backend import models  # noqa: F401  (register tables on Base.metadata)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncSession:
    async with async_session() as session:
        yield session
