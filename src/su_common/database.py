"""Read-only access to the registration service's database.

The "User" table belongs to the registration service. This service only
selects from it, so every connection runs read-only transactions and
sessions never autoflush.
"""

from collections.abc import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from config.settings import settings


class Base(DeclarativeBase):
    """Declarative base for mappings onto externally owned tables."""


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_pre_ping=True,
    execution_options={"postgresql_readonly": True},
)

readonly_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: a read-only session, rolled back on close."""
    async with readonly_session_factory() as session:
        yield session


async def ping_database() -> None:
    """Fail fast at startup when the database is unreachable."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
