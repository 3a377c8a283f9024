from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from fleet_rentals.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL is required for SQL mode")
    if settings.database_url.startswith("sqlite"):
        # SQLite espera el candado de escritura hasta `timeout` segundos
        return create_async_engine(
            settings.database_url,
            echo=settings.sql_echo,
            connect_args={"timeout": settings.db_pool_timeout_seconds},
        )
    return create_async_engine(
        settings.database_url,
        echo=settings.sql_echo,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_timeout=settings.db_pool_timeout_seconds,
    )


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@asynccontextmanager
async def session_scope(session_maker) -> AsyncIterator[AsyncSession]:
    async with session_maker() as session:
        async with session.begin():
            yield session
