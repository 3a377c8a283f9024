from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from fleet_rentals.config import Settings, get_settings
from fleet_rentals.infrastructure.db.engine import build_engine, build_sessionmaker


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    return build_engine(get_settings())


@lru_cache(maxsize=1)
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return build_sessionmaker(get_engine())


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int


def get_page_params(
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    settings: Settings = Depends(get_settings),
) -> PageParams:
    return PageParams(
        page=page,
        limit=min(limit or settings.default_page_size, settings.max_page_size),
    )
