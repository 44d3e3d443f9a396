# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Async SQLAlchemy engine factory."""
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from crime_api.core.config import settings


def build_engine(url: str | None = None) -> AsyncEngine:
    return create_async_engine(
        url or settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        pool_pre_ping=True,
    )
