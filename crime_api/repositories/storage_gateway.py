# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer, the only path from the services to the relational store."""
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql.elements import TextClause

from crime_api.core.database import build_engine
from crime_api.core.exceptions import StorageError
from crime_api.core.logging import get_logger
from crime_api.metrics import STORAGE_ERRORS

logger = get_logger(__name__)

Query = Union[str, TextClause]


def _as_clause(query: Query) -> TextClause:
    return query if isinstance(query, TextClause) else text(query)


class StorageGateway:
    """Wraps one async engine shared by every request.

    The engine is created by ``open()`` at process start and disposed by
    ``close()`` on shutdown. Both operations are parameterized and report
    every driver failure as ``StorageError``; nothing is retried.
    """

    def __init__(self, url: Optional[str] = None):
        self._url = url
        self._engine: Optional[AsyncEngine] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    # ── Lifecycle ──────────────────────────────────────────────────────

    async def open(self) -> None:
        if self._engine is None:
            self._engine = build_engine(self._url)
            logger.info("Storage engine created url=%s", self._engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info("Storage engine disposed")

    async def verify_connection(self) -> None:
        await self.read_rows("SELECT 1")

    # ── Operations ─────────────────────────────────────────────────────

    async def read_rows(self, query: Query,
                        params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        engine = self._require_engine("read")
        try:
            async with engine.connect() as conn:
                result = await conn.execute(_as_clause(query), dict(params or {}))
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as exc:
            raise self._failure("read", exc) from exc

    async def execute(self, query: Query,
                      params: Optional[Mapping[str, Any]] = None) -> None:
        engine = self._require_engine("execute")
        try:
            async with engine.begin() as conn:
                await conn.execute(_as_clause(query), dict(params or {}))
        except SQLAlchemyError as exc:
            raise self._failure("execute", exc) from exc

    # ── Private ────────────────────────────────────────────────────────

    def _require_engine(self, operation: str) -> AsyncEngine:
        if self._engine is None:
            STORAGE_ERRORS.labels(operation=operation).inc()
            raise StorageError(operation, RuntimeError("storage gateway is not open"))
        return self._engine

    @staticmethod
    def _failure(operation: str, exc: SQLAlchemyError) -> StorageError:
        STORAGE_ERRORS.labels(operation=operation).inc()
        logger.error("Storage %s failed: %s", operation, exc)
        return StorageError(operation, exc)
