# portfolio/db/database.py
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from typing import Any, Dict, List, Mapping, Optional
import logging

from portfolio.core.config import settings

logger = logging.getLogger(__name__)


class Database:
    """
    Thin wrapper over an SQLAlchemy ``AsyncEngine``.

    Every statement is a plain SQL string with ``:name`` bind parameters.
    Writes run in their own transaction and are committed before returning.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def fetch_all(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        async with self.engine.connect() as conn:
            result = await conn.execute(text(sql), dict(params or {}))
            return [dict(row) for row in result.mappings().all()]

    async def fetch_one(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Dict[str, Any]]:
        """Run a statement and return its first row.

        Runs inside a transaction so ``INSERT ... RETURNING`` is committed.
        """
        async with self.engine.begin() as conn:
            result = await conn.execute(text(sql), dict(params or {}))
            row = result.mappings().first()
            return dict(row) if row is not None else None

    async def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> int:
        """Run a write statement and return the affected row count."""
        async with self.engine.begin() as conn:
            result = await conn.execute(text(sql), dict(params or {}))
            return result.rowcount

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {str(e)}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


def create_engine_from_url(url: str) -> AsyncEngine:
    """Build an async engine; pool sizing only applies to server databases."""
    kwargs: Dict[str, Any] = {"pool_pre_ping": True}
    if make_url(url).get_backend_name() != "sqlite":
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW
    return create_async_engine(url, **kwargs)


# Global database instance
_database: Optional[Database] = None


def _display_url(url: str) -> str:
    return make_url(url).render_as_string(hide_password=True)


async def connect_to_database(url: Optional[str] = None) -> Database:
    """
    Create the connection pool and verify it with a round trip.

    Raises:
        RuntimeError: If the database cannot be reached
    """
    global _database

    url = url or settings.database_url
    logger.info(f"Connecting to database: {_display_url(url)}")

    database = Database(create_engine_from_url(url))
    if not await database.ping():
        await database.close()
        raise RuntimeError("Database connection failed")

    _database = database
    logger.info("Successfully connected to database")
    return database


async def close_database_connection() -> None:
    """
    Dispose of the connection pool.
    Should be called on application shutdown.
    """
    global _database

    if _database:
        logger.info("Closing database connection")
        await _database.close()
        _database = None


def get_database() -> Database:
    """
    Get the database instance.

    Raises:
        RuntimeError: If database connection not initialized
    """
    if _database is None:
        raise RuntimeError("Database connection not initialized. Call connect_to_database() first.")

    return _database


async def health_check() -> bool:
    if _database is None:
        return False
    return await _database.ping()
