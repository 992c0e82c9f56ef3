"""
Database connection handling for PostgreSQL.
Wraps a pooled async SQLAlchemy engine in an explicitly constructed handle
that is passed to repositories instead of living in module state.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import Integer
from lightbnb.config import Settings
from typing import Any, Dict, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    LightBnB tables use serial integer primary keys.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class Database:
    """
    Handle to the application database.

    Statements are executed at the driver level, so query text uses the
    driver's positional placeholders ($1, $2, ...) and parameters are passed
    as an ordered sequence.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """
        Create a database handle with a connection pool configured from settings.

        Args:
            settings: Application settings

        Returns:
            Database handle owning a new engine
        """
        engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_pre_ping=True,
            pool_recycle=settings.pool_recycle,
            pool_timeout=settings.pool_timeout,
            connect_args={
                "server_settings": {
                    "application_name": "lightbnb",
                }
            }
        )
        return cls(engine)

    async def fetch_all(self, query: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """
        Execute a parameterized statement in its own transaction.

        Args:
            query: SQL text with positional placeholders
            params: Values for the placeholders, in order

        Returns:
            Result rows as dictionaries
        """
        async with self.engine.begin() as conn:
            if params:
                result = await conn.exec_driver_sql(query, tuple(params))
            else:
                result = await conn.exec_driver_sql(query)
            rows = [dict(row._mapping) for row in result] if result.returns_rows else []
        logger.debug(f"Query returned {len(rows)} rows")
        return rows

    async def fetch_one(self, query: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        """Execute a parameterized statement and return the first row, or None."""
        rows = await self.fetch_all(query, params)
        return rows[0] if rows else None

    async def ping(self) -> bool:
        """
        Test database connectivity.
        Returns True if connection is successful, False otherwise.
        """
        try:
            await self.fetch_one("SELECT 1")
            logger.info("Database connection successful")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def create_tables(self) -> None:
        """Create all tables known to the model metadata."""
        import lightbnb.models  # noqa: F401  registers tables on Base.metadata

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")

    async def drop_tables(self) -> None:
        """Drop all tables known to the model metadata."""
        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")
