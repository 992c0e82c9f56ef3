"""
Base repository for parameterized SQL access.
Repositories hold a Database handle and run fixed query templates against it.
"""

from lightbnb.database import Database
from typing import Any, Dict, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base repository providing logged execution of parameterized statements.
    Database failures are logged with the operation name and re-raised.
    """

    def __init__(self, db: Database):
        """
        Initialize repository with a database handle.

        Args:
            db: Database handle used for every statement
        """
        self.db = db

    async def _fetch_all(self, operation: str, query: str, params: Sequence[Any]) -> List[Dict[str, Any]]:
        try:
            rows = await self.db.fetch_all(query, params)
            logger.debug(f"{operation} returned {len(rows)} rows")
            return rows
        except Exception as e:
            logger.error(f"Failed to {operation}: {e}")
            raise

    async def _fetch_one(self, operation: str, query: str, params: Sequence[Any]) -> Optional[Dict[str, Any]]:
        try:
            row = await self.db.fetch_one(query, params)
            if row is None:
                logger.debug(f"{operation} found no row")
            return row
        except Exception as e:
            logger.error(f"Failed to {operation}: {e}")
            raise
