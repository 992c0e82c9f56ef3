"""
Property repository for listing search and creation.
Search queries are built dynamically from the requested filters.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.queries.builder import (
    DEFAULT_LIMIT,
    FilterCriteria,
    PropertySearchQueryBuilder,
)
from lightbnb.database import Database
from typing import Any, Dict, List, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)

# Column order matches the VALUES placeholders of ADD_PROPERTY
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

_COLUMN_LIST = ", ".join(PROPERTY_COLUMNS)
_PLACEHOLDER_LIST = ", ".join("$%d" % i for i in range(1, len(PROPERTY_COLUMNS) + 1))

ADD_PROPERTY = f"""
    INSERT INTO properties ({_COLUMN_LIST})
    VALUES ({_PLACEHOLDER_LIST})
    RETURNING *;
"""


class PropertyRepository(BaseRepository):
    """Repository for property listings."""

    def __init__(self, db: Database, query_builder: Optional[PropertySearchQueryBuilder] = None):
        super().__init__(db)
        self.query_builder = query_builder or PropertySearchQueryBuilder()

    async def get_all_properties(
        self,
        options: Union[FilterCriteria, Mapping[str, Any], None] = None,
        limit: int = DEFAULT_LIMIT
    ) -> List[Dict[str, Any]]:
        """
        Search properties with optional filters.

        Args:
            options: FilterCriteria, or a mapping of filter names to values
            limit: Maximum number of properties to return

        Returns:
            Property rows with their average rating, cheapest first
        """
        criteria = options if isinstance(options, FilterCriteria) else FilterCriteria.from_mapping(options)
        query, params = self.query_builder.build(criteria, limit)
        return await self._fetch_all("search properties", query, params)

    async def add_property(self, property_data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Add a property listing.

        Args:
            property_data: Mapping containing every column in PROPERTY_COLUMNS

        Returns:
            The inserted property row
        """
        params = [property_data[column] for column in PROPERTY_COLUMNS]
        created = await self._fetch_one("add property", ADD_PROPERTY, params)
        logger.info(f"Created property: {created['title']} (ID: {created['id']})")
        return created
