"""
Reservation repository.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.queries.builder import DEFAULT_LIMIT
from typing import Any, Dict, List

GET_ALL_RESERVATIONS = """
    SELECT properties.*, reservations.*, avg(property_reviews.rating) AS average_rating
    FROM properties
    JOIN property_reviews ON property_reviews.property_id = properties.id
    JOIN reservations ON reservations.property_id = properties.id
    JOIN users ON reservations.guest_id = users.id
    WHERE reservations.guest_id = $1
    AND reservations.end_date < now()::date
    GROUP BY properties.id, reservations.id
    ORDER BY reservations.start_date
    LIMIT $2;
"""


class ReservationRepository(BaseRepository):
    """Repository for reservations."""

    async def get_all_reservations(self, guest_id: int, limit: int = DEFAULT_LIMIT) -> List[Dict[str, Any]]:
        """
        Get a guest's past reservations with the reserved property and its average rating.

        Args:
            guest_id: Id of the guest
            limit: Maximum number of reservations to return

        Returns:
            Reservation rows ordered by start date
        """
        return await self._fetch_all("get reservations", GET_ALL_RESERVATIONS, [guest_id, limit])
