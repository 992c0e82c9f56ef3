"""
Pydantic schemas for reservation responses.
"""

from pydantic import BaseModel, ConfigDict
from datetime import date
from typing import List, Optional


class ReservationResponse(BaseModel):
    """A past reservation together with the reserved property."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: int
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    title: str
    city: str
    cost_per_night: int
    thumbnail_photo_url: str
    number_of_bedrooms: int
    number_of_bathrooms: int
    parking_spaces: int
    average_rating: Optional[float] = None


class ReservationListResponse(BaseModel):
    """Reservations for a guest."""

    reservations: List[ReservationResponse]
