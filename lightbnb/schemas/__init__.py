"""
Pydantic schemas for request/response validation.
"""

from .user import UserBase, UserCreate, UserResponse
from .property import PropertyBase, PropertyCreate, PropertyResponse, PropertyListResponse
from .reservation import ReservationResponse, ReservationListResponse

__all__ = [
    # User
    "UserBase",
    "UserCreate",
    "UserResponse",

    # Property
    "PropertyBase",
    "PropertyCreate",
    "PropertyResponse",
    "PropertyListResponse",

    # Reservation
    "ReservationResponse",
    "ReservationListResponse",
]
