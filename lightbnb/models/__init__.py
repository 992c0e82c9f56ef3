"""
Database models for LightBnB.
Includes User, Property, Reservation, and PropertyReview tables.
"""

from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview

__all__ = [
    "User",
    "Property",
    "Reservation",
    "PropertyReview",
]
