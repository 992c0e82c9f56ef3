"""
API route handlers for LightBnB.
"""

from .properties import router as properties_router
from .reservations import router as reservations_router
from .users import router as users_router

__all__ = ["properties_router", "reservations_router", "users_router"]
