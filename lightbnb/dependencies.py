"""
FastAPI dependency injection for the database handle and repositories.
The handle is created by the application factory and stored on app.state.
"""

from fastapi import Depends, Request
from typing import Optional

from lightbnb.config import Settings
from lightbnb.database import Database
from lightbnb.repositories import PropertyRepository, ReservationRepository, UserRepository
from lightbnb.utils.exceptions import ValidationError


def get_db(request: Request) -> Database:
    """Return the database handle owned by the running application."""
    return request.app.state.db


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings


def resolve_search_limit(limit: Optional[int], settings: Settings) -> int:
    """
    Apply the configured default and upper bound to a requested result limit.

    Raises:
        ValidationError: If the limit exceeds settings.max_search_limit
    """
    if limit is None:
        return settings.default_search_limit
    if limit > settings.max_search_limit:
        raise ValidationError(
            f"limit must be at most {settings.max_search_limit}",
            field_errors=[{
                "field": "query -> limit",
                "message": f"Input should be less than or equal to {settings.max_search_limit}",
                "type": "less_than_equal",
            }]
        )
    return limit


def get_user_repository(db: Database = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_property_repository(db: Database = Depends(get_db)) -> PropertyRepository:
    return PropertyRepository(db)


def get_reservation_repository(db: Database = Depends(get_db)) -> ReservationRepository:
    return ReservationRepository(db)
