"""
Property API endpoints for search and listing creation.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from lightbnb.config import Settings
from lightbnb.dependencies import get_app_settings, get_property_repository, resolve_search_limit
from lightbnb.queries.builder import FilterCriteria
from lightbnb.repositories import PropertyRepository
from lightbnb.schemas.property import PropertyCreate, PropertyListResponse, PropertyResponse


router = APIRouter(prefix="/properties", tags=["Properties"])


@router.get(
    "",
    response_model=PropertyListResponse,
    summary="Search properties",
    description="List properties matching optional city, owner, price and rating filters"
)
async def search_properties(
    city: Optional[str] = Query(None, description="Substring of the city name"),
    owner_id: Optional[int] = Query(None, description="Only properties owned by this user"),
    minimum_price_per_night: Optional[int] = Query(None, ge=0, description="Exclusive lower bound on nightly cost"),
    maximum_price_per_night: Optional[int] = Query(None, ge=0, description="Exclusive upper bound on nightly cost"),
    minimum_rating: Optional[int] = Query(None, ge=0, le=5, description="Minimum average rating"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of results"),
    app_settings: Settings = Depends(get_app_settings),
    property_repo: PropertyRepository = Depends(get_property_repository)
) -> PropertyListResponse:
    """
    Search property listings.

    Args:
        city, owner_id, minimum_price_per_night, maximum_price_per_night, minimum_rating:
            Optional filters; omitted filters do not constrain results
        limit: Maximum number of results; defaults to and is bounded by the app settings
        app_settings: Settings the application was created with
        property_repo: Property repository instance

    Returns:
        Matching properties, cheapest first
    """
    limit = resolve_search_limit(limit, app_settings)
    criteria = FilterCriteria(
        city=city,
        owner_id=owner_id,
        minimum_price_per_night=minimum_price_per_night,
        maximum_price_per_night=maximum_price_per_night,
        minimum_rating=minimum_rating,
    )
    rows = await property_repo.get_all_properties(criteria, limit)
    return PropertyListResponse(
        properties=[PropertyResponse.model_validate(row) for row in rows],
        count=len(rows)
    )


@router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add property"
)
async def create_property(
    property_data: PropertyCreate,
    property_repo: PropertyRepository = Depends(get_property_repository)
) -> PropertyResponse:
    """Add a property listing for an owner."""
    created = await property_repo.add_property(property_data.model_dump())
    return PropertyResponse.model_validate(created)
