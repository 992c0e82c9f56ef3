"""
Reservation API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from lightbnb.config import Settings
from lightbnb.dependencies import get_app_settings, get_reservation_repository, resolve_search_limit
from lightbnb.repositories import ReservationRepository
from lightbnb.schemas.reservation import ReservationListResponse, ReservationResponse


router = APIRouter(prefix="/reservations", tags=["Reservations"])


@router.get("", response_model=ReservationListResponse, summary="List past reservations for a guest")
async def list_reservations(
    guest_id: int = Query(..., gt=0, description="Id of the guest"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of results"),
    app_settings: Settings = Depends(get_app_settings),
    reservation_repo: ReservationRepository = Depends(get_reservation_repository)
) -> ReservationListResponse:
    rows = await reservation_repo.get_all_reservations(guest_id, resolve_search_limit(limit, app_settings))
    return ReservationListResponse(
        reservations=[ReservationResponse.model_validate(row) for row in rows]
    )
