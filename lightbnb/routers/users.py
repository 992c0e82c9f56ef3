"""
User API endpoints for registration and lookup.
"""

from fastapi import APIRouter, Depends, Path, Query, status
from pydantic import EmailStr

from lightbnb.dependencies import get_user_repository
from lightbnb.repositories import UserRepository
from lightbnb.schemas.user import UserCreate, UserResponse
from lightbnb.utils.exceptions import UserNotFoundError


router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user"
)
async def create_user(
    user_data: UserCreate,
    user_repo: UserRepository = Depends(get_user_repository)
) -> UserResponse:
    """
    Register a new user.

    Raises:
        DuplicateResourceError: If the email is already registered
    """
    created = await user_repo.add_user(user_data.model_dump())
    return UserResponse.model_validate(created)


@router.get("", response_model=UserResponse, summary="Get user by email")
async def get_user_by_email(
    email: EmailStr = Query(..., description="Email address to look up"),
    user_repo: UserRepository = Depends(get_user_repository)
) -> UserResponse:
    user = await user_repo.get_user_with_email(email)
    if not user:
        raise UserNotFoundError(email)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse, summary="Get user by id")
async def get_user(
    user_id: int = Path(..., gt=0, description="User id"),
    user_repo: UserRepository = Depends(get_user_repository)
) -> UserResponse:
    user = await user_repo.get_user_with_id(user_id)
    if not user:
        raise UserNotFoundError(str(user_id))
    return UserResponse.model_validate(user)
