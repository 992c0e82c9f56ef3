"""
Pydantic schemas for property requests and responses.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


class PropertyBase(BaseModel):
    """Base property schema with the listing columns."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Speed lamp"])
    description: str = Field("", description="Listing description")
    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)
    cost_per_night: int = Field(..., ge=0, description="Nightly cost", examples=[93061])
    street: str = Field(..., max_length=255)
    city: str = Field(..., min_length=1, max_length=255, examples=["Vancouver"])
    province: str = Field(..., max_length=255)
    post_code: str = Field(..., max_length=255)
    country: str = Field(..., max_length=255, examples=["Canada"])
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    @field_validator("title", "city")
    @classmethod
    def validate_not_blank(cls, v):
        """Reject whitespace-only values."""
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()


class PropertyCreate(PropertyBase):
    """Schema for adding a property listing."""

    owner_id: int = Field(..., gt=0, description="Id of the owning user")


class PropertyResponse(PropertyBase):
    """Property as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    active: bool = True
    average_rating: Optional[float] = Field(
        None,
        description="Average review rating; present on search results"
    )


class PropertyListResponse(BaseModel):
    """Search results."""

    properties: List[PropertyResponse]
    count: int
