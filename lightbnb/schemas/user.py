"""
Pydantic schemas for user requests and responses.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserBase(BaseModel):
    """Base user schema with common fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["devin@example.com"]
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Validate and clean name."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class UserCreate(UserBase):
    """Schema for registering a new user."""

    password: str = Field(
        ...,
        min_length=1,
        max_length=72,
        description="Plain text password, stored hashed"
    )


class UserResponse(UserBase):
    """User as returned by the API. Never includes the password."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="User id")
