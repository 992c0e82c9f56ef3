"""
User model for guests and property owners.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from passlib.context import CryptContext
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.property import Property
    from lightbnb.models.reservation import Reservation

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class User(Base):
    """A LightBnB account. The same user can own properties and make reservations."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address - must be unique"
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    properties: Mapped[List["Property"]] = relationship(
        "Property",
        back_populates="owner",
        cascade="all, delete-orphan"
    )

    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation",
        back_populates="guest",
        cascade="all, delete-orphan"
    )

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a plain text password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password string
        """
        if not password:
            raise ValueError("Password cannot be empty")
        return pwd_context.hash(password)

    @staticmethod
    def verify_hashed_password(password: str, hashed_password: str) -> bool:
        """Check a plain text password against a stored hash."""
        return pwd_context.verify(password, hashed_password)
