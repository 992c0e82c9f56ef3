"""
Property model for short-term rental listings.
"""

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.user import User
    from lightbnb.models.reservation import Reservation
    from lightbnb.models.review import PropertyReview


class Property(Base):
    """
    A rental listing owned by a user.
    Nightly cost is stored as an integer amount.
    """

    __tablename__ = "properties"

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    thumbnail_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)
    cover_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)

    cost_per_night: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    owner: Mapped["User"] = relationship("User", back_populates="properties")

    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation",
        back_populates="property",
        cascade="all, delete-orphan"
    )

    reviews: Mapped[List["PropertyReview"]] = relationship(
        "PropertyReview",
        back_populates="property",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("idx_property_city", "city"),
        Index("idx_property_cost_per_night", "cost_per_night"),
    )
