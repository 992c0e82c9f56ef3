"""
Property review model. Review ratings feed the average rating used in search.
"""

from sqlalchemy import SmallInteger, Text, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.property import Property


class PropertyReview(Base):
    """A guest's rating (1-5) of a property after a reservation."""

    __tablename__ = "property_reviews"

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    reservation_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=False
    )

    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    property: Mapped["Property"] = relationship("Property", back_populates="reviews")

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="check_rating_range"),
    )
