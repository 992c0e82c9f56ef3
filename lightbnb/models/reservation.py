"""
Reservation model linking guests to the properties they book.
"""

from sqlalchemy import Date, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.user import User
    from lightbnb.models.property import Property


class Reservation(Base):
    """A booking of a property by a guest for a date range."""

    __tablename__ = "reservations"

    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    property: Mapped["Property"] = relationship("Property", back_populates="reservations")
    guest: Mapped["User"] = relationship("User", back_populates="reservations")
