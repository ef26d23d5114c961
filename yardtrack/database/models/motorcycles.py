"""Motorcycle model."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

# Status value that flags a motorcycle for inspection
REVIEW_STATUS = "review"


class Motorcycle(Base):
    __tablename__ = "motorcycles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    plate: Mapped[str] = mapped_column(String(7), unique=True, nullable=False)
    model: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(65), nullable=False)
    registered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    positions = relationship(
        "Position", back_populates="motorcycle", passive_deletes=True
    )
    mobile_markers = relationship(
        "MobileMarker", back_populates="motorcycle", passive_deletes=True
    )
