"""Position model for timestamped motorcycle coordinate readings."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Position(Base):
    __tablename__ = "positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    x: Mapped[float | None] = mapped_column(Float, nullable=True)
    y: Mapped[float | None] = mapped_column(Float, nullable=True)
    motorcycle_id: Mapped[int | None] = mapped_column(
        ForeignKey("motorcycles.id", ondelete="CASCADE"), nullable=True
    )
    yard_id: Mapped[int | None] = mapped_column(
        ForeignKey("yards.id", ondelete="CASCADE"), nullable=True
    )

    # Relationships
    motorcycle = relationship("Motorcycle", back_populates="positions")
    yard = relationship("Yard", back_populates="positions")
    measurements = relationship(
        "DistanceMeasurement", back_populates="position", passive_deletes=True
    )
