"""ArUco marker models: fixed reference markers and markers mounted on motorcycles."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class FixedMarker(Base):
    """Stationary reference marker with known yard coordinates."""

    __tablename__ = "fixed_markers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    aruco_code: Mapped[str] = mapped_column(String(50), nullable=False)
    x: Mapped[float | None] = mapped_column(Float, nullable=True)
    y: Mapped[float | None] = mapped_column(Float, nullable=True)
    yard_id: Mapped[int | None] = mapped_column(
        ForeignKey("yards.id", ondelete="CASCADE"), nullable=True
    )

    # Relationships
    yard = relationship("Yard", back_populates="fixed_markers")
    measurements = relationship(
        "DistanceMeasurement", back_populates="fixed_marker", passive_deletes=True
    )


class MobileMarker(Base):
    """Marker attached to a motorcycle."""

    __tablename__ = "mobile_markers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    aruco_code: Mapped[str] = mapped_column(String(50), nullable=False)
    installed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    motorcycle_id: Mapped[int | None] = mapped_column(
        ForeignKey("motorcycles.id", ondelete="CASCADE"), nullable=True
    )

    # Relationships
    motorcycle = relationship("Motorcycle", back_populates="mobile_markers")
