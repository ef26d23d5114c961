"""Distance measurement model, the training data for distance prediction."""

from sqlalchemy import Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class DistanceMeasurement(Base):
    """Measured distance in metres between a position and a fixed marker."""

    __tablename__ = "distance_measurements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    distance_m: Mapped[float | None] = mapped_column(Float, nullable=True)
    position_id: Mapped[int | None] = mapped_column(
        ForeignKey("positions.id", ondelete="CASCADE"), nullable=True, index=True
    )
    fixed_marker_id: Mapped[int | None] = mapped_column(
        ForeignKey("fixed_markers.id", ondelete="CASCADE"), nullable=True, index=True
    )

    # Relationships
    position = relationship("Position", back_populates="measurements")
    fixed_marker = relationship("FixedMarker", back_populates="measurements")
