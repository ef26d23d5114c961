"""Yard (storage area) model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Yard(Base):
    __tablename__ = "yards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    location: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships (defined via string references to avoid circular imports)
    users = relationship("User", back_populates="yard", passive_deletes=True)
    positions = relationship(
        "Position", back_populates="yard", passive_deletes=True
    )
    fixed_markers = relationship(
        "FixedMarker", back_populates="yard", passive_deletes=True
    )
