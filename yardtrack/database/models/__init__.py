"""Database models for YardTrack API."""

from .base import Base
from .markers import FixedMarker, MobileMarker
from .measurements import DistanceMeasurement
from .motorcycles import REVIEW_STATUS, Motorcycle
from .positions import Position
from .users import User, UserRole, UserStatus
from .yards import Yard

# Export all models and enums
__all__ = [
    # Base
    "Base",
    # Enums
    "UserRole",
    "UserStatus",
    "REVIEW_STATUS",
    # Models
    "Yard",
    "Motorcycle",
    "User",
    "FixedMarker",
    "MobileMarker",
    "Position",
    "DistanceMeasurement",
]
