"""Test factories for YardTrack API models."""

from .base import AsyncSQLAlchemyModelFactory
from .markers import FixedMarkerFactory, MobileMarkerFactory
from .measurements import DistanceMeasurementFactory
from .motorcycles import MotorcycleFactory
from .positions import PositionFactory
from .users import DEFAULT_PASSWORD, UserFactory
from .yards import YardFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "DEFAULT_PASSWORD",
    "DistanceMeasurementFactory",
    "FixedMarkerFactory",
    "MobileMarkerFactory",
    "MotorcycleFactory",
    "PositionFactory",
    "UserFactory",
    "YardFactory",
]
