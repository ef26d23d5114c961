"""Factory for Position models."""

import factory

from yardtrack.database.models import Position
from .base import AsyncSQLAlchemyModelFactory


class PositionFactory(AsyncSQLAlchemyModelFactory[Position]):
    class Meta:
        model = Position

    x = factory.Faker("pyfloat", min_value=0, max_value=50)
    y = factory.Faker("pyfloat", min_value=0, max_value=50)
    motorcycle_id = None
    yard_id = None
