"""Factory for Motorcycle models."""

import factory

from yardtrack.database.models import Motorcycle
from .base import AsyncSQLAlchemyModelFactory


class MotorcycleFactory(AsyncSQLAlchemyModelFactory[Motorcycle]):
    class Meta:
        model = Motorcycle

    plate = factory.Sequence(lambda n: f"MTO{n:04d}")
    model = factory.Faker("random_element", elements=["Pop 110i", "Sport 160", "E"])
    status = "available"
