"""Factory for Yard models."""

import factory

from yardtrack.database.models import Yard
from .base import AsyncSQLAlchemyModelFactory


class YardFactory(AsyncSQLAlchemyModelFactory[Yard]):
    class Meta:
        model = Yard

    name = factory.Sequence(lambda n: f"Yard {n}")
    location = factory.Faker("city")
    description = factory.Faker("sentence", nb_words=6)
