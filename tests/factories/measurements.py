"""Factory for DistanceMeasurement models."""

import factory

from yardtrack.database.models import DistanceMeasurement
from .base import AsyncSQLAlchemyModelFactory


class DistanceMeasurementFactory(AsyncSQLAlchemyModelFactory[DistanceMeasurement]):
    class Meta:
        model = DistanceMeasurement

    distance_m = factory.Faker("pyfloat", min_value=0.5, max_value=20)
    position_id = None
    fixed_marker_id = None
