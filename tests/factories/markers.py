"""Factories for fixed and mobile ArUco markers."""

import factory

from yardtrack.database.models import FixedMarker, MobileMarker
from .base import AsyncSQLAlchemyModelFactory


class FixedMarkerFactory(AsyncSQLAlchemyModelFactory[FixedMarker]):
    class Meta:
        model = FixedMarker

    aruco_code = factory.Sequence(lambda n: f"FIX-{n:03d}")
    x = factory.Faker("pyfloat", min_value=0, max_value=50)
    y = factory.Faker("pyfloat", min_value=0, max_value=50)
    yard_id = None


class MobileMarkerFactory(AsyncSQLAlchemyModelFactory[MobileMarker]):
    class Meta:
        model = MobileMarker

    aruco_code = factory.Sequence(lambda n: f"MOB-{n:03d}")
    motorcycle_id = None
