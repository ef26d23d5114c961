"""Turning stored measurements into regression samples.

Each sample pairs the coordinates of a position and of a fixed marker with the
distance measured between them. The feature order is fixed:
(position_x, position_y, marker_x, marker_y).
"""

import math
from dataclasses import dataclass
from typing import Iterable

from yardtrack.api.core.exceptions.base import InvalidNumericInputException
from yardtrack.utils.settings.prediction import NullCoordinatePolicy

FEATURE_NAMES = ("position_x", "position_y", "marker_x", "marker_y")

FeatureVector = tuple[float, float, float, float]


@dataclass(frozen=True)
class MeasurementRow:
    """A measurement joined to its position and fixed marker coordinates."""

    measurement_id: int
    distance_m: float
    position_x: float | None
    position_y: float | None
    marker_x: float | None
    marker_y: float | None


@dataclass(frozen=True)
class TrainingSample:
    features: FeatureVector
    distance_m: float


def _ensure_finite(values: Iterable[float]) -> None:
    for name, value in zip(FEATURE_NAMES + ("distance_m",), values):
        if not math.isfinite(value):
            raise InvalidNumericInputException(
                f"{name} is not a finite number", field=name
            )


def build_feature_vector(
    position_x: float | None,
    position_y: float | None,
    marker_x: float | None,
    marker_y: float | None,
    policy: NullCoordinatePolicy = NullCoordinatePolicy.EXCLUDE,
) -> FeatureVector | None:
    """Build the feature vector for one position/marker pair.

    Returns None when a coordinate is missing and the policy excludes
    incomplete rows. Raises InvalidNumericInputException for NaN or infinity.
    """
    raw = (position_x, position_y, marker_x, marker_y)
    if any(value is None for value in raw):
        if policy == NullCoordinatePolicy.EXCLUDE:
            return None
        raw = tuple(0.0 if value is None else value for value in raw)

    vector = tuple(float(value) for value in raw)
    _ensure_finite(vector)
    return vector


def extract_training_samples(
    rows: Iterable[MeasurementRow],
    policy: NullCoordinatePolicy = NullCoordinatePolicy.EXCLUDE,
) -> list[TrainingSample]:
    """Build one sample per usable row, preserving row order."""
    samples: list[TrainingSample] = []
    for row in rows:
        try:
            vector = build_feature_vector(
                row.position_x, row.position_y, row.marker_x, row.marker_y, policy
            )
            if vector is None:
                continue
            _ensure_finite(vector + (float(row.distance_m),))
        except InvalidNumericInputException as exc:
            exc.details["measurement_id"] = row.measurement_id
            raise
        samples.append(
            TrainingSample(features=vector, distance_m=float(row.distance_m))
        )
    return samples
