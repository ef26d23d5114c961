"""Tests for turning measurements into regression samples."""

import math

import pytest

from yardtrack.api.core.exceptions.base import InvalidNumericInputException
from yardtrack.api.core.messages import MessageCode
from yardtrack.modules.measurement.prediction.features import (
    MeasurementRow,
    build_feature_vector,
    extract_training_samples,
)
from yardtrack.utils.settings.prediction import NullCoordinatePolicy


def _row(measurement_id=1, distance_m=2.0, px=1.0, py=2.0, mx=3.0, my=4.0):
    return MeasurementRow(
        measurement_id=measurement_id,
        distance_m=distance_m,
        position_x=px,
        position_y=py,
        marker_x=mx,
        marker_y=my,
    )


def test_feature_order_is_position_then_marker():
    assert build_feature_vector(1, 2, 3, 4) == (1.0, 2.0, 3.0, 4.0)


def test_missing_coordinate_is_excluded_by_default():
    assert build_feature_vector(1.0, None, 3.0, 4.0) is None


def test_missing_coordinate_becomes_zero_under_zero_policy():
    vector = build_feature_vector(1.0, None, 3.0, None, NullCoordinatePolicy.ZERO)

    assert vector == (1.0, 0.0, 3.0, 0.0)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_coordinate_is_rejected(bad):
    with pytest.raises(InvalidNumericInputException) as exc_info:
        build_feature_vector(1.0, 2.0, bad, 4.0)

    assert exc_info.value.message_code == MessageCode.INVALID_NUMERIC_INPUT
    assert exc_info.value.status_code == 422
    assert exc_info.value.details["field"] == "marker_x"


def test_extract_skips_incomplete_rows_and_keeps_order():
    rows = [
        _row(measurement_id=1, distance_m=1.5),
        _row(measurement_id=2, distance_m=2.5, mx=None),
        _row(measurement_id=3, distance_m=3.5),
    ]

    samples = extract_training_samples(rows)

    assert [s.distance_m for s in samples] == [1.5, 3.5]
    assert samples[0].features == (1.0, 2.0, 3.0, 4.0)


def test_extract_keeps_incomplete_rows_under_zero_policy():
    rows = [_row(px=None), _row(measurement_id=2)]

    samples = extract_training_samples(rows, NullCoordinatePolicy.ZERO)

    assert len(samples) == 2
    assert samples[0].features[0] == 0.0


def test_extract_rejects_non_finite_distance_with_row_id():
    rows = [_row(measurement_id=1), _row(measurement_id=9, distance_m=math.nan)]

    with pytest.raises(InvalidNumericInputException) as exc_info:
        extract_training_samples(rows)

    assert exc_info.value.details["measurement_id"] == 9
    assert exc_info.value.details["field"] == "distance_m"
