"""Tests for the least squares distance trainer and single-point inference."""

import math

import pytest

from yardtrack.api.core.exceptions.base import (
    InsufficientTrainingDataException,
    InvalidNumericInputException,
)
from yardtrack.api.core.messages import MessageCode
from yardtrack.modules.measurement.prediction.features import TrainingSample
from yardtrack.modules.measurement.prediction.predictor import (
    fit_and_predict,
    predict_distance,
)
from yardtrack.modules.measurement.prediction.trainer import LinearRegressionTrainer


def _samples(points):
    return [
        TrainingSample(features=features, distance_m=distance)
        for features, distance in points
    ]


# distance = 2 * position_x + 1, other features vary without affecting it
LINEAR_POINTS = [
    ((0.0, 1.0, 5.0, 2.0), 1.0),
    ((1.0, 0.0, 4.0, 3.0), 3.0),
    ((2.0, 3.0, 3.0, 1.0), 5.0),
    ((3.0, 2.0, 7.0, 4.0), 7.0),
    ((4.0, 5.0, 1.0, 0.0), 9.0),
    ((5.0, 4.0, 2.0, 6.0), 11.0),
]


def test_fit_recovers_exact_linear_relationship():
    model = LinearRegressionTrainer().fit(_samples(LINEAR_POINTS))

    prediction = model.predict((10.0, 0.0, 0.0, 0.0))

    assert prediction == pytest.approx(21.0, abs=1e-6)
    assert model.sample_count == 6
    assert model.coefficients["position_x"] == pytest.approx(2.0, abs=1e-6)


def test_fit_is_deterministic():
    samples = _samples(LINEAR_POINTS)
    query = (2.5, 1.0, 3.0, 2.0)

    first = LinearRegressionTrainer().fit(samples).predict(query)
    second = LinearRegressionTrainer().fit(samples).predict(query)

    assert first == second


def test_constant_features_predict_the_mean():
    samples = _samples([((1.0, 1.0, 2.0, 2.0), d) for d in [1.5, 2.5, 3.5, 4.5, 5.5]])

    model = LinearRegressionTrainer().fit(samples)

    assert model.predict((1.0, 1.0, 2.0, 2.0)) == pytest.approx(3.5)


@pytest.mark.parametrize("count", [0, 1, 4])
def test_fewer_than_minimum_samples_is_rejected(count):
    samples = _samples(LINEAR_POINTS[:count])

    with pytest.raises(InsufficientTrainingDataException) as exc_info:
        LinearRegressionTrainer(min_samples=5).fit(samples)

    assert exc_info.value.message_code == MessageCode.INSUFFICIENT_TRAINING_DATA
    assert exc_info.value.status_code == 400
    assert exc_info.value.details["sample_count"] == count
    assert exc_info.value.details["min_samples"] == 5


def test_minimum_is_configurable():
    model = LinearRegressionTrainer(min_samples=2).fit(_samples(LINEAR_POINTS[:2]))

    assert model.sample_count == 2


def test_fit_and_predict_reports_sample_count():
    estimate = fit_and_predict(
        LinearRegressionTrainer(), _samples(LINEAR_POINTS), (1.0, 0.0, 0.0, 0.0)
    )

    assert math.isfinite(estimate.distance_m)
    assert estimate.training_sample_count == 6


class _BrokenModel:
    sample_count = 5

    def predict(self, features):
        return math.inf


def test_non_finite_prediction_is_rejected():
    with pytest.raises(InvalidNumericInputException):
        predict_distance(_BrokenModel(), (0.0, 0.0, 0.0, 0.0))


def test_coordinates_near_float_limit_are_rejected():
    samples = _samples(
        [((1e308, 1e308, 1e308, 1e308), d) for d in [1.0, 2.0, 3.0, 4.0, 5.0]]
    )

    with pytest.raises(InvalidNumericInputException) as exc_info:
        fit_and_predict(LinearRegressionTrainer(), samples, (1e308, 1e308, 0.0, 0.0))

    assert exc_info.value.message_code == MessageCode.INVALID_NUMERIC_INPUT
    assert exc_info.value.status_code == 422
