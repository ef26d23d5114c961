"""Fitting the distance regression model."""

import math
from dataclasses import dataclass
from typing import Protocol, Sequence

import numpy as np
from sklearn.linear_model import LinearRegression

from yardtrack.api.core.exceptions.base import (
    InsufficientTrainingDataException,
    InvalidNumericInputException,
)
from yardtrack.modules.measurement.prediction.features import (
    FEATURE_NAMES,
    FeatureVector,
    TrainingSample,
)

DEFAULT_MIN_SAMPLES = 5


class DistanceModel(Protocol):
    sample_count: int

    def predict(self, features: FeatureVector) -> float: ...


class DistanceTrainer(Protocol):
    min_samples: int

    def fit(self, samples: Sequence[TrainingSample]) -> DistanceModel: ...


@dataclass
class FittedDistanceModel:
    """An ordinary least squares fit over the four coordinate features."""

    estimator: LinearRegression
    sample_count: int

    @property
    def coefficients(self) -> dict[str, float]:
        return {
            name: float(value)
            for name, value in zip(FEATURE_NAMES, self.estimator.coef_)
        }

    @property
    def intercept(self) -> float:
        return float(self.estimator.intercept_)

    def predict(self, features: FeatureVector) -> float:
        X = np.asarray([features], dtype=np.float64)
        try:
            return float(self.estimator.predict(X)[0])
        except (ValueError, FloatingPointError) as exc:
            raise InvalidNumericInputException(
                "Prediction overflowed", features=list(features)
            ) from exc


class LinearRegressionTrainer:
    """Closed-form OLS. Same samples in the same order give the same model."""

    def __init__(self, min_samples: int = DEFAULT_MIN_SAMPLES):
        self.min_samples = min_samples

    def fit(self, samples: Sequence[TrainingSample]) -> FittedDistanceModel:
        if len(samples) < self.min_samples:
            raise InsufficientTrainingDataException(len(samples), self.min_samples)

        X = np.asarray([sample.features for sample in samples], dtype=np.float64)
        y = np.asarray([sample.distance_m for sample in samples], dtype=np.float64)

        estimator = LinearRegression()
        try:
            estimator.fit(X, y)
        except (ValueError, FloatingPointError) as exc:
            # centering can overflow to inf on coordinates near the float limit
            raise InvalidNumericInputException(
                "Model fit overflowed", sample_count=len(samples)
            ) from exc

        if not all(math.isfinite(v) for v in estimator.coef_) or not math.isfinite(
            estimator.intercept_
        ):
            raise InvalidNumericInputException(
                "Model fit produced non-finite coefficients"
            )

        return FittedDistanceModel(estimator=estimator, sample_count=len(samples))
