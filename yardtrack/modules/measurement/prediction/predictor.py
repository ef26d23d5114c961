"""Single-point distance inference."""

import math
from dataclasses import dataclass
from typing import Sequence

from yardtrack.api.core.exceptions.base import InvalidNumericInputException
from yardtrack.modules.measurement.prediction.features import (
    FeatureVector,
    TrainingSample,
)
from yardtrack.modules.measurement.prediction.trainer import (
    DistanceModel,
    DistanceTrainer,
)


@dataclass(frozen=True)
class DistanceEstimate:
    distance_m: float
    training_sample_count: int


def predict_distance(model: DistanceModel, features: FeatureVector) -> float:
    value = model.predict(features)
    if not math.isfinite(value):
        raise InvalidNumericInputException(
            "Model produced a non-finite distance", features=list(features)
        )
    return value


def fit_and_predict(
    trainer: DistanceTrainer,
    samples: Sequence[TrainingSample],
    features: FeatureVector,
) -> DistanceEstimate:
    """Train a throwaway model and apply it to one query.

    Blocking; runs on the training pool, never on the event loop.
    """
    model = trainer.fit(samples)
    return DistanceEstimate(
        distance_m=predict_distance(model, features),
        training_sample_count=model.sample_count,
    )
