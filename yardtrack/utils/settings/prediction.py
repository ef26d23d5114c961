"""Distance prediction settings."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NullCoordinatePolicy(str, Enum):
    """How a measurement with a missing x/y coordinate is treated."""

    # Leave the row out of training and reject such a query
    EXCLUDE = "exclude"
    # Read the missing axis as 0.0
    ZERO = "zero"


class PredictionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MIN_TRAINING_SAMPLES: int = Field(default=5, ge=2)
    NULL_COORDINATE_POLICY: NullCoordinatePolicy = NullCoordinatePolicy.EXCLUDE
    PREDICTION_MAX_WORKERS: int = Field(default=2, ge=1)
