"""Distance prediction for a position / fixed marker pair.

Every request retrains from the measurements stored at that moment. Nothing is
cached between requests.
"""

import asyncio
import time
from concurrent.futures import Executor
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from yardtrack.api.core.exceptions.base import InvalidNumericInputException
from yardtrack.api.core.messages import MessageCode
from yardtrack.core.base import BaseService
from yardtrack.database.models import DistanceMeasurement, FixedMarker, Position
from yardtrack.modules.measurement.prediction.features import (
    FeatureVector,
    MeasurementRow,
    build_feature_vector,
    extract_training_samples,
)
from yardtrack.modules.measurement.prediction.predictor import fit_and_predict
from yardtrack.modules.measurement.prediction.trainer import (
    DistanceTrainer,
    LinearRegressionTrainer,
)
from yardtrack.utils.settings.prediction import PredictionSettings


@dataclass(frozen=True)
class PredictionResult:
    position_id: int
    fixed_marker_id: int
    predicted_distance_m: float
    training_sample_count: int


class DistancePredictionService(BaseService):
    def __init__(
        self,
        db: AsyncSession,
        pool: Executor | None = None,
        trainer: DistanceTrainer | None = None,
        settings: PredictionSettings | None = None,
    ):
        super().__init__(db)
        self.settings = settings or PredictionSettings()
        self.pool = pool
        self.trainer = trainer or LinearRegressionTrainer(
            min_samples=self.settings.MIN_TRAINING_SAMPLES
        )

    async def load_measurement_rows(self) -> list[MeasurementRow]:
        """Measurements with a distance and both references, oldest first."""
        stmt = (
            select(
                DistanceMeasurement.id,
                DistanceMeasurement.distance_m,
                Position.x,
                Position.y,
                FixedMarker.x,
                FixedMarker.y,
            )
            .join(Position, DistanceMeasurement.position_id == Position.id)
            .join(FixedMarker, DistanceMeasurement.fixed_marker_id == FixedMarker.id)
            .where(DistanceMeasurement.distance_m.is_not(None))
            .order_by(DistanceMeasurement.id)
        )
        result = await self.db.execute(stmt)
        return [
            MeasurementRow(
                measurement_id=measurement_id,
                distance_m=distance_m,
                position_x=position_x,
                position_y=position_y,
                marker_x=marker_x,
                marker_y=marker_y,
            )
            for (
                measurement_id,
                distance_m,
                position_x,
                position_y,
                marker_x,
                marker_y,
            ) in result.all()
        ]

    def _query_vector(self, position: Position, marker: FixedMarker) -> FeatureVector:
        vector = build_feature_vector(
            position.x,
            position.y,
            marker.x,
            marker.y,
            self.settings.NULL_COORDINATE_POLICY,
        )
        if vector is None:
            raise InvalidNumericInputException(
                "Position and marker must both have x and y coordinates",
                position_id=position.id,
                fixed_marker_id=marker.id,
            )
        return vector

    async def predict_distance(
        self, position_id: int, fixed_marker_id: int
    ) -> PredictionResult:
        start_time = time.time()

        position = await self.get_or_404(
            Position, position_id, MessageCode.POSITION_NOT_FOUND
        )
        marker = await self.get_or_404(
            FixedMarker, fixed_marker_id, MessageCode.FIXED_MARKER_NOT_FOUND
        )
        query = self._query_vector(position, marker)

        rows = await self.load_measurement_rows()
        samples = extract_training_samples(rows, self.settings.NULL_COORDINATE_POLICY)
        if len(samples) < len(rows):
            self.logger.info(
                "Skipped measurements with missing coordinates",
                skipped=len(rows) - len(samples),
            )

        # Fit and inference block, so they go through the bounded pool
        loop = asyncio.get_event_loop()
        estimate = await loop.run_in_executor(
            self.pool, fit_and_predict, self.trainer, samples, query
        )

        self.logger.info(
            "Predicted distance",
            position_id=position_id,
            fixed_marker_id=fixed_marker_id,
            predicted_distance_m=estimate.distance_m,
            training_sample_count=estimate.training_sample_count,
            duration=int((time.time() - start_time) * 1000),
        )

        return PredictionResult(
            position_id=position_id,
            fixed_marker_id=fixed_marker_id,
            predicted_distance_m=estimate.distance_m,
            training_sample_count=estimate.training_sample_count,
        )
