"""Distance measurement service."""

from sqlalchemy import func, select

from yardtrack.api.core.messages import MessageCode
from yardtrack.core.base import BaseService
from yardtrack.core.pagination import Page, PageRequest, paginate
from yardtrack.database.models import DistanceMeasurement, FixedMarker, Position


class MeasurementService(BaseService):
    async def list_measurements(self, page_request: PageRequest) -> Page:
        stmt = select(DistanceMeasurement).order_by(DistanceMeasurement.id)
        return await paginate(self.db, stmt, page_request)

    async def get_measurement(self, measurement_id: int) -> DistanceMeasurement:
        return await self.get_or_404(
            DistanceMeasurement, measurement_id, MessageCode.MEASUREMENT_NOT_FOUND
        )

    async def list_by_position(
        self, position_id: int, page_request: PageRequest
    ) -> Page:
        stmt = (
            select(DistanceMeasurement)
            .where(DistanceMeasurement.position_id == position_id)
            .order_by(DistanceMeasurement.id)
        )
        return await paginate(self.db, stmt, page_request)

    async def list_by_fixed_marker(
        self, fixed_marker_id: int, page_request: PageRequest
    ) -> Page:
        stmt = (
            select(DistanceMeasurement)
            .where(DistanceMeasurement.fixed_marker_id == fixed_marker_id)
            .order_by(DistanceMeasurement.id)
        )
        return await paginate(self.db, stmt, page_request)

    async def count_by_position(self, position_id: int) -> int:
        stmt = select(func.count(DistanceMeasurement.id)).where(
            DistanceMeasurement.position_id == position_id
        )
        return (await self.db.execute(stmt)).scalar_one()

    async def create_measurement(
        self, distance_m: float | None, position_id: int, fixed_marker_id: int
    ) -> DistanceMeasurement:
        await self.get_or_404(Position, position_id, MessageCode.POSITION_NOT_FOUND)
        await self.get_or_404(
            FixedMarker, fixed_marker_id, MessageCode.FIXED_MARKER_NOT_FOUND
        )
        measurement = await self.save(
            DistanceMeasurement(
                distance_m=distance_m,
                position_id=position_id,
                fixed_marker_id=fixed_marker_id,
            )
        )
        self.logger.info(
            "Recorded measurement",
            measurement_id=measurement.id,
            position_id=position_id,
            fixed_marker_id=fixed_marker_id,
        )
        return measurement
