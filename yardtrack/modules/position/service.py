"""Position tracking service."""

from datetime import datetime, timezone

from sqlalchemy import func, select

from yardtrack.api.core.messages import MessageCode
from yardtrack.core.base import BaseService
from yardtrack.core.pagination import Page, PageRequest, paginate
from yardtrack.database.models import REVIEW_STATUS, Motorcycle, Position, Yard


class PositionService(BaseService):
    async def list_positions(self, page_request: PageRequest) -> Page:
        stmt = select(Position).order_by(Position.id)
        return await paginate(self.db, stmt, page_request)

    async def get_position(self, position_id: int) -> Position:
        return await self.get_or_404(
            Position, position_id, MessageCode.POSITION_NOT_FOUND
        )

    async def list_by_motorcycle(
        self, motorcycle_id: int, page_request: PageRequest
    ) -> Page:
        stmt = (
            select(Position)
            .where(Position.motorcycle_id == motorcycle_id)
            .order_by(Position.id)
        )
        return await paginate(self.db, stmt, page_request)

    async def history_by_motorcycle(
        self, motorcycle_id: int, page_request: PageRequest
    ) -> Page:
        """Positions of one motorcycle, newest reading first."""
        stmt = (
            select(Position)
            .where(Position.motorcycle_id == motorcycle_id)
            .order_by(Position.recorded_at.desc(), Position.id.desc())
        )
        return await paginate(self.db, stmt, page_request)

    async def list_under_review(self, page_request: PageRequest) -> Page:
        """Positions of motorcycles whose status marks them for review."""
        stmt = (
            select(Position)
            .join(Motorcycle, Position.motorcycle_id == Motorcycle.id)
            .where(func.lower(Motorcycle.status) == REVIEW_STATUS)
            .order_by(Position.recorded_at.desc(), Position.id.desc())
        )
        return await paginate(self.db, stmt, page_request)

    async def _ensure_references(
        self, motorcycle_id: int | None, yard_id: int | None
    ) -> None:
        if motorcycle_id is not None:
            await self.get_or_404(
                Motorcycle, motorcycle_id, MessageCode.MOTORCYCLE_NOT_FOUND
            )
        if yard_id is not None:
            await self.get_or_404(Yard, yard_id, MessageCode.YARD_NOT_FOUND)

    async def create_position(
        self,
        x: float | None,
        y: float | None,
        motorcycle_id: int | None,
        yard_id: int | None,
        recorded_at: datetime | None = None,
    ) -> Position:
        await self._ensure_references(motorcycle_id, yard_id)
        position = await self.save(
            Position(
                x=x,
                y=y,
                motorcycle_id=motorcycle_id,
                yard_id=yard_id,
                recorded_at=recorded_at or datetime.now(timezone.utc),
            )
        )
        self.logger.info(
            "Recorded position",
            position_id=position.id,
            motorcycle_id=motorcycle_id,
            yard_id=yard_id,
        )
        return position

    async def update_position(
        self,
        position_id: int,
        x: float | None,
        y: float | None,
        motorcycle_id: int | None,
        yard_id: int | None,
        recorded_at: datetime | None = None,
    ) -> Position:
        position = await self.get_position(position_id)
        await self._ensure_references(motorcycle_id, yard_id)
        position.x = x
        position.y = y
        position.motorcycle_id = motorcycle_id
        position.yard_id = yard_id
        if recorded_at is not None:
            position.recorded_at = recorded_at
        await self.save(position)
        self.logger.info("Updated position", position_id=position.id)
        return position

    async def delete_position(self, position_id: int) -> None:
        position = await self.get_position(position_id)
        await self.remove(position)
        self.logger.info("Deleted position", position_id=position_id)
