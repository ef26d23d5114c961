"""Motorcycle fleet service."""

from datetime import datetime, timezone

from fastapi import status
from sqlalchemy import func, select

from yardtrack.api.core.exceptions.base import YardTrackException
from yardtrack.api.core.messages import MessageCode
from yardtrack.core.base import BaseService
from yardtrack.core.pagination import Page, PageRequest, paginate
from yardtrack.database.models import Motorcycle, Position


def normalize_plate(plate: str) -> str:
    return plate.strip().upper()


class MotorcycleService(BaseService):
    async def list_motorcycles(self, page_request: PageRequest) -> Page:
        stmt = select(Motorcycle).order_by(Motorcycle.id)
        return await paginate(self.db, stmt, page_request)

    async def get_motorcycle(self, motorcycle_id: int) -> Motorcycle:
        return await self.get_or_404(
            Motorcycle, motorcycle_id, MessageCode.MOTORCYCLE_NOT_FOUND
        )

    async def search_by_plate(self, prefix: str, page_request: PageRequest) -> Page:
        prefix = normalize_plate(prefix)
        stmt = (
            select(Motorcycle)
            .where(Motorcycle.plate.startswith(prefix, autoescape=True))
            .order_by(Motorcycle.plate)
        )
        return await paginate(self.db, stmt, page_request)

    async def list_by_status(self, status_name: str, page_request: PageRequest) -> Page:
        stmt = (
            select(Motorcycle)
            .where(func.lower(Motorcycle.status) == status_name.strip().lower())
            .order_by(Motorcycle.id)
        )
        return await paginate(self.db, stmt, page_request)

    async def list_positions(self, motorcycle_id: int) -> list[Position]:
        await self.get_motorcycle(motorcycle_id)
        stmt = (
            select(Position)
            .where(Position.motorcycle_id == motorcycle_id)
            .order_by(Position.recorded_at.desc(), Position.id.desc())
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def _ensure_plate_available(
        self, plate: str, exclude_id: int | None = None
    ) -> None:
        stmt = select(Motorcycle.id).where(Motorcycle.plate == plate)
        if exclude_id is not None:
            stmt = stmt.where(Motorcycle.id != exclude_id)
        if (await self.db.execute(stmt)).first() is not None:
            raise YardTrackException(
                MessageCode.PLATE_ALREADY_REGISTERED,
                status.HTTP_409_CONFLICT,
                {"plate": plate},
            )

    async def create_motorcycle(
        self, plate: str, model: str, status_name: str
    ) -> Motorcycle:
        plate = normalize_plate(plate)
        await self._ensure_plate_available(plate)
        motorcycle = await self.save(
            Motorcycle(
                plate=plate,
                model=model,
                status=status_name,
                registered_at=datetime.now(timezone.utc),
            )
        )
        self.logger.info(
            "Created motorcycle", motorcycle_id=motorcycle.id, plate=motorcycle.plate
        )
        return motorcycle

    async def update_motorcycle(
        self, motorcycle_id: int, plate: str, model: str, status_name: str
    ) -> Motorcycle:
        motorcycle = await self.get_motorcycle(motorcycle_id)
        plate = normalize_plate(plate)
        await self._ensure_plate_available(plate, exclude_id=motorcycle_id)
        motorcycle.plate = plate
        motorcycle.model = model
        motorcycle.status = status_name
        await self.save(motorcycle)
        self.logger.info("Updated motorcycle", motorcycle_id=motorcycle.id)
        return motorcycle

    async def delete_motorcycle(self, motorcycle_id: int) -> None:
        motorcycle = await self.get_motorcycle(motorcycle_id)
        await self.remove(motorcycle)
        self.logger.info("Deleted motorcycle", motorcycle_id=motorcycle_id)
