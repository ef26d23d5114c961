"""Yard management service."""

from sqlalchemy import exists, or_, select

from yardtrack.api.core.messages import MessageCode
from yardtrack.core.base import BaseService
from yardtrack.core.pagination import Page, PageRequest, paginate
from yardtrack.database.models import FixedMarker, Motorcycle, Position, User, Yard


class YardService(BaseService):
    async def list_yards(self, page_request: PageRequest) -> Page:
        return await paginate(self.db, select(Yard).order_by(Yard.id), page_request)

    async def get_yard(self, yard_id: int) -> Yard:
        return await self.get_or_404(Yard, yard_id, MessageCode.YARD_NOT_FOUND)

    async def list_yards_with_relations(self, page_request: PageRequest) -> Page:
        """Yards that have at least one user, position or fixed marker."""
        stmt = (
            select(Yard)
            .where(
                or_(
                    exists().where(User.yard_id == Yard.id),
                    exists().where(Position.yard_id == Yard.id),
                    exists().where(FixedMarker.yard_id == Yard.id),
                )
            )
            .order_by(Yard.id)
        )
        return await paginate(self.db, stmt, page_request)

    async def list_motorcycles_in_yard(self, yard_id: int) -> list[Motorcycle]:
        """Distinct motorcycles with at least one position recorded in the yard."""
        await self.get_yard(yard_id)
        stmt = (
            select(Motorcycle)
            .where(
                exists().where(
                    Position.motorcycle_id == Motorcycle.id,
                    Position.yard_id == yard_id,
                )
            )
            .order_by(Motorcycle.id)
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def create_yard(
        self, name: str, location: str, description: str | None = None
    ) -> Yard:
        yard = await self.save(
            Yard(name=name, location=location, description=description)
        )
        self.logger.info("Created yard", yard_id=yard.id)
        return yard

    async def update_yard(
        self, yard_id: int, name: str, location: str, description: str | None
    ) -> Yard:
        yard = await self.get_yard(yard_id)
        yard.name = name
        yard.location = location
        yard.description = description
        await self.save(yard)
        self.logger.info("Updated yard", yard_id=yard.id)
        return yard

    async def delete_yard(self, yard_id: int) -> None:
        yard = await self.get_yard(yard_id)
        await self.remove(yard)
        self.logger.info("Deleted yard", yard_id=yard_id)
