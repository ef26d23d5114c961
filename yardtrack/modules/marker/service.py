"""Fixed and mobile ArUco marker services."""

from datetime import datetime, timezone

from sqlalchemy import func, select

from yardtrack.api.core.messages import MessageCode
from yardtrack.core.base import BaseService
from yardtrack.core.pagination import Page, PageRequest, paginate
from yardtrack.database.models import FixedMarker, MobileMarker, Motorcycle, Yard


class FixedMarkerService(BaseService):
    async def list_markers(self, page_request: PageRequest) -> Page:
        stmt = select(FixedMarker).order_by(FixedMarker.id)
        return await paginate(self.db, stmt, page_request)

    async def get_marker(self, marker_id: int) -> FixedMarker:
        return await self.get_or_404(
            FixedMarker, marker_id, MessageCode.FIXED_MARKER_NOT_FOUND
        )

    async def list_by_yard(self, yard_id: int, page_request: PageRequest) -> Page:
        stmt = (
            select(FixedMarker)
            .where(FixedMarker.yard_id == yard_id)
            .order_by(FixedMarker.id)
        )
        return await paginate(self.db, stmt, page_request)

    async def search_by_code(self, code: str) -> list[FixedMarker]:
        stmt = (
            select(FixedMarker)
            .where(func.lower(FixedMarker.aruco_code) == code.strip().lower())
            .order_by(FixedMarker.id)
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def create_marker(
        self,
        aruco_code: str,
        x: float | None,
        y: float | None,
        yard_id: int | None,
    ) -> FixedMarker:
        if yard_id is not None:
            await self.get_or_404(Yard, yard_id, MessageCode.YARD_NOT_FOUND)
        marker = await self.save(
            FixedMarker(aruco_code=aruco_code.strip(), x=x, y=y, yard_id=yard_id)
        )
        self.logger.info(
            "Created fixed marker", marker_id=marker.id, aruco_code=marker.aruco_code
        )
        return marker

    async def delete_marker(self, marker_id: int) -> None:
        marker = await self.get_marker(marker_id)
        await self.remove(marker)
        self.logger.info("Deleted fixed marker", marker_id=marker_id)


class MobileMarkerService(BaseService):
    async def list_markers(self, page_request: PageRequest) -> Page:
        stmt = select(MobileMarker).order_by(MobileMarker.id)
        return await paginate(self.db, stmt, page_request)

    async def get_marker(self, marker_id: int) -> MobileMarker:
        return await self.get_or_404(
            MobileMarker, marker_id, MessageCode.MOBILE_MARKER_NOT_FOUND
        )

    async def list_by_motorcycle(self, motorcycle_id: int) -> list[MobileMarker]:
        stmt = (
            select(MobileMarker)
            .where(MobileMarker.motorcycle_id == motorcycle_id)
            .order_by(MobileMarker.id)
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def search_by_code(self, code: str) -> list[MobileMarker]:
        stmt = (
            select(MobileMarker)
            .where(func.lower(MobileMarker.aruco_code) == code.strip().lower())
            .order_by(MobileMarker.id)
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def _ensure_motorcycle(self, motorcycle_id: int | None) -> None:
        if motorcycle_id is not None:
            await self.get_or_404(
                Motorcycle, motorcycle_id, MessageCode.MOTORCYCLE_NOT_FOUND
            )

    async def create_marker(
        self,
        aruco_code: str,
        motorcycle_id: int | None,
        installed_at: datetime | None = None,
    ) -> MobileMarker:
        await self._ensure_motorcycle(motorcycle_id)
        marker = await self.save(
            MobileMarker(
                aruco_code=aruco_code.strip(),
                motorcycle_id=motorcycle_id,
                installed_at=installed_at or datetime.now(timezone.utc),
            )
        )
        self.logger.info(
            "Created mobile marker", marker_id=marker.id, motorcycle_id=motorcycle_id
        )
        return marker

    async def update_marker(
        self,
        marker_id: int,
        aruco_code: str,
        motorcycle_id: int | None,
        installed_at: datetime | None = None,
    ) -> MobileMarker:
        marker = await self.get_marker(marker_id)
        await self._ensure_motorcycle(motorcycle_id)
        marker.aruco_code = aruco_code.strip()
        marker.motorcycle_id = motorcycle_id
        if installed_at is not None:
            marker.installed_at = installed_at
        await self.save(marker)
        self.logger.info("Updated mobile marker", marker_id=marker.id)
        return marker

    async def delete_marker(self, marker_id: int) -> None:
        marker = await self.get_marker(marker_id)
        await self.remove(marker)
        self.logger.info("Deleted mobile marker", marker_id=marker_id)
