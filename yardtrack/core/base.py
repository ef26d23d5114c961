from typing import TypeVar

from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from yardtrack.api.core.exceptions.base import YardTrackException
from yardtrack.api.core.messages import MessageCode
from yardtrack.utils.logger import get_logger

ModelT = TypeVar("ModelT")


class BaseService:
    """Base service class with database dependency injection."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = get_logger(self.__class__.__name__)

    async def get_or_404(
        self, model: type[ModelT], entity_id: int, not_found_code: MessageCode
    ) -> ModelT:
        """Load a row by primary key or raise a 404 with the given code."""
        entity = await self.db.get(model, entity_id)
        if entity is None:
            raise YardTrackException(
                not_found_code,
                status.HTTP_404_NOT_FOUND,
                {"id": entity_id},
            )
        return entity

    async def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        await self.db.commit()
        await self.db.refresh(entity)
        return entity

    async def remove(self, entity) -> None:
        await self.db.delete(entity)
        await self.db.commit()
