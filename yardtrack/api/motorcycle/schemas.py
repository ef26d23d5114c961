"""Motorcycle API schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from yardtrack.api.core.messages import APIResponse, Paginated


class MotorcycleModel(BaseModel):
    id: int
    plate: str
    model: str
    status: str
    registered_at: datetime

    model_config = {"from_attributes": True}


class MotorcycleWriteRequest(BaseModel):
    plate: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=7)
    ]
    model: str = Field(..., min_length=1, max_length=50)
    status: str = Field(..., min_length=1, max_length=65)


MotorcycleResponse = APIResponse[MotorcycleModel]
MotorcycleListResponse = APIResponse[Paginated[MotorcycleModel]]
MotorcycleDeleteResponse = APIResponse[dict[str, bool]]
