"""Yard API schemas."""

from pydantic import BaseModel, Field

from yardtrack.api.core.messages import APIResponse, Paginated
from yardtrack.api.motorcycle.schemas import MotorcycleModel


class YardModel(BaseModel):
    id: int
    name: str
    location: str
    description: str | None = None

    model_config = {"from_attributes": True}


class YardWriteRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=255)


YardResponse = APIResponse[YardModel]
YardListResponse = APIResponse[Paginated[YardModel]]
YardMotorcyclesResponse = APIResponse[list[MotorcycleModel]]
YardDeleteResponse = APIResponse[dict[str, bool]]
