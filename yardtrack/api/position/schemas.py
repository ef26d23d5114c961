"""Position API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from yardtrack.api.core.messages import APIResponse, Paginated


class PositionModel(BaseModel):
    id: int
    recorded_at: datetime
    x: float | None = None
    y: float | None = None
    motorcycle_id: int | None = None
    yard_id: int | None = None

    model_config = {"from_attributes": True}


class PositionWriteRequest(BaseModel):
    x: float | None = Field(default=None, allow_inf_nan=False)
    y: float | None = Field(default=None, allow_inf_nan=False)
    motorcycle_id: int | None = None
    yard_id: int | None = None
    recorded_at: datetime | None = None


PositionResponse = APIResponse[PositionModel]
PositionListResponse = APIResponse[Paginated[PositionModel]]
PositionHistoryResponse = APIResponse[list[PositionModel]]
PositionDeleteResponse = APIResponse[dict[str, bool]]
