"""ArUco marker API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from yardtrack.api.core.messages import APIResponse, Paginated


class FixedMarkerModel(BaseModel):
    id: int
    aruco_code: str
    x: float | None = None
    y: float | None = None
    yard_id: int | None = None

    model_config = {"from_attributes": True}


class FixedMarkerCreateRequest(BaseModel):
    aruco_code: str = Field(..., min_length=1, max_length=50)
    x: float | None = Field(default=None, allow_inf_nan=False)
    y: float | None = Field(default=None, allow_inf_nan=False)
    yard_id: int | None = None


class MobileMarkerModel(BaseModel):
    id: int
    aruco_code: str
    installed_at: datetime
    motorcycle_id: int | None = None

    model_config = {"from_attributes": True}


class MobileMarkerWriteRequest(BaseModel):
    aruco_code: str = Field(..., min_length=1, max_length=50)
    motorcycle_id: int | None = None
    installed_at: datetime | None = None


FixedMarkerResponse = APIResponse[FixedMarkerModel]
FixedMarkerListResponse = APIResponse[Paginated[FixedMarkerModel]]
FixedMarkerSearchResponse = APIResponse[list[FixedMarkerModel]]
MobileMarkerResponse = APIResponse[MobileMarkerModel]
MobileMarkerListResponse = APIResponse[Paginated[MobileMarkerModel]]
MobileMarkerSearchResponse = APIResponse[list[MobileMarkerModel]]
MarkerDeleteResponse = APIResponse[dict[str, bool]]
