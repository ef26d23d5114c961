"""Distance measurement and prediction API schemas."""

from pydantic import BaseModel, Field

from yardtrack.api.core.messages import APIResponse, Paginated


class MeasurementModel(BaseModel):
    id: int
    distance_m: float | None = None
    position_id: int | None = None
    fixed_marker_id: int | None = None

    model_config = {"from_attributes": True}


class MeasurementCreateRequest(BaseModel):
    distance_m: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    position_id: int
    fixed_marker_id: int


class MeasurementCount(BaseModel):
    position_id: int
    count: int


class PredictionRequest(BaseModel):
    position_id: int
    fixed_marker_id: int


class PredictionResultModel(BaseModel):
    position_id: int
    fixed_marker_id: int
    predicted_distance_m: float
    training_sample_count: int

    model_config = {"from_attributes": True}


MeasurementResponse = APIResponse[MeasurementModel]
MeasurementListResponse = APIResponse[Paginated[MeasurementModel]]
MeasurementCountResponse = APIResponse[MeasurementCount]
PredictionResponse = APIResponse[PredictionResultModel]
