from fastapi import APIRouter, status

from yardtrack.api.core.dependencies import (
    CurrentUserAuthDep,
    DistancePredictionServiceDep,
    MeasurementServiceDep,
    PageRequestDep,
)
from yardtrack.api.core.messages import APIResponse, MessageCode, Paginated
from yardtrack.api.measurement.schemas import (
    MeasurementCount,
    MeasurementCountResponse,
    MeasurementCreateRequest,
    MeasurementListResponse,
    MeasurementModel,
    MeasurementResponse,
    PredictionRequest,
    PredictionResponse,
    PredictionResultModel,
)
from yardtrack.core.pagination import Page

router = APIRouter(prefix="/measurements", tags=["measurements"])


def _paginated(page: Page) -> Paginated[MeasurementModel]:
    return Paginated[MeasurementModel](
        items=[MeasurementModel.model_validate(m) for m in page.items],
        pagination=page.pagination,
    )


@router.get("/", response_model=MeasurementListResponse)
async def list_measurements(
    page_request: PageRequestDep,
    service: MeasurementServiceDep,
    current_user: CurrentUserAuthDep,
) -> MeasurementListResponse:
    page = await service.list_measurements(page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/position/{position_id}", response_model=MeasurementListResponse)
async def list_measurements_by_position(
    position_id: int,
    page_request: PageRequestDep,
    service: MeasurementServiceDep,
    current_user: CurrentUserAuthDep,
) -> MeasurementListResponse:
    page = await service.list_by_position(position_id, page_request)
    return APIResponse.success(data=_paginated(page))


@router.get(
    "/fixed-marker/{fixed_marker_id}", response_model=MeasurementListResponse
)
async def list_measurements_by_fixed_marker(
    fixed_marker_id: int,
    page_request: PageRequestDep,
    service: MeasurementServiceDep,
    current_user: CurrentUserAuthDep,
) -> MeasurementListResponse:
    page = await service.list_by_fixed_marker(fixed_marker_id, page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/count/position/{position_id}", response_model=MeasurementCountResponse)
async def count_measurements_by_position(
    position_id: int,
    service: MeasurementServiceDep,
    current_user: CurrentUserAuthDep,
) -> MeasurementCountResponse:
    count = await service.count_by_position(position_id)
    return APIResponse.success(
        data=MeasurementCount(position_id=position_id, count=count)
    )


@router.get("/{measurement_id}", response_model=MeasurementResponse)
async def get_measurement(
    measurement_id: int,
    service: MeasurementServiceDep,
    current_user: CurrentUserAuthDep,
) -> MeasurementResponse:
    measurement = await service.get_measurement(measurement_id)
    return APIResponse.success(data=MeasurementModel.model_validate(measurement))


@router.post(
    "/", response_model=MeasurementResponse, status_code=status.HTTP_201_CREATED
)
async def create_measurement(
    body: MeasurementCreateRequest,
    service: MeasurementServiceDep,
    current_user: CurrentUserAuthDep,
) -> MeasurementResponse:
    measurement = await service.create_measurement(
        body.distance_m, body.position_id, body.fixed_marker_id
    )
    return APIResponse.success(
        message_code=MessageCode.MEASUREMENT_CREATED,
        data=MeasurementModel.model_validate(measurement),
    )


@router.post("/prediction", response_model=PredictionResponse)
async def predict_distance(
    body: PredictionRequest,
    service: DistancePredictionServiceDep,
    current_user: CurrentUserAuthDep,
) -> PredictionResponse:
    """Predict the distance between a position and a fixed marker.

    A linear model is fitted on every stored measurement at request time.
    """
    result = await service.predict_distance(body.position_id, body.fixed_marker_id)
    return APIResponse.success(
        message_code=MessageCode.PREDICTION_COMPLETED,
        data=PredictionResultModel.model_validate(result),
    )
