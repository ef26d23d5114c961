from fastapi import APIRouter, status

from yardtrack.api.core.dependencies import (
    CurrentUserAuthDep,
    PageRequestDep,
    PositionServiceDep,
)
from yardtrack.api.core.messages import APIResponse, MessageCode, Paginated
from yardtrack.api.position.schemas import (
    PositionDeleteResponse,
    PositionListResponse,
    PositionModel,
    PositionResponse,
    PositionWriteRequest,
)
from yardtrack.core.pagination import Page

router = APIRouter(prefix="/positions", tags=["positions"])


def _paginated(page: Page) -> Paginated[PositionModel]:
    return Paginated[PositionModel](
        items=[PositionModel.model_validate(p) for p in page.items],
        pagination=page.pagination,
    )


@router.get("/", response_model=PositionListResponse)
async def list_positions(
    page_request: PageRequestDep,
    service: PositionServiceDep,
    current_user: CurrentUserAuthDep,
) -> PositionListResponse:
    page = await service.list_positions(page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/under-review", response_model=PositionListResponse)
async def list_positions_under_review(
    page_request: PageRequestDep,
    service: PositionServiceDep,
    current_user: CurrentUserAuthDep,
) -> PositionListResponse:
    """Positions of motorcycles currently flagged for review."""
    page = await service.list_under_review(page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/motorcycle/{motorcycle_id}", response_model=PositionListResponse)
async def list_positions_by_motorcycle(
    motorcycle_id: int,
    page_request: PageRequestDep,
    service: PositionServiceDep,
    current_user: CurrentUserAuthDep,
) -> PositionListResponse:
    page = await service.list_by_motorcycle(motorcycle_id, page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/history/{motorcycle_id}", response_model=PositionListResponse)
async def position_history(
    motorcycle_id: int,
    page_request: PageRequestDep,
    service: PositionServiceDep,
    current_user: CurrentUserAuthDep,
) -> PositionListResponse:
    """Positions of a motorcycle, newest first."""
    page = await service.history_by_motorcycle(motorcycle_id, page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/{position_id}", response_model=PositionResponse)
async def get_position(
    position_id: int,
    service: PositionServiceDep,
    current_user: CurrentUserAuthDep,
) -> PositionResponse:
    position = await service.get_position(position_id)
    return APIResponse.success(data=PositionModel.model_validate(position))


@router.post("/", response_model=PositionResponse, status_code=status.HTTP_201_CREATED)
async def create_position(
    body: PositionWriteRequest,
    service: PositionServiceDep,
    current_user: CurrentUserAuthDep,
) -> PositionResponse:
    position = await service.create_position(
        x=body.x,
        y=body.y,
        motorcycle_id=body.motorcycle_id,
        yard_id=body.yard_id,
        recorded_at=body.recorded_at,
    )
    return APIResponse.success(
        message_code=MessageCode.POSITION_CREATED,
        data=PositionModel.model_validate(position),
    )


@router.put("/{position_id}", response_model=PositionResponse)
async def update_position(
    position_id: int,
    body: PositionWriteRequest,
    service: PositionServiceDep,
    current_user: CurrentUserAuthDep,
) -> PositionResponse:
    position = await service.update_position(
        position_id,
        x=body.x,
        y=body.y,
        motorcycle_id=body.motorcycle_id,
        yard_id=body.yard_id,
        recorded_at=body.recorded_at,
    )
    return APIResponse.success(
        message_code=MessageCode.POSITION_UPDATED,
        data=PositionModel.model_validate(position),
    )


@router.delete("/{position_id}", response_model=PositionDeleteResponse)
async def delete_position(
    position_id: int,
    service: PositionServiceDep,
    current_user: CurrentUserAuthDep,
) -> PositionDeleteResponse:
    await service.delete_position(position_id)
    return APIResponse.success(
        message_code=MessageCode.POSITION_DELETED, data={"deleted": True}
    )
