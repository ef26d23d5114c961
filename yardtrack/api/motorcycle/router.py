from fastapi import APIRouter, status

from yardtrack.api.core.dependencies import (
    CurrentUserAuthDep,
    MotorcycleServiceDep,
    PageRequestDep,
)
from yardtrack.api.core.messages import APIResponse, MessageCode, Paginated
from yardtrack.api.motorcycle.schemas import (
    MotorcycleDeleteResponse,
    MotorcycleListResponse,
    MotorcycleModel,
    MotorcycleResponse,
    MotorcycleWriteRequest,
)
from yardtrack.api.position.schemas import PositionHistoryResponse, PositionModel
from yardtrack.core.pagination import Page

router = APIRouter(prefix="/motorcycles", tags=["motorcycles"])


def _paginated(page: Page) -> Paginated[MotorcycleModel]:
    return Paginated[MotorcycleModel](
        items=[MotorcycleModel.model_validate(m) for m in page.items],
        pagination=page.pagination,
    )


@router.get("/", response_model=MotorcycleListResponse)
async def list_motorcycles(
    page_request: PageRequestDep,
    service: MotorcycleServiceDep,
    current_user: CurrentUserAuthDep,
) -> MotorcycleListResponse:
    page = await service.list_motorcycles(page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/plate/{prefix}", response_model=MotorcycleListResponse)
async def search_by_plate(
    prefix: str,
    page_request: PageRequestDep,
    service: MotorcycleServiceDep,
    current_user: CurrentUserAuthDep,
) -> MotorcycleListResponse:
    """Motorcycles whose plate starts with the given prefix."""
    page = await service.search_by_plate(prefix, page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/status/{status_name}", response_model=MotorcycleListResponse)
async def list_by_status(
    status_name: str,
    page_request: PageRequestDep,
    service: MotorcycleServiceDep,
    current_user: CurrentUserAuthDep,
) -> MotorcycleListResponse:
    page = await service.list_by_status(status_name, page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/{motorcycle_id}", response_model=MotorcycleResponse)
async def get_motorcycle(
    motorcycle_id: int,
    service: MotorcycleServiceDep,
    current_user: CurrentUserAuthDep,
) -> MotorcycleResponse:
    motorcycle = await service.get_motorcycle(motorcycle_id)
    return APIResponse.success(data=MotorcycleModel.model_validate(motorcycle))


@router.get("/{motorcycle_id}/positions", response_model=PositionHistoryResponse)
async def list_motorcycle_positions(
    motorcycle_id: int,
    service: MotorcycleServiceDep,
    current_user: CurrentUserAuthDep,
) -> PositionHistoryResponse:
    positions = await service.list_positions(motorcycle_id)
    return APIResponse.success(
        data=[PositionModel.model_validate(p) for p in positions]
    )


@router.post(
    "/", response_model=MotorcycleResponse, status_code=status.HTTP_201_CREATED
)
async def create_motorcycle(
    body: MotorcycleWriteRequest,
    service: MotorcycleServiceDep,
    current_user: CurrentUserAuthDep,
) -> MotorcycleResponse:
    motorcycle = await service.create_motorcycle(body.plate, body.model, body.status)
    return APIResponse.success(
        message_code=MessageCode.MOTORCYCLE_CREATED,
        data=MotorcycleModel.model_validate(motorcycle),
    )


@router.put("/{motorcycle_id}", response_model=MotorcycleResponse)
async def update_motorcycle(
    motorcycle_id: int,
    body: MotorcycleWriteRequest,
    service: MotorcycleServiceDep,
    current_user: CurrentUserAuthDep,
) -> MotorcycleResponse:
    motorcycle = await service.update_motorcycle(
        motorcycle_id, body.plate, body.model, body.status
    )
    return APIResponse.success(
        message_code=MessageCode.MOTORCYCLE_UPDATED,
        data=MotorcycleModel.model_validate(motorcycle),
    )


@router.delete("/{motorcycle_id}", response_model=MotorcycleDeleteResponse)
async def delete_motorcycle(
    motorcycle_id: int,
    service: MotorcycleServiceDep,
    current_user: CurrentUserAuthDep,
) -> MotorcycleDeleteResponse:
    await service.delete_motorcycle(motorcycle_id)
    return APIResponse.success(
        message_code=MessageCode.MOTORCYCLE_DELETED, data={"deleted": True}
    )
