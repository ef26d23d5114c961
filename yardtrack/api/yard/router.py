from fastapi import APIRouter, status

from yardtrack.api.core.dependencies import (
    CurrentUserAuthDep,
    PageRequestDep,
    YardServiceDep,
)
from yardtrack.api.core.messages import APIResponse, MessageCode, Paginated
from yardtrack.api.motorcycle.schemas import MotorcycleModel
from yardtrack.api.yard.schemas import (
    YardDeleteResponse,
    YardListResponse,
    YardModel,
    YardMotorcyclesResponse,
    YardResponse,
    YardWriteRequest,
)
from yardtrack.core.pagination import Page

router = APIRouter(prefix="/yards", tags=["yards"])


def _paginated(page: Page) -> Paginated[YardModel]:
    return Paginated[YardModel](
        items=[YardModel.model_validate(y) for y in page.items],
        pagination=page.pagination,
    )


@router.get("/", response_model=YardListResponse)
async def list_yards(
    page_request: PageRequestDep,
    service: YardServiceDep,
    current_user: CurrentUserAuthDep,
) -> YardListResponse:
    page = await service.list_yards(page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/with-relations", response_model=YardListResponse)
async def list_yards_with_relations(
    page_request: PageRequestDep,
    service: YardServiceDep,
    current_user: CurrentUserAuthDep,
) -> YardListResponse:
    """Yards that have users, positions or fixed markers attached."""
    page = await service.list_yards_with_relations(page_request)
    return APIResponse.success(data=_paginated(page))


@router.get("/{yard_id}", response_model=YardResponse)
async def get_yard(
    yard_id: int, service: YardServiceDep, current_user: CurrentUserAuthDep
) -> YardResponse:
    yard = await service.get_yard(yard_id)
    return APIResponse.success(data=YardModel.model_validate(yard))


@router.get("/{yard_id}/motorcycles", response_model=YardMotorcyclesResponse)
async def list_motorcycles_in_yard(
    yard_id: int, service: YardServiceDep, current_user: CurrentUserAuthDep
) -> YardMotorcyclesResponse:
    """Motorcycles that have been positioned in the yard."""
    motorcycles = await service.list_motorcycles_in_yard(yard_id)
    return APIResponse.success(
        data=[MotorcycleModel.model_validate(m) for m in motorcycles]
    )


@router.post("/", response_model=YardResponse, status_code=status.HTTP_201_CREATED)
async def create_yard(
    body: YardWriteRequest, service: YardServiceDep, current_user: CurrentUserAuthDep
) -> YardResponse:
    yard = await service.create_yard(body.name, body.location, body.description)
    return APIResponse.success(
        message_code=MessageCode.YARD_CREATED, data=YardModel.model_validate(yard)
    )


@router.put("/{yard_id}", response_model=YardResponse)
async def update_yard(
    yard_id: int,
    body: YardWriteRequest,
    service: YardServiceDep,
    current_user: CurrentUserAuthDep,
) -> YardResponse:
    yard = await service.update_yard(
        yard_id, body.name, body.location, body.description
    )
    return APIResponse.success(
        message_code=MessageCode.YARD_UPDATED, data=YardModel.model_validate(yard)
    )


@router.delete("/{yard_id}", response_model=YardDeleteResponse)
async def delete_yard(
    yard_id: int, service: YardServiceDep, current_user: CurrentUserAuthDep
) -> YardDeleteResponse:
    await service.delete_yard(yard_id)
    return APIResponse.success(
        message_code=MessageCode.YARD_DELETED, data={"deleted": True}
    )
