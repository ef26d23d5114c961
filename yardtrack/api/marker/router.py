from typing import Annotated

from fastapi import APIRouter, Query, status

from yardtrack.api.core.dependencies import (
    CurrentUserAuthDep,
    FixedMarkerServiceDep,
    MobileMarkerServiceDep,
    PageRequestDep,
)
from yardtrack.api.core.messages import APIResponse, MessageCode, Paginated
from yardtrack.api.marker.schemas import (
    FixedMarkerCreateRequest,
    FixedMarkerListResponse,
    FixedMarkerModel,
    FixedMarkerResponse,
    FixedMarkerSearchResponse,
    MarkerDeleteResponse,
    MobileMarkerListResponse,
    MobileMarkerModel,
    MobileMarkerResponse,
    MobileMarkerSearchResponse,
    MobileMarkerWriteRequest,
)
from yardtrack.core.pagination import Page

CodeQuery = Annotated[str, Query(min_length=1, max_length=50)]

fixed_router = APIRouter(prefix="/fixed-markers", tags=["fixed-markers"])
mobile_router = APIRouter(prefix="/mobile-markers", tags=["mobile-markers"])


def _fixed_page(page: Page) -> Paginated[FixedMarkerModel]:
    return Paginated[FixedMarkerModel](
        items=[FixedMarkerModel.model_validate(m) for m in page.items],
        pagination=page.pagination,
    )


@fixed_router.get("/", response_model=FixedMarkerListResponse)
async def list_fixed_markers(
    page_request: PageRequestDep,
    service: FixedMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> FixedMarkerListResponse:
    page = await service.list_markers(page_request)
    return APIResponse.success(data=_fixed_page(page))


@fixed_router.get("/search", response_model=FixedMarkerSearchResponse)
async def search_fixed_markers(
    code: CodeQuery,
    service: FixedMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> FixedMarkerSearchResponse:
    """Case-insensitive exact match on the ArUco code."""
    markers = await service.search_by_code(code)
    return APIResponse.success(
        data=[FixedMarkerModel.model_validate(m) for m in markers]
    )


@fixed_router.get("/yard/{yard_id}", response_model=FixedMarkerListResponse)
async def list_fixed_markers_by_yard(
    yard_id: int,
    page_request: PageRequestDep,
    service: FixedMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> FixedMarkerListResponse:
    page = await service.list_by_yard(yard_id, page_request)
    return APIResponse.success(data=_fixed_page(page))


@fixed_router.get("/{marker_id}", response_model=FixedMarkerResponse)
async def get_fixed_marker(
    marker_id: int,
    service: FixedMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> FixedMarkerResponse:
    marker = await service.get_marker(marker_id)
    return APIResponse.success(data=FixedMarkerModel.model_validate(marker))


@fixed_router.post(
    "/", response_model=FixedMarkerResponse, status_code=status.HTTP_201_CREATED
)
async def create_fixed_marker(
    body: FixedMarkerCreateRequest,
    service: FixedMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> FixedMarkerResponse:
    marker = await service.create_marker(body.aruco_code, body.x, body.y, body.yard_id)
    return APIResponse.success(
        message_code=MessageCode.FIXED_MARKER_CREATED,
        data=FixedMarkerModel.model_validate(marker),
    )


@fixed_router.delete("/{marker_id}", response_model=MarkerDeleteResponse)
async def delete_fixed_marker(
    marker_id: int,
    service: FixedMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> MarkerDeleteResponse:
    await service.delete_marker(marker_id)
    return APIResponse.success(
        message_code=MessageCode.FIXED_MARKER_DELETED, data={"deleted": True}
    )


@mobile_router.get("/", response_model=MobileMarkerListResponse)
async def list_mobile_markers(
    page_request: PageRequestDep,
    service: MobileMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> MobileMarkerListResponse:
    page = await service.list_markers(page_request)
    return APIResponse.success(
        data=Paginated[MobileMarkerModel](
            items=[MobileMarkerModel.model_validate(m) for m in page.items],
            pagination=page.pagination,
        )
    )


@mobile_router.get("/search", response_model=MobileMarkerSearchResponse)
async def search_mobile_markers(
    code: CodeQuery,
    service: MobileMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> MobileMarkerSearchResponse:
    markers = await service.search_by_code(code)
    return APIResponse.success(
        data=[MobileMarkerModel.model_validate(m) for m in markers]
    )


@mobile_router.get(
    "/motorcycle/{motorcycle_id}", response_model=MobileMarkerSearchResponse
)
async def list_mobile_markers_by_motorcycle(
    motorcycle_id: int,
    service: MobileMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> MobileMarkerSearchResponse:
    markers = await service.list_by_motorcycle(motorcycle_id)
    return APIResponse.success(
        data=[MobileMarkerModel.model_validate(m) for m in markers]
    )


@mobile_router.get("/{marker_id}", response_model=MobileMarkerResponse)
async def get_mobile_marker(
    marker_id: int,
    service: MobileMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> MobileMarkerResponse:
    marker = await service.get_marker(marker_id)
    return APIResponse.success(data=MobileMarkerModel.model_validate(marker))


@mobile_router.post(
    "/", response_model=MobileMarkerResponse, status_code=status.HTTP_201_CREATED
)
async def create_mobile_marker(
    body: MobileMarkerWriteRequest,
    service: MobileMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> MobileMarkerResponse:
    marker = await service.create_marker(
        body.aruco_code, body.motorcycle_id, body.installed_at
    )
    return APIResponse.success(
        message_code=MessageCode.MOBILE_MARKER_CREATED,
        data=MobileMarkerModel.model_validate(marker),
    )


@mobile_router.put("/{marker_id}", response_model=MobileMarkerResponse)
async def update_mobile_marker(
    marker_id: int,
    body: MobileMarkerWriteRequest,
    service: MobileMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> MobileMarkerResponse:
    marker = await service.update_marker(
        marker_id, body.aruco_code, body.motorcycle_id, body.installed_at
    )
    return APIResponse.success(
        message_code=MessageCode.MOBILE_MARKER_UPDATED,
        data=MobileMarkerModel.model_validate(marker),
    )


@mobile_router.delete("/{marker_id}", response_model=MarkerDeleteResponse)
async def delete_mobile_marker(
    marker_id: int,
    service: MobileMarkerServiceDep,
    current_user: CurrentUserAuthDep,
) -> MarkerDeleteResponse:
    await service.delete_marker(marker_id)
    return APIResponse.success(
        message_code=MessageCode.MOBILE_MARKER_DELETED, data={"deleted": True}
    )
