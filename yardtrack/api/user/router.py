from fastapi import APIRouter, status

from yardtrack.api.core.dependencies import (
    CurrentUserAuthDep,
    PageRequestDep,
    UserServiceDep,
)
from yardtrack.api.core.messages import APIResponse, MessageCode, Paginated
from yardtrack.api.user.schemas import (
    UserDeleteResponse,
    UserListResponse,
    UserModel,
    UserResponse,
    UserWriteRequest,
)
from yardtrack.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=UserListResponse)
async def list_users(
    page_request: PageRequestDep,
    service: UserServiceDep,
    current_user: CurrentUserAuthDep,
) -> UserListResponse:
    page = await service.list_users(page_request)
    return APIResponse.success(
        data=Paginated[UserModel](
            items=[UserModel.model_validate(u) for u in page.items],
            pagination=page.pagination,
        )
    )


@router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str, service: UserServiceDep, current_user: CurrentUserAuthDep
) -> UserResponse:
    user = await service.get_user_by_email(email)
    return APIResponse.success(data=UserModel.model_validate(user))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, service: UserServiceDep, current_user: CurrentUserAuthDep
) -> UserResponse:
    user = await service.get_user(user_id)
    return APIResponse.success(data=UserModel.model_validate(user))


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserWriteRequest, service: UserServiceDep, current_user: CurrentUserAuthDep
) -> UserResponse:
    user = await service.create_user(
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
        status=body.status,
        yard_id=body.yard_id,
    )
    return APIResponse.success(
        message_code=MessageCode.USER_CREATED, data=UserModel.model_validate(user)
    )


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UserWriteRequest,
    service: UserServiceDep,
    current_user: CurrentUserAuthDep,
) -> UserResponse:
    user = await service.update_user(
        user_id,
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
        status=body.status,
        yard_id=body.yard_id,
    )
    return APIResponse.success(
        message_code=MessageCode.USER_UPDATED, data=UserModel.model_validate(user)
    )


@router.delete("/{user_id}", response_model=UserDeleteResponse)
async def delete_user(
    user_id: int, service: UserServiceDep, current_user: CurrentUserAuthDep
) -> UserDeleteResponse:
    await service.delete_user(user_id)
    logger.info("User removed", user_id=user_id, removed_by=current_user.user_id)
    return APIResponse.success(
        message_code=MessageCode.USER_DELETED, data={"deleted": True}
    )
