from fastapi import APIRouter, status

from yardtrack.api.auth.schemas import (
    AuthResponse,
    AuthSession,
    LoginRequest,
    RegisterRequest,
)
from yardtrack.api.core.dependencies import AuthServiceDep
from yardtrack.api.core.messages import APIResponse, MessageCode
from yardtrack.api.user.schemas import UserModel
from yardtrack.database.models.users import User
from yardtrack.modules.auth.tokens import IssuedToken

router = APIRouter(prefix="/auth", tags=["auth"])


def _session(user: User, token: IssuedToken) -> AuthSession:
    return AuthSession(
        user=UserModel.model_validate(user),
        access_token=token.access_token,
        token_type=token.token_type,
        expires_at=token.expires_at,
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(body: RegisterRequest, service: AuthServiceDep) -> AuthResponse:
    """Create an account and return an access token for it."""
    user, token = await service.register(
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
        yard_id=body.yard_id,
    )
    return APIResponse.success(
        message_code=MessageCode.USER_REGISTERED, data=_session(user, token)
    )


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, service: AuthServiceDep) -> AuthResponse:
    """Exchange email and password for an access token."""
    user, token = await service.login(body.email, body.password)
    return APIResponse.success(
        message_code=MessageCode.LOGIN_SUCCESS, data=_session(user, token)
    )
