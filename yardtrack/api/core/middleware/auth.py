from fastapi import Request, status
from fastapi.responses import JSONResponse

from yardtrack.api.core.constants import SKIP_AUTH_PATHS
from yardtrack.api.core.exceptions.base import YardTrackException
from yardtrack.api.core.messages import MessageCode
from yardtrack.modules.auth.tokens import TokenService
from yardtrack.utils.logger import get_logger
from yardtrack.utils.path_helpers import path_matches

logger = get_logger(__name__)


def _extract_bearer_token(authorization: str) -> str:
    auth_parts = authorization.split(" ")
    if len(auth_parts) != 2 or auth_parts[0].lower() != "bearer" or not auth_parts[1]:
        logger.debug(
            "Invalid authorization header format",
            auth_parts_count=len(auth_parts),
        )
        raise YardTrackException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Authorization header must be 'Bearer <token>'"},
        )
    return auth_parts[1]


async def auth_middleware(request: Request, call_next):
    """Verify the bearer token and expose its identity as request.state.user.

    Errors are rendered here because exceptions raised from HTTP middleware
    do not reach the application's exception handlers.
    """
    request.state.user = None

    if request.method == "OPTIONS" or path_matches(request.url.path, SKIP_AUTH_PATHS):
        return await call_next(request)

    authorization = request.headers.get("Authorization", "")

    try:
        if not authorization:
            raise YardTrackException(
                MessageCode.AUTH_REQUIRED,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Provide an 'Authorization: Bearer <token>' header"},
            )

        token = _extract_bearer_token(authorization)
        request.state.user = TokenService().authenticate(token)
    except YardTrackException as e:
        logger.info(
            "Rejected unauthenticated request",
            path=request.url.path,
            message_code=e.message_code.value,
        )
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_response_dict(),
            headers={"WWW-Authenticate": "Bearer", **e.headers},
        )

    logger.debug(
        "Request authenticated",
        user_id=request.state.user.user_id,
        role=request.state.user.role.value,
    )
    return await call_next(request)
