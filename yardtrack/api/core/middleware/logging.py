import time
import uuid

import structlog
from fastapi import Request

from yardtrack.api.core.constants import REQUEST_ID_HEADER, UNLOGGED_PATHS
from yardtrack.utils.logger import get_client_ip, get_logger

logger = get_logger(__name__)


async def logging_middleware(request: Request, call_next):
    path = request.url.path
    if path.rstrip("/") in UNLOGGED_PATHS:
        return await call_next(request)

    started = time.perf_counter()
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        ip_address=get_client_ip(request),
        method=request.method,
        path=path,
    )

    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id

    # Set by the auth middleware, which runs inside this one
    user = getattr(request.state, "user", None)

    logger.info(
        "request",
        method=request.method,
        path=path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
        user_id=getattr(user, "user_id", None),
    )
    return response
