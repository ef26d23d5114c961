from concurrent.futures import Executor
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from yardtrack.api.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from yardtrack.api.core.exceptions.base import YardTrackException
from yardtrack.api.core.messages import MessageCode
from yardtrack.core.context import AuthenticatedUserContext
from yardtrack.core.pagination import PageRequest
from yardtrack.modules.auth.service import AuthService
from yardtrack.modules.marker.service import FixedMarkerService, MobileMarkerService
from yardtrack.modules.measurement.prediction.service import (
    DistancePredictionService,
)
from yardtrack.modules.measurement.service import MeasurementService
from yardtrack.modules.motorcycle.service import MotorcycleService
from yardtrack.modules.position.service import PositionService
from yardtrack.modules.user.service import UserService
from yardtrack.modules.yard.service import YardService


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


def get_training_pool(request: Request) -> Executor | None:
    return getattr(request.app.state, "training_pool", None)


def get_page_request(
    page: Annotated[int, Query(description="1-based page number")] = DEFAULT_PAGE,
    size: Annotated[
        int, Query(description="Items per page, 1 to 100")
    ] = DEFAULT_PAGE_SIZE,
) -> PageRequest:
    """Out-of-range page parameters are normalized, never rejected."""
    return PageRequest.normalize(page, size)


async def get_auth_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> AuthService:
    return AuthService(db)


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserService:
    return UserService(db)


async def get_yard_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> YardService:
    return YardService(db)


async def get_motorcycle_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> MotorcycleService:
    return MotorcycleService(db)


async def get_position_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> PositionService:
    return PositionService(db)


async def get_fixed_marker_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> FixedMarkerService:
    return FixedMarkerService(db)


async def get_mobile_marker_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> MobileMarkerService:
    return MobileMarkerService(db)


async def get_measurement_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> MeasurementService:
    return MeasurementService(db)


async def get_distance_prediction_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
    pool: Annotated[Executor | None, Depends(get_training_pool)],
) -> DistancePredictionService:
    """Prediction service bound to the application's training pool."""
    return DistancePredictionService(db, pool=pool)


async def get_current_user_authenticated(request: Request) -> AuthenticatedUserContext:
    """Dependency to get current authenticated user.

    Assumes auth middleware has set request.state.user.
    """
    user = getattr(request.state, "user", None)
    if not user:
        raise YardTrackException(
            MessageCode.AUTH_REQUIRED, status.HTTP_401_UNAUTHORIZED
        )
    return user


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
PageRequestDep = Annotated[PageRequest, Depends(get_page_request)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
YardServiceDep = Annotated[YardService, Depends(get_yard_service)]
MotorcycleServiceDep = Annotated[MotorcycleService, Depends(get_motorcycle_service)]
PositionServiceDep = Annotated[PositionService, Depends(get_position_service)]
FixedMarkerServiceDep = Annotated[
    FixedMarkerService, Depends(get_fixed_marker_service)
]
MobileMarkerServiceDep = Annotated[
    MobileMarkerService, Depends(get_mobile_marker_service)
]
MeasurementServiceDep = Annotated[
    MeasurementService, Depends(get_measurement_service)
]
DistancePredictionServiceDep = Annotated[
    DistancePredictionService, Depends(get_distance_prediction_service)
]

CurrentUserAuthDep = Annotated[
    AuthenticatedUserContext, Depends(get_current_user_authenticated)
]
