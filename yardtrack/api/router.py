from fastapi import APIRouter

from yardtrack.api.auth.router import router as auth_router
from yardtrack.api.health.router import router as health_router, root_router
from yardtrack.api.marker.router import fixed_router, mobile_router
from yardtrack.api.measurement.router import router as measurement_router
from yardtrack.api.motorcycle.router import router as motorcycle_router
from yardtrack.api.position.router import router as position_router
from yardtrack.api.user.router import router as user_router
from yardtrack.api.yard.router import router as yard_router

# V1 API router
v1_router = APIRouter(prefix="/v1")

# Include domain routers
v1_router.include_router(auth_router)
v1_router.include_router(user_router)
v1_router.include_router(yard_router)
v1_router.include_router(motorcycle_router)
v1_router.include_router(position_router)
v1_router.include_router(fixed_router)
v1_router.include_router(mobile_router)
v1_router.include_router(measurement_router)

# Main API router
api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(health_router)
api_router.include_router(v1_router)
