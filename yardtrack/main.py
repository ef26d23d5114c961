import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from yardtrack.api.core.exceptions.base import register_exception_handlers
from yardtrack.api.core.middleware.auth import auth_middleware
from yardtrack.api.core.middleware.logging import logging_middleware
from yardtrack.api.core.middleware.security import (
    SecurityHeadersMiddleware,
    PayloadSizeMiddleware,
)
from yardtrack.api.router import api_router
from yardtrack.database.connection import AsyncSessionLocal
from yardtrack.modules.measurement.prediction.executor import (
    create_training_pool,
    shutdown_training_pool,
)
from yardtrack.utils.settings.app import AppSettings
from yardtrack.utils.logger import setup_logging


app_settings = AppSettings()
is_production = app_settings.is_production


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger = setup_logging(is_production, app_settings.LOG_LEVEL)
    logger.info("Starting YardTrack API...")
    app_settings.validate_prod()

    app.state.session_factory = AsyncSessionLocal
    logger.info("Database session factory added to app state")

    app.state.training_pool = create_training_pool()

    yield

    # Shutdown
    logger.info("Shutting down YardTrack API...")
    shutdown_training_pool(app.state.training_pool)
    app.state.training_pool = None


app = FastAPI(
    title="YardTrack API",
    description="Motorcycle yard tracking with ArUco marker distance estimation",
    version=app_settings.API_VERSION,
    lifespan=lifespan,
    docs_url=None if is_production else "/docs",
    redoc_url=None if is_production else "/redoc",
    openapi_url=None if is_production else "/openapi.json",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)

app.add_middleware(SecurityHeadersMiddleware, is_production=is_production)
app.add_middleware(
    PayloadSizeMiddleware, max_request_size=app_settings.MAX_REQUEST_SIZE
)
app.middleware("http")(auth_middleware)
app.middleware("http")(logging_middleware)

app.include_router(api_router)


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "yardtrack.main:app", host="0.0.0.0", port=8010, reload=True, access_log=False
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "yardtrack.main:app", host="0.0.0.0", port=8010, reload=False, access_log=False
    )
