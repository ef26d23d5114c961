"""Health check endpoints for debugging and monitoring."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from yardtrack.api.core.dependencies import AsyncSessionDep
from yardtrack.modules.health.service import HealthService, OverallHealthStatus

root_router = APIRouter()
router = APIRouter(prefix="/health", tags=["health"])


@root_router.get("/")
async def root():
    """Root endpoint with minimal HTML landing page."""
    html_content = """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>YardTrack API</title>
        <style>
            body {
                font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
                min-height: 100vh;
                margin: 0;
                background: #f8f9fa;
                color: #1a1a1a;
                display: flex;
                flex-direction: column;
                justify-content: center;
                align-items: center;
                text-align: center;
            }

            .logo {
                font-size: 3rem;
                font-weight: bold;
                margin-bottom: 1rem;
            }

            .link {
                display: inline-block;
                padding: 1rem 2rem;
                background: #1a1a1a;
                color: #ffffff;
                text-decoration: none;
            }
        </style>
    </head>
    <body>
        <div class="logo">YardTrack API</div>
        <p>Motorcycle yard tracking and ArUco distance estimation.</p>
        <a href="/docs" class="link">API documentation</a>
    </body>
    </html>
    """
    return HTMLResponse(content=html_content, media_type="text/html")


@router.get("/")
async def health_check(request: Request, db: AsyncSessionDep) -> OverallHealthStatus:
    """Comprehensive health check for all services."""
    pool = getattr(request.app.state, "training_pool", None)
    health_service = HealthService(db, training_pool_ready=pool is not None)
    return await health_service.run_all_checks()


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "yardtrack-api"}
