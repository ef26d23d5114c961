API_VERSION_HEADER = "X-YardTrack-Version"
REQUEST_ID_HEADER = "X-Request-ID"

# JWT Configuration
JWT_ALGORITHM = "HS256"

# Authentication endpoints configuration
SKIP_AUTH_PATHS = {
    "/openapi.json",
    "/docs",
    "/docs/oauth2-redirect",
    "/redoc",
    "/health",
    "/health/liveness",
    "/",
    "/v1/auth/register",
    "/v1/auth/login",
}

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Probes hit these often; keep them out of the request log
UNLOGGED_PATHS = {"/health", "/health/liveness"}
