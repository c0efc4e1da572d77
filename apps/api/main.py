"""
FarmerConnect - Main FastAPI Application.

REST API for the farm-to-table marketplace: catalog, cart and checkout
for buyers; listings, fulfilment and returns for sellers.
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.api.v1.router import api_router
from apps.api.v1.endpoints import auth, health
from core.application.interfaces import INotificationService, StorageError
from core.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    InvalidStateTransition,
    NotFoundError,
    PermissionDeniedError,
)
from core.infrastructure.adapters.notifications.mock_notification_service import MockNotificationService
from core.infrastructure.database.config import close_database, init_database
from core.infrastructure.event_bus import get_event_bus, notification_subscriber
from core.infrastructure.logging import configure_logging
from core.settings import get_app_settings


configure_logging()
logger = logging.getLogger(__name__)


def build_notification_service() -> INotificationService:
    """Slack when enabled and configured, otherwise the logging mock."""
    settings = get_app_settings()
    if settings.slack.enabled and settings.slack.webhook_url:
        from core.infrastructure.adapters.notifications.slack_notification_service import (
            SlackNotificationService,
        )

        return SlackNotificationService(settings.slack, settings.supabase.timeout_seconds)
    return MockNotificationService()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and wire event notifications for the process lifetime."""
    logger.info("FarmerConnect API starting up...")
    await init_database()

    subscriber = notification_subscriber(build_notification_service())
    get_event_bus().subscribe(subscriber)
    try:
        yield
    finally:
        get_event_bus().unsubscribe(subscriber)
        await close_database()
        logger.info("FarmerConnect API shutting down...")


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="FarmerConnect API",
    description="Farm-to-table marketplace API",
    version="1.0.0",
    lifespan=lifespan,
)


# =============================================================================
# CORS MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )
    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(AuthenticationError)
async def authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return _error(status.HTTP_401_UNAUTHORIZED, exc)


@app.exception_handler(PermissionDeniedError)
async def permission_handler(request: Request, exc: PermissionDeniedError) -> JSONResponse:
    return _error(status.HTTP_403_FORBIDDEN, exc)


@app.exception_handler(InvalidStateTransition)
async def state_transition_handler(request: Request, exc: InvalidStateTransition) -> JSONResponse:
    return _error(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return _error(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(StorageError)
async def storage_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.warning(f"Storage upload failed on {request.url.path}: {exc}")
    return _error(status.HTTP_502_BAD_GATEWAY, exc)


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError exceptions.

    Args:
        request: FastAPI request
        exc: ValueError exception

    Returns:
        JSONResponse with error details
    """
    return _error(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, tags=["Auth"])
app.include_router(api_router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
