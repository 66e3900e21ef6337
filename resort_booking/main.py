import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from resort_booking.api.deps import get_engine
from resort_booking.api.routers.events import router as events_router
from resort_booking.api.routers.health import router as health_router
from resort_booking.api.routers.rooms import router as rooms_router
from resort_booking.api.routers.user import router as user_router
from resort_booking.config import get_settings
from resort_booking.domain.errors import (
    AuthRequiredError,
    CapacityConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from resort_booking.infrastructure.db.tables import metadata

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.use_in_memory:
        yield
        return
    # Initialize DB tables (for dev/demo purposes)
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield
    await engine.dispose()

app = FastAPI(
    title="Resort Booking API",
    version="0.1.0",
    lifespan=lifespan
)


def domain_error_status(exc: DomainError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, AuthRequiredError):
        return 401
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, CapacityConflictError):
        return 409
    if isinstance(exc, InfrastructureError):
        return 503
    return 400


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    status_code = domain_error_status(exc)
    content = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, ValidationError):
        content["field"] = exc.field
    if isinstance(exc, CapacityConflictError):
        content["available"] = exc.available
    if isinstance(exc, InfrastructureError):
        content["retriable"] = exc.transient
        logger.error(
            "Datastore failure surfaced to client",
            extra={"path": request.url.path, "transient": exc.transient},
        )
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Anything that is not a DomainError: log it in full, show the client only an id."""
    error_id = uuid.uuid4().hex

    logger.error(
        "Unhandled exception while serving request",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "code": "INTERNAL_ERROR",
            "error_id": error_id,
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(rooms_router, prefix="/api", tags=["Rooms"])
app.include_router(events_router, prefix="/api", tags=["Events"])
app.include_router(user_router, prefix="/api", tags=["User"])
