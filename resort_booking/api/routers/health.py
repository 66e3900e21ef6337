"""
Health probes for orchestrators (K8s, Docker, load balancers).

- /health, /health/live: process is up, no dependencies touched
- /health/db: one round-trip to the configured datastore
- /health/ready: datastore reachable and the booking catalog loaded
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select, text

from resort_booking.api.dependencies import get_session
from resort_booking.infrastructure.db.tables import rooms
from resort_booking.infrastructure.in_memory.database import InMemorySession

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "resort-booking-api"


async def _ping(session) -> str:
    if isinstance(session, InMemorySession):
        return "in_memory"
    await session.execute(text("SELECT 1"))
    return session.bind.dialect.name


async def _count_rooms(session) -> int:
    if isinstance(session, InMemorySession):
        return len(session.database.rooms)
    result = await session.execute(select(func.count()).select_from(rooms))
    return int(result.scalar_one())


def _liveness() -> dict:
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health")
async def health_check():
    return _liveness()


@router.get("/health/live")
async def health_check_live():
    return _liveness()


@router.get("/health/db")
async def health_check_db(session=Depends(get_session)):
    """One round-trip to the datastore; 503 when it does not answer."""
    started = time.perf_counter()
    try:
        backend = await _ping(session)
    except Exception as e:
        logger.error("Datastore probe failed", exc_info=e)
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "component": "database"},
        )
    return {
        "status": "healthy",
        "component": "database",
        "backend": backend,
        "latency_ms": round((time.perf_counter() - started) * 1000, 2),
    }


@router.get("/health/ready")
async def health_check_ready(session=Depends(get_session)):
    """
    Ready to take bookings.

    An empty room catalog is reported but does not fail readiness; a
    datastore error does.
    """
    checks = {}
    try:
        await _ping(session)
        checks["database"] = "healthy"
        checks["rooms"] = await _count_rooms(session)
    except Exception as e:
        logger.error("Readiness probe failed", exc_info=e)
        checks["database"] = "unhealthy"
        return JSONResponse(status_code=503, content={"status": "not_ready", "checks": checks})

    return {"status": "ready", "checks": checks}
