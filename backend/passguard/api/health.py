"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from passguard.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """System health check: the engine is loaded and has rules."""
    engine = getattr(request.app.state, "validation_engine", None)
    rule_count = len(engine.rules) if engine is not None else 0

    if engine is None:
        status = "unhealthy"
    elif rule_count == 0:
        status = "degraded"
    else:
        status = "healthy"

    return HealthResponse(
        status=status,
        uptime_seconds=round(time.time() - _start_time, 2),
        rules=rule_count,
    )
