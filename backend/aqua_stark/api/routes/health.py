"""Health & API Info: liveness, readiness and the /api index.

Invariants:
    - GET /health always succeeds while the process is up (liveness)
    - GET /health/ready fails when the database is unreachable (readiness)
    - Both answer with the standard envelope
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from aqua_stark import __version__
from aqua_stark.api.envelope import respond
from aqua_stark.core.errors import InternalError
from aqua_stark.core.responses import build_error, build_success
import aqua_stark.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health")
async def get_health(request: Request):
    """Status, version and uptime in whole seconds."""
    started = getattr(request.app.state, "start_time", None) or time.monotonic()
    return respond(build_success({
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": int(time.monotonic() - started),
    }))


@router.get("/health/ready")
async def get_readiness(request: Request):
    db_ok = (
        await database.db_manager.health_check() if database.db_manager else False
    )
    if not db_ok:
        return respond(build_error(InternalError("Database unavailable")))
    dojo = request.app.state.dojo_client
    return respond(build_success({
        "status": "ready",
        "checks": {
            "database": "healthy",
            "chain": "stub" if dojo.is_stub_mode else "configured",
        },
    }))


@router.get("/api")
async def get_api_info():
    return respond(build_success({
        "name": "Aqua Stark Backend API",
        "version": __version__,
    }))
