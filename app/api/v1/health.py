# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation): 
# This file provides health check endpoints that tell us if CigarMap is working properly,
# like a doctor's checkup for the server and its database.
# 🧪 Purpose (Technical Summary): 
# Health check endpoints: basic status, liveness, readiness (database connectivity) and a
# detailed view including the number of live onboarding sessions.
# 🔗 Dependencies: 
# FastAPI, app.shared.infrastructure.database.connection, onboarding session registry
# 🔄 Connected Modules / Calls From: 
# app.api.v1.router, load balancers and monitoring

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.modules.onboarding.application.session_registry import get_session_registry
from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check as db_health_check

logger = logging.getLogger(__name__)

health_router = APIRouter()

_app_start_time = datetime.now(timezone.utc)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@health_router.get("/health", 
                  summary="Basic Health Check",
                  description="Basic health check endpoint for load balancers and monitoring")
async def health_check() -> JSONResponse:
    """Simple OK status for quick health verification."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": _now(),
            "service": "cigarmap-api",
            "version": get_settings().APP_VERSION
        }
    )


@health_router.get("/health/live",
                  summary="Liveness Probe",
                  description="Liveness probe endpoint")
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready",
                  summary="Readiness Probe",
                  description="Readiness probe endpoint; checks database connectivity")
async def readiness_probe() -> JSONResponse:
    db_health = await db_health_check()

    if db_health["status"] == "healthy":
        return JSONResponse(status_code=200, content={"status": "ready", "timestamp": _now()})

    logger.warning(f"Readiness probe failed: {db_health.get('error')}")
    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "database_unhealthy",
            "timestamp": _now()
        }
    )


@health_router.get("/health/detailed",
                  summary="Detailed Health Check",
                  description="Component status, uptime and live onboarding sessions")
async def detailed_health_check() -> JSONResponse:
    settings = get_settings()
    db_health = await db_health_check()
    uptime = datetime.now(timezone.utc) - _app_start_time

    overall = "healthy" if db_health["status"] == "healthy" else "degraded"
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content={
            "status": overall,
            "timestamp": _now(),
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "uptime_seconds": int(uptime.total_seconds()),
            "components": {
                "database": db_health,
                "onboarding_sessions": {"status": "healthy", "active": len(get_session_registry())},
            },
        }
    )
