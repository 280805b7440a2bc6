"""Health check and monitoring endpoints."""

from __future__ import annotations

from datetime import datetime
from time import time
from typing import Any

from fastapi import APIRouter, Depends

from api.utils import get_mission_control
from mission_control import MissionControl, MissionControlError

# Track server start time for uptime metrics
start_time = time()

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/healthz", summary="Basic Health Check", response_description="Service health status")
async def healthz() -> dict[str, Any]:
    """
    Basic health check endpoint for load balancers and monitoring.

    **Example Response:**
    ```json
    {
        "status": "ok",
        "timestamp": "2026-01-01T13:45:00.000000",
        "service": "mission-control"
    }
    ```
    """
    return {"status": "ok", "timestamp": datetime.now().isoformat(), "service": "mission-control"}


@router.get(
    "/health/detailed",
    summary="Detailed Health Check",
    response_description="Service health including document store reachability",
)
async def health_detailed(mc: MissionControl = Depends(get_mission_control)) -> dict[str, Any]:
    """
    Detailed health check including the document store.

    **Status Values:**
    - `healthy`: store reachable
    - `degraded`: store call failed (error message included)
    """
    store: dict[str, Any] = {"backend": type(mc.db).__name__}
    try:
        await mc.db.select(mc.tasks.table, limit=1)
        store["status"] = "healthy"
    except MissionControlError as e:
        store["status"] = "degraded"
        store["error"] = str(e)

    return {
        "status": "ok" if store["status"] == "healthy" else "degraded",
        "timestamp": datetime.now().isoformat(),
        "uptime_seconds": round(time() - start_time, 1),
        "components": {"store": store},
    }
