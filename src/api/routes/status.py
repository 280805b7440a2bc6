"""Aggregate status snapshot for the external agent."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.utils import get_mission_control
from mission_control import MissionControl, settings
from mission_control.models import AgentStatus, CronStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Status"])


@router.get("/status", summary="Dashboard Status Snapshot")
async def api_status(mc: MissionControl = Depends(get_mission_control)) -> Any:
    """
    Task counts, the most recent activity, and agent/cron summaries in one call.

    **Example Response:**
    ```json
    {
        "status": "online",
        "timestamp": 1767225600000,
        "tasks": {"total": 10, "backlog": 4, "in_progress": 2, "review": 1, "done": 3},
        "agents": {"total": 8, "working": 1, "working_names": ["Fact Extractor"]},
        "cronJobs": {"total": 6, "active": 6},
        "lastActivity": {"type": "task_created", "description": "...", "timestamp": 1767225500000}
    }
    ```
    """
    try:
        counts, activities, agents, cron_jobs = await asyncio.gather(
            mc.views.counts(),
            mc.activity.list(settings.status_activity_limit),
            mc.agents.list(),
            mc.cron_jobs.list(),
        )
    except Exception as e:
        logger.exception(f"[API] GET /api/status failed: {e}")
        return JSONResponse(status_code=500, content={"status": "error", "error": str(e)})

    working = [agent for agent in agents if agent.status == AgentStatus.WORKING]
    last_activity = activities[0] if activities else None

    return {
        "status": "online",
        "timestamp": int(time.time() * 1000),
        "tasks": counts.model_dump(),
        "agents": {
            "total": len(agents),
            "working": len(working),
            "working_names": [agent.name for agent in working],
        },
        "cronJobs": {
            "total": len(cron_jobs),
            "active": sum(1 for job in cron_jobs if job.status == CronStatus.ACTIVE),
        },
        "lastActivity": (
            {
                "type": last_activity.type,
                "description": last_activity.description,
                "timestamp": last_activity.timestamp,
            }
            if last_activity
            else None
        ),
    }
