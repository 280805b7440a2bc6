"""Cron job API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.models.responses import MutationResponse
from api.utils import get_mission_control, require_fields
from mission_control import MissionControl
from mission_control.models import CronJob

router = APIRouter(prefix="/api/cron", tags=["Cron"])


@router.get("")
async def api_list_cron_jobs(mc: MissionControl = Depends(get_mission_control)) -> list[CronJob]:
    return await mc.cron_jobs.list()


@router.post("")
async def api_upsert_cron_job(body: dict, mc: MissionControl = Depends(get_mission_control)) -> MutationResponse:
    """Create or update a cron job by name."""
    require_fields(body, "name", "schedule")
    job_id = await mc.cron_jobs.upsert(body)
    return MutationResponse(id=job_id)


@router.post("/{job_id}/toggle")
async def api_toggle_cron_job(job_id: str, mc: MissionControl = Depends(get_mission_control)) -> MutationResponse:
    """Flip a job between active and disabled."""
    await mc.cron_jobs.toggle_status(job_id)
    return MutationResponse(id=job_id)
