"""Activity feed API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from api.models.responses import MutationResponse
from api.utils import get_mission_control, require_fields
from mission_control import MissionControl, settings
from mission_control.models import Activity

router = APIRouter(prefix="/api/activity", tags=["Activity"])


@router.get("")
async def api_list_activity(
    limit: int | None = Query(default=None, ge=1, le=1000),
    mc: MissionControl = Depends(get_mission_control),
) -> list[Activity]:
    """Most recent activity first."""
    return await mc.activity.list(limit or settings.activity_api_limit)


@router.post("")
async def api_log_activity(body: dict, mc: MissionControl = Depends(get_mission_control)) -> MutationResponse:
    """Append an activity entry."""
    require_fields(body, "type", "description")
    activity_id = await mc.activity.log(body["type"], body["description"], body.get("metadata"))
    return MutationResponse(id=activity_id)
