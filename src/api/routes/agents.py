"""Agent roster API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.models.responses import MutationResponse
from api.utils import get_mission_control, require_fields
from mission_control import MissionControl
from mission_control.models import Agent, AgentStatus

router = APIRouter(prefix="/api/agents", tags=["Agents"])


@router.get("")
async def api_list_agents(mc: MissionControl = Depends(get_mission_control)) -> list[Agent]:
    """List every known agent."""
    return await mc.agents.list()


@router.post("")
async def api_upsert_agent(body: dict, mc: MissionControl = Depends(get_mission_control)) -> MutationResponse:
    """Create or update an agent by name and record an ``agent_spawned`` activity.

    **Request Body:**
    - `name`, `role`: required
    - `description`, `status` (idle|working|error), `currentTask`, `totalRuns`, `avatar`: optional
    """
    require_fields(body, "name", "role")
    agent_id = await mc.agents.upsert(body)

    name = body["name"]
    status = body.get("status") or AgentStatus.IDLE
    current_task = body.get("currentTask") or body.get("current_task")
    if status == AgentStatus.WORKING:
        description = f"Agent {name} started working: {current_task or 'unknown task'}"
    else:
        description = f"Agent {name} status updated to {status}"
    await mc.activity.log_best_effort("agent_spawned", description, {"agent": name, "status": status})
    return MutationResponse(id=agent_id)
