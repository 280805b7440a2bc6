"""Memory browser API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.models.responses import MutationResponse
from api.utils import get_mission_control, require_fields
from mission_control import MissionControl
from mission_control.memory import infer_type
from mission_control.models import Memory

router = APIRouter(prefix="/api/memory", tags=["Memory"])


@router.get("")
async def api_list_memories(
    type: str | None = None,
    q: str | None = None,
    mc: MissionControl = Depends(get_mission_control),
) -> list[Memory]:
    """List memories by type, or substring-search them when ``q`` is given."""
    if q:
        return await mc.memories.search(q)
    return await mc.memories.list(type)


@router.post("")
async def api_save_memory(body: dict, mc: MissionControl = Depends(get_mission_control)) -> MutationResponse:
    """Sync a memory file. ``type`` is inferred from the path when omitted."""
    require_fields(body, "path", "content")
    memory_id = await mc.memories.upsert(body)
    memory_type = body.get("type") or infer_type(body["path"])
    await mc.activity.log_best_effort(
        "memory_updated",
        f"Memory synced: {body['path']}",
        {"path": body["path"], "type": memory_type},
    )
    return MutationResponse(id=memory_id)
