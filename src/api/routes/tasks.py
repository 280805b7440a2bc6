"""Task board API routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.models.responses import DropRequest, MutationResponse, StatusChangeResponse
from api.utils import get_mission_control, require_fields
from mission_control import MissionControl
from mission_control.exceptions import NotFoundError
from mission_control.models import Task, TaskCounts
from mission_control.tasks import coerce_status, plan_drop, resolve_drop_target, transition_activity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


async def _get_or_404(mc: MissionControl, task_id: str) -> Task:
    task = await mc.tasks.get(task_id)
    if task is None:
        raise NotFoundError(mc.tasks.table, task_id)
    return task


@router.get("")
async def api_list_tasks(
    status: str | None = None,
    assignee: str | None = None,
    mc: MissionControl = Depends(get_mission_control),
) -> list[Task]:
    """List tasks, most recent first, optionally filtered by status and/or assignee."""
    if assignee:
        tasks = await mc.views.by_assignee(assignee)
    else:
        tasks = await mc.views.snapshot()
    if status:
        target = coerce_status(status)
        tasks = [task for task in tasks if task.status == target]
    return tasks


@router.post("")
async def api_create_task(body: dict, mc: MissionControl = Depends(get_mission_control)) -> MutationResponse:
    """Create a task. Defaults: status=backlog, assignee=himbot, priority=medium."""
    require_fields(body, "title")
    task_id = await mc.tasks.create(body)
    await mc.activity.log_best_effort("task_created", f"Task created: {body['title']}", {"taskId": task_id})
    return MutationResponse(id=task_id)


@router.get("/counts")
async def api_task_counts(mc: MissionControl = Depends(get_mission_control)) -> TaskCounts:
    """Per-column tally; the columns always sum to ``total``."""
    return await mc.views.counts()


@router.get("/{task_id}")
async def api_get_task(task_id: str, mc: MissionControl = Depends(get_mission_control)) -> Task:
    """Get a task by ID."""
    return await _get_or_404(mc, task_id)


@router.patch("/{task_id}")
async def api_update_task(task_id: str, body: dict, mc: MissionControl = Depends(get_mission_control)) -> MutationResponse:
    """Partially update a task. Only supplied fields change."""
    await mc.tasks.patch(task_id, body)
    task = await _get_or_404(mc, task_id)
    await mc.activity.log_best_effort("task_updated", f"Task updated: {task.title}", {"taskId": task_id})
    return MutationResponse(id=task_id)


@router.patch("/{task_id}/status")
async def api_set_task_status(task_id: str, body: dict, mc: MissionControl = Depends(get_mission_control)) -> MutationResponse:
    """Status-only transition. Leaves title and description untouched."""
    require_fields(body, "status")
    status = coerce_status(body["status"])
    await mc.tasks.set_status(task_id, status)
    task = await _get_or_404(mc, task_id)
    activity_type, description = transition_activity(task.title, status)
    await mc.activity.log_best_effort(activity_type, description, {"taskId": task_id, "status": status})
    return MutationResponse(id=task_id)


@router.post("/{task_id}/drop")
async def api_drop_task(
    task_id: str,
    body: DropRequest,
    mc: MissionControl = Depends(get_mission_control),
) -> StatusChangeResponse:
    """Apply a released drag gesture: at most one status change, none for a same-column drop."""
    task = await _get_or_404(mc, task_id)
    target = resolve_drop_target(body.over, await mc.views.snapshot())
    change = plan_drop(task.id, task.status, target)
    if change is None:
        return StatusChangeResponse(id=task_id, changed=False, status=task.status)

    await mc.tasks.set_status(task_id, change.to_status)
    activity_type, description = transition_activity(task.title, change.to_status)
    await mc.activity.log_best_effort(activity_type, description, {"taskId": task_id, "status": change.to_status})
    return StatusChangeResponse(id=task_id, changed=True, status=change.to_status)


@router.delete("/{task_id}")
async def api_delete_task(task_id: str, mc: MissionControl = Depends(get_mission_control)) -> MutationResponse:
    """Permanently delete a task."""
    task = await _get_or_404(mc, task_id)
    await mc.tasks.remove(task_id)
    await mc.activity.log_best_effort("task_deleted", f"Task deleted: {task.title}", {"taskId": task_id})
    return MutationResponse(id=task_id)
