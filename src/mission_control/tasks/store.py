"""Task store: owns task records and enforces field invariants on write."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mission_control.backends import DocumentStore
from mission_control.exceptions import ValidationError
from mission_control.models import Task, TaskAssignee, TaskCreate, TaskUpdate, coerce_enum, new_id, parse_payload
from mission_control.tasks.lifecycle import coerce_status

logger = logging.getLogger(__name__)

# Wire names of fields a caller may never overwrite
_IMMUTABLE_FIELDS = {"id", "created_at", "createdAt", "updated_at", "updatedAt"}


class TaskStore:
    """CRUD over the ``tasks`` table.

    The store performs no side effects beyond the single record write; callers
    that want an activity feed entry append it themselves.
    """

    table = "tasks"

    def __init__(self, db: DocumentStore) -> None:
        self.db = db

    async def create(self, fields: Mapping[str, Any]) -> str:
        """Create a task and return its id.

        Raises:
            ValidationError: If the title is empty or an enum field is out of range.
        """
        payload = parse_payload(TaskCreate, fields)
        now = self.db.now_ms()
        task = Task(id=new_id(), **payload.model_dump(), created_at=now, updated_at=now)
        task_id = await self.db.insert(self.table, task.model_dump(mode="json"))
        logger.info(f"[TASK] Created {task_id}: {task.title!r} ({task.status})")
        return task_id

    async def patch(self, task_id: str, fields: Mapping[str, Any]) -> None:
        """Apply only the supplied fields and re-stamp ``updated_at``.

        Raises:
            ValidationError: On invalid values or an attempt to overwrite identity fields.
            NotFoundError: If ``task_id`` is unknown.
        """
        immutable = _IMMUTABLE_FIELDS.intersection(fields)
        if immutable:
            raise ValidationError(f"cannot overwrite {', '.join(sorted(immutable))}")
        update = parse_payload(TaskUpdate, fields)
        changes = update.model_dump(mode="json", exclude_none=True)
        changes["updated_at"] = self.db.now_ms()
        await self.db.patch(self.table, task_id, changes)
        logger.debug(f"[TASK] Patched {task_id}: {sorted(changes)}")

    async def set_status(self, task_id: str, status: Any) -> None:
        """Status-only transition, so a drag cannot clobber concurrent title/description edits.

        Calling it twice with the same status performs two writes.
        """
        await self.patch(task_id, {"status": coerce_status(status)})

    async def remove(self, task_id: str) -> None:
        """Hard delete. Raises NotFoundError if ``task_id`` is unknown."""
        await self.db.delete(self.table, task_id)
        logger.info(f"[TASK] Removed {task_id}")

    async def get(self, task_id: str) -> Task | None:
        row = await self.db.get(self.table, task_id)
        return Task.model_validate(row) if row else None

    async def list(self, assignee: TaskAssignee | str | None = None) -> list[Task]:
        """All tasks, most recent first."""
        filters = {"assignee": str(coerce_enum(TaskAssignee, assignee, "assignee"))} if assignee else None
        rows = await self.db.select(self.table, filters=filters, order_by="created_at", desc=True)
        return [Task.model_validate(row) for row in rows]
