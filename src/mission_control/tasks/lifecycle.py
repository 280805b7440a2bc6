"""Task status lifecycle.

The board has four columns and no ordering constraint between them: any
status can move to any other, backward moves included, and ``done`` is not
terminal.
"""

from __future__ import annotations

from typing import Any

from mission_control.models import TaskStatus, coerce_enum

# Column order on the board, left to right
BOARD_COLUMNS: tuple[TaskStatus, ...] = (
    TaskStatus.BACKLOG,
    TaskStatus.IN_PROGRESS,
    TaskStatus.REVIEW,
    TaskStatus.DONE,
)

STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.BACKLOG: "Backlog",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.REVIEW: "Review",
    TaskStatus.DONE: "Done",
}

TRANSITIONS: dict[TaskStatus, frozenset[TaskStatus]] = {status: frozenset(TaskStatus) for status in TaskStatus}


def coerce_status(value: Any) -> TaskStatus:
    """Parse a status value, rejecting anything outside the four columns."""
    return coerce_enum(TaskStatus, value, "status")


def can_transition(current: TaskStatus, target: TaskStatus) -> bool:
    return target in TRANSITIONS[current]


def transition_activity(title: str, status: TaskStatus) -> tuple[str, str]:
    """Activity feed ``(type, description)`` for a task moving to ``status``."""
    if status is TaskStatus.DONE:
        return "task_completed", f"Task done: {title}"
    return "task_updated", f"Task moved to {STATUS_LABELS[status]}: {title}"
