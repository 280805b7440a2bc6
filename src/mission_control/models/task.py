"""Task model for the kanban board."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mission_control.models.base import require_text


class TaskStatus(StrEnum):
    """Board columns a task can sit in."""

    BACKLOG = "backlog"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"


class TaskAssignee(StrEnum):
    RYAN = "ryan"
    HIMBOT = "himbot"


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Task(BaseModel):
    """A unit of work tracked on the board."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.BACKLOG
    assignee: TaskAssignee = TaskAssignee.HIMBOT
    priority: TaskPriority = TaskPriority.MEDIUM
    created_at: int = Field(alias="createdAt")
    updated_at: int = Field(alias="updatedAt")


class TaskCreate(BaseModel):
    """Fields accepted when creating a task."""

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.BACKLOG
    assignee: TaskAssignee = TaskAssignee.HIMBOT
    priority: TaskPriority = TaskPriority.MEDIUM

    @field_validator("title")
    @classmethod
    def _title_not_empty(cls, value: str) -> str:
        return require_text(value, "title")


class TaskUpdate(BaseModel):
    """Partial update. ``None`` means "leave unchanged"; identity fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    assignee: TaskAssignee | None = None
    priority: TaskPriority | None = None

    @field_validator("title")
    @classmethod
    def _title_not_empty(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return require_text(value, "title")


class TaskCounts(BaseModel):
    """Tally of tasks per column taken from a single snapshot."""

    total: int = 0
    backlog: int = 0
    in_progress: int = 0
    review: int = 0
    done: int = 0
