"""Response models shared by the REST routes."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mission_control.models import TaskStatus


class MutationResponse(BaseModel):
    """Acknowledgement returned by every write endpoint."""

    id: str
    success: bool = True


class StatusChangeResponse(MutationResponse):
    changed: bool
    status: TaskStatus


class DropRequest(BaseModel):
    """A released drag: ``over`` is the column status or card id under the pointer."""

    over: str | None = Field(default=None, description="Column status or task id under the pointer")
