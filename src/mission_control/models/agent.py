"""Sub-agent roster records."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from mission_control.models.base import require_text


class AgentStatus(StrEnum):
    IDLE = "idle"
    WORKING = "working"
    ERROR = "error"


class Agent(BaseModel):
    """A sub-agent known to the dashboard, keyed by ``name``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    role: str
    description: str = ""
    status: AgentStatus = AgentStatus.IDLE
    current_task: str | None = Field(default=None, alias="currentTask")
    last_active: int = Field(alias="lastActive")
    total_runs: int = Field(default=0, alias="totalRuns")
    avatar: str | None = None


class AgentUpsert(BaseModel):
    """Fields an external agent process pushes for itself."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    role: str
    description: str = ""
    status: AgentStatus = AgentStatus.IDLE
    current_task: str | None = Field(default=None, alias="currentTask")
    total_runs: int = Field(default=0, ge=0, alias="totalRuns")
    avatar: str | None = None

    @field_validator("name", "role")
    @classmethod
    def _not_empty(cls, value: str, info: ValidationInfo) -> str:
        return require_text(value, info.field_name)
