"""Memory file records for the knowledge browser."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from mission_control.models.base import require_text


class MemoryType(StrEnum):
    DAILY = "daily"
    ENTITY = "entity"
    LESSON = "lesson"
    DECISION = "decision"
    CORE = "core"


class Memory(BaseModel):
    """A memory file synced from the agent workspace, keyed by ``path``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    path: str
    content: str
    last_modified: int = Field(alias="lastModified")
    type: MemoryType
    title: str | None = None


class MemoryUpsert(BaseModel):
    """Incoming memory file. ``type`` and ``title`` are derived from the path when omitted."""

    model_config = ConfigDict(extra="ignore")

    path: str
    content: str
    type: MemoryType | None = None
    title: str | None = None

    @field_validator("path", "content")
    @classmethod
    def _not_empty(cls, value: str, info: ValidationInfo) -> str:
        return require_text(value, info.field_name)
