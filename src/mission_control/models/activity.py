"""Activity feed entries."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from mission_control.models.base import require_text


class Activity(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    description: str
    timestamp: int
    metadata: Any = None


class ActivityCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str
    description: str
    metadata: Any = None

    @field_validator("type", "description")
    @classmethod
    def _not_empty(cls, value: str, info: ValidationInfo) -> str:
        return require_text(value, info.field_name)
