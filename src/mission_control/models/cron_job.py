"""Cron job records shown on the calendar."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from mission_control.models.base import require_text


class CronStatus(StrEnum):
    ACTIVE = "active"
    DISABLED = "disabled"


class CronJob(BaseModel):
    """A scheduled job as reported by the agent. Nothing here executes it."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    schedule: str
    last_run: int | None = Field(default=None, alias="lastRun")
    next_run: int | None = Field(default=None, alias="nextRun")
    status: CronStatus = CronStatus.ACTIVE
    last_result: str | None = Field(default=None, alias="lastResult")
    description: str | None = None


class CronJobUpsert(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    schedule: str
    last_run: int | None = Field(default=None, alias="lastRun")
    next_run: int | None = Field(default=None, alias="nextRun")
    status: CronStatus = CronStatus.ACTIVE
    last_result: str | None = Field(default=None, alias="lastResult")
    description: str | None = None

    @field_validator("name", "schedule")
    @classmethod
    def _not_empty(cls, value: str, info: ValidationInfo) -> str:
        return require_text(value, info.field_name)
