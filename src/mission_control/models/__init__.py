"""Record models for mission-control."""

from mission_control.models.activity import Activity, ActivityCreate
from mission_control.models.agent import Agent, AgentStatus, AgentUpsert
from mission_control.models.base import coerce_enum, new_id, parse_payload
from mission_control.models.cron_job import CronJob, CronJobUpsert, CronStatus
from mission_control.models.memory import Memory, MemoryType, MemoryUpsert
from mission_control.models.task import (
    Task,
    TaskAssignee,
    TaskCounts,
    TaskCreate,
    TaskPriority,
    TaskStatus,
    TaskUpdate,
)

__all__ = [
    "Activity",
    "ActivityCreate",
    "Agent",
    "AgentStatus",
    "AgentUpsert",
    "CronJob",
    "CronJobUpsert",
    "CronStatus",
    "Memory",
    "MemoryType",
    "MemoryUpsert",
    "Task",
    "TaskAssignee",
    "TaskCounts",
    "TaskCreate",
    "TaskPriority",
    "TaskStatus",
    "TaskUpdate",
    "coerce_enum",
    "new_id",
    "parse_payload",
]
