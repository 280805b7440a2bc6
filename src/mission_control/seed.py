"""Demo data for an empty dashboard. Each table is only seeded when empty."""

from __future__ import annotations

import logging
import random

from mission_control.client import MissionControl
from mission_control.models import Activity, Task, TaskAssignee, TaskPriority, TaskStatus, new_id

logger = logging.getLogger(__name__)

_DAY_MS = 86_400_000

SEED_TASKS: list[tuple[str, str, TaskStatus, TaskAssignee, TaskPriority]] = [
    ("Build Mission Control dashboard", "Create the main overview page with stats", TaskStatus.DONE, TaskAssignee.HIMBOT, TaskPriority.HIGH),
    ("Implement Kanban drag & drop", "Add DnD functionality to task board", TaskStatus.DONE, TaskAssignee.HIMBOT, TaskPriority.HIGH),
    ("Memory browser with file tree", "Show all memory files with search", TaskStatus.IN_PROGRESS, TaskAssignee.HIMBOT, TaskPriority.MEDIUM),
    ("Review GrantExec pipeline", "Check current deal flow and follow-ups needed", TaskStatus.BACKLOG, TaskAssignee.RYAN, TaskPriority.HIGH),
    ("Set up Supabase deployment", "Configure production Supabase backend", TaskStatus.IN_PROGRESS, TaskAssignee.HIMBOT, TaskPriority.URGENT),
    ("Deploy to Netlify", "Production deploy with env vars", TaskStatus.BACKLOG, TaskAssignee.HIMBOT, TaskPriority.MEDIUM),
    ("Write weekly strategy memo", "Summarize current priorities for Q1 2026", TaskStatus.REVIEW, TaskAssignee.RYAN, TaskPriority.MEDIUM),
    ("Update MEMORY.md patterns", "Add new navigation rules from last week", TaskStatus.BACKLOG, TaskAssignee.HIMBOT, TaskPriority.LOW),
    ("Research competitor pricing", "Compare GrantExec vs alternatives", TaskStatus.BACKLOG, TaskAssignee.HIMBOT, TaskPriority.MEDIUM),
    ("Fix heartbeat extraction bug", "lastExtractedTs not updating correctly", TaskStatus.DONE, TaskAssignee.HIMBOT, TaskPriority.URGENT),
]

SEED_ACTIVITIES: list[tuple[str, str]] = [
    ("task_created", "Task created: Build Mission Control dashboard"),
    ("memory_updated", "Updated MEMORY.md with Netlify Pro plan details"),
    ("cron_ran", "Heartbeat extraction completed, 3 new facts extracted"),
    ("agent_spawned", "Researcher agent spawned for GrantExec pricing analysis"),
    ("task_completed", "Task done: Fix heartbeat extraction bug"),
    ("memory_updated", "Created entity: companies/match-capital"),
    ("cron_ran", "Gmail check completed, 2 important emails flagged"),
    ("task_updated", "Task moved to Review: Write weekly strategy memo"),
    ("agent_spawned", "Coder agent spawned for Mission Control build"),
    ("cron_ran", "ClickUp sync, 12 tasks updated"),
]


async def seed_tasks(mc: MissionControl) -> int:
    if await mc.db.select(mc.tasks.table, limit=1):
        return 0
    now = mc.db.now_ms()
    for title, description, status, assignee, priority in SEED_TASKS:
        created_at = now - random.randint(0, 7 * _DAY_MS)
        task = Task(
            id=new_id(),
            title=title,
            description=description,
            status=status,
            assignee=assignee,
            priority=priority,
            created_at=created_at,
            updated_at=random.randint(created_at, now),
        )
        await mc.db.insert(mc.tasks.table, task.model_dump(mode="json"))
    return len(SEED_TASKS)


async def seed_activities(mc: MissionControl) -> int:
    if await mc.db.select(mc.activity.table, limit=1):
        return 0
    now = mc.db.now_ms()
    for i, (activity_type, description) in enumerate(SEED_ACTIVITIES):
        activity = Activity(
            id=new_id(),
            type=activity_type,
            description=description,
            timestamp=now - i * 600_000,
            metadata={},
        )
        await mc.db.insert(mc.activity.table, activity.model_dump(mode="json"))
    return len(SEED_ACTIVITIES)


async def seed_all(mc: MissionControl) -> dict[str, int]:
    """Seed every table and return the number of rows inserted per table."""
    result = {
        "tasks": await seed_tasks(mc),
        "activities": await seed_activities(mc),
        "agents": await mc.agents.seed(),
        "cron_jobs": await mc.cron_jobs.seed(),
    }
    logger.info(f"[STORE] Seeded {result}")
    return result
