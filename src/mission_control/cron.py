"""Cron job records as reported by the agent.

This is bookkeeping for the calendar view only; nothing here runs jobs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mission_control.backends import DocumentStore
from mission_control.exceptions import NotFoundError
from mission_control.models import CronJob, CronJobUpsert, CronStatus, parse_payload

logger = logging.getLogger(__name__)

_MINUTE = 60_000
_HOUR = 60 * _MINUTE

# (name, schedule, description, ms since last run, ms until next run)
DEFAULT_JOBS: list[tuple[str, str, str, int, int]] = [
    ("Memory Heartbeat", "*/30 * * * *", "Extract facts from recent conversations", 15 * _MINUTE, 15 * _MINUTE),
    ("Daily Summary", "0 20 * * *", "Compile and send daily briefing", 4 * _HOUR, 20 * _HOUR),
    ("Gmail Check", "*/15 * * * *", "Check for important emails and flag them", 8 * _MINUTE, 7 * _MINUTE),
    ("ClickUp Sync", "0 * * * *", "Sync ClickUp tasks to memory", 45 * _MINUTE, 15 * _MINUTE),
    ("Weekly Memory Synthesis", "0 9 * * 1", "Rewrite entity summaries from atomic facts", 72 * _HOUR, 96 * _HOUR),
    ("OpenRouter Monitor", "0 0 * * *", "Check OpenRouter balance and usage", 20 * _HOUR, 4 * _HOUR),
]


class CronJobRegistry:
    table = "cron_jobs"

    def __init__(self, db: DocumentStore) -> None:
        self.db = db

    async def list(self) -> list[CronJob]:
        return [CronJob.model_validate(row) for row in await self.db.select(self.table)]

    async def upsert(self, fields: Mapping[str, Any]) -> str:
        """Create or update the job named ``fields["name"]``."""
        payload = parse_payload(CronJobUpsert, fields)
        job_id = await self.db.upsert(self.table, "name", payload.model_dump(mode="json"))
        logger.info(f"[CRON] {payload.name} ({payload.schedule}) -> {payload.status}")
        return job_id

    async def toggle_status(self, job_id: str) -> CronStatus:
        """Flip between active and disabled and return the new status."""
        row = await self.db.get(self.table, job_id)
        if row is None:
            raise NotFoundError(self.table, job_id)
        current = CronStatus(row["status"])
        new_status = CronStatus.DISABLED if current is CronStatus.ACTIVE else CronStatus.ACTIVE
        await self.db.patch(self.table, job_id, {"status": str(new_status)})
        logger.info(f"[CRON] {row['name']} toggled to {new_status}")
        return new_status

    async def seed(self) -> int:
        """Insert the default jobs if the table is empty. Returns rows inserted."""
        if await self.db.select(self.table, limit=1):
            return 0
        now = self.db.now_ms()
        for name, schedule, description, since_last, until_next in DEFAULT_JOBS:
            await self.upsert(
                {
                    "name": name,
                    "schedule": schedule,
                    "description": description,
                    "status": CronStatus.ACTIVE,
                    "last_run": now - since_last,
                    "next_run": now + until_next,
                    "last_result": "success",
                }
            )
        return len(DEFAULT_JOBS)
