"""Append-only activity feed.

Entries are written by callers after the mutation they describe. The two
writes are not transactional: if the log call fails, or a caller never
issues one, the mutation stands without a feed entry.
"""

from __future__ import annotations

import logging
from typing import Any

from mission_control.backends import DocumentStore
from mission_control.exceptions import MissionControlError
from mission_control.models import Activity, ActivityCreate, new_id, parse_payload
from mission_control.settings import settings

logger = logging.getLogger(__name__)


class ActivityLog:
    table = "activities"

    def __init__(self, db: DocumentStore) -> None:
        self.db = db

    async def log(self, type: str, description: str, metadata: Any = None) -> str:
        entry = parse_payload(ActivityCreate, {"type": type, "description": description, "metadata": metadata})
        activity = Activity(id=new_id(), timestamp=self.db.now_ms(), **entry.model_dump())
        activity_id = await self.db.insert(self.table, activity.model_dump(mode="json"))
        logger.info(f"[ACTIVITY] {activity.type}: {activity.description}")
        return activity_id

    async def log_best_effort(self, type: str, description: str, metadata: Any = None) -> str | None:
        """Like ``log`` but a failure is logged and swallowed."""
        try:
            return await self.log(type, description, metadata)
        except MissionControlError as e:
            logger.warning(f"[ACTIVITY] Dropped {type!r} entry: {e}")
            return None

    async def list(self, limit: int | None = None) -> list[Activity]:
        """Most recent first, capped at ``limit`` or ``settings.activity_default_limit``."""
        rows = await self.db.select(
            self.table, order_by="timestamp", desc=True, limit=limit or settings.activity_default_limit
        )
        return [Activity.model_validate(row) for row in rows]
