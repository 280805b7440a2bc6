"""Sub-agent roster, keyed by agent name."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Any

from mission_control.backends import DocumentStore
from mission_control.models import Agent, AgentStatus, AgentUpsert, coerce_enum, parse_payload

logger = logging.getLogger(__name__)

DEFAULT_ROSTER: list[dict[str, Any]] = [
    {"name": "Researcher", "role": "Research & Intel", "description": "Searches the web, analyzes sources, compiles briefings", "avatar": "🔍"},
    {"name": "Coder", "role": "Software Engineer", "description": "Writes, reviews, and debugs code across all languages", "avatar": "💻"},
    {"name": "Writer", "role": "Content & Comms", "description": "Drafts emails, docs, posts, and creative content", "avatar": "✍️"},
    {"name": "Fact Extractor", "role": "Memory Manager", "description": "Extracts and indexes facts from conversations", "status": "working", "current_task": "Running heartbeat extraction", "avatar": "🧠"},
    {"name": "Monitor", "role": "System Watch", "description": "Watches for anomalies, alerts, and status changes", "avatar": "👁️"},
    {"name": "Designer", "role": "UI & Visual", "description": "Creates mockups, SVGs, and design direction", "avatar": "🎨"},
    {"name": "Analyst", "role": "Data & Metrics", "description": "Crunches numbers, builds reports, spots trends", "avatar": "📊"},
    {"name": "Ops", "role": "Operations", "description": "Handles integrations, workflows, and infra tasks", "avatar": "⚙️"},
]


class AgentRegistry:
    table = "agents"

    def __init__(self, db: DocumentStore) -> None:
        self.db = db

    async def list(self) -> list[Agent]:
        return [Agent.model_validate(row) for row in await self.db.select(self.table)]

    async def get(self, agent_id: str) -> Agent | None:
        row = await self.db.get(self.table, agent_id)
        return Agent.model_validate(row) if row else None

    async def upsert(self, fields: Mapping[str, Any]) -> str:
        """Create or update the agent named ``fields["name"]``; stamps ``last_active``."""
        payload = parse_payload(AgentUpsert, fields)
        doc = {**payload.model_dump(mode="json"), "last_active": self.db.now_ms()}
        agent_id = await self.db.upsert(self.table, "name", doc)
        logger.info(f"[AGENT] {payload.name} -> {payload.status}")
        return agent_id

    async def update_status(self, agent_id: str, status: AgentStatus | str, current_task: str | None = None) -> None:
        """Raises NotFoundError if ``agent_id`` is unknown."""
        await self.db.patch(
            self.table,
            agent_id,
            {
                "status": str(coerce_enum(AgentStatus, status, "status")),
                "current_task": current_task,
                "last_active": self.db.now_ms(),
            },
        )

    async def seed(self) -> int:
        """Insert the default roster if the table is empty. Returns rows inserted."""
        if await self.db.select(self.table, limit=1):
            return 0
        now = self.db.now_ms()
        for definition in DEFAULT_ROSTER:
            payload = parse_payload(AgentUpsert, definition)
            doc = {
                **payload.model_dump(mode="json"),
                "last_active": now - random.randint(0, 3_600_000),
                "total_runs": random.randint(0, 49),
            }
            await self.db.upsert(self.table, "name", doc)
        return len(DEFAULT_ROSTER)

