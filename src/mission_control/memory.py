"""Memory browser store: markdown files synced from the agent workspace, keyed by path."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from mission_control.backends import DocumentStore
from mission_control.models import Memory, MemoryType, MemoryUpsert, parse_payload

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_MEMORY_TYPES = {member.value for member in MemoryType}


def infer_type(path: str) -> MemoryType:
    """Classify a memory file from its path."""
    if path == "MEMORY.md" or path.endswith("SOUL.md") or path.endswith("USER.md"):
        return MemoryType.CORE
    if _DATE_PATTERN.search(path):
        return MemoryType.DAILY
    if "lessons" in path:
        return MemoryType.LESSON
    if "decisions" in path:
        return MemoryType.DECISION
    if "life/areas" in path or "entities" in path:
        return MemoryType.ENTITY
    return MemoryType.CORE


def default_title(path: str) -> str:
    """Last path segment with the ``.md`` suffix removed."""
    return path.rsplit("/", 1)[-1].replace(".md", "")


class MemoryStore:
    table = "memories"

    def __init__(self, db: DocumentStore) -> None:
        self.db = db

    async def list(self, type: MemoryType | str | None = None) -> list[Memory]:
        """All memories, or those of one ``type``. An unknown type matches nothing."""
        if not type:
            rows = await self.db.select(self.table)
        else:
            value = type.value if isinstance(type, MemoryType) else type
            if value not in _MEMORY_TYPES:
                logger.debug(f"[MEMORY] No memories of unknown type {value!r}")
                return []
            rows = await self.db.select(self.table, filters={"type": value})
        return [Memory.model_validate(row) for row in rows]

    async def get(self, path: str) -> Memory | None:
        row = await self.db.first(self.table, path=path)
        return Memory.model_validate(row) if row else None

    async def search(self, query: str) -> list[Memory]:
        """Case-insensitive substring match over path, content and title. A linear scan."""
        needle = query.lower()
        return [
            memory
            for memory in await self.list()
            if needle in memory.path.lower()
            or needle in memory.content.lower()
            or (memory.title and needle in memory.title.lower())
        ]

    async def upsert(self, fields: Mapping[str, Any]) -> str:
        """Create or replace the memory at ``fields["path"]``; stamps ``last_modified``."""
        payload = parse_payload(MemoryUpsert, fields)
        doc = {
            "path": payload.path,
            "content": payload.content,
            "type": str(payload.type or infer_type(payload.path)),
            "title": payload.title or default_title(payload.path),
            "last_modified": self.db.now_ms(),
        }
        memory_id = await self.db.upsert(self.table, "path", doc)
        logger.info(f"[MEMORY] Synced {payload.path} ({doc['type']})")
        return memory_id

    async def remove(self, memory_id: str) -> None:
        await self.db.delete(self.table, memory_id)
