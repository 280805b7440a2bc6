"""In-process document store used for tests and local development."""

from __future__ import annotations

import copy
from collections import defaultdict
from collections.abc import Mapping
from typing import Any

from mission_control.backends.base import ChangeEvent, ChangeKind, DocumentStore, MonotonicClock
from mission_control.exceptions import NotFoundError, ValidationError


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed tables. Each write completes without yielding, so it is atomic per record."""

    def __init__(self, clock: MonotonicClock | None = None) -> None:
        super().__init__(clock)
        self._tables: dict[str, dict[str, dict[str, Any]]] = defaultdict(dict)

    async def insert(self, table: str, doc: Mapping[str, Any]) -> str:
        record_id = doc.get("id")
        if not record_id:
            raise ValidationError(f"{table} insert requires an id")
        rows = self._tables[table]
        if record_id in rows:
            raise ValidationError(f"{table} id already exists: {record_id}")
        rows[record_id] = copy.deepcopy(dict(doc))
        await self._notify(ChangeEvent(table, ChangeKind.INSERT, record_id))
        return record_id

    async def get(self, table: str, record_id: str) -> dict[str, Any] | None:
        row = self._tables[table].get(record_id)
        return copy.deepcopy(row) if row is not None else None

    async def patch(self, table: str, record_id: str, fields: Mapping[str, Any]) -> dict[str, Any]:
        row = self._tables[table].get(record_id)
        if row is None:
            raise NotFoundError(table, record_id)
        row.update(copy.deepcopy({k: v for k, v in fields.items() if k != "id"}))
        snapshot = copy.deepcopy(row)
        await self._notify(ChangeEvent(table, ChangeKind.UPDATE, record_id))
        return snapshot

    async def delete(self, table: str, record_id: str) -> None:
        if self._tables[table].pop(record_id, None) is None:
            raise NotFoundError(table, record_id)
        await self._notify(ChangeEvent(table, ChangeKind.DELETE, record_id))

    async def select(
        self,
        table: str,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        desc: bool = False,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        rows = [
            row
            for row in self._tables[table].values()
            if all(row.get(field) == value for field, value in (filters or {}).items())
        ]
        if order_by:
            rows.sort(key=lambda row: row.get(order_by), reverse=desc)
        if limit is not None:
            rows = rows[:limit]
        return copy.deepcopy(rows)
