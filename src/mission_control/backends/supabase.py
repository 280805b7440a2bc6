"""Supabase-backed document store.

Tables mirror the record models with snake_case columns and a text ``id``
primary key. Change notifications are fanned out locally for writes made
through this handle.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from supabase import Client, PostgrestAPIError, create_client

from mission_control.backends.base import ChangeEvent, ChangeKind, DocumentStore, MonotonicClock
from mission_control.exceptions import NotFoundError, TransportError

logger = logging.getLogger(__name__)


class SupabaseDocumentStore(DocumentStore):
    """Document store over Supabase PostgREST tables."""

    def __init__(self, url: str, key: str, clock: MonotonicClock | None = None) -> None:
        super().__init__(clock)
        self.client: Client = create_client(url, key)

    def _execute(self, builder: Any, action: str) -> list[dict[str, Any]]:
        try:
            response = builder.execute()
        except (PostgrestAPIError, httpx.HTTPError) as e:
            logger.error(f"[STORE] Supabase {action} failed: {e}")
            raise TransportError(f"Supabase {action} failed: {e}") from e
        return list(response.data or [])

    async def insert(self, table: str, doc: Mapping[str, Any]) -> str:
        rows = self._execute(self.client.table(table).insert(dict(doc)), f"insert into {table}")
        record_id = str(rows[0]["id"]) if rows else str(doc["id"])
        await self._notify(ChangeEvent(table, ChangeKind.INSERT, record_id))
        return record_id

    async def get(self, table: str, record_id: str) -> dict[str, Any] | None:
        rows = self._execute(
            self.client.table(table).select("*").eq("id", record_id).limit(1),
            f"get from {table}",
        )
        return rows[0] if rows else None

    async def patch(self, table: str, record_id: str, fields: Mapping[str, Any]) -> dict[str, Any]:
        changes = {k: v for k, v in fields.items() if k != "id"}
        rows = self._execute(
            self.client.table(table).update(changes).eq("id", record_id),
            f"update {table}",
        )
        if not rows:
            raise NotFoundError(table, record_id)
        await self._notify(ChangeEvent(table, ChangeKind.UPDATE, record_id))
        return rows[0]

    async def delete(self, table: str, record_id: str) -> None:
        rows = self._execute(
            self.client.table(table).delete().eq("id", record_id),
            f"delete from {table}",
        )
        if not rows:
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
        query = self.client.table(table).select("*")
        for field, value in (filters or {}).items():
            query = query.eq(field, value)
        if order_by:
            query = query.order(order_by, desc=desc)  # type: ignore
        if limit is not None:
            query = query.limit(limit)
        return self._execute(query, f"select from {table}")
