"""Document store interface shared by the in-memory and Supabase backends.

Every record lives in a named table as a flat dict keyed by an opaque ``id``.
Writes go through ``insert``/``patch``/``delete`` and, once committed, notify
the table's subscribers in write order. Subscribers are awaited before the
write call returns, so a caller that awaited a mutation has also observed
every view refresh it triggered.
"""

from __future__ import annotations

import inspect
import logging
import threading
import time
from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from mission_control.models.base import new_id

logger = logging.getLogger(__name__)


class ChangeKind(StrEnum):
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class ChangeEvent:
    """A committed write to one record."""

    table: str
    kind: ChangeKind
    record_id: str


ChangeListener = Callable[[ChangeEvent], Awaitable[None] | None]


class MonotonicClock:
    """Epoch-millisecond clock that never repeats or goes backwards."""

    def __init__(self, source: Callable[[], float] = time.time) -> None:
        self._source = source
        self._last = 0
        self._lock = threading.Lock()

    def now_ms(self) -> int:
        with self._lock:
            stamp = max(int(self._source() * 1000), self._last + 1)
            self._last = stamp
            return stamp


class DocumentStore(ABC):
    """Typed handle to a reactive document database."""

    def __init__(self, clock: MonotonicClock | None = None) -> None:
        self.clock = clock or MonotonicClock()
        self._listeners: dict[str, list[ChangeListener]] = defaultdict(list)

    def now_ms(self) -> int:
        return self.clock.now_ms()

    @abstractmethod
    async def insert(self, table: str, doc: Mapping[str, Any]) -> str:
        """Insert ``doc`` (which must carry an ``id``) and return the id."""

    @abstractmethod
    async def get(self, table: str, record_id: str) -> dict[str, Any] | None:
        """Fetch one record or ``None``."""

    @abstractmethod
    async def patch(self, table: str, record_id: str, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Apply ``fields`` atomically to one record and return the stored row.

        Raises:
            NotFoundError: If ``record_id`` does not exist.
        """

    @abstractmethod
    async def delete(self, table: str, record_id: str) -> None:
        """Permanently delete one record.

        Raises:
            NotFoundError: If ``record_id`` does not exist.
        """

    @abstractmethod
    async def select(
        self,
        table: str,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        desc: bool = False,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return records matching every equality filter."""

    async def first(self, table: str, **filters: Any) -> dict[str, Any] | None:
        rows = await self.select(table, filters=filters, limit=1)
        return rows[0] if rows else None

    async def upsert(self, table: str, key: str, doc: Mapping[str, Any]) -> str:
        """Patch the record whose ``key`` field equals ``doc[key]``, else insert it."""
        existing = await self.first(table, **{key: doc[key]})
        if existing:
            await self.patch(table, existing["id"], doc)
            return existing["id"]
        return await self.insert(table, {**doc, "id": new_id()})

    def subscribe(self, table: str, listener: ChangeListener) -> Callable[[], None]:
        """Register ``listener`` for committed writes on ``table``.

        Returns:
            A callable that removes the listener.
        """
        self._listeners[table].append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners[table]:
                self._listeners[table].remove(listener)

        return unsubscribe

    async def _notify(self, event: ChangeEvent) -> None:
        for listener in list(self._listeners.get(event.table, ())):
            try:
                result = listener(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                # A broken subscriber must not fail a committed write
                logger.warning(f"[STORE] Listener failed for {event.table}/{event.kind}: {e}")
