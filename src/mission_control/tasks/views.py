"""Derived read projections over the task set.

Views hold no state of their own. Every read re-derives from one store
snapshot, and subscribers get a fresh ``BoardSnapshot`` pushed after each
committed write to the ``tasks`` table.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

from mission_control.backends import ChangeEvent
from mission_control.models import Task, TaskAssignee, TaskCounts, TaskStatus, coerce_enum
from mission_control.tasks.lifecycle import BOARD_COLUMNS, coerce_status
from mission_control.tasks.store import TaskStore

logger = logging.getLogger(__name__)


def view_order(tasks: Iterable[Task]) -> list[Task]:
    """Most recent first; ties broken by id ascending."""
    return sorted(tasks, key=lambda task: (-task.created_at, task.id))


def tally(tasks: Iterable[Task]) -> TaskCounts:
    counts = TaskCounts()
    for task in tasks:
        counts.total += 1
        setattr(counts, task.status.value, getattr(counts, task.status.value) + 1)
    return counts


@dataclass(frozen=True)
class BoardSnapshot:
    """Columns and counts derived from the same read."""

    columns: dict[TaskStatus, list[Task]]
    counts: TaskCounts

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> BoardSnapshot:
        ordered = view_order(tasks)
        columns = {status: [task for task in ordered if task.status == status] for status in BOARD_COLUMNS}
        return cls(columns=columns, counts=tally(ordered))


BoardCallback = Callable[[BoardSnapshot], Awaitable[None] | None]


class Subscription:
    """Handle returned by ``TaskViews.subscribe``."""

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe = unsubscribe
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self._unsubscribe()
            self.active = False

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unsubscribe()


class TaskViews:
    """Query views: by status, by assignee, board and counts."""

    def __init__(self, store: TaskStore) -> None:
        self.store = store

    async def snapshot(self) -> list[Task]:
        return view_order(await self.store.list())

    async def by_status(self, status: TaskStatus | str) -> list[Task]:
        target = coerce_status(status)
        return [task for task in await self.snapshot() if task.status == target]

    async def by_assignee(self, assignee: TaskAssignee | str) -> list[Task]:
        return view_order(await self.store.list(assignee=coerce_enum(TaskAssignee, assignee, "assignee")))

    async def board(self) -> BoardSnapshot:
        return BoardSnapshot.from_tasks(await self.store.list())

    async def counts(self) -> TaskCounts:
        # Single read, so backlog + in_progress + review + done == total
        return tally(await self.store.list())

    def subscribe(self, callback: BoardCallback) -> Subscription:
        """Push a fresh ``BoardSnapshot`` to ``callback`` whenever a task changes."""

        async def on_change(event: ChangeEvent) -> None:
            snapshot = await self.board()
            logger.debug(f"[TASK] View refresh after {event.kind} of {event.record_id}")
            result = callback(snapshot)
            if inspect.isawaitable(result):
                await result

        return Subscription(self.store.db.subscribe(self.store.table, on_change))
