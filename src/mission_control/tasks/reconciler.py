"""Drag-and-drop reconciliation for the task board.

A drag gesture becomes at most one ``set_status`` call. There is no rank
field, so dropping a card between two others only changes its status;
intra-column order falls back to the view ordering on the next refresh.

The mutation is fire-and-forget from the gesture's point of view: the
predicted status shows immediately through an optimistic overlay, and if
the write fails the overlay entry is dropped so the task snaps back to
whatever the store says. No error is surfaced to the user.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum

from mission_control.exceptions import MissionControlError
from mission_control.models import Task, TaskStatus
from mission_control.tasks.lifecycle import BOARD_COLUMNS, can_transition
from mission_control.tasks.store import TaskStore
from mission_control.tasks.views import BoardSnapshot

logger = logging.getLogger(__name__)


class DropKind(StrEnum):
    COLUMN = "column"
    CARD = "card"


@dataclass(frozen=True)
class DropTarget:
    """Where a dragged card was released."""

    kind: DropKind
    status: TaskStatus
    task_id: str | None = None

    @classmethod
    def column(cls, status: TaskStatus) -> DropTarget:
        return cls(kind=DropKind.COLUMN, status=status)

    @classmethod
    def card(cls, task: Task, status: TaskStatus | None = None) -> DropTarget:
        return cls(kind=DropKind.CARD, status=status or task.status, task_id=task.id)


@dataclass(frozen=True)
class StatusChange:
    task_id: str
    from_status: TaskStatus
    to_status: TaskStatus


def resolve_drop_target(
    over_id: str | None,
    tasks: Iterable[Task],
    status_of: Callable[[Task], TaskStatus] | None = None,
) -> DropTarget | None:
    """Map the id under the pointer (a column status or a card id) to a drop target.

    A card target takes the column the card is shown in, which ``status_of``
    supplies when it differs from the stored status.
    """
    if not over_id:
        return None
    if over_id in {status.value for status in BOARD_COLUMNS}:
        return DropTarget.column(TaskStatus(over_id))
    for task in tasks:
        if task.id == over_id:
            return DropTarget.card(task, status_of(task) if status_of else None)
    return None


def plan_drop(task_id: str, origin: TaskStatus, target: DropTarget | None) -> StatusChange | None:
    """Decide the single status change a drop implies, or ``None`` for a no-op."""
    if target is None:
        return None
    if target.kind is DropKind.CARD and target.task_id == task_id:
        return None
    if target.status == origin or not can_transition(origin, target.status):
        return None
    return StatusChange(task_id=task_id, from_status=origin, to_status=target.status)


class DragReconciler:
    """Client-side drag state plus the optimistic overlay."""

    def __init__(self, store: TaskStore) -> None:
        self.store = store
        self.active: Task | None = None
        self._optimistic: dict[str, TaskStatus] = {}
        # Status writes still awaiting a response, per task
        self._pending: dict[str, int] = {}

    def drag_start(self, task: Task) -> None:
        self.active = task

    def drag_cancel(self) -> None:
        self.active = None

    async def drag_end(self, target: DropTarget | None) -> StatusChange | None:
        """Finish the current drag, issuing at most one ``set_status``.

        A later drag started before this write resolves is not cancelled;
        both writes land and the later one wins.
        """
        task, self.active = self.active, None
        if task is None:
            return None

        change = plan_drop(task.id, self.display_status(task), target)
        if change is None:
            logger.debug(f"[DRAG] No-op drop for {task.id}")
            return None

        self._optimistic[task.id] = change.to_status
        self._pending[task.id] = self._pending.get(task.id, 0) + 1
        try:
            await self.store.set_status(task.id, change.to_status)
        except MissionControlError as e:
            logger.warning(f"[DRAG] set_status({task.id}, {change.to_status}) failed: {e}")
            if self._optimistic.get(task.id) == change.to_status:
                del self._optimistic[task.id]
        finally:
            self._pending[task.id] -= 1
            if not self._pending[task.id]:
                del self._pending[task.id]
        return change

    def display_status(self, task: Task) -> TaskStatus:
        return self._optimistic.get(task.id, task.status)

    def target_for(self, over_id: str | None, tasks: Iterable[Task]) -> DropTarget | None:
        """Resolve a drop against the board as displayed, predictions included."""
        return resolve_drop_target(over_id, tasks, self.display_status)

    def refresh(self, snapshot: BoardSnapshot) -> None:
        """Accept a store refresh as authoritative.

        A prediction survives only while its write is still in flight and the
        store has not yet caught up with it. Once the write has resolved, the
        store wins whatever status it reports.
        """
        settled = {task.id: task.status for tasks in snapshot.columns.values() for task in tasks}
        for task_id in list(self._optimistic):
            caught_up = settled.get(task_id) == self._optimistic[task_id]
            if caught_up or task_id not in settled or task_id not in self._pending:
                del self._optimistic[task_id]

    def columns(self, tasks: Iterable[Task]) -> dict[TaskStatus, list[Task]]:
        """Group ``tasks`` (already in view order) by their displayed status."""
        grouped: dict[TaskStatus, list[Task]] = {status: [] for status in BOARD_COLUMNS}
        for task in tasks:
            grouped[self.display_status(task)].append(task)
        return grouped
