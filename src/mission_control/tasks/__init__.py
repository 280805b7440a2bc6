"""Task board: store, status lifecycle, query views and drag reconciliation."""

from mission_control.tasks.lifecycle import (
    BOARD_COLUMNS,
    STATUS_LABELS,
    can_transition,
    coerce_status,
    transition_activity,
)
from mission_control.tasks.reconciler import (
    DragReconciler,
    DropKind,
    DropTarget,
    StatusChange,
    plan_drop,
    resolve_drop_target,
)
from mission_control.tasks.store import TaskStore
from mission_control.tasks.views import BoardSnapshot, Subscription, TaskViews, tally, view_order

__all__ = [
    "BOARD_COLUMNS",
    "BoardSnapshot",
    "STATUS_LABELS",
    "DragReconciler",
    "DropKind",
    "DropTarget",
    "StatusChange",
    "Subscription",
    "TaskStore",
    "TaskViews",
    "can_transition",
    "coerce_status",
    "plan_drop",
    "resolve_drop_target",
    "tally",
    "transition_activity",
    "view_order",
]
