"""Mission Control: task board, agent roster, cron jobs, memory browser and activity feed."""

from mission_control.activity import ActivityLog
from mission_control.agents import AgentRegistry
from mission_control.backends import DocumentStore, InMemoryDocumentStore, create_document_store
from mission_control.client import MissionControl
from mission_control.cron import CronJobRegistry
from mission_control.exceptions import MissionControlError, NotFoundError, TransportError, ValidationError
from mission_control.memory import MemoryStore
from mission_control.settings import Settings, settings
from mission_control.tasks import DragReconciler, DropTarget, TaskStore, TaskViews

__version__ = "0.1.0"

__all__ = [
    "ActivityLog",
    "AgentRegistry",
    "CronJobRegistry",
    "DocumentStore",
    "DragReconciler",
    "DropTarget",
    "InMemoryDocumentStore",
    "MemoryStore",
    "MissionControl",
    "MissionControlError",
    "NotFoundError",
    "Settings",
    "TaskStore",
    "TaskViews",
    "TransportError",
    "ValidationError",
    "create_document_store",
    "settings",
]
