"""Process-wide Mission Control handle.

Construct one ``MissionControl`` at process start and pass it to whatever
needs the store. There is no ambient global client: tests build their own
handle over an ``InMemoryDocumentStore``.
"""

from __future__ import annotations

from mission_control.activity import ActivityLog
from mission_control.agents import AgentRegistry
from mission_control.backends import DocumentStore, create_document_store
from mission_control.cron import CronJobRegistry
from mission_control.memory import MemoryStore
from mission_control.settings import Settings, settings
from mission_control.tasks import TaskStore, TaskViews


class MissionControl:
    def __init__(self, db: DocumentStore) -> None:
        self.db = db
        self.tasks = TaskStore(db)
        self.views = TaskViews(self.tasks)
        self.activity = ActivityLog(db)
        self.agents = AgentRegistry(db)
        self.cron_jobs = CronJobRegistry(db)
        self.memories = MemoryStore(db)

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> MissionControl:
        return cls(create_document_store(config or settings))
