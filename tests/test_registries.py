"""Unit tests for the activity log, agent roster, cron jobs, memory store and seeding."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from mission_control import MissionControl, settings
from mission_control.agents import DEFAULT_ROSTER
from mission_control.cron import DEFAULT_JOBS
from mission_control.exceptions import NotFoundError, TransportError, ValidationError
from mission_control.memory import default_title, infer_type
from mission_control.models import AgentStatus, CronStatus, MemoryType
from mission_control.seed import SEED_ACTIVITIES, SEED_TASKS, seed_all


class TestActivityLog:
    @pytest.mark.asyncio
    async def test_newest_first_with_default_limit(self, mc: MissionControl) -> None:
        for i in range(25):
            await mc.activity.log("cron_ran", f"run {i}")

        entries = await mc.activity.list()

        assert len(entries) == 20
        assert entries[0].description == "run 24"
        assert all(a.timestamp > b.timestamp for a, b in zip(entries, entries[1:]))

    @pytest.mark.asyncio
    async def test_default_limit_comes_from_settings(self, mc: MissionControl) -> None:
        for i in range(5):
            await mc.activity.log("cron_ran", f"run {i}")

        with patch.object(settings, "activity_default_limit", 3):
            entries = await mc.activity.list()

        assert [entry.description for entry in entries] == ["run 4", "run 3", "run 2"]

    @pytest.mark.asyncio
    async def test_explicit_limit_and_metadata(self, mc: MissionControl) -> None:
        await mc.activity.log("task_created", "Task created: x", {"taskId": "t1"})
        await mc.activity.log("task_deleted", "Task deleted: x")

        entries = await mc.activity.list(1)

        assert [entry.type for entry in entries] == ["task_deleted"]
        assert (await mc.activity.list())[1].metadata == {"taskId": "t1"}

    @pytest.mark.asyncio
    async def test_empty_description_rejected(self, mc: MissionControl) -> None:
        with pytest.raises(ValidationError):
            await mc.activity.log("task_created", "")

    @pytest.mark.asyncio
    async def test_best_effort_swallows_store_failure(self, mc: MissionControl) -> None:
        with patch.object(mc.db, "insert", new=AsyncMock(side_effect=TransportError("down"))):
            assert await mc.activity.log_best_effort("task_created", "x") is None

    @pytest.mark.asyncio
    async def test_failed_log_leaves_mutation_in_place(self, mc: MissionControl) -> None:
        task_id = await mc.tasks.create({"title": "kept"})

        with patch.object(mc.db, "insert", new=AsyncMock(side_effect=TransportError("down"))):
            await mc.activity.log_best_effort("task_created", "Task created: kept")

        assert (await mc.tasks.get(task_id)).title == "kept"
        assert await mc.activity.list() == []


class TestAgentRegistry:
    @pytest.mark.asyncio
    async def test_upsert_by_name_keeps_one_record(self, mc: MissionControl, fake_time) -> None:
        first_id = await mc.agents.upsert({"name": "Coder", "role": "Engineer"})
        first = await mc.agents.get(first_id)
        fake_time.advance(10)

        second_id = await mc.agents.upsert(
            {"name": "Coder", "role": "Engineer", "status": "working", "currentTask": "Fix bug", "totalRuns": 3}
        )

        agents = await mc.agents.list()
        assert first_id == second_id
        assert len(agents) == 1
        assert agents[0].status == AgentStatus.WORKING
        assert agents[0].current_task == "Fix bug"
        assert agents[0].total_runs == 3
        assert agents[0].last_active > first.last_active

    @pytest.mark.asyncio
    async def test_invalid_status_rejected(self, mc: MissionControl) -> None:
        with pytest.raises(ValidationError):
            await mc.agents.upsert({"name": "Coder", "role": "Engineer", "status": "sleeping"})

    @pytest.mark.asyncio
    async def test_update_status(self, mc: MissionControl) -> None:
        agent_id = await mc.agents.upsert({"name": "Monitor", "role": "Watch"})

        await mc.agents.update_status(agent_id, "error", "Alert storm")

        agent = await mc.agents.get(agent_id)
        assert agent.status == AgentStatus.ERROR
        assert agent.current_task == "Alert storm"

    @pytest.mark.asyncio
    async def test_update_status_unknown_agent(self, mc: MissionControl) -> None:
        with pytest.raises(NotFoundError):
            await mc.agents.update_status("missing", "idle")

    @pytest.mark.asyncio
    async def test_seed_only_when_empty(self, mc: MissionControl) -> None:
        assert await mc.agents.seed() == len(DEFAULT_ROSTER)
        assert await mc.agents.seed() == 0

        agents = await mc.agents.list()
        assert len(agents) == len(DEFAULT_ROSTER)
        assert all(0 <= agent.total_runs < 50 for agent in agents)


class TestCronJobRegistry:
    @pytest.mark.asyncio
    async def test_upsert_by_name(self, mc: MissionControl) -> None:
        first_id = await mc.cron_jobs.upsert({"name": "Gmail Check", "schedule": "*/15 * * * *"})
        second_id = await mc.cron_jobs.upsert({"name": "Gmail Check", "schedule": "*/5 * * * *", "lastResult": "ok"})

        jobs = await mc.cron_jobs.list()
        assert first_id == second_id
        assert len(jobs) == 1
        assert jobs[0].schedule == "*/5 * * * *"
        assert jobs[0].last_result == "ok"

    @pytest.mark.asyncio
    async def test_toggle_status_flips(self, mc: MissionControl) -> None:
        job_id = await mc.cron_jobs.upsert({"name": "Daily Summary", "schedule": "0 20 * * *"})

        assert await mc.cron_jobs.toggle_status(job_id) == CronStatus.DISABLED
        assert await mc.cron_jobs.toggle_status(job_id) == CronStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_toggle_unknown_job(self, mc: MissionControl) -> None:
        with pytest.raises(NotFoundError):
            await mc.cron_jobs.toggle_status("missing")

    @pytest.mark.asyncio
    async def test_seed_only_when_empty(self, mc: MissionControl) -> None:
        assert await mc.cron_jobs.seed() == len(DEFAULT_JOBS)
        assert await mc.cron_jobs.seed() == 0

        jobs = await mc.cron_jobs.list()
        assert all(job.last_run < job.next_run for job in jobs)
        assert all(job.status == CronStatus.ACTIVE for job in jobs)


class TestMemoryStore:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("MEMORY.md", MemoryType.CORE),
            ("workspace/SOUL.md", MemoryType.CORE),
            ("memory/2026-02-01.md", MemoryType.DAILY),
            ("memory/lessons/navigation.md", MemoryType.LESSON),
            ("memory/decisions/pricing.md", MemoryType.DECISION),
            ("life/areas/companies/acme.md", MemoryType.ENTITY),
            ("notes/random.md", MemoryType.CORE),
        ],
    )
    def test_infer_type(self, path: str, expected: MemoryType) -> None:
        assert infer_type(path) == expected

    def test_default_title(self) -> None:
        assert default_title("memory/lessons/navigation.md") == "navigation"
        assert default_title("MEMORY.md") == "MEMORY"

    @pytest.mark.asyncio
    async def test_upsert_by_path_derives_type_and_title(self, mc: MissionControl) -> None:
        first_id = await mc.memories.upsert({"path": "memory/2026-02-01.md", "content": "v1"})
        second_id = await mc.memories.upsert({"path": "memory/2026-02-01.md", "content": "v2"})

        memory = await mc.memories.get("memory/2026-02-01.md")
        assert first_id == second_id
        assert memory.content == "v2"
        assert memory.type == MemoryType.DAILY
        assert memory.title == "2026-02-01"

    @pytest.mark.asyncio
    async def test_explicit_type_wins(self, mc: MissionControl) -> None:
        await mc.memories.upsert({"path": "notes/a.md", "content": "x", "type": "decision", "title": "A"})

        memory = await mc.memories.get("notes/a.md")
        assert memory.type == MemoryType.DECISION
        assert memory.title == "A"

    @pytest.mark.asyncio
    async def test_list_by_type_and_search(self, mc: MissionControl) -> None:
        await mc.memories.upsert({"path": "MEMORY.md", "content": "Netlify Pro plan"})
        await mc.memories.upsert({"path": "memory/lessons/deploys.md", "content": "Always check env vars"})

        assert [m.path for m in await mc.memories.list("lesson")] == ["memory/lessons/deploys.md"]
        assert [m.path for m in await mc.memories.search("NETLIFY")] == ["MEMORY.md"]
        assert [m.path for m in await mc.memories.search("deploys")] == ["memory/lessons/deploys.md"]
        assert await mc.memories.search("nothing here") == []

    @pytest.mark.asyncio
    async def test_unknown_type_lists_nothing(self, mc: MissionControl) -> None:
        await mc.memories.upsert({"path": "MEMORY.md", "content": "x"})

        assert await mc.memories.list("bogus") == []
        assert [m.path for m in await mc.memories.list(MemoryType.CORE)] == ["MEMORY.md"]
        assert len(await mc.memories.list()) == 1

    @pytest.mark.asyncio
    async def test_remove(self, mc: MissionControl) -> None:
        memory_id = await mc.memories.upsert({"path": "MEMORY.md", "content": "x"})

        await mc.memories.remove(memory_id)

        assert await mc.memories.get("MEMORY.md") is None


class TestSeed:
    @pytest.mark.asyncio
    async def test_seed_all_is_idempotent(self, mc: MissionControl) -> None:
        first = await seed_all(mc)
        second = await seed_all(mc)

        assert first == {
            "tasks": len(SEED_TASKS),
            "activities": len(SEED_ACTIVITIES),
            "agents": len(DEFAULT_ROSTER),
            "cron_jobs": len(DEFAULT_JOBS),
        }
        assert set(second.values()) == {0}

    @pytest.mark.asyncio
    async def test_seeded_tasks_are_consistent(self, mc: MissionControl) -> None:
        await seed_all(mc)

        tasks = await mc.tasks.list()
        counts = await mc.views.counts()
        assert counts.total == len(SEED_TASKS)
        assert all(task.updated_at >= task.created_at for task in tasks)
