"""Unit tests for derived task views and live board subscriptions."""

from __future__ import annotations

import pytest

from mission_control import MissionControl
from mission_control.exceptions import ValidationError
from mission_control.models import Task, TaskStatus
from mission_control.tasks import BOARD_COLUMNS, BoardSnapshot, tally, view_order


def make_task(task_id: str, created_at: int, status: str = "backlog") -> Task:
    return Task(id=task_id, title=task_id, status=status, created_at=created_at, updated_at=created_at)


class TestViewOrder:
    def test_most_recent_first_ties_by_id(self) -> None:
        tasks = [make_task("b", 10), make_task("a", 10), make_task("c", 20)]

        assert [task.id for task in view_order(tasks)] == ["c", "a", "b"]

    def test_tally_sums_to_total(self) -> None:
        tasks = [make_task("a", 1), make_task("b", 2, "done"), make_task("c", 3, "done"), make_task("d", 4, "review")]

        counts = tally(tasks)

        assert counts.total == 4
        assert counts.backlog == 1
        assert counts.in_progress == 0
        assert counts.review == 1
        assert counts.done == 2

    def test_board_snapshot_has_every_column(self) -> None:
        snapshot = BoardSnapshot.from_tasks([])

        assert list(snapshot.columns) == list(BOARD_COLUMNS)
        assert all(tasks == [] for tasks in snapshot.columns.values())
        assert snapshot.counts.total == 0


class TestTaskViews:
    @pytest.mark.asyncio
    async def test_by_status_partitions_tasks(self, mc: MissionControl) -> None:
        backlog_id = await mc.tasks.create({"title": "a"})
        done_id = await mc.tasks.create({"title": "b", "status": "done"})
        await mc.tasks.create({"title": "c", "status": "review"})

        everything: set[str] = set()
        for status in BOARD_COLUMNS:
            ids = {task.id for task in await mc.views.by_status(status)}
            assert everything.isdisjoint(ids)
            everything |= ids

        assert everything == {task.id for task in await mc.tasks.list()}
        assert [task.id for task in await mc.views.by_status("backlog")] == [backlog_id]
        assert [task.id for task in await mc.views.by_status(TaskStatus.DONE)] == [done_id]

    @pytest.mark.asyncio
    async def test_by_status_rejects_unknown(self, mc: MissionControl) -> None:
        with pytest.raises(ValidationError):
            await mc.views.by_status("archived")

    @pytest.mark.asyncio
    async def test_by_assignee(self, mc: MissionControl) -> None:
        await mc.tasks.create({"title": "bot"})
        older = await mc.tasks.create({"title": "ryan 1", "assignee": "ryan"})
        newer = await mc.tasks.create({"title": "ryan 2", "assignee": "ryan"})

        assert [task.id for task in await mc.views.by_assignee("ryan")] == [newer, older]

    @pytest.mark.asyncio
    async def test_counts_match_board(self, mc: MissionControl) -> None:
        for status in ["backlog", "backlog", "in_progress", "done"]:
            await mc.tasks.create({"title": status, "status": status})

        counts = await mc.views.counts()
        board = await mc.views.board()

        assert counts == board.counts
        assert counts.total == counts.backlog + counts.in_progress + counts.review + counts.done == 4
        assert len(board.columns[TaskStatus.BACKLOG]) == 2

    @pytest.mark.asyncio
    async def test_status_change_moves_task_between_views(self, mc: MissionControl) -> None:
        task_id = await mc.tasks.create({"title": "move me"})

        await mc.tasks.set_status(task_id, "review")

        assert await mc.views.by_status("backlog") == []
        assert [task.id for task in await mc.views.by_status("review")] == [task_id]


class TestSubscriptions:
    @pytest.mark.asyncio
    async def test_subscriber_sees_every_committed_write(self, mc: MissionControl) -> None:
        snapshots: list[BoardSnapshot] = []
        subscription = mc.views.subscribe(snapshots.append)

        task_id = await mc.tasks.create({"title": "live"})
        await mc.tasks.set_status(task_id, "in_progress")
        await mc.tasks.remove(task_id)

        assert [snapshot.counts.total for snapshot in snapshots] == [1, 1, 0]
        assert [task.id for task in snapshots[1].columns[TaskStatus.IN_PROGRESS]] == [task_id]
        subscription.unsubscribe()

    @pytest.mark.asyncio
    async def test_async_callback_and_unsubscribe(self, mc: MissionControl) -> None:
        totals: list[int] = []

        async def on_board(snapshot: BoardSnapshot) -> None:
            totals.append(snapshot.counts.total)

        with mc.views.subscribe(on_board) as subscription:
            await mc.tasks.create({"title": "one"})
        await mc.tasks.create({"title": "two"})

        assert totals == [1]
        assert subscription.active is False

    @pytest.mark.asyncio
    async def test_other_tables_do_not_refresh_board(self, mc: MissionControl) -> None:
        snapshots: list[BoardSnapshot] = []
        mc.views.subscribe(snapshots.append)

        await mc.activity.log("cron_ran", "noise")

        assert snapshots == []
