"""
Shared pytest fixtures.

This module provides fixtures for:
- An in-memory document store with a controllable clock
- A MissionControl handle over that store
- A FastAPI TestClient bound to the handle
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from api.server import create_app
from mission_control import InMemoryDocumentStore, MissionControl
from mission_control.backends import MonotonicClock


class FakeTime:
    """Settable time source in seconds, for deterministic timestamps."""

    def __init__(self, start: float = 1_767_225_600.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def db(fake_time: FakeTime) -> InMemoryDocumentStore:
    return InMemoryDocumentStore(clock=MonotonicClock(fake_time))


@pytest.fixture
def mc(db: InMemoryDocumentStore) -> MissionControl:
    return MissionControl(db)


@pytest.fixture
def client(mc: MissionControl) -> Generator[TestClient, None, None]:
    """TestClient with the app lifespan running, so the live board subscription is active."""
    with TestClient(create_app(mc)) as test_client:
        yield test_client
