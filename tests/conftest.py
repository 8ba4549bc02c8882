import itertools
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from task_service.main import create_app
from task_service.providers import FixedClock
from task_service.service import TaskCreationService
from task_service.store import InMemoryTaskStore

NOW = datetime(2026, 10, 17, 12, 30, tzinfo=timezone.utc)


def counter_ids():
    counter = itertools.count(1)
    return lambda: f"task-{next(counter)}"


@pytest.fixture()
def clock():
    return FixedClock(NOW)


@pytest.fixture()
def store():
    return InMemoryTaskStore()


@pytest.fixture()
def service(store, clock):
    return TaskCreationService(store, clock=clock, id_generator=counter_ids())


@pytest.fixture()
def client(store, clock):
    app = create_app(store=store, clock=clock, id_generator=counter_ids())
    return TestClient(app)
