"""
Pytest fixtures for the tracker relay tests.

Provides:
- A fresh DeviceStateStore per test, driven by a fake clock
- A TestClient whose get_store dependency is overridden with that store
"""

import pytest
from fastapi.testclient import TestClient

from gateway.dependencies import get_store
from gateway.main import app
from gateway.services.store import DeviceStateStore
from tests.fixtures import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> DeviceStateStore:
    """Isolated store; no seeded device."""
    return DeviceStateStore(clock=clock)


@pytest.fixture
def client(store: DeviceStateStore):
    """Test client bound to the per-test store."""
    app.dependency_overrides[get_store] = lambda: store

    yield TestClient(app)

    # Clean up override so lifespan-driven tests see the real store
    app.dependency_overrides.clear()
