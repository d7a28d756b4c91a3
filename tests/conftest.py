"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from main import app
from shorturl_app.dependencies import get_registry
from shorturl_app.log_sink import InMemoryLogSink
from shorturl_app.services.registry import Registry
from shorturl_app.services.short_code_strategies import HexShortCodeStrategy


class FakeClock:
    """Controllable UTC clock: tests move time forward explicitly"""

    def __init__(self, start: datetime = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(scope="function")
def clock():
    return FakeClock()


@pytest.fixture(scope="function")
def registry(clock):
    """
    Fresh registry for each test.
    This ensures tests are isolated and don't affect each other.
    """
    return Registry(
        short_code_strategy=HexShortCodeStrategy(num_bytes=3, max_attempts=10),
        default_validity_minutes=30,
        clock=clock
    )


@pytest.fixture(scope="function")
def log_sink():
    return InMemoryLogSink()


@pytest.fixture(scope="function")
def client(registry, log_sink):
    """
    Create a test client with the registry dependency overridden
    and log events captured in memory.
    """
    app.dependency_overrides[get_registry] = lambda: registry
    app.state.log_sink = log_sink

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    app.state.log_sink = None
