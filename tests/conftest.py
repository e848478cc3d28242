"""
Test configuration and fixtures.
"""
import pytest


class FakeSearchClient:
    """Search client double that records calls and returns canned events."""

    def __init__(self, events=None):
        self.events = events if events is not None else []
        self.calls = []

    def search_events(self, params, fields):
        self.calls.append((dict(params), frozenset(fields)))
        return self.events


@pytest.fixture
def fake_client():
    return FakeSearchClient(events=[{"id": "e1", "name": "build"}])


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep EPR_* variables from the host out of the tests."""
    for name in ("EPR_URL", "EPR_TIMEOUT", "EPR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

