"""Tests for the event search command."""

import json

import pytest
from typer.testing import CliRunner

from epr.cli.main import app
from epr.errors import ServiceError, TransportError
from epr.schema import EVENT_SCHEMA


runner = CliRunner()


class RecordingRegistryClient:
    """Stands in for RegistryClient and records how it was used."""

    instances = []
    events = [{"id": "e1", "name": "build"}]
    error = None

    def __init__(self, base_url, timeout=30.0):
        self.base_url = base_url
        self.timeout = timeout
        self.calls = []
        RecordingRegistryClient.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    def search_events(self, params, fields):
        self.calls.append((dict(params), frozenset(fields)))
        if self.error is not None:
            raise self.error
        return self.events


@pytest.fixture
def registry(monkeypatch):
    RecordingRegistryClient.instances = []
    RecordingRegistryClient.events = [{"id": "e1", "name": "build"}]
    RecordingRegistryClient.error = None
    monkeypatch.setattr("epr.search.RegistryClient", RecordingRegistryClient)
    return RecordingRegistryClient


class TestSearchCommand:
    """Tests for epr event search."""

    def test_compact_search(self, registry):
        result = runner.invoke(
            app, ["event", "search", "--id=e1", "--fields=id name", "--no-indent"]
        )

        assert result.exit_code == 0
        assert result.stdout == '[{"id":"e1","name":"build"}]\n'
        client = registry.instances[0]
        assert client.base_url == "http://localhost:8042"
        assert client.calls == [({"id": "e1"}, frozenset({"id", "name"}))]

    def test_indented_search(self, registry):
        result = runner.invoke(app, ["event", "search", "--fields", "id name"])

        assert result.exit_code == 0
        assert result.stdout == '[\n  {\n    "id": "e1",\n    "name": "build"\n  }\n]\n'
        assert registry.instances[0].calls[0][0] == {}

    def test_all_fields(self, registry):
        result = runner.invoke(app, ["event", "search", "--fields=all"])

        assert result.exit_code == 0
        assert registry.instances[0].calls[0][1] == EVENT_SCHEMA.names()

    def test_jsonpath(self, registry):
        registry.events = [{"id": "e1", "name": "build"}, {"id": "e2", "name": "test"}]
        result = runner.invoke(
            app, ["event", "search", "--jsonpath", "$[*].name", "--no-indent"]
        )

        assert result.exit_code == 0
        assert result.stdout == '["build","test"]\n'

    def test_jsonpath_without_match(self, registry):
        result = runner.invoke(app, ["event", "search", "--jsonpath", "$[*].nothing"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == []

    def test_url_flag(self, registry):
        result = runner.invoke(app, ["event", "search", "--url", "http://epr:9999"])

        assert result.exit_code == 0
        assert registry.instances[0].base_url == "http://epr:9999"

    def test_url_and_timeout_from_environment(self, registry):
        result = runner.invoke(
            app,
            ["event", "search"],
            env={"EPR_URL": "http://from-env:8042", "EPR_TIMEOUT": "3"},
        )

        assert result.exit_code == 0
        assert registry.instances[0].base_url == "http://from-env:8042"
        assert registry.instances[0].timeout == 3.0

    def test_url_flag_overrides_environment(self, registry):
        result = runner.invoke(
            app,
            ["event", "search", "--url", "http://flag:1"],
            env={"EPR_URL": "http://from-env:8042"},
        )

        assert result.exit_code == 0
        assert registry.instances[0].base_url == "http://flag:1"


class TestDryRun:
    """Tests for epr event search --dry-run."""

    def test_dry_run_previews_without_network(self, registry):
        result = runner.invoke(
            app, ["event", "search", "--id=abc", "--fields=id name", "--dry-run"]
        )

        assert result.exit_code == 0
        assert "abc" in result.stdout
        assert "id name" in result.stdout
        assert registry.instances == []

    def test_dry_run_still_validates_fields(self, registry):
        result = runner.invoke(app, ["event", "search", "--fields=bogus", "--dry-run"])

        assert result.exit_code == 1
        assert "bogus" in result.stderr
        assert result.stdout == ""


class TestErrors:
    """Failures print to stderr and exit non-zero."""

    def test_unknown_field(self, registry):
        result = runner.invoke(app, ["event", "search", "--fields", "id bogus"])

        assert result.exit_code == 1
        assert "Error:" in result.stderr
        assert "bogus" in result.stderr
        assert registry.instances == []

    def test_invalid_jsonpath(self, registry):
        result = runner.invoke(app, ["event", "search", "--jsonpath", "$["])

        assert result.exit_code == 1
        assert "jsonpath" in result.stderr
        assert registry.instances == []

    def test_transport_error(self, registry):
        registry.error = TransportError("could not reach http://localhost:8042")
        result = runner.invoke(app, ["event", "search"])

        assert result.exit_code == 1
        assert "could not reach" in result.stderr
        assert result.stdout == ""

    def test_service_error(self, registry):
        registry.error = ServiceError("registry returned HTTP 500: boom", status_code=500)
        result = runner.invoke(app, ["event", "search"])

        assert result.exit_code == 1
        assert "HTTP 500" in result.stderr


class TestInvalidInput:
    """Bad URLs and settings are reported, not raised."""

    def test_malformed_url(self):
        result = runner.invoke(app, ["event", "search", "--url", "http://exa mple:99x"])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Error:" in result.stderr
        assert "could not reach" in result.stderr

    def test_invalid_timeout_setting(self, registry):
        result = runner.invoke(
            app, ["event", "search", "--dry-run"], env={"EPR_TIMEOUT": "abc"}
        )

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: invalid configuration" in result.stderr
        assert registry.instances == []

    def test_invalid_log_level_setting(self, registry):
        result = runner.invoke(
            app, ["event", "search", "--dry-run"], env={"EPR_LOG_LEVEL": "loud"}
        )

        assert result.exit_code == 1
        assert "Error: invalid configuration" in result.stderr
