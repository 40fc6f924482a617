import json

import pytest
from typer.testing import CliRunner

from ipmap.client import cli
from ipmap.client.cli import app
from ipmap.client.session import ClientSession
from ipmap.client.storage import JsonFileStorage


runner = CliRunner()


@pytest.fixture
def state_file(tmp_path):
    return tmp_path / "state.json"


@pytest.fixture(autouse=True)
def offline_session(monkeypatch, auth_client, geo_client):
    """Route the CLI's clients to the in-process fakes."""

    def build_session(settings, state_path=None):
        session = ClientSession(
            storage=JsonFileStorage(state_path),
            auth_client=auth_client,
            geo_client=geo_client,
            notice_seconds=settings.NOTICE_DISMISS_SECONDS,
        )
        return session.hydrate()

    monkeypatch.setattr(cli, "build_session", build_session)


def _invoke(state_file, *args):
    return runner.invoke(app, ["--state-file", str(state_file), *args])


def _login(state_file):
    result = _invoke(state_file, "login", "-e", "test@email.com", "-p", "password123")
    assert result.exit_code == 0, result.output
    return result


def test_login_stores_session(state_file):
    result = _login(state_file)

    assert "Logged in as Juan Cruz <test@email.com>" in result.output
    stored = json.loads(state_file.read_text())
    assert json.loads(stored["user"])["user"]["name"] == "Juan Cruz"


def test_login_failure(state_file):
    result = _invoke(state_file, "login", "-e", "test@email.com", "-p", "wrong")

    assert result.exit_code == 1
    assert "Invalid email or password" in result.output
    assert not state_file.exists()


def test_commands_require_login(state_file):
    result = _invoke(state_file, "lookup", "8.8.8.8")

    assert result.exit_code == 1
    assert "Not logged in" in result.output


def test_lookup_and_history(state_file):
    _login(state_file)

    first = _invoke(state_file, "lookup", "8.8.8.8")
    second = _invoke(state_file, "lookup", "8.8.8.8")
    listing = _invoke(state_file, "history")

    assert first.exit_code == 0, first.output
    assert "Mountain View" in first.output
    assert second.exit_code == 0
    assert listing.output.strip().splitlines() == ["1. 8.8.8.8"]


def test_invalid_address(state_file):
    _login(state_file)

    result = _invoke(state_file, "lookup", "8.8.8")

    assert result.exit_code == 1
    assert "Invalid IP address" in result.output
    assert "history" not in json.loads(state_file.read_text())


def test_provider_rejection(state_file):
    _login(state_file)

    result = _invoke(state_file, "lookup", "999.999.999.999")

    assert result.exit_code == 1
    assert "Error fetching IP info" in result.output


def test_where(state_file):
    _login(state_file)

    result = _invoke(state_file, "where")

    assert result.exit_code == 0
    assert "203.0.113.7" in result.output


def test_show_does_not_change_history(state_file):
    _login(state_file)
    _invoke(state_file, "lookup", "8.8.8.8")

    result = _invoke(state_file, "show", "1.1.1.1")

    assert result.exit_code == 0
    assert "Brisbane" in result.output
    assert json.loads(json.loads(state_file.read_text())["history"]) == ["8.8.8.8"]


def test_delete(state_file):
    _login(state_file)
    _invoke(state_file, "lookup", "8.8.8.8")
    _invoke(state_file, "lookup", "1.1.1.1")

    result = _invoke(state_file, "delete", "8.8.8.8", "4.4.4.4")

    assert result.exit_code == 0
    assert "Not in history: 4.4.4.4" in result.output
    assert "Deleted 1 entry; 1 left." in result.output
    assert _invoke(state_file, "history").output.strip() == "1. 1.1.1.1"


def test_delete_nothing(state_file):
    _login(state_file)

    result = _invoke(state_file, "delete", "4.4.4.4")

    assert "Nothing to delete." in result.output


def test_logout_keeps_history(state_file):
    _login(state_file)
    _invoke(state_file, "lookup", "8.8.8.8")

    result = _invoke(state_file, "logout")
    whoami = _invoke(state_file, "whoami")

    assert result.exit_code == 0
    assert whoami.exit_code == 1
    stored = json.loads(state_file.read_text())
    assert "user" not in stored
    assert json.loads(stored["history"]) == ["8.8.8.8"]


def test_lookup_prints_summary_line(state_file):
    _login(state_file)

    result = _invoke(state_file, "lookup", "8.8.8.8")

    lines = result.output.splitlines()
    assert "Mountain View, California, US (IP: 8.8.8.8)" in lines
    assert "Map center: 37.4056, -122.0775" in lines
