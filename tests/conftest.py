import json

import pytest
import requests

from stats_generator.models import StatsConfig


class FakeResponse:

    def __init__(self, status_code=200, body="[]", reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self.text = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        try:
            return json.loads(self.text)
        except ValueError as exc:
            raise requests.exceptions.JSONDecodeError(str(exc), self.text, 0) from exc


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get and record every call made through it."""
    calls = []
    state = {"response": FakeResponse()}

    def _get(url, headers=None, **kwargs):
        calls.append({"url": url, "headers": headers or {}, "kwargs": kwargs})
        return state["response"]

    def respond(status_code=200, body="[]", reason="OK"):
        state["response"] = FakeResponse(status_code, body, reason)

    monkeypatch.setattr(requests, "get", _get)
    _get.calls = calls
    _get.respond = respond
    return _get


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        values = {
            "github_user": "octocat",
            "github_token": "",
            "theme_mode": "adaptive",
            "mock_data": False,
            "output_path": str(tmp_path / "stats.svg"),
        }
        values.update(overrides)
        return StatsConfig(**values)
    return _make
