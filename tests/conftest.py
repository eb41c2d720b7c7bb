"""Shared fixtures: isolated config files and a recording HTTP transport."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Iterator

import httpx
import pytest
import yaml

from slackstatus import app as app_module
from slackstatus import config as config_module
from slackstatus.client import SlackClient
from slackstatus.config import ConfigStore


TWO_WORKSPACES = {
    "workspace_credentials": {
        "acme": {"short_name": "acme", "token": "A"},
        "beta": {"short_name": "beta", "token": "B"},
    },
    "statuses": {
        "work": {
            "short_name": "work",
            "emoji": ":male-technologist:",
            "presence": "auto",
            "status_text": "Hard at work",
        },
        "lunch": {
            "short_name": "lunch",
            "emoji": ":sandwich:",
            "presence": "away",
            "status_text": "Out to lunch",
        },
    },
}


class Recorder:
    """Collects every request sent through an httpx.MockTransport."""

    def __init__(self, body: dict | str | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.body = {"ok": True} if body is None else body
        self.fail_after: int | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        if self.fail_after is not None and len(self.requests) >= self.fail_after:
            raise httpx.ConnectError("connection refused", request=request)
        self.requests.append(request)
        if isinstance(self.body, str):
            return httpx.Response(200, text=self.body)
        return httpx.Response(200, json=self.body)

    @property
    def calls(self) -> list[tuple[str, str, str, dict | None]]:
        """(method, path, bearer token, json body) per request."""

        rows = []
        for request in self.requests:
            token = request.headers["Authorization"].removeprefix("Bearer ")
            body = json.loads(request.content) if request.content else None
            rows.append((request.method, request.url.path, token, body))
        return rows


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and cwd at empty dirs and drop SLACKSTATUS_* variables."""

    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    for name in list(os.environ):
        if name.startswith("SLACKSTATUS_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("HOME", str(home))
    env_file = home / ".config" / "slackstatus" / "slackstatus.env"
    monkeypatch.setattr(config_module, "DEFAULT_ENV_FILE", env_file)
    monkeypatch.chdir(work)
    return home


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict], Path]:
    def _write(data: dict, name: str = "config.yml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store() -> ConfigStore:
    return ConfigStore(data=TWO_WORKSPACES)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(recorder: Recorder) -> Iterator[SlackClient]:
    slack = SlackClient(transport=httpx.MockTransport(recorder.handler))
    yield slack
    slack.close()


@pytest.fixture
def cli_recorder(recorder: Recorder, monkeypatch: pytest.MonkeyPatch) -> Recorder:
    """Make the CLI build its SlackClient on top of the recording transport."""

    def _client(timeout_seconds: float) -> SlackClient:
        return SlackClient(
            timeout_seconds=timeout_seconds,
            transport=httpx.MockTransport(recorder.handler),
        )

    monkeypatch.setattr(app_module, "SlackClient", _client)
    return recorder
