"""Shared test fixtures for bobcli.

Provides isolated config directories, output-state reset, a fake HiBob API
backed by :class:`httpx.MockTransport`, and a Typer CLI runner. These
fixtures are discovered by pytest and available to every test module.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest

from bobcli.auth import CredentialResolver
from bobcli.client import HiBobClient
from bobcli.output import OutputFormat, OutputManager, reset_output, set_output


# --- global state ---


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Drop the installed OutputManager so no test sees another test's streams."""
    yield
    reset_output()


# --- filesystem and environment ---


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration and home to a temporary directory.

    Points XDG_CONFIG_HOME, XDG_DATA_HOME, and HOME into tmp_path, clears
    the HiBob and spinner environment variables, and changes the working
    directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for var in ["HIBOB_SERVICE_ID", "HIBOB_API_TOKEN", "BOB_SPINNER", "CI", "NO_COLOR"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# --- output ---


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a colourless PLAIN-format OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


# --- HiBob API ---


class FakeApi:
    """Canned responses keyed by ``(method, path)`` with request recording.

    Paths are given relative to the API root (``/people/search``).
    Unregistered routes answer 404 with a JSON message.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[], httpx.Response]] = {}

    def add(
        self,
        method: str,
        path: str,
        json_data: Any = None,
        status_code: int = 200,
        text: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        def _build() -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text, headers=headers)
            if json_data is None:
                return httpx.Response(status_code, headers=headers)
            return httpx.Response(status_code, json=json_data, headers=headers)

        self._routes[(method.upper(), "/v1" + path)] = _build

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key in self._routes:
            return self._routes[key]()
        return httpx.Response(404, json={"message": f"no route for {key}"})

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json_body(self) -> Any:
        return json.loads(self.last_request.content or b"null")

    def client(self, show_spinner: bool = False) -> HiBobClient:
        resolver = CredentialResolver(
            environ={"HIBOB_SERVICE_ID": "svc", "HIBOB_API_TOKEN": "tok"},
            config_reader=lambda: None,
        )
        return HiBobClient(
            resolver=resolver,
            show_spinner=show_spinner,
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def fake_api(monkeypatch: pytest.MonkeyPatch) -> FakeApi:
    """A :class:`FakeApi` wired in as the client every command opens."""
    api = FakeApi()
    monkeypatch.setattr(
        "bobcli.client.open_client",
        lambda show_spinner=True: api.client(show_spinner=show_spinner),
    )
    return api


# --- CLI ---


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
