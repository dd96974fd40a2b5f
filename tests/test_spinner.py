"""Tests for spinner labels and opt-out detection."""

from __future__ import annotations

import pytest

from bobcli.spinner import DEFAULT_TEXT, spinner, spinner_disabled, spinner_text


class TestSpinnerText:
    @pytest.mark.parametrize(
        ("method", "path", "expected"),
        [
            ("POST", "/people/search", "Fetching people"),
            ("post", "/people/123", "Fetching person"),
            ("GET", "/timeoff/whosout", "Fetching who's out"),
            ("GET", "/timeoff/outtoday", "Fetching out today"),
            ("GET", "/timeoff/employees/1/balance", DEFAULT_TEXT),
            ("GET", "/people/search", DEFAULT_TEXT),
        ],
    )
    def test_labels(self, method: str, path: str, expected: str) -> None:
        assert spinner_text(method, path) == expected


class TestSpinnerDisabled:
    def test_enabled_by_default(self) -> None:
        assert spinner_disabled(environ={}) is False

    def test_env_opt_out(self) -> None:
        assert spinner_disabled(environ={"BOB_SPINNER": "false"}) is True

    def test_ci(self) -> None:
        assert spinner_disabled(environ={"CI": "true"}) is True

    def test_other_env_values(self) -> None:
        assert spinner_disabled(environ={"BOB_SPINNER": "true", "CI": ""}) is False

    def test_ignores_process_arguments(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["bob", "people", "--", "--json"])
        assert spinner_disabled(environ={}) is False


class TestSpinnerContext:
    def test_body_runs_when_disabled(self, plain_output, capsys) -> None:
        ran = []
        with spinner("Loading", enabled=False):
            ran.append(True)
        assert ran == [True]
        assert capsys.readouterr().err == ""

    def test_silent_when_stderr_not_a_terminal(self, plain_output, capsys) -> None:
        with spinner("Loading"):
            pass
        assert capsys.readouterr().err == ""
