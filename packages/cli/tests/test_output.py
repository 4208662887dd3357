"""Tests for token resolution and log output."""

import logging
import subprocess

from reviewgate_cli.auth import resolve_github_token
from reviewgate_cli.output import WorkflowCommandHandler, configure_logging, escape_data


def _record(level, msg):
    return logging.LogRecord("reviewgate_core.gate", level, __file__, 1, msg, None, None)


class TestWorkflowCommandHandler:
    def test_formats_levels_as_commands(self):
        handler = WorkflowCommandHandler()
        assert handler.format(_record(logging.WARNING, "careful")) == "::warning::careful"
        assert handler.format(_record(logging.ERROR, "broken")) == "::error::broken"
        assert handler.format(_record(logging.DEBUG, "detail")) == "::debug::detail"
        assert handler.format(_record(logging.INFO, "plain")) == "plain"

    def test_escapes_multiline_messages(self):
        assert escape_data("50%\nnext") == "50%25%0Anext"


class TestConfigureLogging:
    def test_replaces_previous_handler(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACTIONS", "true")
        first = configure_logging()
        second = configure_logging()
        try:
            handlers = logging.getLogger("reviewgate_core").handlers
            assert second in handlers
            assert first not in handlers
            assert isinstance(second, WorkflowCommandHandler)
        finally:
            for name in ("reviewgate_core", "reviewgate_cli"):
                logging.getLogger(name).removeHandler(second)

    def test_uses_rich_outside_actions(self, monkeypatch):
        from rich.logging import RichHandler

        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
        handler = configure_logging(verbose=True)
        try:
            assert isinstance(handler, RichHandler)
            assert logging.getLogger("reviewgate_cli").level == logging.DEBUG
        finally:
            for name in ("reviewgate_core", "reviewgate_cli"):
                logging.getLogger(name).removeHandler(handler)


class TestResolveGithubToken:
    def test_input_token_first(self, monkeypatch):
        monkeypatch.setenv("INPUT_TOKEN", "input")
        monkeypatch.setenv("GITHUB_TOKEN", "env")
        assert resolve_github_token() == "input"

    def test_github_token_env(self, monkeypatch):
        monkeypatch.delenv("INPUT_TOKEN", raising=False)
        monkeypatch.setenv("GITHUB_TOKEN", "env")
        assert resolve_github_token() == "env"

    def test_gh_cli_fallback(self, monkeypatch, mocker):
        monkeypatch.delenv("INPUT_TOKEN", raising=False)
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        mocker.patch(
            "reviewgate_cli.auth.subprocess.run",
            return_value=subprocess.CompletedProcess(["gh"], 0, stdout="gho_abc\n", stderr=""),
        )
        assert resolve_github_token() == "gho_abc"

    def test_none_when_gh_missing(self, monkeypatch, mocker):
        monkeypatch.delenv("INPUT_TOKEN", raising=False)
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        mocker.patch("reviewgate_cli.auth.subprocess.run", side_effect=FileNotFoundError)
        assert resolve_github_token() is None
