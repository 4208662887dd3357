"""Logging output for the CLI.

Inside GitHub Actions log records become workflow commands so warnings and
errors show up as annotations on the run. Elsewhere they go through rich.
"""

from __future__ import annotations

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMES = ("reviewgate_core", "reviewgate_cli")


def in_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandHandler(logging.StreamHandler):
    """Writes records as ``::warning::``-style workflow commands.

    INFO records are written as plain lines since Actions has no info command.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            command = "error"
        elif record.levelno >= logging.WARNING:
            command = "warning"
        elif record.levelno < logging.INFO:
            command = "debug"
        else:
            return message
        return f"::{command}::{escape_data(message)}"


def configure_logging(verbose: bool = False) -> logging.Handler:
    """Attach a single output handler to the reviewgate loggers and return it."""
    if in_github_actions():
        handler: logging.Handler = WorkflowCommandHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        # ::debug:: lines are only displayed when the run has debug logging on.
        level = logging.DEBUG
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        level = logging.DEBUG if verbose else logging.INFO

    handler._reviewgate = True  # type: ignore[attr-defined]
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for existing in [h for h in logger.handlers if getattr(h, "_reviewgate", False)]:
            logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(level)
    return handler
