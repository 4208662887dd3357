"""check command — pass or fail a pull request on its approval count."""

from __future__ import annotations

import logging

import click
from rich.console import Console

from reviewgate_cli.commands.common import gate_settings, pull_request_options, select_pull_request, snapshot_fetcher
from reviewgate_core.errors import GateError
from reviewgate_core.gate import run_gate

console = Console()
logger = logging.getLogger(__name__)


@click.command("check")
@pull_request_options
@click.pass_context
def check_cmd(
    ctx,
    repo: str | None,
    pr_number: int | None,
    label_prefix: str | None,
    default_required: int | None,
):
    """Fail unless enough distinct reviewers currently approve the pull request.

    The number of approvals required comes from labels named
    <label-prefix><count> (the largest wins), or the configured default when
    no such label is applied.

    \b
    Exit status:
      0  enough approvals
      1  too few approvals, changes requested, or invalid configuration
    """
    try:
        settings = gate_settings(ctx, label_prefix, default_required)
        ref = select_pull_request(repo, pr_number)
        result = run_gate(ref, settings, snapshot_fetcher(ctx))
    except GateError as e:
        logger.error(str(e))
        ctx.exit(1)

    if not result.passed:
        logger.error(result.message)
        ctx.exit(1)

    console.print(f"[green]{result.message}[/green]")
