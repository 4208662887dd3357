"""explain command — show how the gate sees a pull request."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from reviewgate_cli.commands.common import gate_settings, pull_request_options, select_pull_request, snapshot_fetcher
from reviewgate_core.approvals import count_active_approvals, effective_states
from reviewgate_core.errors import GateError
from reviewgate_core.gh.pull_request import LABEL_WINDOW, REVIEW_WINDOW
from reviewgate_core.models import ReviewState
from reviewgate_core.threshold import matching_labels, parse_suffix, resolve_threshold

console = Console()
logger = logging.getLogger(__name__)

_STATE_STYLE = {
    ReviewState.APPROVED: "green",
    ReviewState.CHANGES_REQUESTED: "red",
    ReviewState.DISMISSED: "yellow",
}


@click.command("explain")
@pull_request_options
@click.pass_context
def explain_cmd(
    ctx,
    repo: str | None,
    pr_number: int | None,
    label_prefix: str | None,
    default_required: int | None,
):
    """Show each reviewer's effective state and the resolved threshold.

    Only the last 20 reviews and the first 20 labels are fetched, the same
    window the check command sees. Never fails because of missing approvals.
    """
    try:
        settings = gate_settings(ctx, label_prefix, default_required)
        ref = select_pull_request(repo, pr_number)
        snapshot = snapshot_fetcher(ctx)(ref)
    except GateError as e:
        logger.error(str(e))
        ctx.exit(1)

    states = effective_states(snapshot.reviews)

    reviewers = Table(title=f"Reviewers — {ref}", show_header=True, header_style="bold cyan")
    reviewers.add_column("Reviewer", style="bold")
    reviewers.add_column("Effective state")
    reviewers.add_column("Reviews", justify="right")
    review_counts: dict[str, int] = {}
    for review in snapshot.reviews:
        review_counts[review.reviewer] = review_counts.get(review.reviewer, 0) + 1
    for reviewer, count in review_counts.items():
        state = states.get(reviewer)
        if state is None:
            reviewers.add_row(reviewer, "[dim]none (comments only)[/dim]", str(count))
        else:
            style = _STATE_STYLE[state]
            reviewers.add_row(reviewer, f"[{style}]{state.value}[/{style}]", str(count))
    console.print(reviewers)

    names = matching_labels(snapshot.labels, settings.label_prefix)
    if names:
        labels = Table(title=f"Labels matching {settings.label_prefix!r}", show_header=True, header_style="bold cyan")
        labels.add_column("Label", style="bold")
        labels.add_column("Required", justify="right")
        for name in names:
            labels.add_row(name, str(parse_suffix(name[len(settings.label_prefix) :])))
        console.print(labels)
    else:
        console.print(f"[yellow]No label matches {settings.label_prefix!r}.[/yellow]")

    threshold = resolve_threshold(snapshot.labels, settings.label_prefix, settings.default_threshold)
    approvals = count_active_approvals(snapshot.reviews)
    decision = snapshot.decision.value if snapshot.decision else "none"
    console.print(f"\n  Review decision: {decision}")
    console.print(f"  Approvals:       {approvals}")
    console.print(f"  Threshold:       {threshold} (default {settings.default_threshold})")
    if len(snapshot.reviews) >= REVIEW_WINDOW or len(snapshot.labels) >= LABEL_WINDOW:
        console.print(
            f"[dim]Window full: only the last {REVIEW_WINDOW} reviews and first {LABEL_WINDOW} labels are seen.[/dim]"
        )
