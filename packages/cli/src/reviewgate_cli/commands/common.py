"""Options and helpers shared by the check and explain commands."""

from __future__ import annotations

import click

from reviewgate_core.config import threshold_config
from reviewgate_core.errors import ConfigError
from reviewgate_core.gh.event import read_event
from reviewgate_core.gh.pull_request import fetch_pull_request, get_client
from reviewgate_core.models import PullRequestRef, PullRequestSnapshot, ThresholdConfig


_PULL_REQUEST_OPTIONS = (
    click.option("--repo", default=None, help="GitHub repository in owner/name format."),
    click.option(
        "--pr",
        "pr_number",
        type=int,
        default=None,
        help="Pull request number. Omit both --repo and --pr inside GitHub Actions.",
    ),
    click.option("--label-prefix", default=None, help="Label prefix that selects the threshold. Overrides config file."),
    click.option(
        "--default-required",
        "default_required",
        type=int,
        default=None,
        help="Approvals required when no label matches. Overrides config file.",
    ),
)


def pull_request_options(func):
    """Add the pull request selection and threshold override options."""
    for option in reversed(_PULL_REQUEST_OPTIONS):
        func = option(func)
    return func


def gate_settings(ctx: click.Context, label_prefix: str | None, default_required: int | None) -> ThresholdConfig:
    """Apply CLI overrides to the loaded config and validate it."""
    config = dict(ctx.obj["config"])
    if label_prefix is not None:
        config["label_prefix"] = label_prefix
    if default_required is not None:
        config["default_required_reviewers"] = default_required
    return threshold_config(config)


def select_pull_request(repo: str | None, pr_number: int | None) -> PullRequestRef:
    """Use --repo/--pr when given, otherwise the workflow event payload."""
    if repo is None and pr_number is None:
        return read_event()
    if repo is None or pr_number is None:
        raise click.UsageError("--repo and --pr must be given together.")
    owner, sep, name = repo.partition("/")
    if not sep or not owner or not name or "/" in name:
        raise click.UsageError(f"--repo must be in owner/name format, got {repo!r}.")
    return PullRequestRef(owner=owner, name=name, number=pr_number)


def snapshot_fetcher(ctx: click.Context):
    """Return a fetch function bound to a client for the resolved token."""
    token = ctx.obj["config"].get("github_token")
    if not token:
        raise ConfigError("No GitHub token found. Set the `token` input, GITHUB_TOKEN, or run `gh auth login`.")
    client = get_client(token)

    def fetch(ref: PullRequestRef) -> PullRequestSnapshot:
        return fetch_pull_request(client, ref)

    return fetch
