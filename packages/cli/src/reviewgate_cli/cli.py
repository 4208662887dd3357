"""CLI entry point for reviewgate.

Commands:
  check    — pass or fail a pull request on its approval count
  explain  — show each reviewer's effective state and the resolved threshold
"""

from __future__ import annotations

import importlib.metadata

import click

from reviewgate_cli.commands.check import check_cmd
from reviewgate_cli.commands.explain import explain_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("reviewgate"),
    prog_name="reviewgate",
)
@click.option(
    "--config",
    "config_path",
    default=".reviewgate.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="REVIEWGATE_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Fail pull requests until the label-selected number of reviewers approve."""
    from reviewgate_core.config import load_config
    from reviewgate_cli.auth import resolve_github_token
    from reviewgate_cli.output import configure_logging

    ctx.ensure_object(dict)
    configure_logging(verbose)

    config = load_config(config_path)

    # Resolve token early so all subcommands share the same resolution.
    token = resolve_github_token()
    if token:
        config["github_token"] = token

    ctx.obj["config"] = config


main.add_command(check_cmd)
main.add_command(explain_cmd)
