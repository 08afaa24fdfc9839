"""CLI entry point — single click command with config options."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

from approval_count.core.github import GitHubAPIError, check_gh_cli

console = Console(stderr=True)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

DEFAULT_ORG = "wbd-streaming"
DEFAULT_REPO = "live-orchestration"
DEFAULT_TEAM = "live-control-plane"


class ApprovalContext:
    """Run configuration passed to the fetch and display layers."""

    def __init__(self, org: str, repo: str, team: str, months: int = 1,
                 json_output: bool = False, fmt: str | None = None,
                 mode: str = "auto", verbose: bool = False):
        self.org = org
        if "/" in repo:
            self.owner, self.name = repo.split("/", 1)
        else:
            self.owner, self.name = org, repo
        self.repo = f"{self.owner}/{self.name}"
        self.team = team
        self.months = months
        self.json_output = json_output
        self.fmt = fmt
        self.mode = mode
        self.verbose = verbose

    def resolved_mode(self) -> str:
        """`table` on an interactive stdout, `picker` when piped, unless forced."""
        if self.mode != "auto":
            return self.mode
        return "table" if sys.stdout.isatty() else "picker"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("--org", envvar="APPROVAL_COUNT_ORG", default=DEFAULT_ORG,
              show_default=True, help="Organization that owns the team")
@click.option("--repo", envvar="APPROVAL_COUNT_REPO", default=DEFAULT_REPO,
              show_default=True, help="Repository name, or owner/name")
@click.option("--team", envvar="APPROVAL_COUNT_TEAM", default=DEFAULT_TEAM,
              show_default=True, help="Team slug whose members count as reviewers")
@click.option("--months", "-m", default=1, show_default=True,
              type=click.IntRange(min=1), help="Lookback window in calendar months")
@click.option("--mode", type=click.Choice(["auto", "table", "picker"]), default="auto",
              show_default=True, help="auto: table on a terminal, fzf picker when piped")
@click.option("--json", "json_output", is_flag=True, help="Output the report as JSON")
@click.option("--format", "fmt", type=click.Choice(["csv", "parquet"]), default=None,
              help="Export report tables")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(org, repo, team, months, mode, json_output, fmt, verbose):
    """Count pull-request approvals per team reviewer over the last month.

    \b
    Usage:
      approval-count                          Table on a terminal, fzf picker when piped
      approval-count --repo owner/name --team reviewers
      approval-count --json                   Full reviewer/author breakdown as JSON
    """
    _configure_logging(verbose)
    ctx = ApprovalContext(org, repo, team, months=months, json_output=json_output,
                          fmt=fmt, mode=mode, verbose=verbose)

    from approval_count.commands.approvals import run_approvals
    from approval_count.display.picker import PickerError

    try:
        check_gh_cli()
        run_approvals(ctx)
    except (GitHubAPIError, PickerError) as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)
