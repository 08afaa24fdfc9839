"""Approvals per team reviewer — fetch, aggregate, present."""

from __future__ import annotations

import logging
from contextlib import nullcontext

from rich.console import Console
from rich.status import Status

from approval_count.cli import ApprovalContext
from approval_count.core.analysis import (
    build_review_index, filter_recent, parse_pr_node, summarize_reviewers,
    window_cutoff,
)
from approval_count.core.github import GitHubAPIError, graphql, paginated_query
from approval_count.core.models import ApprovalReport, PullRequest
from approval_count.core.queries import (
    APPROVALS_PAGE_SIZE, PULL_REQUESTS_WITH_APPROVALS, TEAM_MEMBERS,
    TEAM_MEMBERS_PAGE_SIZE,
)
from approval_count.display.json_out import print_json
from approval_count.display.picker import picker_header, run_picker
from approval_count.display.tables import display_approvals

logger = logging.getLogger(__name__)

console = Console(stderr=True)


def fetch_team_members(org: str, team: str) -> tuple[frozenset[str], bool]:
    """Logins of the first page of team members, and whether more exist."""
    data = graphql(TEAM_MEMBERS, {"org": org, "team": team, "first": TEAM_MEMBERS_PAGE_SIZE})
    team_data = (data.get("organization") or {}).get("team")
    if team_data is None:
        raise GitHubAPIError(f"Team {org}/{team} not found")

    members = team_data["members"]
    logins = frozenset(edge["node"]["login"] for edge in members.get("edges", []))
    total = members.get("totalCount", len(logins))
    truncated = total > len(logins)
    if truncated:
        logger.warning(
            "Team %s/%s has %d members; only the first %d are counted as reviewers",
            org, team, total, TEAM_MEMBERS_PAGE_SIZE,
        )
    return logins, truncated


def fetch_pull_requests(owner: str, name: str, cutoff: str) -> list[PullRequest]:
    """All PRs in any state, newest update first, filtered to the window."""
    nodes = paginated_query(
        PULL_REQUESTS_WITH_APPROVALS,
        ["repository", "pullRequests"],
        variables={"owner": owner, "name": name, "approvals": APPROVALS_PAGE_SIZE},
    )
    prs = filter_recent([parse_pr_node(n) for n in nodes], cutoff)
    logger.debug("%d of %d PRs updated since %s", len(prs), len(nodes), cutoff)
    return prs


def fetch_approval_report(ctx: ApprovalContext) -> ApprovalReport:
    """Fetch and compute approval report."""
    team_members, truncated_team = fetch_team_members(ctx.org, ctx.team)
    cutoff = window_cutoff(ctx.months)
    prs = fetch_pull_requests(ctx.owner, ctx.name, cutoff)

    truncated_prs = [pr.number for pr in prs if pr.approvals_truncated]
    for number in truncated_prs:
        logger.warning("PR #%d has more than %d approvals; extra approvals are not counted",
                       number, APPROVALS_PAGE_SIZE)

    index = build_review_index(prs, team_members)
    return ApprovalReport(
        repo=ctx.repo,
        org=ctx.org,
        team=ctx.team,
        cutoff=cutoff,
        team_members=sorted(team_members),
        pull_requests_in_window=len(prs),
        index=index,
        summaries=summarize_reviewers(index),
        truncated_team=truncated_team,
        truncated_prs=truncated_prs,
    )


def run_approvals(ctx: ApprovalContext) -> None:
    mode = ctx.resolved_mode()
    show_status = mode == "table" and not (ctx.json_output or ctx.fmt)
    status = Status(f"Counting approvals for {ctx.repo}...", console=console) if show_status else nullcontext()
    with status:
        report = fetch_approval_report(ctx)

    if ctx.fmt:
        from approval_count.frames import approval_frames, export_tables
        export_tables(approval_frames(report), ctx.fmt)
    elif ctx.json_output:
        print_json(report)
    elif mode == "table":
        display_approvals(report, months=ctx.months)
    else:
        run_picker(report.summaries, header=picker_header(ctx.months))
