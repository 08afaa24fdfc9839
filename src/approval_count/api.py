"""Public Python API — returns ibis tables for programmatic use.

Usage:
    import approval_count.api as ac

    tables = ac.approvals("my-org/my-repo", team="reviewers")
    tables["reviewers"].to_pyarrow()
    tables["approvals"].to_pandas()

    # The dataclass report behind the tables
    ac.report("my-org/my-repo", team="reviewers").summaries
"""

from __future__ import annotations

import ibis

from approval_count.cli import DEFAULT_TEAM, ApprovalContext
from approval_count.core.github import check_gh_cli
from approval_count.core.models import ApprovalReport


def _ctx(repo: str, *, org: str | None = None, team: str = DEFAULT_TEAM,
         months: int = 1) -> ApprovalContext:
    if org is None:
        if "/" not in repo:
            raise ValueError("repo must be owner/name format when org is not given")
        org = repo.split("/", 1)[0]
    if months < 1:
        raise ValueError("months must be at least 1")
    check_gh_cli()
    return ApprovalContext(org, repo, team, months=months)


def report(repo: str, **kwargs) -> ApprovalReport:
    """Approval report: review index plus sorted reviewer summaries."""
    from approval_count.commands.approvals import fetch_approval_report
    return fetch_approval_report(_ctx(repo, **kwargs))


def approvals(repo: str, **kwargs) -> dict[str, ibis.Table]:
    """Approvals per team reviewer as `reviewers` and `approvals` tables."""
    from approval_count.frames import approval_frames
    return approval_frames(report(repo, **kwargs))
