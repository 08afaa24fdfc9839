"""Window filtering, reviewer -> author grouping, per-reviewer totals."""

from __future__ import annotations

from datetime import datetime, timezone

from dateutil.relativedelta import relativedelta

from approval_count.core.models import (
    AuthorBreakdown, PullRequest, Review, ReviewerSummary, ReviewIndex,
)

GITHUB_TIMESTAMP = "%Y-%m-%dT%H:%M:%SZ"


def window_cutoff(months: int = 1, now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp `months` calendar months before now.

    relativedelta clamps the day, so Mar 31 minus one month is Feb 28/29.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return (now - relativedelta(months=months)).strftime(GITHUB_TIMESTAMP)


def parse_pr_node(node: dict) -> PullRequest:
    """Convert a GraphQL PR node to PullRequest."""
    author = (node.get("author") or {}).get("login", "ghost")
    review_conn = node.get("reviews") or {}
    reviews = tuple(
        Review(
            reviewer=(edge["node"].get("author") or {}).get("login", "ghost"),
            state=edge["node"].get("state", "APPROVED"),
            submitted_at=edge["node"].get("submittedAt"),
        )
        for edge in review_conn.get("edges", [])
    )
    return PullRequest(
        author=author,
        number=node["number"],
        title=node["title"],
        url=node["url"],
        created_at=node["createdAt"],
        updated_at=node["updatedAt"],
        reviews=reviews,
        review_total=review_conn.get("totalCount", len(reviews)),
    )


def filter_recent(prs: list[PullRequest], cutoff: str) -> list[PullRequest]:
    """Keep PRs updated at or after cutoff. Fixed-format ISO strings sort chronologically."""
    return [pr for pr in prs if pr.updated_at >= cutoff]


def build_review_index(prs: list[PullRequest], team_members: frozenset[str] | set[str]) -> ReviewIndex:
    """Group PRs by approving team member, then by PR author.

    Repeat approvals by the same reviewer on one PR are kept, so that PR is
    listed (and counted) once per approval.
    """
    index: ReviewIndex = {}
    for pr in prs:
        for review in pr.reviews:
            if review.reviewer not in team_members:
                continue
            index.setdefault(review.reviewer, {}).setdefault(pr.author, []).append(pr)
    return index


def summarize_reviewers(index: ReviewIndex) -> list[ReviewerSummary]:
    """Per-reviewer totals, most approvals first, login ascending on ties."""
    summaries = []
    for reviewer, by_author in index.items():
        authors = [AuthorBreakdown(author=a, prs=list(prs)) for a, prs in by_author.items()]
        summaries.append(ReviewerSummary(
            reviewer=reviewer,
            total=sum(a.count for a in authors),
            authors=authors,
        ))

    summaries.sort(key=lambda s: (-s.total, s.reviewer))
    return summaries
