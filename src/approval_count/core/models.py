"""Data models as dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Review:
    reviewer: str
    state: str  # always APPROVED, filtered by the query
    submitted_at: str | None = None


@dataclass(frozen=True)
class PullRequest:
    author: str
    number: int
    title: str
    url: str
    created_at: str
    updated_at: str  # ISO-8601, compared as a string against the cutoff
    reviews: tuple[Review, ...] = ()
    review_total: int = 0  # totalCount of approvals, may exceed len(reviews)

    @property
    def approvals_truncated(self) -> bool:
        return self.review_total > len(self.reviews)


# reviewer -> author -> PRs in fetch order
ReviewIndex = dict[str, dict[str, list[PullRequest]]]


@dataclass
class AuthorBreakdown:
    author: str
    prs: list[PullRequest]

    @property
    def count(self) -> int:
        return len(self.prs)


@dataclass
class ReviewerSummary:
    reviewer: str
    total: int
    authors: list[AuthorBreakdown] = field(default_factory=list)


@dataclass
class ApprovalReport:
    repo: str
    org: str
    team: str
    cutoff: str
    team_members: list[str]
    pull_requests_in_window: int
    index: ReviewIndex
    summaries: list[ReviewerSummary]
    truncated_team: bool = False
    truncated_prs: list[int] = field(default_factory=list)  # PR numbers with >50 approvals
