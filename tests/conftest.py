"""Shared fixtures: GraphQL node builders and a mocked gh layer."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from approval_count.core.models import PullRequest, Review


def pr_node(number, author="dave", approvers=(), updated_at="2026-10-10T12:00:00Z",
            title=None, total=None):
    """A pullRequests edge node shaped like the GitHub GraphQL response."""
    return {
        "author": {"login": author} if author else None,
        "number": number,
        "title": title or f"PR {number}",
        "url": f"https://github.com/acme/widgets/pull/{number}",
        "createdAt": "2026-10-01T09:00:00Z",
        "updatedAt": updated_at,
        "reviews": {
            "totalCount": len(approvers) if total is None else total,
            "edges": [
                {"node": {"author": {"login": login}, "state": "APPROVED",
                          "submittedAt": "2026-10-09T08:00:00Z"}}
                for login in approvers
            ],
        },
    }


def make_pr(number, author="dave", approvers=(), updated_at="2026-10-10T12:00:00Z", title=None):
    return PullRequest(
        author=author,
        number=number,
        title=title or f"PR {number}",
        url=f"https://github.com/acme/widgets/pull/{number}",
        created_at="2026-10-01T09:00:00Z",
        updated_at=updated_at,
        reviews=tuple(Review(reviewer=r, state="APPROVED") for r in approvers),
        review_total=len(approvers),
    )


def team_response(*logins, total=None):
    return {
        "organization": {
            "team": {
                "members": {
                    "totalCount": len(logins) if total is None else total,
                    "edges": [{"node": {"login": login}} for login in logins],
                }
            }
        }
    }


def pr_page(nodes, has_next=False, cursor=None):
    return {
        "repository": {
            "pullRequests": {
                "edges": [{"node": n} for n in nodes],
                "pageInfo": {"hasNextPage": has_next, "endCursor": cursor},
            }
        }
    }


@pytest.fixture
def mock_graphql():
    with patch("approval_count.core.github.graphql") as m:
        yield m
