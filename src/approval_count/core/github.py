"""GraphQL executor via `gh` subprocess + cursor pagination."""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any

logger = logging.getLogger(__name__)

GH_TIMEOUT = 60
AUTH_TIMEOUT = 10


class GitHubAPIError(Exception):
    pass


def check_gh_cli() -> None:
    """Verify gh CLI is installed and authenticated."""
    try:
        result = subprocess.run(
            ["gh", "auth", "status"],
            capture_output=True, text=True, timeout=AUTH_TIMEOUT,
        )
    except FileNotFoundError:
        raise GitHubAPIError("gh CLI not found. Install: https://cli.github.com")
    except subprocess.TimeoutExpired:
        raise GitHubAPIError(f"gh auth status timed out after {AUTH_TIMEOUT}s")
    if result.returncode != 0:
        raise GitHubAPIError("gh CLI is not authenticated. Run: gh auth login")


def graphql(query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
    """Execute a GraphQL query via gh api graphql."""
    cmd = ["gh", "api", "graphql", "-f", f"query={query}"]
    if variables:
        for key, value in variables.items():
            if value is None:
                continue
            if isinstance(value, (int, float, bool)):
                cmd.extend(["-F", f"{key}={value}"])
            else:
                cmd.extend(["-f", f"{key}={value}"])

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=GH_TIMEOUT)
    except subprocess.TimeoutExpired:
        raise GitHubAPIError(f"GraphQL query timed out after {GH_TIMEOUT}s")
    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitHubAPIError(f"GraphQL query failed: {stderr}")

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise GitHubAPIError(f"Invalid JSON response: {e}")

    if "errors" in data:
        msgs = "; ".join(e.get("message", str(e)) for e in data["errors"])
        raise GitHubAPIError(f"GraphQL errors: {msgs}")

    return data.get("data", data)


def paginated_query(
    query: str,
    path: list[str],
    variables: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Follow a GraphQL connection until it is exhausted.

    query must declare `$cursor: String` and pass `after: $cursor`; a null
    cursor fetches the first page. path is the key path from `data` to the
    connection (e.g. ["repository", "pullRequests"]).
    """
    all_nodes: list[dict[str, Any]] = []
    cursor: str | None = None
    variables = dict(variables or {})
    page = 1

    while True:
        data = graphql(query, {**variables, "cursor": cursor})

        connection = data
        for key in path:
            if connection is None:
                raise GitHubAPIError(f"Missing {'.'.join(path)} in response")
            connection = connection[key]

        nodes = [edge["node"] for edge in connection.get("edges", [])]
        all_nodes.extend(nodes)
        logger.debug("Fetched page %d of %s (%d nodes)", page, ".".join(path), len(nodes))

        page_info = connection.get("pageInfo", {})
        if not page_info.get("hasNextPage", False):
            break
        cursor = page_info.get("endCursor")
        if cursor is None:
            break
        page += 1

    return all_nodes
