"""Aligned approval table for interactive terminals."""

from __future__ import annotations

from rich.console import Console

from approval_count.core.models import ApprovalReport, ReviewerSummary

console = Console(highlight=False)

COUNT_WIDTH = 7


def window_label(months: int) -> str:
    return "Last Month" if months == 1 else f"Last {months} Months"


def name_column_width(summaries: list[ReviewerSummary]) -> int:
    """Longest reviewer login + 2 (room for the @ prefix and a space)."""
    return max((len(s.reviewer) for s in summaries), default=0) + 2


def display_approvals(report: ApprovalReport, months: int = 1) -> None:
    console.print()
    console.print(f"[bold]=== Approval Summary ({window_label(months)}) ===[/]")
    console.print()

    width = name_column_width(report.summaries)
    console.print(f"[bold]{'Reviewer':<{width}}[/] [bold]Reviews[/]")
    console.print(f"{'-' * width} {'-' * COUNT_WIDTH}")
    for s in report.summaries:
        console.print(f"{'@' + s.reviewer:<{width}} [cyan]{s.total:>{COUNT_WIDTH}}[/]")
