"""fzf picker with a per-reviewer breakdown preview, for piped/non-interactive use."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
import tempfile
from io import StringIO
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from approval_count.core.models import ReviewerSummary
from approval_count.display.tables import window_label

PICKER_HEADER = "Top Approvers (Last 30d)"
PICKER_PROMPT = "Select > "

# fzf: 1 = no match, 130 = interrupted with Ctrl-C / Esc
FZF_NO_SELECTION = (1, 130)


class PickerError(Exception):
    pass


def picker_header(months: int = 1) -> str:
    if months == 1:
        return PICKER_HEADER
    return f"Top Approvers ({window_label(months)})"


def picker_line(summary: ReviewerSummary) -> str:
    return f"@{summary.reviewer} ({summary.total} approvals)"


def preview_lines(summary: ReviewerSummary) -> list[str]:
    """Rich markup lines for one reviewer's author -> PR breakdown."""
    lines = [f"[bold]@{escape(summary.reviewer)}[/]: {summary.total} PRs approved"]
    for breakdown in summary.authors:
        lines.append("")
        lines.append(f"  [cyan]{breakdown.count} PRs by @{escape(breakdown.author)}[/]")
        for i, pr in enumerate(breakdown.prs, 1):
            lines.append("")
            lines.append(f"    {i}. {escape(pr.title)}")
            lines.append(f"[bright_black]       {escape(pr.url)}[/]")
    return lines


def render_preview(summary: ReviewerSummary) -> str:
    """Preview text with ANSI bold/colour escapes baked in."""
    buf = StringIO()
    out = Console(file=buf, force_terminal=True, color_system="standard", highlight=False)
    for line in preview_lines(summary):
        out.print(line, soft_wrap=True)
    return buf.getvalue()


def fzf_command(preview_dir: str, header: str = PICKER_HEADER) -> list[str]:
    # {1} is the first whitespace-separated field of the line, i.e. "@login"
    preview = f"cat {shlex.quote(preview_dir)}/{{1}}"
    return [
        "fzf",
        "--ansi",
        "--border",
        "--layout", "reverse",
        "--preview-window=right:60%",
        f"--preview={preview}",
        f"--prompt={PICKER_PROMPT}",
        f"--header={header}",
    ]


def run_picker(summaries: list[ReviewerSummary], header: str = PICKER_HEADER) -> str | None:
    """Feed one line per reviewer to fzf; echo and return the selected line."""
    if shutil.which("fzf") is None:
        raise PickerError("fzf not found on PATH. Install: https://github.com/junegunn/fzf")

    lines = [picker_line(s) for s in summaries]
    with tempfile.TemporaryDirectory(prefix="approval-count-") as preview_dir:
        for s in summaries:
            Path(preview_dir, f"@{s.reviewer}").write_text(render_preview(s))
        result = subprocess.run(
            fzf_command(preview_dir, header),
            input="\n".join(lines),
            stdout=subprocess.PIPE,
            text=True,
        )

    if result.returncode in FZF_NO_SELECTION:
        return None
    if result.returncode != 0:
        raise PickerError(f"fzf exited with status {result.returncode}")

    selection = result.stdout.strip()
    if selection:
        sys.stdout.write(selection + "\n")
    return selection or None
