"""JSON serialization for --json flag."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from rich.console import Console

from approval_count.core.models import ReviewerSummary

console = Console()


class _Encoder(json.JSONEncoder):
    def default(self, obj: Any) -> Any:
        if isinstance(obj, ReviewerSummary):
            # authors is already keyed in the index; keep the summary flat
            return {"reviewer": obj.reviewer, "total": obj.total,
                    "authors": {a.author: a.count for a in obj.authors}}
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
        return super().default(obj)


def to_json(data: Any) -> str:
    return json.dumps(data, cls=_Encoder, indent=2)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    console.print_json(to_json(data))
