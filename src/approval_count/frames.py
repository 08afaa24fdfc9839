"""Convert an ApprovalReport to ibis memtables and export them.

approval_frames() returns dict[str, ibis.Table]:

    tables["reviewers"]   one row per reviewer: reviewer/total/authors
    tables["approvals"]   one row per (reviewer, author, PR) approval

Tables can be materialized to any backend:

    tables["reviewers"].to_pyarrow()
    tables["approvals"].to_pandas()
"""

from __future__ import annotations

import sys

import ibis

from approval_count.core.models import ApprovalReport

REVIEWER_SCHEMA = ibis.schema({"rank": "int64", "reviewer": "string",
                               "total": "int64", "authors": "int64"})
APPROVAL_SCHEMA = ibis.schema({
    "reviewer": "string", "author": "string", "number": "int64", "title": "string",
    "url": "string", "created_at": "string", "updated_at": "string",
})


def _mt(rows: list[dict], schema: ibis.Schema) -> ibis.Table:
    """Memtable with a fixed schema, so empty reports still have columns."""
    if not rows:
        return ibis.memtable(schema.to_pyarrow().empty_table())
    return ibis.memtable(rows, schema=schema)


def approval_frames(report: ApprovalReport) -> dict[str, ibis.Table]:
    reviewer_rows = [
        {"rank": i, "reviewer": s.reviewer, "total": s.total, "authors": len(s.authors)}
        for i, s in enumerate(report.summaries, 1)
    ]

    approval_rows = [
        {"reviewer": s.reviewer, "author": a.author, "number": pr.number,
         "title": pr.title, "url": pr.url,
         "created_at": pr.created_at, "updated_at": pr.updated_at}
        for s in report.summaries
        for a in s.authors
        for pr in a.prs
    ]

    return {
        "reviewers": _mt(reviewer_rows, REVIEWER_SCHEMA),
        "approvals": _mt(approval_rows, APPROVAL_SCHEMA),
    }


def export_tables(tables: dict[str, ibis.Table], fmt: str) -> None:
    """Export ibis tables to stdout (csv) or files (parquet)."""
    if fmt == "csv":
        for name, table in tables.items():
            sys.stdout.write(f"# {name}\n")
            table.to_pandas().to_csv(sys.stdout, index=False)
            sys.stdout.write("\n")
    elif fmt == "parquet":
        for name, table in tables.items():
            path = f"{name}.parquet"
            table.to_pandas().to_parquet(path)
            sys.stderr.write(f"Wrote {path}\n")
    else:
        raise ValueError(f"Unknown export format: {fmt}")
