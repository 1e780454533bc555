"""
Row normalization: raw CSV rows → schema-shaped directory records.
"""
from __future__ import annotations

from typing import Iterable, Optional

from alumni.data.resolve import matched_header, resolve
from alumni.data.schemas import FieldSchema, RawRow, Record


# ---------------------------------------------------------------------------
# Single row
# ---------------------------------------------------------------------------

def normalize_row(row: Optional[RawRow], schema: FieldSchema) -> Record:
    """Resolve every schema field from one raw row ("" when absent)."""
    return {name: resolve(row, candidates) for name, candidates in schema}


# ---------------------------------------------------------------------------
# Batch
# ---------------------------------------------------------------------------

def has_name(record: Record) -> bool:
    """A record is a directory entry only if its name is non-blank."""
    return str(record.get("name") or "").strip() != ""


def normalize_all(rows: Iterable[Optional[RawRow]], schema: FieldSchema) -> list[Record]:
    """Normalize rows in source order, dropping records without a name.

    The name gate runs on normalized records, not raw rows, so a drifted
    "Name" header still counts.
    """
    records = [normalize_row(row, schema) for row in rows]
    return [r for r in records if has_name(r)]


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

def resolution_report(headers: Iterable[str], schema: FieldSchema) -> list[dict]:
    """For each schema field, which detected header (if any) it resolves to.

    Used to diagnose schema drift when the sheet's columns are renamed.
    """
    probe = {h: "" for h in headers}
    report = []
    for name, candidates in schema:
        report.append({
            "field": name,
            "candidates": list(candidates),
            "header": matched_header(probe, candidates),
        })
    return report
