"""
Substring search over normalized records.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from alumni.config import SEARCH_FIELDS
from alumni.data.schemas import Record


def build_haystack(record: Record, fields: Sequence[str] = SEARCH_FIELDS) -> str:
    """Lower-cased search text for one record, one space between fields.

    Missing fields contribute "" so the field positions stay fixed.
    """
    parts = []
    for f in fields:
        value = record.get(f)
        parts.append(("" if value is None else str(value)).lower())
    return " ".join(parts)


def matches(record: Record, query: str | None) -> bool:
    """Case-insensitive containment of the trimmed query in the haystack."""
    q = (query or "").strip().lower()
    if not q:
        return True
    return q in build_haystack(record)


def filter_records(records: Iterable[Record], query: str | None) -> tuple[Record, ...]:
    """Records matching ``query``, in their original order."""
    records = tuple(records)
    if not (query or "").strip():
        return records
    return tuple(r for r in records if matches(r, query))
