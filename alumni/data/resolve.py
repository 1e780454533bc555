"""
Header-tolerant field lookup for raw CSV rows.

The sheet's column headers are edited by hand, so a header may pick up a
stray space or a different capitalisation between exports. A strict key
lookup would silently blank the field; ``resolve`` falls back through
progressively looser comparisons instead:

1. exact key, for each candidate in order
2. trimmed candidate vs trimmed key, first candidate first, then the
   row's own key order
3. as (2), case-insensitively

No match is not an error: the field simply is not in this revision of the
sheet, and ``""`` is returned.
"""
from __future__ import annotations

from typing import Iterable, Optional

from alumni.data.schemas import RawRow


def _find_key(keys: list[str], wanted: str, fold_case: bool) -> Optional[str]:
    for key in keys:
        candidate = str(key).strip()
        if fold_case:
            candidate = candidate.lower()
        if candidate == wanted:
            return key
    return None


def matched_header(row: Optional[RawRow], candidates: Iterable[str]) -> Optional[str]:
    """The row key that ``resolve`` reads for these candidates, or None."""
    if not row:
        return None
    candidates = [str(c) for c in candidates]

    for header in candidates:
        if header in row:
            return header

    keys = list(row.keys())
    for header in candidates:
        key = _find_key(keys, header.strip(), fold_case=False)
        if key is not None:
            return key

    for header in candidates:
        key = _find_key(keys, header.strip().lower(), fold_case=True)
        if key is not None:
            return key

    return None


def resolve(row: Optional[RawRow], candidates: Iterable[str]) -> str:
    """Return the value under the first candidate header found in ``row``."""
    key = matched_header(row, candidates)
    if key is None:
        return ""
    value = row[key]
    return "" if value is None else str(value)
