"""
DirectoryStore — the loaded people directory plus the active search query.

``raw`` is replaced wholesale on every successful load, ``query`` on every
search change; ``visible`` is always recomputed from the two, never patched.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from alumni.data.schemas import LoadStatus, Record
from alumni.data.search import filter_records


class DirectoryStore:
    """In-memory directory with a query-filtered view."""

    def __init__(self) -> None:
        self._raw: tuple[Record, ...] = ()
        self._query: str = ""
        self._visible: tuple[Record, ...] = ()
        self.status: LoadStatus = LoadStatus.IDLE
        self.message: str = ""
        self.headers: tuple[str, ...] = ()

    # ------------------------------------------------------------------
    # Read channels
    # ------------------------------------------------------------------

    @property
    def raw(self) -> tuple[Record, ...]:
        return self._raw

    @property
    def query(self) -> str:
        return self._query

    @property
    def visible(self) -> tuple[Record, ...]:
        return self._visible

    @property
    def is_loaded(self) -> bool:
        return self.status in (LoadStatus.OK, LoadStatus.EMPTY)

    def row_count(self) -> int:
        return len(self._raw)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def load(self, records: Iterable[Record], headers: Sequence[str] = ()) -> "DirectoryStore":
        """Replace the whole record set; the current query is kept."""
        self._raw = tuple(records)
        self.headers = tuple(headers)
        if self._raw:
            self.status = LoadStatus.OK
            self.message = ""
        else:
            self.status = LoadStatus.EMPTY
            self.message = f"No rows with a Name found. Detected headers: {', '.join(self.headers)}"
        self._recompute()
        return self

    def set_query(self, query: str | None) -> "DirectoryStore":
        self._query = query or ""
        self._recompute()
        return self

    def record_failure(self, message: str) -> None:
        """Mark the last load attempt as failed; records and query stay as they were."""
        self.status = LoadStatus.ERROR
        self.message = message

    def fork(self) -> "DirectoryStore":
        """A store sharing this one's records and load status, with its own query."""
        other = DirectoryStore()
        other._raw = self._raw
        other._visible = self._raw
        other.status = self.status
        other.message = self.message
        other.headers = self.headers
        return other

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def _recompute(self) -> None:
        # single assignment: readers see either the old or the new view
        self._visible = filter_records(self._raw, self._query)
