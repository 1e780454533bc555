"""
Directory data shapes: raw rows, records, field schemas, parse and load results.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Sequence

# One parsed CSV data row, keyed by header text exactly as exported
RawRow = Mapping[str, Optional[str]]

# One normalized directory entry: every schema field present, "" when absent
Record = dict[str, str]

# Ordered (semantic name, candidate headers) pairs
FieldSchema = Sequence[tuple[str, Sequence[str]]]


class LoadStatus(str, Enum):
    IDLE = "idle"
    OK = "ok"
    EMPTY = "empty"
    ERROR = "error"


@dataclass
class ParseError:
    """A malformed CSV line skipped by the tokenizer."""
    message: str
    row: Optional[int] = None            # 1-based line number in the CSV text

    def __str__(self) -> str:
        return f"line {self.row}: {self.message}" if self.row is not None else self.message


@dataclass
class ParsedCSV:
    """Tokenizer output: data rows, header list, and non-fatal line errors."""
    rows: list[dict[str, str]] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)

    @property
    def detected_headers(self) -> list[str]:
        """Header list, falling back to the first row's keys."""
        if self.fields:
            return list(self.fields)
        return list(self.rows[0].keys()) if self.rows else []
