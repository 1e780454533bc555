"""
Dataset loading: fetch the published CSV, tokenize, normalize, fill a store.
"""
from __future__ import annotations

import io
from typing import Optional

import httpx
import pandas as pd

from alumni.config import CSV_URL, HTTP_TIMEOUT, NO_CACHE_HEADERS, active_schema
from alumni.data.normalize import normalize_all
from alumni.data.schemas import FieldSchema, LoadStatus, ParsedCSV, ParseError
from alumni.data.store import DirectoryStore
from alumni.logging import get_logger

logger = get_logger(__name__)


class DirectoryLoadError(Exception):
    """Raised when the dataset cannot be fetched or tokenized at all."""


# ---------------------------------------------------------------------------
# Fetch
# ---------------------------------------------------------------------------

async def fetch_csv(
    url: str = CSV_URL,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = HTTP_TIMEOUT,
) -> str:
    """GET the CSV export with caching disabled and redirects followed."""
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=timeout, follow_redirects=True)
    try:
        response = await client.get(url, headers=NO_CACHE_HEADERS, follow_redirects=True)
    except httpx.HTTPError as exc:
        raise DirectoryLoadError(str(exc) or exc.__class__.__name__) from exc
    finally:
        if owns_client:
            await client.aclose()

    if not response.is_success:
        raise DirectoryLoadError(f"HTTP {response.status_code}")
    return response.text


# ---------------------------------------------------------------------------
# Tokenize
# ---------------------------------------------------------------------------

def parse_csv(text: str) -> ParsedCSV:
    """Split CSV text into header-keyed rows.

    Blank lines are skipped. Lines with more cells than the header are
    recorded in ``errors`` and dropped; short lines are padded with "".
    Header text is kept exactly as written: pandas would suffix repeated
    headers (``Name.1``), so the header row is read on its own. When a
    header repeats, the rightmost cell wins in each row.
    """
    errors: list[ParseError] = []

    def _bad_line(cells: list[str]) -> None:
        errors.append(ParseError(f"Too many fields ({len(cells)}): {', '.join(cells)[:120]}"))
        return None

    try:
        header = pd.read_csv(
            io.StringIO(text), header=None, nrows=1, index_col=False, dtype=str, keep_default_na=False,
        )
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=_bad_line,
        )
    except pd.errors.EmptyDataError:
        return ParsedCSV()
    except pd.errors.ParserError as exc:
        raise DirectoryLoadError(f"Could not parse CSV: {exc}") from exc

    fields = [str(h) for h in header.iloc[0].tolist()]
    df = df.fillna("")
    rows = [dict(zip(fields, values)) for values in df.itertuples(index=False, name=None)]
    return ParsedCSV(rows=rows, fields=fields, errors=errors)


# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------

async def load_directory(
    store: DirectoryStore,
    url: str = CSV_URL,
    schema: Optional[FieldSchema] = None,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = HTTP_TIMEOUT,
) -> DirectoryStore:
    """Fetch and normalize the dataset into ``store``.

    A failed fetch leaves the store's records as they were and marks it
    ERROR; a parse with no named rows marks it EMPTY with the headers seen.
    """
    schema = schema if schema is not None else active_schema()
    try:
        text = await fetch_csv(url, client=client, timeout=timeout)
        parsed = parse_csv(text)
    except DirectoryLoadError as exc:
        logger.error("directory_load_failed", url=url, error=str(exc))
        store.record_failure(f"Failed to load alumni data: {exc}")
        return store

    logger.info("csv_parsed", fields=parsed.fields, rows=len(parsed.rows))
    if parsed.errors:
        logger.warning(
            "csv_parse_errors",
            count=len(parsed.errors),
            errors=[str(e) for e in parsed.errors[:20]],
        )

    records = normalize_all(parsed.rows, schema)
    store.load(records, headers=parsed.detected_headers)

    if store.status == LoadStatus.EMPTY:
        logger.warning("directory_empty", headers=list(store.headers))
    else:
        logger.info(
            "directory_loaded",
            records=len(records),
            dropped=len(parsed.rows) - len(records),
        )
    return store
