#!/usr/bin/env python3
"""
Alumni Directory CLI — search, header diagnostics, Excel export, and API server.

USAGE:
  python -m alumni.cli search                        # Everyone in the directory
  python -m alumni.cli search "engineer"             # Substring search
  python -m alumni.cli search "unc" --json           # DirectoryView JSON
  python -m alumni.cli headers                       # Detected sheet headers per field
  python -m alumni.cli headers --schema v1           # ...against the v1 field schema

  python -m alumni.cli export --query "chapel hill"  # Excel workbook of the matches
  python -m alumni.cli serve --port 8000             # Start API server
"""
from __future__ import annotations

import argparse
import asyncio
import json
import os
from datetime import datetime
from pathlib import Path

from alumni.config import (
    CSV_URL, EXPORT_FOLDER, FIELD_SCHEMAS, LOG_LEVEL, active_schema, schema_label,
)
from alumni.data.loader import load_directory
from alumni.data.normalize import resolution_report
from alumni.data.schemas import LoadStatus
from alumni.data.store import DirectoryStore
from alumni.logging import configure_logging


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  ALUMNI DIRECTORY — {title}")
    print("=" * 70)


def _schema(args):
    # an explicit --schema beats ALUMNI_SCHEMA_FILE
    if args.schema:
        return active_schema(args.schema, schema_file="")
    return active_schema()


def _load(args) -> DirectoryStore:
    """Fetch the sheet into a fresh store using the CLI's schema choice."""
    return asyncio.run(load_directory(DirectoryStore(), url=args.url, schema=_schema(args)))


def _report_failure(store: DirectoryStore) -> int:
    if store.status in (LoadStatus.ERROR, LoadStatus.EMPTY):
        print(f"\n  {store.message}\n")
        return 1
    return 0


def cmd_search(args) -> int:
    """Print the people matching a query."""
    store = _load(args)
    store.set_query(args.query)

    if args.json:
        from alumni.reports.directory_report import generate_json
        print(json.dumps(generate_json(store), indent=2, ensure_ascii=False))
        return 1 if store.status in (LoadStatus.ERROR, LoadStatus.EMPTY) else 0

    _banner("SEARCH")
    failed = _report_failure(store)
    if failed:
        return failed

    label = f'"{args.query.strip()}"' if args.query.strip() else "(everyone)"
    print(f"\n  Query: {label}  |  {len(store.visible)} of {store.row_count()} people\n")
    if not store.visible:
        print("  No matches found.\n")
        return 0

    for i, person in enumerate(store.visible, 1):
        where = " @ ".join(p for p in (person.get("role", ""), person.get("organization", "")) if p)
        print(f"  {i:<4}{person['name'][:36]:<38}{where[:60]}")
        if i >= args.limit:
            remaining = len(store.visible) - i
            if remaining:
                print(f"  ... {remaining} more")
            break
    print()
    return 0


def cmd_headers(args) -> int:
    """Show the detected headers and which schema field each one feeds."""
    _banner("SHEET HEADERS")
    store = _load(args)
    if store.status == LoadStatus.ERROR:
        return _report_failure(store)

    schema = _schema(args)
    print(f"\n  Schema: {args.schema or schema_label()}  |  {len(store.headers)} columns  |  "
          f"{store.row_count()} named rows\n")

    used = set()
    for entry in resolution_report(store.headers, schema):
        header = entry["header"]
        if header is not None:
            used.add(header)
        shown = repr(header) if header is not None else "— not found —"
        print(f"  {entry['field']:<26}{shown}")

    unmatched = [h for h in store.headers if h not in used]
    if unmatched:
        print(f"\n  Unused columns ({len(unmatched)}):")
        for h in unmatched:
            print(f"    - {h!r}")
    print()
    return _report_failure(store)


def cmd_export(args) -> int:
    """Write the matching people to an Excel workbook."""
    from alumni.reports.directory_report import generate_excel

    _banner("EXCEL EXPORT")
    store = _load(args)
    failed = _report_failure(store)
    if failed:
        return failed
    store.set_query(args.query)

    out = Path(args.output) if args.output else (
        EXPORT_FOLDER / f"Alumni_Directory_{datetime.now():%Y%m%d_%H%M%S}.xlsx"
    )
    path = generate_excel(store, out)
    print(f"\n  {len(store.visible)} of {store.row_count()} people")
    print(f"  Saved to: {path}\n")
    return 0


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Alumni Directory API on port {args.port}...")
    uvicorn.run("alumni.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Alumni Directory — searchable people directory from a published sheet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # options shared by every command that fetches the sheet
    source = argparse.ArgumentParser(add_help=False)
    source.add_argument("--url", default=CSV_URL, help="CSV export URL")
    source.add_argument("--schema", choices=sorted(FIELD_SCHEMAS), help="Field schema version")

    search_parser = subparsers.add_parser("search", parents=[source], help="Search the directory")
    search_parser.add_argument("query", nargs="?", default="", help="Substring to search for")
    search_parser.add_argument("--json", action="store_true", help="Print the DirectoryView as JSON")
    search_parser.add_argument("--limit", type=int, default=50, help="Max rows to print (default 50)")
    search_parser.set_defaults(func=cmd_search)

    headers_parser = subparsers.add_parser("headers", parents=[source], help="Diagnose sheet headers")
    headers_parser.set_defaults(func=cmd_headers)

    export_parser = subparsers.add_parser("export", parents=[source], help="Export to Excel")
    export_parser.add_argument("--query", default="", help="Only export people matching this")
    export_parser.add_argument("--output", help=f"Output .xlsx path (default: {EXPORT_FOLDER})")
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(LOG_LEVEL)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
