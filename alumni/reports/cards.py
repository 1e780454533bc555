"""
Person cards — display structures for directory entries and directory views.

Pure projections: a record in, plain dicts out. No markup is produced here;
the dashboard and API decide how to render.
"""
from __future__ import annotations

import math
import re
from typing import Mapping

from alumni.config import PHOTO_OVERRIDES
from alumni.data.schemas import LoadStatus, Record
from alumni.data.store import DirectoryStore

NO_MATCHES_MESSAGE = "No matches found."


def initials(name: str | None) -> str:
    """First letter of the first and last name parts, upper-cased."""
    parts = re.split(r"\s+", str(name or "").strip())
    parts = [p for p in parts if p]
    if not parts:
        return ""
    first = parts[0][0]
    last = parts[-1][0] if len(parts) > 1 else ""
    return (first + last).upper()


def year_display(record: Record) -> str:
    """Start and end year as "2019 - 2024", or whichever one is known."""
    start = record.get("starting_year", "")
    end = record.get("year", "")
    if start and end:
        return f"{start} - {end}"
    return start or end or ""


def linkedin_url(value: str) -> str:
    return value if value.startswith("http") else f"https://{value}"


def _photo(record: Record, overrides: Mapping[str, str]) -> str | None:
    name = record.get("name", "").lower()
    for fragment, path in overrides.items():
        if fragment.lower() in name:
            return path
    return record.get("photo") or None


def _contacts(record: Record) -> list[dict]:
    contacts = []
    for key in ("email", "email2"):
        if record.get(key):
            contacts.append({"kind": "email", "href": f"mailto:{record[key]}", "title": record[key]})
    if record.get("linkedin"):
        contacts.append({"kind": "linkedin", "href": linkedin_url(record["linkedin"]), "title": "LinkedIn"})
    return contacts


def _info_items(record: Record) -> list[dict]:
    universities = ",".join(u for u in (record.get("background_uni1"), record.get("background_uni2")) if u)
    candidates = [
        ("gender", "Gender", record.get("gender", "")),
        ("calendar", "Year", year_display(record)),
        ("department", "Department", record.get("program", "")),
        ("degree", "Degree", record.get("degree", "")),
        ("school", "Past Universities", universities),
        ("education", "Highest Education", record.get("highest_education", "")),
        ("organization", "Organization", record.get("organization", "")),
        ("position", "Position", record.get("role", "")),
        ("location", "Current Location", record.get("location", "")),
        ("home", "Home Country Location", record.get("district_in_home_country", "")),
    ]
    return [{"icon": icon, "label": label, "value": value} for icon, label, value in candidates if value]


def project_card(record: Record, photo_overrides: Mapping[str, str] = PHOTO_OVERRIDES) -> dict:
    """Display structure for one person.

    Info rows are split over two columns; the left column takes the extra
    row when the count is odd.
    """
    items = _info_items(record)
    mid = math.ceil(len(items) / 2)
    return {
        "name": record.get("name", ""),
        "initials": initials(record.get("name")),
        "photo": _photo(record, photo_overrides),
        "contacts": _contacts(record),
        "columns": [items[:mid], items[mid:]],
    }


def project_view(store: DirectoryStore) -> dict:
    """The store's visible subset as cards, with the load/no-results signal."""
    message = store.message
    if store.status == LoadStatus.OK and not store.visible:
        message = NO_MATCHES_MESSAGE
    return {
        "status": store.status.value,
        "message": message,
        "headers": list(store.headers),
        "query": store.query,
        "total": store.row_count(),
        "count": len(store.visible),
        "people": [project_card(r) for r in store.visible],
    }
