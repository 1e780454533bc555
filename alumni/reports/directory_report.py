"""
Directory Report — the visible people as JSON cards or an Excel workbook.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from alumni.data.store import DirectoryStore
from alumni.excel.writer import ExcelWriter
from alumni.reports.cards import linkedin_url, project_view, year_display


DIRECTORY_COLS = [
    ("name", "text", "Name"),
    ("role", "text", "Position"),
    ("organization", "text", "Organization"),
    ("program", "text", "Department"),
    ("degree", "text", "Degree"),
    ("years", "text", "Year"),
    ("highest_education", "text", "Highest Education"),
    ("location", "text", "Current Location"),
    ("district_in_home_country", "text", "Home Country Location"),
    ("email", "email", "Email"),
    ("email2", "email", "Secondary Email"),
    ("phone", "text", "Phone"),
    ("linkedin", "link", "LinkedIn"),
    ("bio", "long", "Research Topic"),
]


def generate_json(store: DirectoryStore) -> dict:
    return project_view(store)


def _table_rows(store: DirectoryStore) -> list[dict]:
    rows = []
    for record in store.visible:
        row = dict(record)
        row["years"] = year_display(record)
        if record.get("linkedin"):
            row["linkedin"] = linkedin_url(record["linkedin"])
        rows.append(row)
    return rows


def generate_excel(store: DirectoryStore, output_path: str | Path) -> Path:
    """Write the store's visible people to a workbook at ``output_path``."""
    ew = ExcelWriter()

    ws = ew.add_sheet("Summary")
    search = f"Search: \"{store.query.strip()}\"" if store.query.strip() else "All people"
    ew.write_title(ws, "ALUMNI DIRECTORY",
                   f"{search}  |  Generated {datetime.now():%B %d, %Y}")

    row = ew.write_section(ws, 5, "OVERVIEW")
    ew.write_kpi_row(ws, row, [
        (store.row_count(), "PEOPLE IN DIRECTORY"),
        (len(store.visible), "MATCHING SEARCH"),
        (len(store.headers), "SHEET COLUMNS"),
    ])

    ws_people = ew.add_sheet("People")
    ew.write_table(ws_people, 1, DIRECTORY_COLS, _table_rows(store))

    return ew.save(output_path)
