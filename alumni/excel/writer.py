"""
ExcelWriter — builds the directory workbook sheet by sheet.
"""
from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from alumni.excel.formatters import add_kpi_card, auto_column_width, format_data_cell, format_header_row
from alumni.excel.styles import SECTION_FONT, SUBTITLE_FONT, TITLE_FONT

ColSpec = tuple[str, str, str]  # (record key, column type, label)


class ExcelWriter:
    """Workbook under construction; ``save`` writes it out."""

    def __init__(self) -> None:
        self.wb = Workbook()
        # Workbook() starts with one blank sheet; the first add_sheet takes it over
        self._unused: Worksheet | None = self.wb.active

    def add_sheet(self, title: str) -> Worksheet:
        if self._unused is not None:
            ws, self._unused = self._unused, None
            ws.title = title
            return ws
        return self.wb.create_sheet(title=title)

    def write_title(self, ws: Worksheet, title: str, subtitle: str, width: int = 6) -> int:
        """Title and subtitle across the first ``width`` columns. Returns the next free row."""
        for row, (text, font) in enumerate(((title, TITLE_FONT), (subtitle, SUBTITLE_FONT)), 1):
            ws.cell(row=row, column=1, value=text).font = font
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=width)
        ws.row_dimensions[1].height = 30
        return 4

    def write_section(self, ws: Worksheet, row: int, title: str) -> int:
        ws.cell(row=row, column=1, value=title).font = SECTION_FONT
        return row + 2

    def write_kpi_row(self, ws: Worksheet, row: int, kpis: list[tuple[int, str]], spacing: int = 2) -> int:
        """One KPI card per (value, label), ``spacing`` columns apart. Returns the next free row."""
        for i, (value, label) in enumerate(kpis):
            add_kpi_card(ws, row, 1 + i * spacing, value, label)
            ws.column_dimensions[ws.cell(row=row, column=1 + i * spacing).column_letter].width = 22
        return row + 3

    def write_table(self, ws: Worksheet, start_row: int, columns: list[ColSpec], rows: list[dict]) -> int:
        """Header plus one row per dict, frozen below the header. Returns the row after the table."""
        format_header_row(ws, start_row, [label for _, _, label in columns])
        for offset, record in enumerate(rows, 1):
            for col, (key, col_type, _) in enumerate(columns, 1):
                format_data_cell(ws, start_row + offset, col, record.get(key) or "", col_type)

        auto_column_width(ws)
        ws.freeze_panes = ws.cell(row=start_row + 1, column=1)
        ws.auto_filter.ref = ws.dimensions
        return start_row + len(rows) + 1

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
