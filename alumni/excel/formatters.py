"""
Cell and row formatting for directory sheets.

Column types: ``text`` (default), ``email`` (mailto link), ``link`` (URL)
and ``long`` (wrapped free text).
"""
from __future__ import annotations

from openpyxl.cell.cell import Cell
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from alumni.excel.styles import (
    CELL_BORDER, CENTER, DATA_FONT, HEADER_BORDER, HEADER_FILL, HEADER_FONT,
    KPI_LABEL_FONT, KPI_VALUE_FONT, LEFT, LINK_FONT, STRIPE_FILL, WRAP,
)


def format_header_row(ws: Worksheet, row_num: int, labels: list[str]) -> None:
    """Write column labels with the header styling."""
    for col, label in enumerate(labels, 1):
        cell = ws.cell(row=row_num, column=col, value=label)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = HEADER_BORDER
        cell.alignment = CENTER


def _hyperlink(cell: Cell, target: str) -> None:
    cell.hyperlink = target
    cell.font = LINK_FONT


def format_data_cell(ws: Worksheet, row_num: int, col_num: int, value: str, col_type: str = "text") -> None:
    """Write one table cell. Blank values get styling only."""
    cell = ws.cell(row=row_num, column=col_num, value=value or None)
    if isinstance(cell.value, str):
        # sheet text is never a formula, even with a leading "="
        cell.data_type = "s"
    cell.font = DATA_FONT
    cell.border = CELL_BORDER
    cell.alignment = WRAP if col_type == "long" else LEFT

    if value and col_type == "email":
        _hyperlink(cell, f"mailto:{value}")
    elif value and col_type == "link":
        _hyperlink(cell, value)

    if row_num % 2 == 0:
        cell.fill = STRIPE_FILL


def auto_column_width(ws: Worksheet, min_width: int = 10, max_width: int = 50) -> None:
    """Size each column to its longest value, within bounds."""
    for idx, values in enumerate(ws.iter_cols(values_only=True), 1):
        longest = max((len(str(v)) for v in values if v), default=0)
        ws.column_dimensions[get_column_letter(idx)].width = min(max(longest + 2, min_width), max_width)


def add_kpi_card(ws: Worksheet, row: int, col: int, value: int, label: str) -> None:
    """A big count with a small caption underneath."""
    figure = ws.cell(row=row, column=col, value=value)
    figure.font = KPI_VALUE_FONT
    figure.alignment = CENTER
    figure.number_format = "#,##0"

    caption = ws.cell(row=row + 1, column=col, value=label)
    caption.font = KPI_LABEL_FONT
    caption.alignment = CENTER
