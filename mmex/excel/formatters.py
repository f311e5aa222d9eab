"""
Cell and row formatting helpers.
"""
from __future__ import annotations

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from mmex.excel.styles import (
    HEADER_FONT, HEADER_FILL, DATA_FONT, NEGATIVE_FONT, TOTAL_FONT,
    KPI_VALUE_FONT, KPI_NEGATIVE_FONT, KPI_LABEL_FONT, KPI_FILL,
    STRIPE_FILL, TOTAL_FILL, THIN_BORDER, TOTAL_BORDER,
    CENTER, LEFT, RIGHT, NUMBER_FORMATS, NUMERIC_TYPES,
)


def format_header_row(ws: Worksheet, row_num: int, num_cols: int) -> None:
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row_num, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = THIN_BORDER


def format_data_cell(
    ws: Worksheet,
    row_num: int,
    col_num: int,
    value,
    col_type: str = "text",
    is_total: bool = False,
) -> None:
    """Write one value with the font, border and number format for its type."""
    cell = ws.cell(row=row_num, column=col_num)
    cell.value = value
    if is_total:
        cell.font = TOTAL_FONT
    elif col_type == "currency" and isinstance(value, (int, float)) and value < 0:
        cell.font = NEGATIVE_FONT
    else:
        cell.font = DATA_FONT
    cell.border = TOTAL_BORDER if is_total else THIN_BORDER
    cell.alignment = RIGHT if col_type in NUMERIC_TYPES else LEFT
    if col_type in NUMBER_FORMATS:
        cell.number_format = NUMBER_FORMATS[col_type]

    if is_total:
        cell.fill = TOTAL_FILL
    elif row_num % 2 == 0:
        cell.fill = STRIPE_FILL


def auto_column_width(ws: Worksheet, min_width: int = 10, max_width: int = 50) -> None:
    for column in ws.iter_cols():
        longest = max((len(str(c.value)) for c in column if c.value is not None), default=0)
        ws.column_dimensions[get_column_letter(column[0].column)].width = (
            min(max(longest + 2, min_width), max_width)
        )


def add_kpi_card(ws: Worksheet, row: int, col: int, value, label: str, format_type: str = "currency") -> None:
    """Large value with a small caption underneath."""
    value_cell = ws.cell(row=row, column=col)
    value_cell.value = value
    negative = isinstance(value, (int, float)) and value < 0
    value_cell.font = KPI_NEGATIVE_FONT if negative else KPI_VALUE_FONT
    value_cell.fill = KPI_FILL
    value_cell.alignment = CENTER
    if format_type in NUMBER_FORMATS:
        value_cell.number_format = NUMBER_FORMATS[format_type]

    label_cell = ws.cell(row=row + 1, column=col)
    label_cell.value = label
    label_cell.font = KPI_LABEL_FONT
    label_cell.alignment = CENTER
