"""
Month Column Resolution

Scans the month header row for the target month label. Every visited
column is handed to a visitor before the label check, so the balance chain
of all months up to and including the target stays consistent.
"""
from __future__ import annotations

from typing import Callable, Optional

from openpyxl.worksheet.worksheet import Worksheet

from timesheet_engine.errors import ColumnNotFound
from timesheet_engine.models import SheetLayout


ColumnVisitor = Callable[[str, bool], None]


def read_month_label(sheet: Worksheet, layout: SheetLayout, column: str):
    return sheet[layout.cell(column, layout.month_row)].value


def resolve_month_column(
    sheet: Worksheet,
    layout: SheetLayout,
    label: str,
    visit: Optional[ColumnVisitor] = None,
) -> str:
    """
    Find the column whose header carries ``label``.
    
    Columns are scanned from the base column for ``layout.months`` columns.
    Comparison is exact string equality; non-string headers never match.
    
    Args:
        sheet: Worksheet being filled
        layout: Template layout
        label: Three-letter month label, e.g. "Jan"
        visit: Called as ``visit(column, matched)`` for every scanned column,
            including the matching one
    
    Returns:
        Column letter of the matching month
    
    Raises:
        ColumnNotFound: If no scanned column carries the label
    """
    for column in layout.month_columns():
        matched = read_month_label(sheet, layout, column) == label
        if visit is not None:
            visit(column, matched)
        if matched:
            return column

    columns = layout.month_columns()
    raise ColumnNotFound(
        f"Month column for {label!r} not found in row {layout.month_row} "
        f"({columns[0]}..{columns[-1]})"
    )
