"""Workbook checks for the balance formula chain."""
from __future__ import annotations

from openpyxl.worksheet.worksheet import Worksheet

from timesheet_engine.carry_forward import is_formula
from timesheet_engine.models import SheetLayout


def pending_columns(sheet: Worksheet, layout: SheetLayout) -> list[str]:
    """Month columns whose new balance is still an unevaluated formula."""
    return [
        column
        for column in layout.month_columns()
        if is_formula(sheet[layout.cell(column, layout.new_balance_row)].value)
    ]
