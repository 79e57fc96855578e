"""
Timesheet I/O Writers

Blank formula-driven template workbooks and defaults file skeletons.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from timesheet_engine.dates import MONTH_ABBREVIATIONS
from timesheet_engine.models import SheetLayout, TimesheetConfig


DEFAULT_SHEET_TITLE = "Leave Record"
LABEL_COLUMN = "B"

ROW_LABELS = {
    "initials_row": "Employee initials",
    "supervisor_initials_row": "Supervisor initials",
    "day_of_month_row": "Date (DD/MM)",
    "starting_balance_row": "Balance brought forward",
    "days_earned_row": "Days earned",
    "leave_row": "Leave taken",
    "new_balance_row": "New balance",
}


def _style_header(ws, cells: list[str]) -> None:
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="2E75B6", end_color="2E75B6", fill_type="solid")
    thin_border = Border(
        left=Side(style="thin"),
        right=Side(style="thin"),
        top=Side(style="thin"),
        bottom=Side(style="thin"),
    )
    for coordinate in cells:
        cell = ws[coordinate]
        cell.font = header_font
        cell.fill = header_fill
        cell.border = thin_border
        cell.alignment = Alignment(horizontal="center")


def _apply_number_format(ws, cells: list[str], fmt: str) -> None:
    for coordinate in cells:
        ws[coordinate].number_format = fmt


def build_blank_template(
    layout: Optional[SheetLayout] = None,
    year: Optional[int] = None,
    opening_balance: float = 0.0,
    sheet_title: str = DEFAULT_SHEET_TITLE,
) -> Workbook:
    """
    Build a template workbook matching ``layout``.

    Each month column gets its label, a starting balance formula pointing at
    the previous column's new balance, a zero leave count and a new balance
    formula. The column before the first month holds the opening balance.

    Args:
        layout: Template layout (defaults to the standard layout)
        year: Year shown in the title, if any
        opening_balance: Balance carried into the first month
        sheet_title: Title of the single worksheet

    Returns:
        Workbook with one worksheet
    """
    layout = layout or SheetLayout()
    if layout.base_column_index < 4:
        raise ValueError("Base column must leave room for the label and opening balance columns")

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title

    ws["A1"] = "Leave Record" if year is None else f"Leave Record {year}"
    ws["A1"].font = Font(bold=True, size=14)
    ws[layout.submitter_name_cell] = "Name:"
    ws[layout.submission_date_cell] = "Date:"

    for field, label in ROW_LABELS.items():
        ws[layout.cell(LABEL_COLUMN, getattr(layout, field))] = label

    opening_column = layout.previous_column(layout.base_column)
    ws[layout.cell(opening_column, layout.month_row)] = "Opening"
    ws[layout.cell(opening_column, layout.new_balance_row)] = opening_balance

    headers = [layout.cell(opening_column, layout.month_row)]
    balance_cells = [layout.cell(opening_column, layout.new_balance_row)]
    for offset, column in enumerate(layout.month_columns()):
        previous = layout.previous_column(column)
        start = layout.cell(column, layout.starting_balance_row)
        earned = layout.cell(column, layout.days_earned_row)
        leave = layout.cell(column, layout.leave_row)
        new = layout.cell(column, layout.new_balance_row)

        ws[layout.cell(column, layout.month_row)] = MONTH_ABBREVIATIONS[offset]
        ws[start] = f"={layout.cell(previous, layout.new_balance_row)}"
        ws[leave] = 0
        ws[new] = f"={start}+{earned}-{leave}"

        headers.append(layout.cell(column, layout.month_row))
        balance_cells.extend([start, earned, leave, new])

    _style_header(ws, headers)
    _apply_number_format(ws, balance_cells, "0.0")
    ws.column_dimensions[LABEL_COLUMN].width = 24
    return wb


def export_blank_template(path: str | Path, **kwargs) -> Path:
    """Write a blank template workbook to ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    build_blank_template(**kwargs).save(path)
    return path


def export_config_template(path: str | Path, config: Optional[TimesheetConfig] = None) -> Path:
    """Write a YAML defaults file that can be edited and passed to ``--config``."""
    config = config or TimesheetConfig()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
    return path
