"""
Submission Field Writing

Writes the submitter identity into the sheet-global cells and the
per-month identity fields into the resolved month column.
"""
from __future__ import annotations

from openpyxl.worksheet.worksheet import Worksheet

from timesheet_engine.dates import format_day_of_month, format_submission_date
from timesheet_engine.models import SheetLayout, SubmissionRecord


def write_submission_header(sheet: Worksheet, layout: SheetLayout, record: SubmissionRecord) -> None:
    """Write the "Name:" and "Date:" labels."""
    sheet[layout.submitter_name_cell] = f"Name: {record.name}"
    sheet[layout.submission_date_cell] = f"Date: {format_submission_date(record.period_end)}"


def write_month_fields(
    sheet: Worksheet,
    layout: SheetLayout,
    column: str,
    record: SubmissionRecord,
) -> None:
    """Write initials, supervisor initials and the DD/MM month end into ``column``."""
    sheet[layout.cell(column, layout.initials_row)] = record.initials
    sheet[layout.cell(column, layout.supervisor_initials_row)] = record.supervisor_initials
    sheet[layout.cell(column, layout.day_of_month_row)] = format_day_of_month(record.period_end)
