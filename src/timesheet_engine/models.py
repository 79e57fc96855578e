"""
Timesheet Engine Core Data Models

Pydantic models for the sheet layout, the per-run submission record and
run options. These replace module-level state: every operation receives
the layout and record it works on.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Optional

from openpyxl.utils import column_index_from_string, get_column_letter
from pydantic import BaseModel, Field, field_validator

from timesheet_engine.dates import last_day_of_month, month_label


# ============================================================================
# LAYOUT
# ============================================================================

class SheetLayout(BaseModel):
    """Cell addresses of a timesheet template."""
    base_column: str = Field("D", description="Column holding January")
    months: int = Field(12, ge=1, le=12, description="Number of month columns scanned")

    # Rows inside each month column
    month_row: int = Field(7, ge=1, description="Row of the month label")
    initials_row: int = Field(42, ge=1)
    supervisor_initials_row: int = Field(43, ge=1)
    day_of_month_row: int = Field(44, ge=1)
    starting_balance_row: int = Field(46, ge=1)
    days_earned_row: int = Field(47, ge=1)
    leave_row: int = Field(48, ge=1)
    new_balance_row: int = Field(49, ge=1)

    # Sheet-global cells
    submitter_name_cell: str = "A44"
    submission_date_cell: str = "A45"

    days_earned: float = Field(2.5, ge=0, description="Leave days earned per month")

    @field_validator("base_column")
    @classmethod
    def validate_base_column(cls, v: str) -> str:
        v = v.strip().upper()
        try:
            column_index_from_string(v)
        except ValueError:
            raise ValueError(f"Invalid column letter: {v!r}")
        return v

    @property
    def base_column_index(self) -> int:
        return column_index_from_string(self.base_column)

    def month_columns(self) -> list[str]:
        """Column letters scanned for month labels, in order."""
        start = self.base_column_index
        return [get_column_letter(start + offset) for offset in range(self.months)]

    def previous_column(self, column: str) -> str:
        """Column to the left of ``column``; its new balance opens ``column``."""
        index = column_index_from_string(column)
        if index <= 1:
            raise ValueError(f"Column {column} has no previous column")
        return get_column_letter(index - 1)

    @staticmethod
    def cell(column: str, row: int) -> str:
        return f"{column}{row}"


# ============================================================================
# SUBMISSION
# ============================================================================

class SubmissionRecord(BaseModel):
    """Everything one run writes into the workbook."""
    name: str = ""
    initials: str = ""
    supervisor_initials: str = ""
    month: int = Field(..., ge=1, le=12, description="1-based month number")
    year: int = Field(..., ge=1, le=9998)
    leave: int = Field(0, ge=0, description="Leave days taken in the month")

    @property
    def month_label(self) -> str:
        return month_label(self.month)

    @property
    def period_end(self) -> date:
        """Last day of the target month; the submission date of the sheet."""
        return last_day_of_month(self.year, self.month)


class RunOptions(BaseModel):
    """Resolved inputs of a single fill run."""
    template: Path = Path("timesheet.xlsx")
    output_dir: Path = Path("gen")
    sheet_index: int = Field(0, ge=0)
    chain: bool = True
    submission: SubmissionRecord
    layout: SheetLayout = Field(default_factory=SheetLayout)


# ============================================================================
# OUTPUTS
# ============================================================================

class MonthEntry(BaseModel):
    """Values of one month column as stored in the workbook."""
    column: str
    label: Optional[Any] = None
    initials: Optional[Any] = None
    supervisor_initials: Optional[Any] = None
    day_of_month: Optional[Any] = None
    starting_balance: Optional[Any] = None
    days_earned: Optional[Any] = None
    leave: Optional[Any] = None
    new_balance: Optional[Any] = None


class RunResult(BaseModel):
    """Outcome of a successful run."""
    input_path: Path
    output_path: Path
    column: str
    chained: bool = False
    entry: MonthEntry


# ============================================================================
# CONFIG FILE
# ============================================================================

class SubmitterDefaults(BaseModel):
    """Submitter identity used when the command line leaves it out."""
    name: str = ""
    initials: str = ""
    supervisor_initials: str = ""


class TimesheetConfig(BaseModel):
    """Contents of an optional YAML/JSON defaults file."""
    submitter: SubmitterDefaults = Field(default_factory=SubmitterDefaults)
    template: Path = Path("timesheet.xlsx")
    output_dir: Path = Path("gen")
    sheet: int = Field(0, ge=0, description="0-based sheet index")
    layout: SheetLayout = Field(default_factory=SheetLayout)
