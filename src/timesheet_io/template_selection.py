"""
Input Template Selection

When chaining is enabled the previous month's generated workbook becomes
the input, so balances accumulate from run to run. A timesheet covers one
calendar year, so chaining stops at January.
"""
from __future__ import annotations

from pathlib import Path

from timesheet_engine.dates import last_day_of_month, previous_month
from timesheet_io.workbook import output_path


def previous_output_path(output_dir: str | Path, year: int, month: int) -> Path:
    """Generated file name of the month before (year, month)."""
    prev_year, prev_month = previous_month(year, month)
    return output_path(output_dir, last_day_of_month(prev_year, prev_month))


def locate_input_template(
    template: str | Path,
    output_dir: str | Path,
    year: int,
    month: int,
    chain: bool = True,
) -> Path:
    """
    Pick the workbook a run starts from.

    Returns the previous month's output when chaining and that file exists,
    otherwise the base template. January always starts from the base
    template: the previous December's output belongs to another year's
    sheet. No locking is done.
    """
    if chain and month > 1:
        candidate = previous_output_path(output_dir, year, month)
        if candidate.is_file():
            return candidate
    return Path(template)
