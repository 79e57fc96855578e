"""
Timesheet Date Helpers

Month labels and the date formats written into the workbook and used in
generated file names. Labels are fixed English abbreviations so results do
not depend on the process locale.
"""
from __future__ import annotations

from datetime import date, timedelta


MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def month_label(month: int) -> str:
    """Three-letter label for a 1-based month number."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return MONTH_ABBREVIATIONS[month - 1]


def last_day_of_month(year: int, month: int) -> date:
    """
    Last calendar day of a month.
    
    Computed as "day zero" of the following month: the first day of the
    next month minus one day. Covers 28/29/30/31-day months and leap years
    without a lookup table.
    
    Args:
        year: Calendar year
        month: 1-based month number
    
    Returns:
        Date of the final day of the month
    """
    month_label(month)
    next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)
    return date(next_year, next_month, 1) - timedelta(days=1)


def previous_month(year: int, month: int) -> tuple[int, int]:
    """(year, month) of the month before, wrapping January to December."""
    month_label(month)
    if month == 1:
        return year - 1, 12
    return year, month - 1


def format_file_date(day: date) -> str:
    """DD-Mon-YYYY, as used in generated file names."""
    return f"{day.day:02d}-{MONTH_ABBREVIATIONS[day.month - 1]}-{day.year:04d}"


def format_submission_date(day: date) -> str:
    """DD-MM-YYYY, as written next to the submitter name."""
    return f"{day.day:02d}-{day.month:02d}-{day.year:04d}"


def format_day_of_month(day: date) -> str:
    """DD/MM, as written into a month column."""
    return f"{day.day:02d}/{day.month:02d}"
