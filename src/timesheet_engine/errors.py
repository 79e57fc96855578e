"""
Timesheet Errors

Every failure of a run is terminal: nothing is retried and nothing is saved.
"""
from __future__ import annotations


class TimesheetError(Exception):
    """Base class for failures that abort a timesheet run."""
    pass


class InputUnreadable(TimesheetError):
    """Raised when the input template is missing, corrupt or lacks the sheet."""
    pass


class OutputDirUnreadable(TimesheetError):
    """Raised when the output directory does not exist."""
    pass


class ColumnNotFound(TimesheetError):
    """Raised when no month column carries the target month label."""
    pass


class FormulaEvaluationFailed(TimesheetError):
    """Raised when a balance formula cannot be evaluated."""
    pass


class SaveFailed(TimesheetError):
    """Raised when the generated workbook cannot be written."""
    pass
