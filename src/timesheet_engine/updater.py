"""
Timesheet Updater

Fills one month of an open worksheet: writes the submission header,
resolves the month column while carrying balances forward and writes the
per-month fields. Loading and saving workbooks is left to the caller.
"""
from __future__ import annotations

from openpyxl.worksheet.worksheet import Worksheet

from timesheet_engine.carry_forward import CarryForwardUpdater, FormulaEvaluator
from timesheet_engine.field_writer import write_month_fields, write_submission_header
from timesheet_engine.models import SheetLayout, SubmissionRecord
from timesheet_engine.resolver import resolve_month_column


class TimesheetUpdater:
    """
    Applies a submission record to a timesheet worksheet.

    Every column scanned on the way to the target month has its days
    earned and balances recomputed, not just the target column.
    """

    def __init__(self, record: SubmissionRecord, layout: SheetLayout, evaluator: FormulaEvaluator):
        """
        Initialize updater.

        Args:
            record: Submission being written
            layout: Template layout
            evaluator: Formula engine used to snapshot balance formulas
        """
        self.record = record
        self.layout = layout
        self.carry_forward = CarryForwardUpdater(evaluator, layout)

    def run(self, sheet: Worksheet) -> str:
        """
        Fill ``sheet`` in place.

        Returns:
            Column letter of the filled month

        Raises:
            ColumnNotFound: If the month label is missing
            FormulaEvaluationFailed: If a balance formula fails to evaluate
        """
        record = self.record
        layout = self.layout

        write_submission_header(sheet, layout, record)
        # The matching column receives the leave count before its new balance
        # is evaluated; earlier columns only get their days earned refreshed.
        column = resolve_month_column(
            sheet,
            layout,
            record.month_label,
            visit=lambda col, matched: self.carry_forward.update(
                sheet, col, leave=record.leave if matched else 0
            ),
        )
        write_month_fields(sheet, layout, column, record)
        return column
