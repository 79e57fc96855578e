"""
Balance Carry-Forward

Keeps the leave balance chain of a month column current: sets the days
earned, optionally the leave taken, and replaces the starting and new
balance formulas with their evaluated values.
"""
from __future__ import annotations

from typing import Any, Protocol

from openpyxl.worksheet.worksheet import Worksheet

from timesheet_engine.errors import FormulaEvaluationFailed
from timesheet_engine.models import SheetLayout


class FormulaEvaluator(Protocol):
    """Evaluates the formula stored at a cell of a worksheet."""

    def evaluate(self, sheet: Worksheet, coordinate: str) -> Any:
        ...


def is_formula(value: Any) -> bool:
    return isinstance(value, str) and value.startswith("=")


def is_error_value(value: Any) -> bool:
    """Excel error results such as #REF!, #DIV/0! or #VALUE!."""
    return isinstance(value, str) and value.startswith("#")


class CarryForwardUpdater:
    """
    Recomputes the balance fields of month columns.
    
    The formula engine is injected so the updater can run against any
    evaluator, including stubs.
    """

    def __init__(self, evaluator: FormulaEvaluator, layout: SheetLayout):
        self.evaluator = evaluator
        self.layout = layout

    def update(self, sheet: Worksheet, column: str, leave: int = 0) -> None:
        """
        Update one month column.
        
        Args:
            sheet: Worksheet being filled
            column: Month column letter
            leave: Leave days to record; only written when greater than zero
        
        Raises:
            FormulaEvaluationFailed: If a balance formula fails to evaluate
        """
        layout = self.layout
        sheet[layout.cell(column, layout.days_earned_row)] = layout.days_earned
        self.snapshot(sheet, layout.cell(column, layout.starting_balance_row))
        if leave > 0:
            sheet[layout.cell(column, layout.leave_row)] = leave
        self.snapshot(sheet, layout.cell(column, layout.new_balance_row))

    def snapshot(self, sheet: Worksheet, coordinate: str) -> Any:
        """Evaluate the formula at ``coordinate`` and store the result in its place."""
        cell = sheet[coordinate]
        if not is_formula(cell.value):
            return cell.value

        result = self.evaluator.evaluate(sheet, coordinate)
        if is_error_value(result):
            raise FormulaEvaluationFailed(
                f"{sheet.title}!{coordinate} evaluated to {result} ({cell.value})"
            )
        cell.value = result
        return result
