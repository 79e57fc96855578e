"""
Timesheet Fill Runner

Runs one fill from disk to disk: check the output directory, locate the
input template, open it, apply the submission and save a dated copy.
Saving is the last step, so a failure anywhere leaves no output behind.
"""
from __future__ import annotations

from typing import Callable, Optional

from openpyxl import Workbook

from timesheet_engine.carry_forward import FormulaEvaluator
from timesheet_engine.models import RunOptions, RunResult
from timesheet_engine.updater import TimesheetUpdater
from timesheet_io.evaluators import ExcelFormulaEvaluator
from timesheet_io.readers import read_month_entry
from timesheet_io.template_selection import locate_input_template
from timesheet_io.workbook import (
    check_output_dir,
    open_template,
    output_path,
    save_output,
    select_sheet,
)


EvaluatorFactory = Callable[[Workbook], FormulaEvaluator]


def fill_timesheet(options: RunOptions, evaluator_factory: Optional[EvaluatorFactory] = None) -> RunResult:
    """
    Execute a fill run.

    Args:
        options: Resolved run options
        evaluator_factory: Builds the formula evaluator for the opened
            workbook; defaults to ExcelFormulaEvaluator

    Returns:
        RunResult describing the input used and the file written

    Raises:
        TimesheetError: Any failure; nothing is saved in that case
    """
    evaluator_factory = evaluator_factory or ExcelFormulaEvaluator
    record = options.submission
    layout = options.layout

    output_dir = check_output_dir(options.output_dir)
    source = locate_input_template(
        options.template, output_dir, record.year, record.month, chain=options.chain
    )
    workbook = open_template(source)
    sheet = select_sheet(workbook, options.sheet_index)

    column = TimesheetUpdater(record, layout, evaluator_factory(workbook)).run(sheet)

    destination = save_output(workbook, output_path(output_dir, record.period_end), source=source)
    return RunResult(
        input_path=source,
        output_path=destination,
        column=column,
        chained=source != options.template,
        entry=read_month_entry(sheet, layout, column),
    )
