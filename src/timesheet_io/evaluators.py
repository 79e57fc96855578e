"""
Formula Evaluators

Formula evaluation backed by the ``formulas`` Excel engine. The engine
reads workbooks from disk, so each evaluation writes a scratch copy of the
in-memory workbook first; values written earlier in the run are therefore
visible to later formulas.
"""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

import formulas
import numpy as np
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from timesheet_engine.errors import FormulaEvaluationFailed


SCRATCH_NAME = "evaluate.xlsx"


def _find_result(solution, sheet_title: str, coordinate: str):
    """Look up a single-cell result; keys read like ``'[book.xlsx]SHEET'!D49``."""
    suffix = f"]{sheet_title}'!{coordinate}".upper()
    for key, value in solution.items():
        if isinstance(key, str) and key.upper().endswith(suffix):
            return value
    raise FormulaEvaluationFailed(f"No result computed for {sheet_title}!{coordinate}")


def _to_scalar(result: Any) -> Any:
    value = getattr(result, "value", result)
    array = np.asarray(value, dtype=object)
    if array.size == 0:
        return None
    item = array.ravel()[0]
    if isinstance(item, np.generic):
        item = item.item()
    return item


class ExcelFormulaEvaluator:
    """
    Evaluates cells of an open workbook with the ``formulas`` engine.

    The engine cannot resolve sheet titles containing an apostrophe, so such
    a sheet is saved under a temporary title and renamed back afterwards.
    Formulas on other sheets that name it explicitly are not rewritten.
    """

    def __init__(self, workbook: Workbook):
        self.workbook = workbook

    def evaluate(self, sheet: Worksheet, coordinate: str) -> Any:
        address = f"{sheet.title}!{coordinate}"
        title = sheet.title
        if "'" in title:
            sheet.title = title.replace("'", "")
        try:
            with tempfile.TemporaryDirectory() as scratch_dir:
                scratch = Path(scratch_dir) / SCRATCH_NAME
                self.workbook.save(scratch)
                try:
                    model = formulas.ExcelModel().loads(str(scratch)).finish()
                    solution = model.calculate()
                except Exception as err:
                    raise FormulaEvaluationFailed(f"Failed to evaluate {address}: {err}") from err
                result = _find_result(solution, sheet.title, coordinate)
        finally:
            sheet.title = title
        return _to_scalar(result)
