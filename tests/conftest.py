"""Shared fixtures: template workbooks built in tmp_path."""
import re
from pathlib import Path

import pytest

from timesheet_engine.models import SheetLayout
from timesheet_io.writers import build_blank_template


OPENING_BALANCE = 10.0


@pytest.fixture
def layout() -> SheetLayout:
    return SheetLayout()


@pytest.fixture
def template_workbook(layout):
    return build_blank_template(layout, year=2023, opening_balance=OPENING_BALANCE)


@pytest.fixture
def template_path(tmp_path: Path, template_workbook) -> Path:
    path = tmp_path / "timesheet.xlsx"
    template_workbook.save(path)
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "gen"
    path.mkdir()
    return path


class ChainEvaluator:
    """
    Stand-in for the formula engine.

    Understands the references and +/- sums used by the balance chain;
    empty cells count as zero. Records every evaluated coordinate.
    """

    TERM = re.compile(r"([+-]?)\s*([A-Z]+[0-9]+)")

    def __init__(self, workbook=None):
        self.workbook = workbook
        self.calls: list[str] = []

    def evaluate(self, sheet, coordinate):
        self.calls.append(coordinate)
        return self._value(sheet, coordinate)

    def _value(self, sheet, coordinate):
        value = sheet[coordinate].value
        if value is None:
            return 0
        if not (isinstance(value, str) and value.startswith("=")):
            return value
        total = 0
        for sign, ref in self.TERM.findall(value[1:]):
            term = self._value(sheet, ref)
            total = total - term if sign == "-" else total + term
        return total


@pytest.fixture
def chain_evaluator_cls():
    return ChainEvaluator
