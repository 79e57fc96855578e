"""
Unit Tests for Balance Carry-Forward
"""
import pytest

from timesheet_engine.carry_forward import CarryForwardUpdater, is_error_value, is_formula
from timesheet_engine.errors import FormulaEvaluationFailed


class FixedEvaluator:
    def __init__(self, result):
        self.result = result

    def evaluate(self, sheet, coordinate):
        return self.result


class RaisingEvaluator:
    def evaluate(self, sheet, coordinate):
        raise FormulaEvaluationFailed(f"cannot evaluate {coordinate}")


@pytest.fixture
def sheet(template_workbook):
    return template_workbook.active


class TestCarryForwardUpdater:
    def test_snapshots_balances(self, sheet, layout, chain_evaluator_cls):
        evaluator = chain_evaluator_cls()
        CarryForwardUpdater(evaluator, layout).update(sheet, "D")

        assert sheet["D47"].value == 2.5
        assert sheet["D46"].value == pytest.approx(10.0)
        assert sheet["D49"].value == pytest.approx(12.5)
        assert evaluator.calls == ["D46", "D49"]

    def test_chain_across_columns(self, sheet, layout, chain_evaluator_cls):
        updater = CarryForwardUpdater(chain_evaluator_cls(), layout)
        for column in "DEF":
            updater.update(sheet, column)
        assert sheet["F46"].value == pytest.approx(15.0)
        assert sheet["F49"].value == pytest.approx(17.5)
        assert sheet["G46"].value == "=F49"

    def test_zero_leave_leaves_field_untouched(self, sheet, layout, chain_evaluator_cls):
        sheet["D48"] = None
        CarryForwardUpdater(chain_evaluator_cls(), layout).update(sheet, "D", leave=0)
        assert sheet["D48"].value is None

    def test_leave_reduces_new_balance(self, sheet, layout, chain_evaluator_cls):
        CarryForwardUpdater(chain_evaluator_cls(), layout).update(sheet, "D", leave=3)
        assert sheet["D48"].value == 3
        assert sheet["D49"].value == pytest.approx(9.5)

    def test_literals_not_reevaluated(self, sheet, layout, chain_evaluator_cls):
        sheet["D46"] = 4.0
        sheet["D49"] = 6.5
        evaluator = chain_evaluator_cls()
        CarryForwardUpdater(evaluator, layout).update(sheet, "D")
        assert evaluator.calls == []
        assert sheet["D49"].value == 6.5

    def test_custom_days_earned(self, sheet, layout, chain_evaluator_cls):
        layout = layout.model_copy(update={"days_earned": 1.75})
        CarryForwardUpdater(chain_evaluator_cls(), layout).update(sheet, "D")
        assert sheet["D47"].value == 1.75
        assert sheet["D49"].value == pytest.approx(11.75)

    def test_error_result_is_fatal(self, sheet, layout):
        with pytest.raises(FormulaEvaluationFailed, match="#REF!"):
            CarryForwardUpdater(FixedEvaluator("#REF!"), layout).update(sheet, "D")
        assert sheet["D46"].value == "=C49"

    def test_evaluator_failure_propagates(self, sheet, layout):
        with pytest.raises(FormulaEvaluationFailed):
            CarryForwardUpdater(RaisingEvaluator(), layout).update(sheet, "D")


class TestValueChecks:
    def test_is_formula(self):
        assert is_formula("=C49")
        assert not is_formula("C49")
        assert not is_formula(12.5)
        assert not is_formula(None)

    def test_is_error_value(self):
        assert is_error_value("#DIV/0!")
        assert not is_error_value(0)
        assert not is_error_value("Jan")
