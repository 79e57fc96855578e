"""
Timesheet I/O Readers

YAML/JSON defaults files and the month ledger stored in a workbook.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from openpyxl.worksheet.worksheet import Worksheet

from timesheet_engine.models import MonthEntry, SheetLayout, TimesheetConfig


def parse_config_dict(data: dict[str, Any] | None) -> TimesheetConfig:
    """
    Parse a dictionary of defaults into a TimesheetConfig.
    
    An empty document yields the built-in defaults.
    """
    return TimesheetConfig.model_validate(data or {})


def read_yaml(path: str | Path) -> TimesheetConfig:
    path = Path(path)
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    return parse_config_dict(data)


def read_json(path: str | Path) -> TimesheetConfig:
    path = Path(path)
    with open(path, "r") as f:
        data = json.load(f)
    return parse_config_dict(data)


def read_config_file(path: str | Path) -> TimesheetConfig:
    """
    Read defaults from a file (auto-detects format).
    
    Args:
        path: Path to a YAML or JSON file
    
    Returns:
        TimesheetConfig model
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in (".yaml", ".yml"):
        return read_yaml(path)
    elif suffix == ".json":
        return read_json(path)
    else:
        raise ValueError(f"Unsupported config file format: {suffix}")


def read_month_entry(sheet: Worksheet, layout: SheetLayout, column: str) -> MonthEntry:
    """Current values of one month column."""
    def value(row: int):
        return sheet[layout.cell(column, row)].value

    return MonthEntry(
        column=column,
        label=value(layout.month_row),
        initials=value(layout.initials_row),
        supervisor_initials=value(layout.supervisor_initials_row),
        day_of_month=value(layout.day_of_month_row),
        starting_balance=value(layout.starting_balance_row),
        days_earned=value(layout.days_earned_row),
        leave=value(layout.leave_row),
        new_balance=value(layout.new_balance_row),
    )


def read_ledger(sheet: Worksheet, layout: SheetLayout) -> list[MonthEntry]:
    """All month columns of the sheet, in layout order."""
    return [read_month_entry(sheet, layout, column) for column in layout.month_columns()]
