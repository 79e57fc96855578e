"""
Timesheet Workbook I/O

Opening templates, selecting the working sheet and saving generated copies.
"""
from __future__ import annotations

import zipfile
from datetime import date
from pathlib import Path

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from timesheet_engine.dates import format_file_date
from timesheet_engine.errors import InputUnreadable, OutputDirUnreadable, SaveFailed


OUTPUT_PREFIX = "timesheet-"
OUTPUT_SUFFIX = ".xlsx"


def output_path(output_dir: str | Path, period_end: date) -> Path:
    """Path of the generated workbook for the month ending on ``period_end``."""
    return Path(output_dir) / f"{OUTPUT_PREFIX}{format_file_date(period_end)}{OUTPUT_SUFFIX}"


def check_output_dir(output_dir: str | Path) -> Path:
    output_dir = Path(output_dir)
    if not output_dir.is_dir():
        raise OutputDirUnreadable(f"Output directory {output_dir} unreadable: not an existing directory")
    return output_dir


def open_template(path: str | Path) -> Workbook:
    """
    Load a template workbook with its formulas.
    
    Raises:
        InputUnreadable: If the file is missing or not a readable workbook
    """
    path = Path(path)
    if not path.is_file():
        raise InputUnreadable(f"Input template unreadable: {path} not found")
    try:
        return load_workbook(path, data_only=False)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as err:
        raise InputUnreadable(f"Failed to read input template {path}: {err}") from err


def select_sheet(workbook: Workbook, index: int) -> Worksheet:
    """Worksheet at a 0-based index."""
    sheets = workbook.worksheets
    if not 0 <= index < len(sheets):
        raise InputUnreadable(
            f"Sheet index {index} out of range: workbook has {len(sheets)} sheet(s)"
        )
    return sheets[index]


def save_output(workbook: Workbook, path: str | Path, source: str | Path | None = None) -> Path:
    """
    Save the filled workbook.
    
    Args:
        workbook: Filled workbook
        path: Destination path
        source: Path the workbook was loaded from; never overwritten
    
    Raises:
        SaveFailed: If the destination is the source or cannot be written
    """
    path = Path(path)
    if source is not None and path.resolve() == Path(source).resolve():
        raise SaveFailed(f"Refusing to overwrite input template {source}")
    try:
        workbook.save(path)
    except OSError as err:
        raise SaveFailed(f"Failed to create updated timesheet {path}: {err}") from err
    return path
