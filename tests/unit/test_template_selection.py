"""
Unit Tests for Input Template Selection and Output Paths
"""
from datetime import date
from pathlib import Path

import pytest
from openpyxl import Workbook

from timesheet_engine.errors import InputUnreadable, OutputDirUnreadable, SaveFailed
from timesheet_io.template_selection import locate_input_template, previous_output_path
from timesheet_io.workbook import (
    check_output_dir,
    open_template,
    output_path,
    save_output,
    select_sheet,
)


class TestOutputPath:
    def test_name_uses_month_end(self):
        assert output_path("gen", date(2023, 1, 31)) == Path("gen/timesheet-31-Jan-2023.xlsx")

    def test_previous_output_wraps_year(self, tmp_path):
        assert previous_output_path(tmp_path, 2024, 1) == tmp_path / "timesheet-31-Dec-2023.xlsx"
        assert previous_output_path(tmp_path, 2024, 3) == tmp_path / "timesheet-29-Feb-2024.xlsx"


class TestLocateInputTemplate:
    def test_falls_back_to_base_template(self, template_path, output_dir):
        assert locate_input_template(template_path, output_dir, 2023, 2) == template_path

    def test_uses_previous_output(self, template_path, output_dir):
        previous = output_dir / "timesheet-31-Jan-2023.xlsx"
        previous.write_bytes(b"")
        assert locate_input_template(template_path, output_dir, 2023, 2) == previous

    def test_chain_disabled(self, template_path, output_dir):
        (output_dir / "timesheet-31-Jan-2023.xlsx").write_bytes(b"")
        assert locate_input_template(template_path, output_dir, 2023, 2, chain=False) == template_path

    def test_only_immediately_preceding_month(self, template_path, output_dir):
        (output_dir / "timesheet-31-Jan-2023.xlsx").write_bytes(b"")
        assert locate_input_template(template_path, output_dir, 2023, 3) == template_path

    def test_january_does_not_chain_from_previous_year(self, template_path, output_dir):
        (output_dir / "timesheet-31-Dec-2023.xlsx").write_bytes(b"")
        assert locate_input_template(template_path, output_dir, 2024, 1) == template_path

    def test_december_chains_from_november(self, template_path, output_dir):
        previous = output_dir / "timesheet-30-Nov-2023.xlsx"
        previous.write_bytes(b"")
        assert locate_input_template(template_path, output_dir, 2023, 12) == previous


class TestWorkbookIO:
    def test_missing_output_dir(self, tmp_path):
        with pytest.raises(OutputDirUnreadable):
            check_output_dir(tmp_path / "gen")

    def test_missing_template(self, tmp_path):
        with pytest.raises(InputUnreadable):
            open_template(tmp_path / "missing.xlsx")

    def test_corrupt_template(self, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_text("not a workbook")
        with pytest.raises(InputUnreadable):
            open_template(path)

    def test_opens_formulas(self, template_path):
        wb = open_template(template_path)
        assert wb.active["D46"].value == "=C49"

    def test_sheet_index(self):
        wb = Workbook()
        wb.create_sheet("Second")
        assert select_sheet(wb, 1).title == "Second"
        with pytest.raises(InputUnreadable):
            select_sheet(wb, 2)

    def test_never_overwrites_source(self, template_path):
        wb = open_template(template_path)
        with pytest.raises(SaveFailed):
            save_output(wb, template_path, source=template_path)

    def test_save_into_missing_directory(self, tmp_path):
        with pytest.raises(SaveFailed):
            save_output(Workbook(), tmp_path / "nope" / "out.xlsx")
