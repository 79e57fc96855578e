"""
Timesheet CLI Application

Typer-based command-line interface for filling leave timesheets.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import typer
from openpyxl import load_workbook
from rich.console import Console

from timesheet_engine.models import RunOptions, SubmissionRecord, TimesheetConfig
from timesheet_io.readers import read_config_file, read_ledger
from timesheet_io.runner import fill_timesheet
from timesheet_io.workbook import select_sheet
from timesheet_io.writers import export_blank_template, export_config_template
from timesheet_io.xlsx_validation import pending_columns
from timesheet_ui_cli.display import display_ledger, display_run_result


app = typer.Typer(
    name="timesheet",
    help="Fill a monthly leave timesheet and save a dated copy",
    add_completion=False,
)

console = Console()


def _load_config(config_file: Optional[Path]) -> TimesheetConfig:
    """Read the defaults file, or fall back to built-in defaults."""
    if config_file is None:
        return TimesheetConfig()
    if not config_file.is_file():
        raise typer.BadParameter(f"Config file not found: {config_file}")
    return read_config_file(config_file)


def build_run_options(
    config: TimesheetConfig,
    template: Optional[Path] = None,
    name: Optional[str] = None,
    initials: Optional[str] = None,
    supervisor_initials: Optional[str] = None,
    sheet: Optional[int] = None,
    month: Optional[int] = None,
    year: Optional[int] = None,
    leave: int = 0,
    output_dir: Optional[Path] = None,
    chain: bool = True,
    today: Optional[date] = None,
) -> RunOptions:
    """Merge command-line values over config defaults; None means "not given"."""
    today = today or date.today()
    submitter = config.submitter
    record = SubmissionRecord(
        name=submitter.name if name is None else name,
        initials=submitter.initials if initials is None else initials,
        supervisor_initials=(
            submitter.supervisor_initials if supervisor_initials is None else supervisor_initials
        ),
        month=today.month if month is None else month,
        year=today.year if year is None else year,
        leave=leave,
    )
    return RunOptions(
        template=config.template if template is None else template,
        output_dir=config.output_dir if output_dir is None else output_dir,
        sheet_index=config.sheet if sheet is None else sheet,
        chain=chain,
        submission=record,
        layout=config.layout,
    )


@app.command()
def fill(
    template: Optional[Path] = typer.Option(
        None,
        "--file", "--template", "-f",
        help="Timesheet template file [default: timesheet.xlsx]",
    ),
    name: Optional[str] = typer.Option(None, "--name", help="Submitter name"),
    initials: Optional[str] = typer.Option(None, "--initials", help="Submitter initials"),
    supervisor_initials: Optional[str] = typer.Option(
        None,
        "--sinitials",
        help="Supervisor initials",
    ),
    sheet: Optional[int] = typer.Option(None, "--sheet", min=0, help="0-based sheet index [default: 0]"),
    month: Optional[int] = typer.Option(
        None,
        "--month",
        min=1,
        max=12,
        help="1-based month number [default: current month]",
    ),
    year: Optional[int] = typer.Option(None, "--year", help="Year [default: current year]"),
    leave: int = typer.Option(0, "--leave", min=0, help="Leave days taken in the month"),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir", "-o",
        help="Directory for generated timesheets [default: gen]",
    ),
    chain: bool = typer.Option(
        True,
        "--chain/--no-chain",
        help="Start from the previous month's generated timesheet when it exists",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="YAML or JSON file with default values",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print progress"),
) -> None:
    """
    Fill one month of the timesheet.

    Writes the submitter fields into the month column, carries leave
    balances forward and saves gen/timesheet-<DD-Mon-YYYY>.xlsx.
    Prints nothing on success unless --verbose is given.
    """
    try:
        config = _load_config(config_file)
        options = build_run_options(
            config,
            template=template,
            name=name,
            initials=initials,
            supervisor_initials=supervisor_initials,
            sheet=sheet,
            month=month,
            year=year,
            leave=leave,
            output_dir=output_dir,
            chain=chain,
        )
        if verbose:
            record = options.submission
            console.print(f"[dim]Filling {record.month_label} {record.year} from {options.template}[/dim]")

        result = fill_timesheet(options)

        if verbose:
            display_run_result(result)

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


@app.command()
def show(
    input_file: Path = typer.Argument(..., help="Timesheet workbook to display"),
    sheet: Optional[int] = typer.Option(None, "--sheet", min=0, help="0-based sheet index [default: 0]"),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="YAML or JSON file with layout overrides",
    ),
) -> None:
    """
    Display the month ledger of a timesheet workbook.
    """
    try:
        if not input_file.is_file():
            raise typer.BadParameter(f"Input file not found: {input_file}")
        config = _load_config(config_file)
        wb = load_workbook(input_file, data_only=False)
        ws = select_sheet(wb, config.sheet if sheet is None else sheet)

        entries = read_ledger(ws, config.layout)
        display_ledger(entries, f"{input_file.name} / {ws.title}", pending_columns(ws, config.layout))

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


@app.command()
def init(
    output_file: Path = typer.Option(
        Path("timesheet.xlsx"),
        "--output", "-o",
        help="Template workbook path",
    ),
    year: Optional[int] = typer.Option(None, "--year", help="Year shown in the title"),
    opening_balance: float = typer.Option(
        0.0,
        "--opening-balance",
        help="Leave balance brought into January",
    ),
    config_output: Optional[Path] = typer.Option(
        None,
        "--config-output",
        help="Also write a YAML defaults file here",
    ),
) -> None:
    """
    Generate a blank timesheet template.

    The template holds the month labels and the balance formula chain in the
    default layout, ready for `timesheet fill`.
    """
    try:
        if output_file.exists():
            raise typer.BadParameter(f"Refusing to overwrite existing file: {output_file}")
        export_blank_template(output_file, year=year, opening_balance=opening_balance)
        console.print(f"[green]✓ Created template: {output_file}[/green]")

        if config_output:
            export_config_template(config_output, TimesheetConfig(template=output_file))
            console.print(f"[green]✓ Created config: {config_output}[/green]")

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
