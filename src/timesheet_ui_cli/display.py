"""
Timesheet CLI Display

Rich table formatting for terminal output.
"""
from __future__ import annotations

from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from timesheet_engine.carry_forward import is_formula
from timesheet_engine.models import MonthEntry, RunResult


console = Console()


def display_header(title: str) -> None:
    """Display a section header."""
    console.print()
    console.print(Panel(Text(title, style="bold white"), style="blue"))


def _fmt(value: Any) -> str:
    if value is None:
        return ""
    if is_formula(value):
        return f"[dim]{value}[/dim]"
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


def display_ledger(entries: list[MonthEntry], title: str, pending: Optional[list[str]] = None) -> None:
    """Display the month columns of a timesheet."""
    display_header(title)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Col", justify="center", style="dim")
    table.add_column("Month", justify="center")
    table.add_column("Date", justify="center")
    table.add_column("Init.", justify="center")
    table.add_column("Sup.", justify="center")
    table.add_column("Brought Fwd", justify="right")
    table.add_column("Earned", justify="right")
    table.add_column("Leave", justify="right")
    table.add_column("Balance", justify="right")

    for e in entries:
        table.add_row(
            e.column,
            _fmt(e.label),
            _fmt(e.day_of_month),
            _fmt(e.initials),
            _fmt(e.supervisor_initials),
            _fmt(e.starting_balance),
            _fmt(e.days_earned),
            _fmt(e.leave),
            _fmt(e.new_balance),
        )

    console.print(table)
    if pending:
        console.print(f"[dim]Balances not yet computed: {', '.join(pending)}[/dim]")


def display_run_result(result: RunResult) -> None:
    """Display a one-line summary of a fill run."""
    source = "previous output" if result.chained else "template"
    console.print(
        f"[green]✓ {result.entry.label} written to column {result.column} "
        f"of {result.output_path} (from {source} {result.input_path})[/green]"
    )
    console.print(
        f"[dim]  Brought forward {_fmt(result.entry.starting_balance)}, "
        f"leave {_fmt(result.entry.leave)}, balance {_fmt(result.entry.new_balance)}[/dim]"
    )
