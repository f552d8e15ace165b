"""Rendering of period history and predictions.

Uses a Rich table when Rich is importable and falls back to one plain
line per period otherwise.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Any

from cycle_tracker.cli.console import console
from cycle_tracker.core.models import FertileWindow, HistoryRow
from cycle_tracker.utils.dates import format_date


def _import_rich_table() -> type[Any] | None:
    """Return ``rich.table.Table`` or ``None`` when Rich is missing."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return None
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def format_history_line(row: HistoryRow) -> str:
    """Single-line plain-text rendering of *row*."""
    return (
        f"Start Date: {format_date(row.start_date)}, "
        f"End Date: {format_date(row.end_date)}, "
        f"Cycle Length: {row.cycle_length} days, "
        f"Estimated Fertile Window: {format_date(row.fertile_start)} - "
        f"{format_date(row.fertile_end)}"
    )


def format_next_period(predicted: date | None) -> str:
    if predicted is None:
        return "Unable to predict next period date."
    return f"Predicted Start Date of Next Period: {format_date(predicted)}"


def format_fertile_window(window: FertileWindow) -> str:
    if window.start is None or window.end is None:
        return "Unable to calculate the predicted fertile window."
    return f"Predicted Fertile Window: {format_date(window.start)} - {format_date(window.end)}"


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------

def print_history(rows: Sequence[HistoryRow]) -> None:
    """Print the period history under a ``Period History:`` heading."""
    console.print("\n[bold]Period History:[/bold]")

    if not rows:
        console.print("[dim]No periods recorded yet.[/dim]")
        return

    table_class = _import_rich_table()
    if table_class is None:
        for row in rows:
            console.print(format_history_line(row))
        return

    table = table_class(show_header=True, header_style="bold magenta", border_style="dim")
    table.add_column("Start Date", justify="left")
    table.add_column("End Date", justify="left")
    table.add_column("Cycle Length", justify="right")
    table.add_column("Estimated Fertile Window", justify="left")

    for row in rows:
        table.add_row(
            format_date(row.start_date),
            format_date(row.end_date),
            f"{row.cycle_length} days",
            f"{format_date(row.fertile_start)} - {format_date(row.fertile_end)}",
        )
    console.print(table)


def print_next_period(predicted: date | None) -> None:
    if predicted is None:
        console.print(f"[yellow]{format_next_period(predicted)}[/yellow]")
    else:
        console.print(f"\n[bold cyan]{format_next_period(predicted)}[/bold cyan]")


def print_fertile_window(window: FertileWindow) -> None:
    style = "bold cyan" if window else "yellow"
    console.print(f"[{style}]{format_fertile_window(window)}[/{style}]")
