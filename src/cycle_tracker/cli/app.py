"""CLI application entry point and command routing for cycle-tracker.

Flow
----
1. Show the disclaimer; anything other than ``yes`` exits with code 0.
2. Open the period store.
3. ``--removelast`` deletes the most recently inserted record; otherwise
   the user picks ``R`` (review) or ``A`` (add).
4. Always finish by printing the full history and both predictions.

Storage and input errors are reported where they occur and the run
carries on toward step 4.  :func:`cli` is the process-level boundary for
anything that still escapes.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from cycle_tracker.cli import exit_codes
from cycle_tracker.cli.console import console
from cycle_tracker.cli.logging_setup import setup_logging
from cycle_tracker.config import Settings, get_settings
from cycle_tracker.core.cycle_service import CycleService
from cycle_tracker.exceptions import CycleTrackerError
from cycle_tracker.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``cycle-tracker``               — interactive review / add
    * ``cycle-tracker --removelast``  — drop the last entered period
    * ``cycle-tracker --version``
    """
    parser = argparse.ArgumentParser(
        prog="cycle-tracker",
        description="Track period dates and estimate the next cycle.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--removelast",
        action="store_true",
        help="Remove the most recently entered period, then show the history.",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        metavar="PATH",
        help="SQLite file to use instead of the configured one.",
    )
    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _report(exc: CycleTrackerError) -> None:
    """Render a typed error without a stack trace."""
    console.print_labelled("Error:", str(exc), style="bold red")
    if exc.hint:
        console.print_labelled("Hint:", exc.hint, style="yellow")


def _open_service(settings: Settings) -> CycleService:
    """Create the store and service.  An init failure is reported, not raised."""
    from cycle_tracker.infra.sqlite_store import SqlitePeriodStore

    store = SqlitePeriodStore(settings.db_path)
    try:
        store.initialize()
    except CycleTrackerError as exc:
        _report(exc)
    return CycleService(store, settings)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_remove_last(service: CycleService) -> None:
    try:
        removed = service.remove_last_period()
    except CycleTrackerError as exc:
        _report(exc)
        return

    if removed is None:
        console.print("[yellow]No periods to remove.[/yellow]")
    else:
        console.print("[green]Successfully removed the last period.[/green]")


def _handle_review(service: CycleService) -> None:
    from cycle_tracker.cli.history_view import print_history, print_next_period

    try:
        print_history(service.history())
        print_next_period(service.predict_next_period_date())
    except CycleTrackerError as exc:
        _report(exc)


def _handle_add(service: CycleService) -> None:
    from cycle_tracker.cli.prompts import prompt_period_dates

    try:
        start, end = prompt_period_dates()
        service.add_period(start, end)
    except CycleTrackerError as exc:
        _report(exc)
        return
    console.print("[green]Period added.[/green]")


def _print_summary(service: CycleService) -> None:
    """Print history, next-period prediction and fertile window, each independently."""
    from cycle_tracker.cli.history_view import (
        print_fertile_window,
        print_history,
        print_next_period,
    )

    try:
        print_history(service.history())
    except CycleTrackerError as exc:
        _report(exc)

    try:
        print_next_period(service.predict_next_period_date())
    except CycleTrackerError as exc:
        _report(exc)

    try:
        print_fertile_window(service.predict_fertile_window())
    except CycleTrackerError as exc:
        _report(exc)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    """Run the cycle-tracker CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    settings:
        Explicit settings; defaults to :func:`get_settings`.

    Returns
    -------
    int
        OS process exit code.
    """
    from cycle_tracker.cli.prompts import (
        ACTION_ADD,
        ACTION_REVIEW,
        prompt_action,
        prompt_disclaimer,
    )

    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = settings or get_settings()
    if args.db is not None:
        settings = settings.model_copy(update={"db_path": args.db})
    setup_logging(settings.log_level)

    if not prompt_disclaimer():
        console.print(
            "You did not agree to the terms of the disclaimer. Exiting the application."
        )
        return exit_codes.SUCCESS

    service = _open_service(settings)

    if args.removelast:
        _handle_remove_last(service)
    else:
        action = prompt_action()
        if action == ACTION_REVIEW:
            _handle_review(service)
        elif action == ACTION_ADD:
            _handle_add(service)
        else:
            console.print(
                "[yellow]Invalid option. Please enter R to review data "
                "or A to add new data.[/yellow]"
            )

    _print_summary(service)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CycleTrackerError as exc:
        _report(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] Please report this issue."
        )
        console.print_labelled(f" {type(exc).__name__}:", str(exc), style="dim")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
