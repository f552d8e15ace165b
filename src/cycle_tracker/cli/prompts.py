"""Interactive prompts for the CLI layer.

This module is responsible for:

* Showing the disclaimer and reading the user's acceptance.
* Asking whether to review or add data.
* Reading a start and end date for a new period.

No business logic and no storage access live here.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from cycle_tracker.cli.console import console
from cycle_tracker.exceptions import EnvironmentError, InputFormatError
from cycle_tracker.utils.dates import parse_date

ACTION_REVIEW: str = "R"
ACTION_ADD: str = "A"

DISCLAIMER: str = """\
=====================================================================
                          CYCLE TRACKER

DISCLAIMER:
This application is intended as an educational tool only.

It does not provide medical or any other health care advice, diagnosis
or treatment, and its predictions are not a substitute for the advice of
a professional health care provider.

Always consult your health care provider about any health-related
decision. Do not ignore or delay seeking professional advice because of
information you have read or received through this application.

By using it, you acknowledge that you understand this disclaimer and
agree to use the application for educational purposes only.
====================================================================="""


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Disclaimer
# ---------------------------------------------------------------------------

def prompt_disclaimer() -> bool:
    """Show the disclaimer; return ``True`` only if the user types ``yes``."""
    questionary = _import_questionary()

    console.print(DISCLAIMER)
    answer: str | None = questionary.text(
        "Would you like to proceed with this educational experience? (yes/no)",
    ).ask()  # Returns None on Ctrl+C
    return answer is not None and answer.strip().lower() == "yes"


# ---------------------------------------------------------------------------
# Menu
# ---------------------------------------------------------------------------

def prompt_action() -> str | None:
    """Ask for review or add; returns ``"R"``, ``"A"``, or ``None`` if cancelled."""
    questionary = _import_questionary()

    choices = [
        questionary.Choice(title="R  Review data", value=ACTION_REVIEW),
        questionary.Choice(title="A  Add new data", value=ACTION_ADD),
    ]
    selected: str | None = questionary.select(
        "What would you like to do?",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()
    return selected


# ---------------------------------------------------------------------------
# Date entry
# ---------------------------------------------------------------------------

def prompt_period_dates() -> tuple[date, date]:
    """Read a start and an end date in ``yyyy-mm-dd`` format.

    Both answers are collected before either is parsed.

    Raises
    ------
    InputFormatError
        If either answer is missing or not a valid date.
    """
    questionary = _import_questionary()

    start_text: str | None = questionary.text(
        "Please enter the start date (yyyy-mm-dd):",
    ).ask()
    end_text: str | None = questionary.text(
        "Please enter the end date (yyyy-mm-dd):",
    ).ask()

    if start_text is None or end_text is None:
        raise InputFormatError(
            "No date entered.",
            hint="Please enter dates in the format yyyy-mm-dd.",
        )
    return parse_date(start_text), parse_date(end_text)
