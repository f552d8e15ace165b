"""Regression tests for optional CLI UI dependencies (rich/questionary).

Bootstrap commands must work when the UI packages are missing, and
interactive paths must fail cleanly only when they are actually used.
"""

from __future__ import annotations

import sys

import pytest

from cycle_tracker.cli.app import main
from cycle_tracker.cli.console import console, strip_markup
from cycle_tracker.cli.prompts import prompt_disclaimer
from cycle_tracker.config import Settings
from cycle_tracker.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_prompt_requires_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        prompt_disclaimer()


def test_interactive_run_requires_questionary(
    monkeypatch: pytest.MonkeyPatch, settings: Settings,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError):
        main([], settings=settings)


def test_console_falls_back_to_plain_print(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("[bold red]Error:[/bold red] disk full")
    assert capsys.readouterr().out == "Error: disk full\n"


def test_strip_markup_keeps_plain_text() -> None:
    assert strip_markup("[yellow]Hint:[/yellow] check the path") == "Hint: check the path"


def test_labelled_fallback_keeps_bracketed_text(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print_labelled("Error:", "bad [abc] input", style="bold red")
    assert capsys.readouterr().out == "Error: bad [abc] input\n"


def test_labelled_rich_output_keeps_bracketed_text(capsys: pytest.CaptureFixture[str]) -> None:
    console.print_labelled("Error:", "Invalid date: '[/x]' or [bold]", style="bold red")
    assert "Error: Invalid date: '[/x]' or [bold]" in capsys.readouterr().out
