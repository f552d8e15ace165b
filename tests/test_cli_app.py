"""End-to-end tests for the CLI flow (cli/app.py).

Prompts are patched at the ``cycle_tracker.cli.prompts`` boundary and
the store lives in ``tmp_path``, so no terminal interaction and no file
in the working directory is involved.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cycle_tracker.cli import exit_codes
from cycle_tracker.cli.app import cli, main
from cycle_tracker.config import Settings
from cycle_tracker.exceptions import EnvironmentError, InputFormatError
from cycle_tracker.infra.sqlite_store import SqlitePeriodStore

PROMPTS = "cycle_tracker.cli.prompts"


def _run(
    settings: Settings,
    argv: list[str] | None = None,
    *,
    accept: bool = True,
    action: str | None = None,
    dates: tuple[date, date] | Exception | None = None,
) -> tuple[int, MagicMock]:
    """Run :func:`main` with patched prompts; return (exit code, action mock)."""
    date_mock = MagicMock()
    if isinstance(dates, Exception):
        date_mock.side_effect = dates
    else:
        date_mock.return_value = dates

    with patch("cycle_tracker.cli.app.setup_logging"), \
            patch(f"{PROMPTS}.prompt_disclaimer", return_value=accept), \
            patch(f"{PROMPTS}.prompt_action", return_value=action) as action_mock, \
            patch(f"{PROMPTS}.prompt_period_dates", date_mock):
        code = main(argv or [], settings=settings)
    return code, action_mock


def _seed(db_path: Path) -> SqlitePeriodStore:
    store = SqlitePeriodStore(db_path)
    store.initialize()
    store.insert(date(2024, 3, 1), date(2024, 3, 5))
    return store


# ---------------------------------------------------------------------------
# Disclaimer
# ---------------------------------------------------------------------------

class TestDisclaimer:
    def test_decline_exits_zero_without_touching_store(
        self, settings: Settings, db_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code, action_mock = _run(settings, accept=False)
        assert code == exit_codes.SUCCESS
        assert "did not agree" in capsys.readouterr().out
        action_mock.assert_not_called()
        assert not db_path.exists()


# ---------------------------------------------------------------------------
# Review
# ---------------------------------------------------------------------------

class TestReview:
    def test_empty_store(
        self, settings: Settings, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code, _ = _run(settings, action="R")
        out = capsys.readouterr().out
        assert code == exit_codes.SUCCESS
        assert "Period History:" in out
        assert "Unable to predict next period date." in out
        assert "Unable to calculate the predicted fertile window." in out

    def test_prints_predictions(
        self, settings: Settings, db_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _seed(db_path)
        _run(settings, action="R")
        out = capsys.readouterr().out
        assert "2024-03-01" in out
        assert "Predicted Start Date of Next Period: 2024-04-02" in out
        assert "Predicted Fertile Window: 2024-04-11 - 2024-04-16" in out

    def test_history_printed_twice(
        self, settings: Settings, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _run(settings, action="R")
        assert capsys.readouterr().out.count("Period History:") == 2


# ---------------------------------------------------------------------------
# Add
# ---------------------------------------------------------------------------

class TestAdd:
    def test_inserts_record(
        self, settings: Settings, db_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code, _ = _run(settings, action="A", dates=(date(2024, 3, 1), date(2024, 3, 5)))
        assert code == exit_codes.SUCCESS
        records = SqlitePeriodStore(db_path).fetch_all()
        assert [(r.start_date, r.end_date) for r in records] == [
            (date(2024, 3, 1), date(2024, 3, 5)),
        ]
        out = capsys.readouterr().out
        assert "Period added." in out
        assert "Predicted Start Date of Next Period: 2024-04-02" in out

    def test_invalid_input_skips_insert_but_still_summarises(
        self, settings: Settings, db_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code, _ = _run(
            settings,
            action="A",
            dates=InputFormatError("Invalid date: 'x'", hint="Please enter dates in the format yyyy-mm-dd."),
        )
        out = capsys.readouterr().out
        assert code == exit_codes.SUCCESS
        assert "Error:" in out
        assert "yyyy-mm-dd" in out
        assert "Period History:" in out
        assert SqlitePeriodStore(db_path).fetch_all() == []

    def test_inverted_range_rejected_when_configured(
        self, db_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        settings = Settings(db_path=db_path, reject_inverted_ranges=True)
        _run(settings, action="A", dates=(date(2024, 3, 5), date(2024, 3, 1)))
        assert "before start date" in capsys.readouterr().out
        assert SqlitePeriodStore(db_path).fetch_all() == []


# ---------------------------------------------------------------------------
# Menu edge cases
# ---------------------------------------------------------------------------

class TestMenu:
    def test_cancelled_menu_reports_invalid_option(
        self, settings: Settings, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code, _ = _run(settings, action=None)
        out = capsys.readouterr().out
        assert code == exit_codes.SUCCESS
        assert "Invalid option" in out
        assert "Period History:" in out


# ---------------------------------------------------------------------------
# --removelast
# ---------------------------------------------------------------------------

class TestRemoveLast:
    def test_skips_menu_and_removes(
        self, settings: Settings, db_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        store = _seed(db_path)
        store.insert(date(2024, 1, 1), date(2024, 1, 5))

        code, action_mock = _run(settings, ["--removelast"])

        assert code == exit_codes.SUCCESS
        action_mock.assert_not_called()
        remaining = store.fetch_all()
        assert [r.start_date for r in remaining] == [date(2024, 3, 1)]
        assert "Successfully removed the last period." in capsys.readouterr().out

    def test_empty_store(
        self, settings: Settings, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _run(settings, ["--removelast"])
        assert "No periods to remove." in capsys.readouterr().out

    def test_db_flag_overrides_settings(
        self, settings: Settings, tmp_path: Path,
    ) -> None:
        other = tmp_path / "other.sqlite3"
        store = _seed(other)
        _run(settings, ["--removelast", "--db", str(other)])
        assert store.fetch_all() == []


# ---------------------------------------------------------------------------
# Storage failures degrade, never abort
# ---------------------------------------------------------------------------

class TestStorageFailures:
    def test_unopenable_database_still_completes(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        settings = Settings(db_path=tmp_path / "missing" / "db.sqlite3")
        code, _ = _run(settings, action="R")
        out = capsys.readouterr().out
        assert code == exit_codes.SUCCESS
        assert "Could not open period database" in out
        assert "Traceback" not in out


# ---------------------------------------------------------------------------
# Process-level boundary
# ---------------------------------------------------------------------------

class TestCliBoundary:
    def test_success_exit(self) -> None:
        with patch("cycle_tracker.cli.app.main", return_value=exit_codes.SUCCESS):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_known_error_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "cycle_tracker.cli.app.main",
            side_effect=EnvironmentError("questionary is not installed."),
        ):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert "questionary is not installed." in capsys.readouterr().out

    def test_keyboard_interrupt_exit(self) -> None:
        with patch("cycle_tracker.cli.app.main", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("cycle_tracker.cli.app.main", side_effect=RuntimeError("kaboom")):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Bracketed user text is echoed, never parsed as markup
# ---------------------------------------------------------------------------

class TestBracketedText:
    def test_bracketed_date_reported_verbatim(
        self, settings: Settings, db_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        questionary = MagicMock()
        questionary.text.return_value.ask.side_effect = ["[/x]", "2024-03-05"]

        with patch("cycle_tracker.cli.app.setup_logging"), \
                patch(f"{PROMPTS}.prompt_disclaimer", return_value=True), \
                patch(f"{PROMPTS}.prompt_action", return_value="A"), \
                patch(f"{PROMPTS}._import_questionary", return_value=questionary):
            code = main([], settings=settings)

        out = capsys.readouterr().out
        assert code == exit_codes.SUCCESS
        assert "Invalid date: '[/x]'" in out
        assert "Period History:" in out
        assert SqlitePeriodStore(db_path).fetch_all() == []

    def test_bracketed_db_path_reported_verbatim(
        self, settings: Settings, tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        code, _ = _run(settings, ["--db", "[/x]/db.sqlite3"], action="R")
        out = capsys.readouterr().out
        assert code == exit_codes.SUCCESS
        assert "[/x]/db.sqlite3" in out
        assert "Period History:" in out
