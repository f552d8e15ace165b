"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``) remain functional even when
Rich is not installed.
"""

from __future__ import annotations

import re
from typing import Any

from cycle_tracker.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stdout."""
	console_class = _load_rich_console_class()
	return console_class(highlight=False)


def strip_markup(text: str) -> str:
	"""Remove simple Rich markup tags such as ``[bold red]`` from *text*.

	Only applied to markup written by this package; dynamic text goes
	through :meth:`_ConsoleProxy.print_labelled` instead.
	"""
	return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stdout print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*(strip_markup(o) if isinstance(o, str) else o for o in objects))
			return
		rich_console.print(*objects)

	def print_labelled(self, label: str, text: str, *, style: str) -> None:
		"""Print *label* in *style* followed by *text* exactly as given.

		*text* is never parsed as markup, so user input, paths and backend
		messages containing brackets are shown verbatim.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(f"{label} {text}")
			return
		from rich.text import Text

		rich_console.print(Text.assemble((label, style), " ", text))


console = _ConsoleProxy()
