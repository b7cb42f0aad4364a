"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``, ``usage``) keep working when Rich is not
installed; output then falls back to plain stderr.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from stackctl.exceptions import EnvironmentError


_MARKUP_TAG = re.compile(r"(?<!\\)\[/?[a-z][a-z ]*\]")


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
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def strip_markup(text: str) -> str:
	"""Remove simple Rich style tags such as ``[bold red]`` from *text*.

	Brackets escaped with :func:`escape` are kept and unescaped.
	"""
	return _MARKUP_TAG.sub("", text).replace("\\[", "[")


def escape(text: object) -> str:
	"""Make *text* safe to interpolate into a markup string.

	Every user- or tool-supplied value rendered through :data:`console`
	must pass through here first.
	"""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return str(text).replace("[", "\\[")
	return rich_escape(str(text))


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
