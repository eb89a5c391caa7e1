"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Everything rendered here goes to **stderr**; stdout is reserved for
dry-run descriptions and the children's own output.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from pipe_while_read.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?(?:bold|dim|red|green|yellow| )+\]")


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
	return console_class(stderr=True)


def strip_markup(text: str) -> str:
	"""Drop the Rich style tags used by the CLI, such as ``[bold red]``."""
	return _MARKUP_TAG.sub("", text)


def escape(text: str) -> str:
	"""Escape *text* for Rich markup; identity when Rich is missing."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render markup with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)

	def plain(self, message: str) -> None:
		"""Write *message* verbatim as one stderr line.

		Used for text carrying user data (commands, input lines).  Rich
		is bypassed: it would expand ``:emoji:`` codes and drop control
		characters.
		"""
		sys.stderr.write(message + "\n")
		sys.stderr.flush()


console = _ConsoleProxy()
