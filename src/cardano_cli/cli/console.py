"""CLI console and logging helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) and error reporting keep working when Rich
is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from cardano_cli.exceptions import EnvironmentError

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_installed_handler: logging.Handler | None = None


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


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def _build_log_handler() -> logging.Handler:
	"""Rich log handler on stderr, or a plain stream handler without Rich."""
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(_LOG_FORMAT))
		return handler
	return RichHandler(console=get_rich_console(), show_path=False)


def configure_logging(verbose: bool = False) -> logging.Logger:
	"""Attach one handler to the ``cardano_cli`` logger.

	``verbose`` selects DEBUG, otherwise WARNING.  Calling this again
	replaces the previously installed handler instead of stacking.
	"""
	global _installed_handler

	package_logger = logging.getLogger("cardano_cli")
	if _installed_handler is not None:
		package_logger.removeHandler(_installed_handler)
	_installed_handler = _build_log_handler()
	package_logger.addHandler(_installed_handler)
	package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
	return package_logger
