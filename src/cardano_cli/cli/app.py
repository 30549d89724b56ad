"""CLI application entry point for cardano-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cardano_cli.exceptions.CardanoCliError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders
user-friendly messages via Rich and returns well-defined exit codes.

Architecture notes
------------------
* No validation logic lives here: tokens are turned into a command by
  the registry, and the command is handed to a dispatcher.
* A parse either completes with one command or fails before anything
  is dispatched.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from cardano_cli.cli import exit_codes
from cardano_cli.cli.console import configure_logging, console
from cardano_cli.cli.registry import CommandRegistry
from cardano_cli.core.protocols import Dispatcher
from cardano_cli.exceptions import CardanoCliError, UsageError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    dispatcher: Dispatcher | None = None,
) -> int:
    """Parse *argv* into one command and dispatch it.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    dispatcher:
        Executor for the assembled command.  Defaults to
        :class:`~cardano_cli.cli.render.EchoDispatcher`.

    Returns
    -------
    int
        OS process exit code reported by the dispatcher.

    Raises
    ------
    CardanoCliError
        On any grammar or validation failure; nothing is dispatched.
    """
    registry = CommandRegistry()
    namespace = registry.parse_args(argv)
    configure_logging(namespace.verbose)

    command = registry.assemble(namespace)

    if dispatcher is None:
        from cardano_cli.cli.render import EchoDispatcher

        dispatcher = EchoDispatcher()

    logger.debug("dispatching %s to %s", command.subcommand, type(dispatcher).__name__)
    return dispatcher.dispatch(command)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report(exc: CardanoCliError) -> None:
    console.print(f"[bold red]Error:[/bold red] {_escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {_escape(exc.hint)}")


def _escape(text: str) -> str:
    """Escape Rich markup in user-supplied text; identity without Rich."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


def cli(argv: Sequence[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
    except UsageError as exc:
        _report(exc)
        sys.exit(exit_codes.USAGE_ERROR)
    except CardanoCliError as exc:
        _report(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {_escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    sys.exit(code)
