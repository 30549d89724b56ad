"""Protocols (interfaces) for the collaborators that consume commands.

Executing a command (signing, networking, writing genesis files) is not
part of this package.  The CLI hands each assembled command to an
object satisfying :class:`Dispatcher`; implementations are matched
structurally, no explicit inheritance required.
"""

from __future__ import annotations

from typing import Protocol

from cardano_cli.core.commands import Command


class Dispatcher(Protocol):
    """Contract for command executors."""

    def dispatch(self, command: Command) -> int:
        """Execute *command* and return the process exit code.

        Implementations performing I/O must map their own failures to
        :class:`~cardano_cli.exceptions.CardanoCliError` subclasses so
        the CLI error boundary can report them.
        """
        ...  # pragma: no cover
