"""Command registry — all command groups merged into one grammar.

Exactly one subcommand is selected per invocation.  Groups only shape
the help listing; selection is by subcommand name over the flattened
set.  The registry holds no mutable state and is built once per process.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import NoReturn

from cardano_cli.cli.delegation_commands import DELEGATION_COMMANDS
from cardano_cli.cli.genesis_commands import GENESIS_COMMANDS
from cardano_cli.cli.key_commands import KEY_COMMANDS
from cardano_cli.cli.options import CommandGroup, CommandSpec
from cardano_cli.cli.tx_commands import TX_COMMANDS
from cardano_cli.core.commands import Command
from cardano_cli.exceptions import UsageError
from cardano_cli.version import __version__

logger = logging.getLogger(__name__)

PROG: str = "cardano-cli"

DEFAULT_GROUPS: tuple[CommandGroup, ...] = (
    KEY_COMMANDS,
    DELEGATION_COMMANDS,
    GENESIS_COMMANDS,
    TX_COMMANDS,
)


class CliArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises :class:`UsageError` instead of exiting.

    Subparsers inherit this class, so every grammar error reaches the
    single CLI error boundary.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=f"Run '{self.prog} --help' for usage.")


class CommandRegistry:
    """Flattened, selectable set of every command in *groups*.

    Raises
    ------
    ValueError
        If two commands share a name.
    """

    def __init__(
        self,
        groups: Sequence[CommandGroup] = DEFAULT_GROUPS,
        *,
        prog: str = PROG,
    ) -> None:
        self._groups: tuple[CommandGroup, ...] = tuple(groups)
        self._commands: dict[str, CommandSpec] = {}
        for group in self._groups:
            for spec in group.commands:
                if spec.name in self._commands:
                    raise ValueError(f"Duplicate command name: {spec.name}")
                self._commands[spec.name] = spec
        self._parser: CliArgumentParser = self._build_parser(prog)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def parser(self) -> CliArgumentParser:
        return self._parser

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def spec(self, name: str) -> CommandSpec:
        try:
            return self._commands[name]
        except KeyError:
            raise UsageError(f"Unknown command: {name}") from None

    def parse_args(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        """Run the grammar over *argv*; raises :class:`UsageError`."""
        return self._parser.parse_args(argv)

    def assemble(self, namespace: argparse.Namespace) -> Command:
        """Build the selected command from a parsed *namespace*."""
        spec = self.spec(namespace.command)
        logger.debug("selected command %s", spec.name)
        return spec.assemble(namespace)

    def parse(self, argv: Sequence[str] | None = None) -> Command:
        """Parse *argv* all the way to a validated :data:`Command`."""
        return self.assemble(self.parse_args(argv))

    # ------------------------------------------------------------------
    # Parser construction
    # ------------------------------------------------------------------

    def _build_parser(self, prog: str) -> CliArgumentParser:
        parser = CliArgumentParser(
            prog=prog,
            allow_abbrev=False,
            description="Command-line interface for a Cardano node.",
            epilog=self._command_listing(),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        parser.add_argument(
            "-V",
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log debug details of argument processing to stderr.",
        )
        subparsers = parser.add_subparsers(
            dest="command",
            metavar="COMMAND",
            required=True,
        )
        for spec in self._commands.values():
            spec.register(subparsers)
        return parser

    def _command_listing(self) -> str:
        width = max((len(name) for name in self._commands), default=0)
        blocks: list[str] = []
        for group in self._groups:
            lines = [f"{group.title}:"]
            lines.extend(
                f"  {spec.name:<{width}}  {spec.description}" for spec in group.commands
            )
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)
