"""Default dispatcher: render the assembled command instead of running it.

Execution backends live outside this package.  When none is supplied,
:class:`EchoDispatcher` shows every validated field of the command as a
Rich table (plain text without Rich), which doubles as a dry run.
"""

from __future__ import annotations

import dataclasses
import enum
import ipaddress
import sys
from datetime import datetime
from pathlib import Path

from cardano_cli.cli import exit_codes
from cardano_cli.cli.console import console
from cardano_cli.core.address import Address
from cardano_cli.core.commands import Command
from cardano_cli.core.models import (
    CoreNodeId,
    Lovelace,
    LovelacePortion,
    MainOrStaging,
    NodeAddress,
    NonEmpty,
    ProtocolMagicId,
    SlotLength,
    Testnet,
    TxId,
    TxIn,
    TxOut,
)


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def describe(value: object) -> str:
    """Render one field value as a single line of text."""
    if value is None:
        return "—"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, Address):
        return str(value)
    if isinstance(value, Lovelace):
        return f"{value.value} lovelace"
    if isinstance(value, LovelacePortion):
        return str(value.fraction)
    if isinstance(value, MainOrStaging):
        return "main or staging"
    if isinstance(value, Testnet):
        return f"testnet (magic {value.magic})"
    if isinstance(value, ProtocolMagicId):
        return str(value.value)
    if isinstance(value, CoreNodeId):
        return f"core node {value.number}"
    if isinstance(value, TxId):
        return value.hex
    if isinstance(value, TxIn):
        return f"{value.tx_id.hex}#{value.index}"
    if isinstance(value, TxOut):
        return f"{describe(value.amount)} to {value.address}"
    if isinstance(value, NodeAddress):
        if isinstance(value.host, ipaddress.IPv6Address):
            return f"[{value.host}]:{value.port}"
        return f"{value.host}:{value.port}"
    if isinstance(value, SlotLength):
        return f"{value.milliseconds} ms"
    if isinstance(value, NonEmpty):
        return ", ".join(describe(item) for item in value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, Path):
        return str(value)
    return str(value)


def command_rows(command: Command) -> list[tuple[str, str]]:
    """Flatten *command* into ``(field, value)`` rows.

    Nested records (genesis parameters, balance options, topology) are
    expanded with dotted field names.  Leaf value types are rendered by
    :func:`describe`.
    """
    return _rows(command, prefix="")


_LEAF_TYPES = (
    Address,
    Lovelace,
    LovelacePortion,
    MainOrStaging,
    Testnet,
    ProtocolMagicId,
    CoreNodeId,
    TxId,
    TxIn,
    TxOut,
    NodeAddress,
    SlotLength,
)


def _rows(record: object, prefix: str) -> list[tuple[str, str]]:
    rows: list[tuple[str, str]] = []
    for field in dataclasses.fields(record):  # type: ignore[arg-type]
        value = getattr(record, field.name)
        label = f"{prefix}{field.name}"
        if (
            dataclasses.is_dataclass(value)
            and not isinstance(value, _LEAF_TYPES)
            and not isinstance(value, NonEmpty)
        ):
            rows.extend(_rows(value, prefix=f"{label}."))
        else:
            rows.append((label, describe(value)))
    return rows


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class EchoDispatcher:
    """:class:`~cardano_cli.core.protocols.Dispatcher` that only renders."""

    def dispatch(self, command: Command) -> int:
        rows = command_rows(command)
        try:
            from rich.markup import escape
            from rich.table import Table
        except ModuleNotFoundError:
            self._print_plain(command.subcommand, rows)
            return exit_codes.SUCCESS

        table = Table(
            title=f"cardano-cli {command.subcommand}",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Field", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        for label, value in rows:
            table.add_row(label, escape(value))
        console.print(table)
        return exit_codes.SUCCESS

    @staticmethod
    def _print_plain(name: str, rows: list[tuple[str, str]]) -> None:
        width = max((len(label) for label, _ in rows), default=0)
        print(f"cardano-cli {name}", file=sys.stderr)
        print("=" * 56, file=sys.stderr)
        for label, value in rows:
            print(f"{label:<{width}}  {value}", file=sys.stderr)
