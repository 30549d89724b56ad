"""Command-line override slots for node configuration values.

Each flag here yields a :class:`~cardano_cli.core.overrides.Last`: an
empty slot when the flag is absent, the validated value when given.
The configuration collaborator combines these slots with the values
from the configuration file; nothing is merged here.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from cardano_cli.cli.options import Arity, Missing, Option, Record
from cardano_cli.cli.registry import CliArgumentParser
from cardano_cli.core import primitives
from cardano_cli.core.models import RequiresNetworkMagic
from cardano_cli.core.overrides import Last, NodeOverrides


@dataclass(frozen=True, slots=True)
class Overridable:
    """Wrap an optional :class:`Option` so it yields a :class:`Last`."""

    option: Option

    def register(self, parser: argparse.ArgumentParser, required: Any) -> None:
        self.option.register(parser, required)

    def missing(self, namespace: argparse.Namespace) -> list[Missing]:
        return []

    def extract(self, namespace: argparse.Namespace) -> Last[Any]:
        return Last(self.option.extract(namespace))


def _last_path(flag: str, desc: str, metavar: str = "FILEPATH") -> Overridable:
    return Overridable(
        Option(
            flag,
            desc,
            convert=primitives.parse_file_path,
            metavar=metavar,
            arity=Arity.OPTIONAL,
        )
    )


def db_path_last() -> Overridable:
    return _last_path("database-path", "Directory where the state is stored.")


def genesis_path_last() -> Overridable:
    return _last_path("genesis-file", "The filepath to the genesis file.")


def delegation_cert_last() -> Overridable:
    return _last_path("delegation-certificate", "Path to the delegation certificate.")


def signing_key_last() -> Overridable:
    return _last_path("signing-key", "Path to the signing key.")


def log_config_file_last() -> Overridable:
    return _last_path("log-config", "Configuration file for logging.", metavar="LOGCONFIG")


def socket_dir_last() -> Overridable:
    return _last_path(
        "socket-dir",
        "Directory with local sockets: ${dir}/node-{core,relay}-${node-id}.socket",
    )


def pbft_sig_threshold_last() -> Overridable:
    return Overridable(
        Option(
            "pbft-signature-threshold",
            "The PBFT signature threshold.",
            convert=primitives.parse_double,
            metavar="DOUBLE",
            arity=Arity.OPTIONAL,
            hidden=True,
        )
    )


def slot_length_last() -> Overridable:
    return Overridable(
        Option(
            "slot-duration",
            "The slot duration (seconds).",
            convert=primitives.parse_slot_length,
            metavar="SECONDS",
            arity=Arity.OPTIONAL,
            hidden=True,
        )
    )


def requires_network_magic_last() -> Overridable:
    # Absent means "no override", not RequiresNoMagic.
    return Overridable(
        Option(
            "require-network-magic",
            "Require network magic in transactions.",
            arity=Arity.SWITCH,
            default=None,
            present=RequiresNetworkMagic.REQUIRES_MAGIC,
            hidden=True,
        )
    )


def requires_network_magic() -> Option:
    """Plain flag: ``REQUIRES_MAGIC`` when given, ``REQUIRES_NO_MAGIC`` otherwise."""
    return Option(
        "require-network-magic",
        "Require network magic in transactions.",
        arity=Arity.SWITCH,
        default=RequiresNetworkMagic.REQUIRES_NO_MAGIC,
        present=RequiresNetworkMagic.REQUIRES_MAGIC,
        hidden=True,
    )


def genesis_hash_last() -> Overridable:
    return Overridable(
        Option(
            "genesis-hash",
            "The genesis hash value.",
            metavar="GENESIS-HASH",
            arity=Arity.OPTIONAL,
        )
    )


NODE_OVERRIDES = Record(
    NodeOverrides,
    (
        ("database_path", db_path_last()),
        ("genesis_file", genesis_path_last()),
        ("delegation_certificate", delegation_cert_last()),
        ("signing_key", signing_key_last()),
        ("log_config", log_config_file_last()),
        ("socket_dir", socket_dir_last()),
        ("pbft_signature_threshold", pbft_sig_threshold_last()),
        ("slot_length", slot_length_last()),
        ("requires_network_magic", requires_network_magic_last()),
        ("genesis_hash", genesis_hash_last()),
    ),
)


def add_override_arguments(parser: argparse.ArgumentParser) -> None:
    """Register every node override flag on *parser*."""
    group = parser.add_argument_group("configuration overrides")
    NODE_OVERRIDES.register(group, group)


def overrides_from_namespace(namespace: argparse.Namespace) -> NodeOverrides:
    overrides: NodeOverrides = NODE_OVERRIDES.extract(namespace)
    return overrides


def parse_node_overrides(
    argv: Sequence[str] | None = None,
    *,
    prog: str = "cardano-node",
) -> NodeOverrides:
    """Parse *argv* into :class:`NodeOverrides`; unknown flags are usage errors."""
    parser = CliArgumentParser(prog=prog, add_help=False, allow_abbrev=False)
    add_override_arguments(parser)
    return overrides_from_namespace(parser.parse_args(argv))
