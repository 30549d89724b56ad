"""Flags shared by several command groups."""

from __future__ import annotations

from functools import partial

from cardano_cli.cli.options import Arity, Choice, OneOf, Option, Record
from cardano_cli.core import primitives
from cardano_cli.core.models import (
    MainOrStaging,
    Protocol,
    TopologyInfo,
)


def file_path(flag: str, desc: str, *, arity: Arity = Arity.REQUIRED) -> Option:
    return Option(
        flag,
        desc,
        convert=primitives.parse_file_path,
        metavar="FILEPATH",
        arity=arity,
    )


def new_file(flag: str, what: str) -> Option:
    """A path the dispatcher will create; it should not exist yet."""
    return file_path(flag, f"Non-existent file to write {what} to.")


def integral(
    flag: str,
    desc: str,
    *,
    bits: int = 64,
    arity: Arity = Arity.REQUIRED,
) -> Option:
    return Option(
        flag,
        desc,
        convert=partial(primitives.parse_word, bits=bits),
        metavar="INT",
        arity=arity,
    )


def lovelace(flag: str, desc: str) -> Option:
    return Option(flag, desc, convert=primitives.parse_lovelace, metavar="LOVELACE")


def protocol_magic_id(flag: str = "protocol-magic") -> Option:
    return Option(
        flag,
        "The magic number unique to any instance of Cardano.",
        convert=primitives.parse_protocol_magic_id,
        metavar="INT",
    )


def network_magic() -> OneOf:
    return OneOf(
        (
            Choice(
                "main-or-staging",
                "Use the main network or the staging environment.",
                value=MainOrStaging(),
            ),
            Choice(
                "testnet-magic",
                "The testnet network magic, decimal.",
                convert=primitives.parse_testnet_magic,
                metavar="MAGIC",
            ),
        )
    )


def protocol() -> OneOf:
    return OneOf(
        (
            Choice("byron-legacy", "Byron/Ouroboros Classic suite of algorithms.",
                   value=Protocol.BYRON_LEGACY),
            Choice("bft", "BFT consensus.", value=Protocol.BFT),
            Choice("praos", "Praos consensus.", value=Protocol.PRAOS),
            Choice("mock-pbft", "Permissive BFT consensus with a mock ledger.",
                   value=Protocol.MOCK_PBFT),
            Choice("real-pbft", "Permissive BFT consensus with a real ledger.",
                   value=Protocol.REAL_PBFT),
        )
    )


def node_id(desc: str) -> Option:
    return Option(
        "node-id",
        desc,
        convert=primitives.parse_core_node_id,
        metavar="NODE-ID",
    )


def topology_info(desc: str) -> Record:
    return Record(
        TopologyInfo,
        (
            ("node_id", node_id(desc)),
            ("topology_file", file_path("topology", "Path to the topology file.")),
        ),
    )
