"""Genesis related commands and the composite genesis parameters.

``GENESIS_PARAMETERS`` is the largest composite in the grammar: start
time, protocol parameters file, security parameter, protocol magic,
testnet balance split, fake AVVM entries, AVVM balance factor and an
optional seed.  The balance factor defaults to the whole portion (1).
"""

from __future__ import annotations

from cardano_cli.cli import fields
from cardano_cli.cli.options import Arity, CommandGroup, CommandSpec, Option, Record
from cardano_cli.core import primitives
from cardano_cli.core.commands import DumpHardcodedGenesis, Genesis, PrintGenesisHash
from cardano_cli.core.models import (
    FakeAvvmOptions,
    GenesisParameters,
    LovelacePortion,
    ProtocolMagic,
    ProtocolMagicId,
    RequiresNetworkMagic,
    TestnetBalanceOptions,
)


def _genesis_protocol_magic(magic_id: ProtocolMagicId) -> ProtocolMagic:
    # A freshly generated chain always requires the network magic.
    return ProtocolMagic(magic_id, RequiresNetworkMagic.REQUIRES_MAGIC)


TESTNET_BALANCE_OPTIONS = Record(
    TestnetBalanceOptions,
    (
        (
            "poor_addresses",
            fields.integral("n-poor-addresses", "Number of poor nodes (with small balance)."),
        ),
        (
            "delegate_addresses",
            fields.integral(
                "n-delegate-addresses", "Number of delegate nodes (with huge balance)."
            ),
        ),
        ("total_balance", fields.lovelace("total-balance", "Total balance owned by these nodes.")),
        (
            "delegate_share",
            Option(
                "delegate-share",
                "Portion of stake owned by all delegates together.",
                convert=primitives.parse_lovelace_portion,
                metavar="PORTION",
            ),
        ),
    ),
)

FAKE_AVVM_OPTIONS = Record(
    FakeAvvmOptions,
    (
        ("entry_count", fields.integral("avvm-entry-count", "Number of AVVM addresses.")),
        ("entry_balance", fields.lovelace("avvm-entry-balance", "AVVM address balance.")),
    ),
)

GENESIS_PARAMETERS = Record(
    GenesisParameters,
    (
        (
            "start_time",
            Option(
                "start-time",
                "Start time of the new cluster to be enshrined in the new genesis.",
                convert=primitives.parse_posix_time,
                metavar="POSIXSECONDS",
            ),
        ),
        (
            "protocol_parameters_file",
            fields.file_path("protocol-parameters-file", "JSON file with protocol parameters."),
        ),
        ("k", fields.integral("k", "The security parameter of the Ouroboros protocol.")),
        (
            "protocol_magic",
            Record(_genesis_protocol_magic, (("magic_id", fields.protocol_magic_id()),)),
        ),
        ("testnet_balance", TESTNET_BALANCE_OPTIONS),
        ("fake_avvm", FAKE_AVVM_OPTIONS),
        (
            "avvm_balance_factor",
            Option(
                "avvm-balance-factor",
                "AVVM balances will be multiplied by this factor (defaults to 1).",
                convert=primitives.parse_lovelace_portion,
                metavar="PORTION",
                arity=Arity.DEFAULTED,
                default=LovelacePortion.whole(),
            ),
        ),
        (
            "seed",
            fields.integral(
                "secret-seed",
                "Optionally specify the seed of generation.",
                arity=Arity.OPTIONAL,
            ),
        ),
    ),
)

GENESIS = CommandSpec(
    "genesis",
    "Create genesis.",
    Record(
        Genesis,
        (
            (
                "output_dir",
                fields.file_path(
                    "genesis-output-dir",
                    "Non-existent directory where genesis JSON file and secrets "
                    "shall be placed.",
                ),
            ),
            ("parameters", GENESIS_PARAMETERS),
        ),
    ),
)

DUMP_HARDCODED_GENESIS = CommandSpec(
    "dump-hardcoded-genesis",
    "Write out a hard-coded genesis.",
    Record(
        DumpHardcodedGenesis,
        (
            (
                "output_dir",
                fields.file_path(
                    "genesis-output-dir",
                    "Non-existent directory where the genesis artifacts are to be written.",
                ),
            ),
        ),
    ),
)

PRINT_GENESIS_HASH = CommandSpec(
    "print-genesis-hash",
    "Compute hash of a genesis file.",
    Record(
        PrintGenesisHash,
        (("genesis_file", fields.file_path("genesis-json", "Genesis JSON file.")),),
    ),
)

GENESIS_COMMANDS = CommandGroup(
    "Genesis related commands",
    (GENESIS, DUMP_HARDCODED_GENESIS, PRINT_GENESIS_HASH),
)
