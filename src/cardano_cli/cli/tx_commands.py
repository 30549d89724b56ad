"""Transaction related commands: submission, expenditure and generation.

``--txin``, ``--txout``, ``--target-node`` and ``--sig-key`` may be
repeated; occurrences are kept in command-line order and at least one
is required wherever they appear.
"""

from __future__ import annotations

from cardano_cli.cli import fields
from cardano_cli.cli.options import Arity, CommandGroup, CommandSpec, Option, Record
from cardano_cli.core import primitives
from cardano_cli.core.commands import GenerateTxs, SpendGenesisUTxO, SpendUTxO, SubmitTx


def _txin() -> Option:
    return Option(
        "txin",
        "Transaction input is a pair of an UTxO TxId and a zero-based output index.",
        convert=primitives.parse_tx_in,
        metavar="(TXID,INDEX)",
        arity=Arity.SOME,
    )


def _txout() -> Option:
    return Option(
        "txout",
        "Specify a transaction output, as a pair of an address and lovelace.",
        convert=primitives.parse_tx_out,
        metavar="(ADDR,LOVELACE)",
        arity=Arity.SOME,
    )


def _wallet_key() -> Option:
    return fields.file_path(
        "wallet-key", "Key that has access to all mentioned genesis UTxO inputs."
    )


SUBMIT_TX = CommandSpec(
    "submit-tx",
    "Submit a raw, signed transaction, in its on-wire representation.",
    Record(
        SubmitTx,
        (
            ("tx_file", fields.file_path("tx", "File containing the signed transaction.")),
            ("target", fields.topology_info("Node Id of target node.")),
        ),
    ),
)

ISSUE_GENESIS_UTXO_EXPENDITURE = CommandSpec(
    "issue-genesis-utxo-expenditure",
    "Write a file with a signed transaction, spending genesis UTxO.",
    Record(
        SpendGenesisUTxO,
        (
            ("output_tx", fields.new_file("tx", "the signed transaction")),
            ("wallet_key", _wallet_key()),
            (
                "source_address",
                Option(
                    "rich-addr-from",
                    "Tx source: genesis UTxO richman address (non-HD).",
                    convert=primitives.parse_address,
                    metavar="ADDR",
                ),
            ),
            ("outputs", _txout()),
        ),
    ),
)

ISSUE_UTXO_EXPENDITURE = CommandSpec(
    "issue-utxo-expenditure",
    "Write a file with a signed transaction, spending normal UTxO.",
    Record(
        SpendUTxO,
        (
            ("output_tx", fields.new_file("tx", "the signed transaction")),
            ("wallet_key", _wallet_key()),
            ("inputs", _txin()),
            ("outputs", _txout()),
        ),
    ),
)

GENERATE_TXS = CommandSpec(
    "generate-txs",
    "Launch transactions generator.",
    Record(
        GenerateTxs,
        (
            (
                "target_nodes",
                Option(
                    "target-node",
                    "Host and port of the node transactions will be sent to.",
                    convert=primitives.parse_node_address,
                    metavar="(HOST,PORT)",
                    arity=Arity.SOME,
                ),
            ),
            (
                "tx_count",
                fields.integral("num-of-txs", "Number of transactions generator will create."),
            ),
            (
                "inputs_per_tx",
                fields.integral("inputs-per-tx", "Number of inputs in each of transactions."),
            ),
            (
                "outputs_per_tx",
                fields.integral("outputs-per-tx", "Number of outputs in each of transactions."),
            ),
            ("fee_per_tx", fields.integral("tx-fee", "Fee per transaction, in Lovelaces.")),
            ("tps_rate", fields.integral("tps", "TPS (transaction per second) rate.")),
            (
                "extra_size",
                fields.integral(
                    "add-tx-size",
                    "Additional size of transaction, in bytes.",
                    arity=Arity.OPTIONAL,
                ),
            ),
            (
                "signing_keys",
                fields.file_path(
                    "sig-key",
                    "Path to signing key file, for genesis UTxO using by generator.",
                    arity=Arity.SOME,
                ),
            ),
            ("node_id", fields.node_id("Node Id of target node.")),
        ),
    ),
)

TX_COMMANDS = CommandGroup(
    "Transaction related commands",
    (SUBMIT_TX, ISSUE_GENESIS_UTXO_EXPENDITURE, ISSUE_UTXO_EXPENDITURE, GENERATE_TXS),
)
