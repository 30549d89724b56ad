"""Command variants — one frozen dataclass per subcommand.

:data:`Command` is the closed union of all variants.  Each variant
carries its subcommand name in the ``subcommand`` class attribute so a
dispatcher can report it without a lookup table.  Instances are built
exactly once by the command registry and are immutable afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from cardano_cli.core.address import Address
from cardano_cli.core.models import (
    CertificateFile,
    CoreNodeId,
    EpochNumber,
    FeePerTx,
    GenesisFile,
    GenesisParameters,
    NetworkMagic,
    NewCertificateFile,
    NewDirectory,
    NewSigningKeyFile,
    NewTxFile,
    NewVerificationKeyFile,
    NodeAddress,
    NonEmpty,
    NumberOfInputsPerTx,
    NumberOfOutputsPerTx,
    NumberOfTxs,
    Protocol,
    ProtocolMagicId,
    SigningKeyFile,
    TopologyInfo,
    TPSRate,
    TxAdditionalSize,
    TxFile,
    TxIn,
    TxOut,
    VerificationKeyFile,
)


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Keygen:
    subcommand: ClassVar[str] = "keygen"

    output_key: NewSigningKeyFile
    password_protected: bool


@dataclass(frozen=True, slots=True)
class ToVerification:
    subcommand: ClassVar[str] = "to-verification"

    signing_key: SigningKeyFile
    output_key: NewVerificationKeyFile


@dataclass(frozen=True, slots=True)
class PrettySigningKeyPublic:
    subcommand: ClassVar[str] = "signing-key-public"

    signing_key: SigningKeyFile


@dataclass(frozen=True, slots=True)
class PrintSigningKeyAddress:
    subcommand: ClassVar[str] = "signing-key-address"

    network: NetworkMagic
    signing_key: SigningKeyFile


@dataclass(frozen=True, slots=True)
class MigrateDelegateKeyFrom:
    subcommand: ClassVar[str] = "migrate-delegate-key-from"

    protocol: Protocol
    output_key: NewSigningKeyFile
    source_key: SigningKeyFile


# ---------------------------------------------------------------------------
# Delegation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IssueDelegationCertificate:
    subcommand: ClassVar[str] = "issue-delegation-certificate"

    protocol_magic_id: ProtocolMagicId
    since_epoch: EpochNumber
    issuer_key: SigningKeyFile
    delegate_key: VerificationKeyFile
    output_certificate: NewCertificateFile


@dataclass(frozen=True, slots=True)
class CheckDelegation:
    subcommand: ClassVar[str] = "check-delegation"

    protocol_magic_id: ProtocolMagicId
    certificate: CertificateFile
    issuer_key: VerificationKeyFile
    delegate_key: VerificationKeyFile


# ---------------------------------------------------------------------------
# Genesis
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Genesis:
    subcommand: ClassVar[str] = "genesis"

    output_dir: NewDirectory
    parameters: GenesisParameters


@dataclass(frozen=True, slots=True)
class DumpHardcodedGenesis:
    subcommand: ClassVar[str] = "dump-hardcoded-genesis"

    output_dir: NewDirectory


@dataclass(frozen=True, slots=True)
class PrintGenesisHash:
    subcommand: ClassVar[str] = "print-genesis-hash"

    genesis_file: GenesisFile


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SubmitTx:
    """Submit a signed transaction to the node described by ``target``."""

    subcommand: ClassVar[str] = "submit-tx"

    tx_file: TxFile
    target: TopologyInfo

    @property
    def node_id(self) -> CoreNodeId:
        return self.target.node_id


@dataclass(frozen=True, slots=True)
class SpendGenesisUTxO:
    subcommand: ClassVar[str] = "issue-genesis-utxo-expenditure"

    output_tx: NewTxFile
    wallet_key: SigningKeyFile
    source_address: Address
    outputs: NonEmpty[TxOut]


@dataclass(frozen=True, slots=True)
class SpendUTxO:
    subcommand: ClassVar[str] = "issue-utxo-expenditure"

    output_tx: NewTxFile
    wallet_key: SigningKeyFile
    inputs: NonEmpty[TxIn]
    outputs: NonEmpty[TxOut]


@dataclass(frozen=True, slots=True)
class GenerateTxs:
    """Parameters for the transaction generator.

    The generator schedules and paces submissions itself; the values
    here are only validated.
    """

    subcommand: ClassVar[str] = "generate-txs"

    target_nodes: NonEmpty[NodeAddress]
    tx_count: NumberOfTxs
    inputs_per_tx: NumberOfInputsPerTx
    outputs_per_tx: NumberOfOutputsPerTx
    fee_per_tx: FeePerTx
    tps_rate: TPSRate
    extra_size: TxAdditionalSize | None
    signing_keys: NonEmpty[SigningKeyFile]
    node_id: CoreNodeId


Command = Union[
    Keygen,
    ToVerification,
    PrettySigningKeyPublic,
    PrintSigningKeyAddress,
    MigrateDelegateKeyFrom,
    IssueDelegationCertificate,
    CheckDelegation,
    Genesis,
    DumpHardcodedGenesis,
    PrintGenesisHash,
    SubmitTx,
    SpendGenesisUTxO,
    SpendUTxO,
    GenerateTxs,
]
