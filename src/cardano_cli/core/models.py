"""Domain value types for cardano-cli.

All types are **frozen** dataclasses — immutable value objects whose
constructors enforce their invariants and raise :class:`ValueError`
when violated.  They carry zero I/O and no knowledge of the command
line; the primitive parsers in :mod:`cardano_cli.core.primitives` turn
those ``ValueError`` s into user-facing errors.
"""

from __future__ import annotations

import enum
import ipaddress
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from fractions import Fraction
from pathlib import Path
from typing import Generic, NewType, TypeVar, Union

from cardano_cli.core.address import Address

T = TypeVar("T")

MAX_LOVELACE: int = 45_000_000_000_000_000
"""Total supply of the native unit; no amount may exceed it."""

LOVELACE_PORTION_DENOMINATOR: int = 1_000_000_000_000_000
"""Fixed denominator of every :class:`LovelacePortion`."""

WORD32_MAX: int = 2**32 - 1
WORD64_MAX: int = 2**64 - 1
PORT_MAX: int = 2**16 - 1

TX_ID_LENGTH: int = 32
"""Byte length of a transaction id (a Blake2b-256 digest)."""


# ---------------------------------------------------------------------------
# File paths
# ---------------------------------------------------------------------------
# Used opaquely: no existence check happens in this layer.  The "New"
# variants name files or directories that the dispatcher will create.

SigningKeyFile = NewType("SigningKeyFile", Path)
NewSigningKeyFile = NewType("NewSigningKeyFile", Path)
VerificationKeyFile = NewType("VerificationKeyFile", Path)
NewVerificationKeyFile = NewType("NewVerificationKeyFile", Path)
CertificateFile = NewType("CertificateFile", Path)
NewCertificateFile = NewType("NewCertificateFile", Path)
TxFile = NewType("TxFile", Path)
NewTxFile = NewType("NewTxFile", Path)
NewDirectory = NewType("NewDirectory", Path)
GenesisFile = NewType("GenesisFile", Path)
TopologyFile = NewType("TopologyFile", Path)


# ---------------------------------------------------------------------------
# Plain counts
# ---------------------------------------------------------------------------

EpochNumber = NewType("EpochNumber", int)
BlockCount = NewType("BlockCount", int)
NumberOfTxs = NewType("NumberOfTxs", int)
NumberOfInputsPerTx = NewType("NumberOfInputsPerTx", int)
NumberOfOutputsPerTx = NewType("NumberOfOutputsPerTx", int)
FeePerTx = NewType("FeePerTx", int)
TPSRate = NewType("TPSRate", int)
TxAdditionalSize = NewType("TxAdditionalSize", int)


def _check_range(name: str, value: int, upper: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    if value > upper:
        raise ValueError(f"{name} must not exceed {upper}")


# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Lovelace:
    """A quantity of the native unit, bounded by the total supply."""

    value: int

    def __post_init__(self) -> None:
        _check_range("Lovelace value", self.value, MAX_LOVELACE)


@dataclass(frozen=True, slots=True)
class LovelacePortion:
    """An exact proportion of a whole: ``numerator / LOVELACE_PORTION_DENOMINATOR``."""

    numerator: int

    def __post_init__(self) -> None:
        _check_range("Lovelace portion", self.numerator, LOVELACE_PORTION_DENOMINATOR)

    @classmethod
    def whole(cls) -> LovelacePortion:
        """The portion ``1`` (numerator equal to the denominator)."""
        return cls(LOVELACE_PORTION_DENOMINATOR)

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.numerator, LOVELACE_PORTION_DENOMINATOR)


# ---------------------------------------------------------------------------
# Network identity
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MainOrStaging:
    """The main network or the staging environment."""


@dataclass(frozen=True, slots=True)
class Testnet:
    """A testnet instance identified by its network magic."""

    magic: int

    def __post_init__(self) -> None:
        _check_range("Testnet magic", self.magic, WORD32_MAX)


NetworkMagic = Union[MainOrStaging, Testnet]


class RequiresNetworkMagic(enum.Enum):
    """Whether transactions must carry the network magic."""

    REQUIRES_NO_MAGIC = "RequiresNoMagic"
    REQUIRES_MAGIC = "RequiresMagic"


@dataclass(frozen=True, slots=True)
class ProtocolMagicId:
    """The magic number unique to a chain instance."""

    value: int

    def __post_init__(self) -> None:
        _check_range("Protocol magic", self.value, WORD32_MAX)


@dataclass(frozen=True, slots=True)
class ProtocolMagic:
    magic_id: ProtocolMagicId
    requires_network_magic: RequiresNetworkMagic


class Protocol(enum.Enum):
    """Consensus protocol a delegate key is migrated from."""

    BYRON_LEGACY = "byron-legacy"
    BFT = "bft"
    PRAOS = "praos"
    MOCK_PBFT = "mock-pbft"
    REAL_PBFT = "real-pbft"


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TxId:
    """Identifier of a transaction: a fixed-length hash digest."""

    digest: bytes

    def __post_init__(self) -> None:
        if len(self.digest) != TX_ID_LENGTH:
            raise ValueError(
                f"transaction id must be {TX_ID_LENGTH} bytes, got {len(self.digest)}"
            )

    @property
    def hex(self) -> str:
        return self.digest.hex()


@dataclass(frozen=True, slots=True)
class TxIn:
    """A reference to an unspent output: transaction id and zero-based index."""

    tx_id: TxId
    index: int

    def __post_init__(self) -> None:
        _check_range("Output index", self.index, WORD32_MAX)


@dataclass(frozen=True, slots=True)
class TxOut:
    """A payment of ``amount`` to ``address``."""

    address: Address
    amount: Lovelace


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

NodeHostAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True, slots=True)
class NodeAddress:
    """A concrete network endpoint of a node."""

    host: NodeHostAddress
    port: int

    def __post_init__(self) -> None:
        _check_range("Port", self.port, PORT_MAX)


@dataclass(frozen=True, slots=True)
class CoreNodeId:
    """Identifier of a core (block-producing) node."""

    number: int

    def __post_init__(self) -> None:
        _check_range("Node id", self.number, WORD64_MAX)


@dataclass(frozen=True, slots=True)
class TopologyInfo:
    """Where to find a node: its id and the topology file that lists it."""

    node_id: CoreNodeId
    topology_file: TopologyFile


@dataclass(frozen=True, slots=True)
class SlotLength:
    milliseconds: int

    @classmethod
    def from_seconds(cls, seconds: int) -> SlotLength:
        if seconds <= 0:
            raise ValueError("slot duration must be positive")
        return cls(seconds * 1000)


# ---------------------------------------------------------------------------
# Genesis composites
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TestnetBalanceOptions:
    """How the testnet balance is split between poor and delegate addresses."""

    poor_addresses: int
    delegate_addresses: int
    total_balance: Lovelace
    delegate_share: LovelacePortion


@dataclass(frozen=True, slots=True)
class FakeAvvmOptions:
    """Fake AVVM (pre-sale voucher) entries seeded into the genesis."""

    entry_count: int
    entry_balance: Lovelace


@dataclass(frozen=True, slots=True)
class GenesisParameters:
    """Every value needed to generate a new genesis."""

    start_time: datetime
    protocol_parameters_file: Path
    k: BlockCount
    protocol_magic: ProtocolMagic
    testnet_balance: TestnetBalanceOptions
    fake_avvm: FakeAvvmOptions
    avvm_balance_factor: LovelacePortion
    seed: int | None


# ---------------------------------------------------------------------------
# Non-empty sequence
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NonEmpty(Generic[T]):
    """An ordered sequence holding at least one element.

    The head is a separate field, so an empty instance cannot be built.
    """

    head: T
    tail: tuple[T, ...] = ()

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> NonEmpty[T]:
        """Build from *items*; raises :class:`ValueError` when empty."""
        collected = tuple(items)
        if not collected:
            raise ValueError("at least one element is required")
        return cls(collected[0], collected[1:])

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def __getitem__(self, index: int) -> T:
        return self.to_tuple()[index]

    def to_tuple(self) -> tuple[T, ...]:
        return (self.head, *self.tail)
