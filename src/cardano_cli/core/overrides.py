"""Override slots for settings that may also come from a configuration file.

A :class:`Last` either holds a value or is empty.  Slots compose with
"rightmost present value wins": ``Last(x).combine(Last(y)) == Last(y)``
and ``Last(x).combine(Last()) == Last(x)``.  ``combine`` is associative
and ``Last()`` is its identity, so any number of layers (defaults,
configuration file, command line) fold into one slot.

Merging the layers is the job of the configuration collaborator; the
command-line layer only produces the command-line slots.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from pathlib import Path
from typing import Generic, TypeVar

from cardano_cli.core.models import RequiresNetworkMagic, SlotLength

T = TypeVar("T")


@dataclass(frozen=True)
class Last(Generic[T]):
    """An optional override; ``None`` means "not supplied"."""

    value: T | None = None

    @property
    def is_set(self) -> bool:
        return self.value is not None

    def combine(self, later: Last[T]) -> Last[T]:
        """Compose with a *later* layer: its value wins when present."""
        return later if later.is_set else self

    def get(self, default: T) -> T:
        return self.value if self.value is not None else default


def last_of(*slots: Last[T]) -> Last[T]:
    """Fold *slots* left to right; the rightmost present value wins."""
    return reduce(Last.combine, slots, Last())


@dataclass(frozen=True, slots=True)
class NodeOverrides:
    """Command-line override slots for node configuration values."""

    database_path: Last[Path]
    genesis_file: Last[Path]
    delegation_certificate: Last[Path]
    signing_key: Last[Path]
    log_config: Last[Path]
    socket_dir: Last[Path]
    pbft_signature_threshold: Last[float]
    slot_length: Last[SlotLength]
    requires_network_magic: Last[RequiresNetworkMagic]
    genesis_hash: Last[str]
