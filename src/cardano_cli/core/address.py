"""Checksummed base58 payment addresses.

An address travels as base58 text.  The decoded bytes are a CBOR
envelope ``[tag24(payload), crc32(payload)]`` where ``payload`` is
itself CBOR ``[root, attributes, type]``.  Decoding verifies the CRC32
and rejects any non-canonical encoding so that
``encode_address(decode_address(text)) == text`` always holds.

This module is the only place in the codebase that imports ``base58``
and ``cbor2``; their exceptions are mapped to :class:`ValueError`.
"""

from __future__ import annotations

import zlib
from dataclasses import dataclass
from typing import Any

import base58
import cbor2

_ENCODED_CBOR_TAG: int = 24
"""CBOR tag marking a byte string that holds an encoded CBOR item."""

ADDRESS_ROOT_LENGTH: int = 28


@dataclass(frozen=True, slots=True)
class Address:
    """A decoded payment address.

    ``payload`` holds the exact bytes covered by ``checksum``; ``root``
    and ``address_type`` are read out of it for convenience.
    """

    root: bytes
    address_type: int
    payload: bytes
    checksum: int

    def __str__(self) -> str:
        return encode_address(self)


def crc32(data: bytes) -> int:
    return zlib.crc32(data) & 0xFFFFFFFF


def encode_address(address: Address) -> str:
    """Render *address* as base58 text."""
    envelope = cbor2.dumps(
        [cbor2.CBORTag(_ENCODED_CBOR_TAG, address.payload), address.checksum]
    )
    return base58.b58encode(envelope).decode("ascii")


def address_from_payload(payload: bytes) -> Address:
    """Build an :class:`Address` around *payload*, computing its checksum."""
    root, address_type = _parse_payload(payload)
    return Address(
        root=root,
        address_type=address_type,
        payload=payload,
        checksum=crc32(payload),
    )


def decode_address(text: str) -> Address:
    """Decode base58 *text* into an :class:`Address`.

    Raises
    ------
    ValueError
        If the text is not base58, the CBOR envelope is malformed, the
        checksum does not match, or the encoding is not canonical.
    """
    if not text:
        raise ValueError("address is empty")
    try:
        raw = base58.b58decode(text)
    except ValueError as exc:
        raise ValueError(f"not base58: {exc}") from exc

    envelope = _loads(raw, "address envelope")
    if not (isinstance(envelope, list) and len(envelope) == 2):
        raise ValueError("address envelope must be a two-element array")
    tagged, checksum = envelope
    if not (
        isinstance(tagged, cbor2.CBORTag)
        and tagged.tag == _ENCODED_CBOR_TAG
        and isinstance(tagged.value, bytes)
    ):
        raise ValueError("address payload must be tag-24 encoded bytes")
    if not isinstance(checksum, int) or isinstance(checksum, bool):
        raise ValueError("address checksum must be an integer")

    payload: bytes = tagged.value
    if crc32(payload) != checksum:
        raise ValueError("address checksum mismatch")

    root, address_type = _parse_payload(payload)
    address = Address(
        root=root,
        address_type=address_type,
        payload=payload,
        checksum=checksum,
    )
    if encode_address(address) != text:
        raise ValueError("address is not canonically encoded")
    return address


def _parse_payload(payload: bytes) -> tuple[bytes, int]:
    """Return ``(root, type)`` from the inner ``[root, attributes, type]``."""
    inner = _loads(payload, "address payload")
    if not (isinstance(inner, list) and len(inner) == 3):
        raise ValueError("address payload must be a three-element array")
    root, attributes, address_type = inner
    if not isinstance(root, bytes) or len(root) != ADDRESS_ROOT_LENGTH:
        raise ValueError(f"address root must be {ADDRESS_ROOT_LENGTH} bytes")
    if not isinstance(attributes, dict):
        raise ValueError("address attributes must be a map")
    if not isinstance(address_type, int) or isinstance(address_type, bool):
        raise ValueError("address type must be an integer")
    return root, address_type


def _loads(data: bytes, what: str) -> Any:
    """Decode one CBOR item; any decoder failure becomes ``ValueError``."""
    try:
        return cbor2.loads(data)
    except Exception as exc:
        raise ValueError(f"malformed {what}: {exc}") from exc
