"""Primitive value parsers — one command-line token to one domain value.

Every parser has the shape ``parse_x(token, option) -> X``.  ``option``
is the flag the token came from (e.g. ``"--txout"``) and is used only to
build the error message.  Every failure raises
:class:`~cardano_cli.exceptions.MalformedValueError`; nothing else
escapes, and no parser has side effects.
"""

from __future__ import annotations

import ipaddress
import math
import re
from datetime import datetime, timezone
from pathlib import Path

from cardano_cli.core.address import Address, decode_address
from cardano_cli.core.models import (
    CoreNodeId,
    Lovelace,
    LovelacePortion,
    NodeAddress,
    ProtocolMagicId,
    SlotLength,
    Testnet,
    TxId,
    TxIn,
    TxOut,
)
from cardano_cli.exceptions import MalformedValueError

_INTEGER_RE = re.compile(r"-?[0-9]+")
_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})+")

# "(first,second)" with optional whitespace; either element may be quoted.
_PAIR_RE = re.compile(
    r"""\(\s*
        (?:"(?P<qfirst>[^"]*)"|(?P<first>[^,"()\s]+))
        \s*,\s*
        (?:"(?P<qsecond>[^"]*)"|(?P<second>[^,"()\s]+))
        \s*\)""",
    re.VERBOSE,
)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def parse_integer(token: str, option: str) -> int:
    """Parse a decimal integer (sign allowed, no separators)."""
    stripped = token.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        raise MalformedValueError(option, token, "expected a decimal integer")
    return int(stripped)


def parse_word(token: str, option: str, *, bits: int = 64) -> int:
    """Parse an unsigned integer that fits in *bits* bits."""
    value = parse_integer(token, option)
    if value < 0:
        raise MalformedValueError(option, token, "must be non-negative")
    if value >= 1 << bits:
        raise MalformedValueError(
            option, token, f"must fit in {bits} bits (max {(1 << bits) - 1})"
        )
    return value


def parse_word32(token: str, option: str) -> int:
    return parse_word(token, option, bits=32)


def parse_double(token: str, option: str) -> float:
    """Parse a finite floating point number."""
    try:
        value = float(token)
    except ValueError:
        raise MalformedValueError(option, token, "expected a number") from None
    if not math.isfinite(value):
        raise MalformedValueError(option, token, "must be finite")
    return value


# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------

def parse_lovelace(token: str, option: str) -> Lovelace:
    """Parse an amount, bounded by the maximum supply."""
    value = parse_word(token, option)
    try:
        return Lovelace(value)
    except ValueError as exc:
        raise MalformedValueError(option, token, str(exc)) from exc


def parse_lovelace_portion(token: str, option: str) -> LovelacePortion:
    """Parse the numerator of a portion over the fixed denominator."""
    value = parse_word(token, option)
    try:
        return LovelacePortion(value)
    except ValueError as exc:
        raise MalformedValueError(option, token, str(exc)) from exc


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

def parse_address(token: str, option: str) -> Address:
    """Decode a checksummed base58 address."""
    try:
        return decode_address(token.strip())
    except ValueError as exc:
        raise MalformedValueError(
            option, token, f"bad base58 address ({exc})"
        ) from exc


def parse_tx_id(token: str, option: str) -> TxId:
    """Decode a hex transaction id of exactly the digest length."""
    stripped = token.strip()
    if not _HEX_RE.fullmatch(stripped):
        raise MalformedValueError(option, token, "not a hex string")
    digest = bytes.fromhex(stripped)
    try:
        return TxId(digest)
    except ValueError as exc:
        raise MalformedValueError(option, token, str(exc)) from exc


def parse_testnet_magic(token: str, option: str) -> Testnet:
    return Testnet(parse_word32(token, option))


def parse_protocol_magic_id(token: str, option: str) -> ProtocolMagicId:
    return ProtocolMagicId(parse_word32(token, option))


def parse_core_node_id(token: str, option: str) -> CoreNodeId:
    return CoreNodeId(parse_word(token, option))


# ---------------------------------------------------------------------------
# Tuples
# ---------------------------------------------------------------------------

def parse_pair(token: str, option: str) -> tuple[str, str]:
    """Split ``(first,second)`` into its two raw elements."""
    match = _PAIR_RE.fullmatch(token.strip())
    if match is None:
        raise MalformedValueError(
            option, token, "expected a pair written as (FIRST,SECOND)"
        )
    first = match.group("qfirst")
    if first is None:
        first = match.group("first")
    second = match.group("qsecond")
    if second is None:
        second = match.group("second")
    return first, second


def parse_tx_in(token: str, option: str) -> TxIn:
    """Parse ``(TXID,INDEX)`` into a :class:`TxIn`."""
    raw_id, raw_index = parse_pair(token, option)
    return TxIn(
        tx_id=parse_tx_id(raw_id, option),
        index=parse_word32(raw_index, option),
    )


def parse_tx_out(token: str, option: str) -> TxOut:
    """Parse ``(ADDR,LOVELACE)`` into a :class:`TxOut`."""
    raw_address, raw_amount = parse_pair(token, option)
    return TxOut(
        address=parse_address(raw_address, option),
        amount=parse_lovelace(raw_amount, option),
    )


def parse_node_address(token: str, option: str) -> NodeAddress:
    """Parse ``(HOST,PORT)``; the host must be a literal IP address."""
    raw_host, raw_port = parse_pair(token, option)
    try:
        host = ipaddress.ip_address(raw_host)
    except ValueError:
        raise MalformedValueError(
            option,
            token,
            f"bad host of target node: {raw_host!r} is not an IP address",
        ) from None
    return NodeAddress(host=host, port=parse_word(raw_port, option, bits=16))


# ---------------------------------------------------------------------------
# Time, paths and durations
# ---------------------------------------------------------------------------

def parse_posix_time(token: str, option: str) -> datetime:
    """Convert whole seconds since the epoch into an aware UTC datetime."""
    seconds = parse_integer(token, option)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise MalformedValueError(
            option, token, f"time is out of range ({exc})"
        ) from exc


def parse_file_path(token: str, option: str) -> Path:
    """Accept any non-empty path.  Existence is not checked here."""
    if not token:
        raise MalformedValueError(option, token, "path must not be empty")
    return Path(token)


def parse_slot_length(token: str, option: str) -> SlotLength:
    """Convert whole seconds into a :class:`SlotLength`."""
    seconds = parse_word(token, option)
    try:
        return SlotLength.from_seconds(seconds)
    except ValueError as exc:
        raise MalformedValueError(option, token, str(exc)) from exc
