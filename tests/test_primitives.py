"""Tests for primitive value parsers (core/primitives.py).

Every parser is pure: one token in, one value out, or a
:class:`MalformedValueError` naming the offending option.
"""

from __future__ import annotations

import ipaddress
from datetime import datetime, timezone
from fractions import Fraction
from pathlib import Path

import pytest

from cardano_cli.core import primitives
from cardano_cli.core.models import (
    LOVELACE_PORTION_DENOMINATOR,
    MAX_LOVELACE,
    CoreNodeId,
    Lovelace,
    NodeAddress,
    ProtocolMagicId,
    SlotLength,
    Testnet,
    TxId,
    TxIn,
)
from cardano_cli.exceptions import MalformedValueError


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

class TestIntegers:
    def test_plain_integer(self) -> None:
        assert primitives.parse_integer("42", "--k") == 42

    def test_surrounding_whitespace(self) -> None:
        assert primitives.parse_word(" 42 ", "--k") == 42

    @pytest.mark.parametrize("token", ["", "4.2", "0x10", "1_000", "ten"])
    def test_not_an_integer(self, token: str) -> None:
        with pytest.raises(MalformedValueError, match="expected a decimal integer"):
            primitives.parse_integer(token, "--k")

    def test_word_rejects_negative(self) -> None:
        with pytest.raises(MalformedValueError, match="non-negative"):
            primitives.parse_word("-1", "--k")

    def test_word64_upper_bound(self) -> None:
        assert primitives.parse_word(str(2**64 - 1), "--k") == 2**64 - 1
        with pytest.raises(MalformedValueError, match="64 bits"):
            primitives.parse_word(str(2**64), "--k")

    def test_word32_upper_bound(self) -> None:
        with pytest.raises(MalformedValueError, match="32 bits"):
            primitives.parse_word32(str(2**32), "--protocol-magic")

    def test_error_carries_option_and_value(self) -> None:
        with pytest.raises(MalformedValueError) as exc_info:
            primitives.parse_word("-3", "--tps")
        assert exc_info.value.option == "--tps"
        assert exc_info.value.value == "-3"
        assert "--tps" in str(exc_info.value)


class TestDouble:
    def test_parses(self) -> None:
        assert primitives.parse_double("0.25", "--pbft-signature-threshold") == 0.25

    @pytest.mark.parametrize("token", ["nan", "inf", "-inf"])
    def test_rejects_non_finite(self, token: str) -> None:
        with pytest.raises(MalformedValueError, match="finite"):
            primitives.parse_double(token, "--pbft-signature-threshold")

    def test_rejects_text(self) -> None:
        with pytest.raises(MalformedValueError, match="expected a number"):
            primitives.parse_double("half", "--pbft-signature-threshold")


# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------

class TestLovelace:
    @pytest.mark.parametrize("value", [0, 1_000_000, MAX_LOVELACE])
    def test_within_supply(self, value: int) -> None:
        assert primitives.parse_lovelace(str(value), "--total-balance") == Lovelace(value)

    def test_above_supply(self) -> None:
        with pytest.raises(MalformedValueError, match="must not exceed"):
            primitives.parse_lovelace(str(MAX_LOVELACE + 1), "--total-balance")

    def test_negative(self) -> None:
        with pytest.raises(MalformedValueError):
            primitives.parse_lovelace("-5", "--total-balance")


class TestLovelacePortion:
    def test_exact_fraction(self) -> None:
        portion = primitives.parse_lovelace_portion(
            str(LOVELACE_PORTION_DENOMINATOR // 2), "--delegate-share"
        )
        assert portion.fraction == Fraction(1, 2)

    def test_full_portion(self) -> None:
        portion = primitives.parse_lovelace_portion(
            str(LOVELACE_PORTION_DENOMINATOR), "--delegate-share"
        )
        assert portion.fraction == 1

    def test_above_denominator(self) -> None:
        with pytest.raises(MalformedValueError):
            primitives.parse_lovelace_portion(
                str(LOVELACE_PORTION_DENOMINATOR + 1), "--delegate-share"
            )


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

class TestAddress:
    def test_valid(self, address_text: str) -> None:
        assert str(primitives.parse_address(address_text, "--rich-addr-from")) == address_text

    def test_corrupted(self, address_text: str) -> None:
        corrupted = address_text[:-1] + ("1" if address_text[-1] != "1" else "2")
        with pytest.raises(MalformedValueError, match="bad base58 address"):
            primitives.parse_address(corrupted, "--rich-addr-from")


class TestTxId:
    def test_valid(self, tx_id_hex: str) -> None:
        assert primitives.parse_tx_id(tx_id_hex, "--txin") == TxId(bytes.fromhex(tx_id_hex))

    def test_not_hex(self) -> None:
        with pytest.raises(MalformedValueError, match="not a hex string"):
            primitives.parse_tx_id("zz" * 32, "--txin")

    def test_inner_whitespace(self) -> None:
        with pytest.raises(MalformedValueError, match="not a hex string"):
            primitives.parse_tx_id(" ".join(["ab"] * 32), "--txin")

    def test_odd_length(self) -> None:
        with pytest.raises(MalformedValueError, match="not a hex string"):
            primitives.parse_tx_id("a" * 63, "--txin")

    def test_wrong_length(self) -> None:
        with pytest.raises(MalformedValueError, match="32 bytes"):
            primitives.parse_tx_id("ab" * 31, "--txin")


class TestMagicsAndIds:
    def test_testnet_magic(self) -> None:
        assert primitives.parse_testnet_magic("1097911063", "--testnet-magic") == Testnet(
            1097911063
        )

    def test_protocol_magic_id(self) -> None:
        assert primitives.parse_protocol_magic_id("764824073", "--protocol-magic") == (
            ProtocolMagicId(764824073)
        )

    def test_core_node_id(self) -> None:
        assert primitives.parse_core_node_id("3", "--node-id") == CoreNodeId(3)


# ---------------------------------------------------------------------------
# Tuples
# ---------------------------------------------------------------------------

class TestPair:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("(a,b)", ("a", "b")),
            ("( a , b )", ("a", "b")),
            ('("a",b)', ("a", "b")),
            ('("a","b")', ("a", "b")),
        ],
    )
    def test_accepted_forms(self, token: str, expected: tuple[str, str]) -> None:
        assert primitives.parse_pair(token, "--txin") == expected

    @pytest.mark.parametrize("token", ["a,b", "(a)", "(a,b,c)", "(a,b", "()"])
    def test_malformed(self, token: str) -> None:
        with pytest.raises(MalformedValueError, match=r"\(FIRST,SECOND\)"):
            primitives.parse_pair(token, "--txin")


class TestTxIn:
    def test_valid(self, tx_id_hex: str) -> None:
        tx_in = primitives.parse_tx_in(f"({tx_id_hex},3)", "--txin")
        assert tx_in == TxIn(TxId(bytes.fromhex(tx_id_hex)), 3)

    def test_quoted_id(self, tx_id_hex: str) -> None:
        tx_in = primitives.parse_tx_in(f'("{tx_id_hex}",0)', "--txin")
        assert tx_in.index == 0

    def test_bad_index(self, tx_id_hex: str) -> None:
        with pytest.raises(MalformedValueError):
            primitives.parse_tx_in(f"({tx_id_hex},-1)", "--txin")

    def test_malformed_tuple(self, tx_id_hex: str) -> None:
        with pytest.raises(MalformedValueError, match="pair"):
            primitives.parse_tx_in(f"{tx_id_hex}#3", "--txin")


class TestTxOut:
    def test_valid(self, address_text: str) -> None:
        tx_out = primitives.parse_tx_out(f"({address_text},1000)", "--txout")
        assert str(tx_out.address) == address_text
        assert tx_out.amount == Lovelace(1000)

    def test_amount_above_supply(self, address_text: str) -> None:
        with pytest.raises(MalformedValueError, match="must not exceed"):
            primitives.parse_tx_out(f"({address_text},{MAX_LOVELACE + 1})", "--txout")


class TestNodeAddress:
    def test_ipv4(self) -> None:
        parsed = primitives.parse_node_address("(127.0.0.1,3000)", "--target-node")
        assert parsed == NodeAddress(ipaddress.ip_address("127.0.0.1"), 3000)

    def test_ipv6(self) -> None:
        parsed = primitives.parse_node_address("(::1,3001)", "--target-node")
        assert parsed.host == ipaddress.ip_address("::1")
        assert parsed.port == 3001

    def test_hostname_rejected(self) -> None:
        with pytest.raises(MalformedValueError, match="bad host of target node"):
            primitives.parse_node_address("(localhost,3000)", "--target-node")

    def test_port_out_of_range(self) -> None:
        with pytest.raises(MalformedValueError, match="16 bits"):
            primitives.parse_node_address("(127.0.0.1,70000)", "--target-node")


# ---------------------------------------------------------------------------
# Time, paths and durations
# ---------------------------------------------------------------------------

class TestPosixTime:
    def test_epoch(self) -> None:
        assert primitives.parse_posix_time("0", "--start-time") == datetime(
            1970, 1, 1, tzinfo=timezone.utc
        )

    def test_is_utc(self) -> None:
        parsed = primitives.parse_posix_time("1506203091", "--start-time")
        assert parsed.tzinfo == timezone.utc
        assert parsed.year == 2017

    def test_out_of_range(self) -> None:
        with pytest.raises(MalformedValueError, match="out of range"):
            primitives.parse_posix_time(str(10**30), "--start-time")

    def test_not_integer(self) -> None:
        with pytest.raises(MalformedValueError):
            primitives.parse_posix_time("yesterday", "--start-time")


class TestFilePath:
    def test_path(self) -> None:
        assert primitives.parse_file_path("keys/a.sk", "--secret") == Path("keys/a.sk")

    def test_empty(self) -> None:
        with pytest.raises(MalformedValueError, match="empty"):
            primitives.parse_file_path("", "--secret")


class TestSlotLength:
    def test_seconds_to_milliseconds(self) -> None:
        assert primitives.parse_slot_length("20", "--slot-duration") == SlotLength(20_000)

    def test_zero(self) -> None:
        with pytest.raises(MalformedValueError, match="positive"):
            primitives.parse_slot_length("0", "--slot-duration")
