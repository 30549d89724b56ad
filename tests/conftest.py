"""Shared pytest fixtures and configuration for the cardano-cli test suite.

Guidelines
----------
* No network access and no filesystem state in any test.
* Core tests must be pure — no side effects.
* Addresses are built in-process from a fixed payload.
"""

from __future__ import annotations

import cbor2
import pytest

from cardano_cli.core.address import Address, address_from_payload, encode_address

TX_ID_HEX: str = "ab" * 32


def make_payload(root: bytes = b"\x00" * 28, address_type: int = 0) -> bytes:
    return cbor2.dumps([root, {}, address_type])


@pytest.fixture()
def address() -> Address:
    return address_from_payload(make_payload())


@pytest.fixture()
def address_text(address: Address) -> str:
    return encode_address(address)


@pytest.fixture()
def other_address_text() -> str:
    return encode_address(address_from_payload(make_payload(root=b"\x11" * 28, address_type=2)))


@pytest.fixture()
def tx_id_hex() -> str:
    return TX_ID_HEX
