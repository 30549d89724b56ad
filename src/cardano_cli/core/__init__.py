"""Core layer — domain values, validation rules and command variants.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Validating constructors raise ``ValueError``; primitive parsers raise
  :class:`~cardano_cli.exceptions.MalformedValueError`.
"""

from cardano_cli.core.address import Address, decode_address, encode_address
from cardano_cli.core.commands import Command
from cardano_cli.core.models import Lovelace, LovelacePortion, NonEmpty
from cardano_cli.core.overrides import Last, NodeOverrides
from cardano_cli.core.protocols import Dispatcher

__all__: list[str] = [
    "Address",
    "Command",
    "Dispatcher",
    "Last",
    "Lovelace",
    "LovelacePortion",
    "NodeOverrides",
    "NonEmpty",
    "decode_address",
    "encode_address",
]
