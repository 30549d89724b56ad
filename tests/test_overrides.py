"""Tests for layered override slots (core/overrides.py, cli/override_options.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from cardano_cli.cli.override_options import (
    add_override_arguments,
    parse_node_overrides,
    requires_network_magic,
)
from cardano_cli.cli.registry import CliArgumentParser
from cardano_cli.core.models import RequiresNetworkMagic, SlotLength
from cardano_cli.core.overrides import Last, last_of
from cardano_cli.exceptions import MalformedValueError, UsageError


# ---------------------------------------------------------------------------
# Last
# ---------------------------------------------------------------------------

class TestLast:
    def test_later_value_wins(self) -> None:
        assert Last(1).combine(Last(2)) == Last(2)

    def test_empty_later_keeps_earlier(self) -> None:
        assert Last(1).combine(Last()) == Last(1)

    def test_empty_is_identity(self) -> None:
        assert Last().combine(Last(3)) == Last(3)
        assert Last().combine(Last()) == Last()

    def test_associative(self) -> None:
        a, b, c = Last(1), Last(), Last(3)
        assert a.combine(b).combine(c) == a.combine(b.combine(c))

    def test_last_of_folds_left_to_right(self) -> None:
        assert last_of(Last("default"), Last("file"), Last()) == Last("file")
        assert last_of() == Last()

    def test_get(self) -> None:
        assert Last(5).get(0) == 5
        assert Last().get(0) == 0
        assert not Last().is_set


# ---------------------------------------------------------------------------
# Override flags
# ---------------------------------------------------------------------------

class TestParseNodeOverrides:
    def test_all_absent(self) -> None:
        overrides = parse_node_overrides([])
        assert overrides.database_path == Last()
        assert overrides.genesis_file == Last()
        assert overrides.delegation_certificate == Last()
        assert overrides.signing_key == Last()
        assert overrides.log_config == Last()
        assert overrides.socket_dir == Last()
        assert overrides.pbft_signature_threshold == Last()
        assert overrides.slot_length == Last()
        assert overrides.requires_network_magic == Last()
        assert overrides.genesis_hash == Last()

    def test_all_present(self) -> None:
        overrides = parse_node_overrides(
            [
                "--database-path", "db",
                "--genesis-file", "genesis.json",
                "--delegation-certificate", "node.cert",
                "--signing-key", "node.key",
                "--log-config", "log.yaml",
                "--socket-dir", "sockets",
                "--pbft-signature-threshold", "0.7",
                "--slot-duration", "20",
                "--require-network-magic",
                "--genesis-hash", "5f20df93",
            ]
        )
        assert overrides.database_path == Last(Path("db"))
        assert overrides.genesis_file == Last(Path("genesis.json"))
        assert overrides.delegation_certificate == Last(Path("node.cert"))
        assert overrides.signing_key == Last(Path("node.key"))
        assert overrides.log_config == Last(Path("log.yaml"))
        assert overrides.socket_dir == Last(Path("sockets"))
        assert overrides.pbft_signature_threshold == Last(0.7)
        assert overrides.slot_length == Last(SlotLength(20_000))
        assert overrides.requires_network_magic == Last(RequiresNetworkMagic.REQUIRES_MAGIC)
        assert overrides.genesis_hash == Last("5f20df93")

    def test_command_line_slot_overrides_file_slot(self) -> None:
        from_file = Last(Path("/var/lib/node/db"))
        from_cli = parse_node_overrides(["--database-path", "db"]).database_path
        assert from_file.combine(from_cli) == Last(Path("db"))

    def test_absent_flag_keeps_file_slot(self) -> None:
        from_file = Last(Path("/var/lib/node/db"))
        from_cli = parse_node_overrides([]).database_path
        assert from_file.combine(from_cli) == from_file

    def test_malformed_value(self) -> None:
        with pytest.raises(MalformedValueError):
            parse_node_overrides(["--slot-duration", "0"])

    def test_unknown_flag(self) -> None:
        with pytest.raises(UsageError):
            parse_node_overrides(["--no-such-flag"])

    def test_flag_prefix_not_accepted(self) -> None:
        with pytest.raises(UsageError):
            parse_node_overrides(["--database", "db"])

    def test_repeated_override(self) -> None:
        with pytest.raises(UsageError, match="given more than once"):
            parse_node_overrides(["--database-path", "a", "--database-path", "b"])

    def test_package_level_exports(self) -> None:
        from cardano_cli import cli

        assert cli.parse_node_overrides is parse_node_overrides
        assert cli.add_override_arguments is add_override_arguments
        assert cli.parse_node_overrides([]).genesis_file == Last()

    def test_hidden_flags_not_in_help(self) -> None:
        parser = CliArgumentParser(prog="cardano-node")
        add_override_arguments(parser)
        text = parser.format_help()
        assert "--database-path" in text
        assert "--slot-duration" not in text
        assert "--pbft-signature-threshold" not in text


class TestRequiresNetworkMagicSwitch:
    def _extract(self, argv: list[str]) -> RequiresNetworkMagic:
        option = requires_network_magic()
        parser = CliArgumentParser(prog="test")
        option.register(parser, parser)
        return option.extract(parser.parse_args(argv))

    def test_default(self) -> None:
        assert self._extract([]) is RequiresNetworkMagic.REQUIRES_NO_MAGIC

    def test_given(self) -> None:
        assert self._extract(["--require-network-magic"]) is RequiresNetworkMagic.REQUIRES_MAGIC
