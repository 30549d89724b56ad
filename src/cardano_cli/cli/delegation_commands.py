"""Delegation related commands: issuing and checking delegation certificates."""

from __future__ import annotations

from cardano_cli.cli import fields
from cardano_cli.cli.options import CommandGroup, CommandSpec, Record
from cardano_cli.core.commands import CheckDelegation, IssueDelegationCertificate

ISSUE_DELEGATION_CERTIFICATE = CommandSpec(
    "issue-delegation-certificate",
    "Create a delegation certificate allowing the delegator to sign blocks "
    "on behalf of the issuer.",
    Record(
        IssueDelegationCertificate,
        (
            ("protocol_magic_id", fields.protocol_magic_id()),
            (
                "since_epoch",
                fields.integral("since-epoch", "The epoch from which the delegation is valid."),
            ),
            (
                "issuer_key",
                fields.file_path(
                    "secret",
                    "The issuer of the certificate, who delegates their right to sign blocks.",
                ),
            ),
            (
                "delegate_key",
                fields.file_path(
                    "delegate-key", "The delegate, who gains the right to sign blocks."
                ),
            ),
            ("output_certificate", fields.new_file("certificate", "the certificate")),
        ),
    ),
)

CHECK_DELEGATION = CommandSpec(
    "check-delegation",
    "Verify that a given certificate constitutes a valid delegation "
    "relationship between keys.",
    Record(
        CheckDelegation,
        (
            ("protocol_magic_id", fields.protocol_magic_id()),
            (
                "certificate",
                fields.file_path(
                    "certificate", "The certificate embodying delegation to verify."
                ),
            ),
            (
                "issuer_key",
                fields.file_path("issuer-key", "The genesis key that supposedly delegates."),
            ),
            (
                "delegate_key",
                fields.file_path(
                    "delegate-key",
                    "The operation verification key supposedly delegated to.",
                ),
            ),
        ),
    ),
)

DELEGATION_COMMANDS = CommandGroup(
    "Delegation related commands",
    (ISSUE_DELEGATION_CERTIFICATE, CHECK_DELEGATION),
)
