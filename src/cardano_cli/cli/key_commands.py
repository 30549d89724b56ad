"""Key related commands: generation, conversion, inspection and migration."""

from __future__ import annotations

from cardano_cli.cli import fields
from cardano_cli.cli.options import Arity, CommandGroup, CommandSpec, Option, Record
from cardano_cli.core.commands import (
    Keygen,
    MigrateDelegateKeyFrom,
    PrettySigningKeyPublic,
    PrintSigningKeyAddress,
    ToVerification,
)

KEYGEN = CommandSpec(
    "keygen",
    "Generate a signing key.",
    Record(
        Keygen,
        (
            ("output_key", fields.new_file("secret", "the signing key")),
            (
                "password_protected",
                Option(
                    "no-password",
                    "Disable password protection.",
                    arity=Arity.SWITCH,
                    default=True,
                    present=False,
                ),
            ),
        ),
    ),
)

TO_VERIFICATION = CommandSpec(
    "to-verification",
    "Extract a verification key in its base64 form.",
    Record(
        ToVerification,
        (
            (
                "signing_key",
                fields.file_path(
                    "secret", "Signing key file to extract the verification part from."
                ),
            ),
            ("output_key", fields.new_file("to", "the verification key")),
        ),
    ),
)

SIGNING_KEY_PUBLIC = CommandSpec(
    "signing-key-public",
    "Pretty-print a signing key's verification key (not a secret).",
    Record(
        PrettySigningKeyPublic,
        (("signing_key", fields.file_path("secret", "Signing key to pretty-print.")),),
    ),
)

SIGNING_KEY_ADDRESS = CommandSpec(
    "signing-key-address",
    "Print address of a signing key.",
    Record(
        PrintSigningKeyAddress,
        (
            ("network", fields.network_magic()),
            (
                "signing_key",
                fields.file_path("secret", "Signing key, whose address is to be printed."),
            ),
        ),
    ),
)

MIGRATE_DELEGATE_KEY_FROM = CommandSpec(
    "migrate-delegate-key-from",
    "Migrate a delegate key from an older version.",
    Record(
        MigrateDelegateKeyFrom,
        (
            ("protocol", fields.protocol()),
            ("output_key", fields.new_file("to", "the signing key")),
            ("source_key", fields.file_path("from", "Signing key file to migrate.")),
        ),
    ),
)

KEY_COMMANDS = CommandGroup(
    "Key related commands",
    (
        KEYGEN,
        TO_VERIFICATION,
        SIGNING_KEY_PUBLIC,
        SIGNING_KEY_ADDRESS,
        MIGRATE_DELEGATE_KEY_FROM,
    ),
)
