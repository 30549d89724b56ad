"""Custom exception hierarchy for cardano-cli.

Every error condition raised while turning command-line tokens into a
command must inherit from :class:`CardanoCliError`.  Value types raise
plain :class:`ValueError` from their validating constructors; the
primitive parsers translate those into :class:`MalformedValueError` so
that nothing untyped reaches the CLI error boundary.

Hierarchy
---------
CardanoCliError
├── MalformedValueError
├── UsageError
│   └── MissingRequiredOptionError
│       └── EmptyRequiredCollectionError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Sequence


class CardanoCliError(Exception):
    """Base exception for all cardano-cli errors.

    The CLI error boundary renders the message and the optional hint,
    then terminates the process with a non-zero exit code.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Values ----------------------------------------------------------------

class MalformedValueError(CardanoCliError):
    """Raised when a token does not convert to a valid domain value.

    Covers numbers out of bounds, bad checksums, wrong hash lengths and
    bad tuple syntax.
    """

    def __init__(
        self,
        option: str,
        value: str,
        reason: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"Invalid value {value!r} for {option}: {reason}", hint=hint)
        self.option: str = option
        self.value: str = value
        self.reason: str = reason


# --- Grammar ---------------------------------------------------------------

class UsageError(CardanoCliError):
    """Raised when the invocation does not match the command grammar."""


class MissingRequiredOptionError(UsageError):
    """Raised when one or more mandatory flags are absent."""

    summary: str = "Missing required option(s)"

    def __init__(self, options: Sequence[str], *, hint: str | None = None) -> None:
        listed = ", ".join(options)
        super().__init__(f"{self.summary}: {listed}", hint=hint)
        self.options: tuple[str, ...] = tuple(options)


class EmptyRequiredCollectionError(MissingRequiredOptionError):
    """Raised when a flag that must occur at least once never occurs."""

    summary = "Option(s) must be given at least once"


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CardanoCliError):
    """Raised when an optional runtime dependency is not available."""
