"""Declarative flag descriptions and their argparse wiring.

A command is declared as a tree of *fields*:

* :class:`Option` — one flag whose token(s) go through a primitive parser.
* :class:`OneOf` — mutually exclusive flags of which exactly one is needed.
* :class:`Record` — a composite: several fields fed into a constructor.

Every field knows how to register itself on an argparse parser, which
of its required flags are missing from a parsed namespace, and how to
turn the namespace into a validated value.  argparse only collects raw
strings; all validation happens in the primitive parsers so that each
failure surfaces as a typed :class:`~cardano_cli.exceptions.CardanoCliError`.
"""

from __future__ import annotations

import argparse
import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from cardano_cli.core.commands import Command
from cardano_cli.core.models import NonEmpty
from cardano_cli.exceptions import (
    EmptyRequiredCollectionError,
    MissingRequiredOptionError,
)

logger = logging.getLogger(__name__)

Converter = Callable[[str, str], Any]
"""``(token, option_name) -> value``; raises ``MalformedValueError``."""

ArgumentContainer = Any
"""An ``argparse`` parser or argument group."""


class StoreOnce(argparse.Action):
    """Store a flag's token; a second occurrence is a usage error."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest, None) is not None:
            parser.error(f"{option_string} given more than once")
        setattr(namespace, self.dest, values)


class Arity(enum.Enum):
    """How often a flag may or must occur."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    DEFAULTED = "defaulted"
    SOME = "some"
    SWITCH = "switch"


@dataclass(frozen=True, slots=True)
class Missing:
    """A required flag (or flag alternative) absent from the namespace."""

    label: str
    repeatable: bool = False


class Field(Protocol):
    def register(self, parser: argparse.ArgumentParser, required: ArgumentContainer) -> None:
        ...  # pragma: no cover

    def missing(self, namespace: argparse.Namespace) -> list[Missing]:
        ...  # pragma: no cover

    def extract(self, namespace: argparse.Namespace) -> Any:
        ...  # pragma: no cover


# ---------------------------------------------------------------------------
# Single flag
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Option:
    """One ``--flag``.

    ``default`` is the value used when a ``DEFAULTED`` or ``SWITCH`` flag
    is absent; ``present`` is what a ``SWITCH`` yields when given.
    """

    flag: str
    help: str
    convert: Converter | None = None
    metavar: str | None = None
    arity: Arity = Arity.REQUIRED
    default: Any = None
    present: Any = True
    hidden: bool = False

    @property
    def name(self) -> str:
        return f"--{self.flag}"

    @property
    def dest(self) -> str:
        return self.flag.replace("-", "_")

    def register(self, parser: argparse.ArgumentParser, required: ArgumentContainer) -> None:
        target = required if self.arity in (Arity.REQUIRED, Arity.SOME) else parser
        help_text = argparse.SUPPRESS if self.hidden else self._help_text()
        if self.arity is Arity.SWITCH:
            target.add_argument(self.name, dest=self.dest, action="store_true", help=help_text)
            return
        target.add_argument(
            self.name,
            dest=self.dest,
            metavar=self.metavar,
            help=help_text,
            default=None,
            action="append" if self.arity is Arity.SOME else StoreOnce,
        )

    def _help_text(self) -> str:
        if self.arity is Arity.SOME:
            return f"{self.help} (repeatable, at least once)"
        return self.help

    def missing(self, namespace: argparse.Namespace) -> list[Missing]:
        if self.arity not in (Arity.REQUIRED, Arity.SOME):
            return []
        if getattr(namespace, self.dest, None) is not None:
            return []
        return [Missing(self.name, repeatable=self.arity is Arity.SOME)]

    def extract(self, namespace: argparse.Namespace) -> Any:
        raw = getattr(namespace, self.dest, None)
        if self.arity is Arity.SWITCH:
            return self.present if raw else self.default
        if raw is None:
            if self.arity is Arity.OPTIONAL:
                return None
            if self.arity is Arity.DEFAULTED:
                return self.default
            if self.arity is Arity.SOME:
                raise EmptyRequiredCollectionError([self.name])
            raise MissingRequiredOptionError([self.name])
        if self.arity is Arity.SOME:
            return NonEmpty.from_iterable(self._convert(token) for token in raw)
        return self._convert(raw)

    def _convert(self, token: str) -> Any:
        if self.convert is None:
            return token
        return self.convert(token, self.name)


# ---------------------------------------------------------------------------
# Alternatives
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Choice:
    """One alternative of a :class:`OneOf`.

    A choice without ``convert`` is a switch yielding ``value``; with
    ``convert`` it takes a token.
    """

    flag: str
    help: str
    value: Any = None
    convert: Converter | None = None
    metavar: str | None = None

    @property
    def name(self) -> str:
        return f"--{self.flag}"

    @property
    def dest(self) -> str:
        return self.flag.replace("-", "_")


@dataclass(frozen=True, slots=True)
class OneOf:
    """Mutually exclusive flags; exactly one must be supplied.

    Supplying two of them is rejected by argparse as a conflict.
    """

    choices: tuple[Choice, ...]

    @property
    def label(self) -> str:
        return " | ".join(
            choice.name if choice.convert is None else f"{choice.name} {choice.metavar}"
            for choice in self.choices
        )

    def register(self, parser: argparse.ArgumentParser, required: ArgumentContainer) -> None:
        group = required.add_mutually_exclusive_group()
        for choice in self.choices:
            if choice.convert is None:
                group.add_argument(
                    choice.name, dest=choice.dest, action="store_true", help=choice.help
                )
            else:
                group.add_argument(
                    choice.name,
                    dest=choice.dest,
                    metavar=choice.metavar,
                    help=choice.help,
                    default=None,
                    action=StoreOnce,
                )

    def _selected(self, namespace: argparse.Namespace) -> tuple[Choice, Any] | None:
        for choice in self.choices:
            raw = getattr(namespace, choice.dest, None)
            if choice.convert is None and raw:
                return choice, raw
            if choice.convert is not None and raw is not None:
                return choice, raw
        return None

    def missing(self, namespace: argparse.Namespace) -> list[Missing]:
        if self._selected(namespace) is None:
            return [Missing(self.label)]
        return []

    def extract(self, namespace: argparse.Namespace) -> Any:
        selected = self._selected(namespace)
        if selected is None:
            raise MissingRequiredOptionError([self.label])
        choice, raw = selected
        if choice.convert is None:
            return choice.value
        return choice.convert(raw, choice.name)


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Record:
    """Feed several fields, by keyword, into ``factory``."""

    factory: Callable[..., Any]
    fields: tuple[tuple[str, Field], ...]

    def register(self, parser: argparse.ArgumentParser, required: ArgumentContainer) -> None:
        for _, field in self.fields:
            field.register(parser, required)

    def missing(self, namespace: argparse.Namespace) -> list[Missing]:
        return [entry for _, field in self.fields for entry in field.missing(namespace)]

    def extract(self, namespace: argparse.Namespace) -> Any:
        values = {name: field.extract(namespace) for name, field in self.fields}
        return self.factory(**values)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandSpec:
    """A subcommand: its name, one-line description and field tree."""

    name: str
    description: str
    fields: Record

    def register(self, subparsers: Any) -> argparse.ArgumentParser:
        parser: argparse.ArgumentParser = subparsers.add_parser(
            self.name,
            description=self.description,
            allow_abbrev=False,
        )
        required = parser.add_argument_group("required options")
        self.fields.register(parser, required)
        return parser

    def assemble(self, namespace: argparse.Namespace) -> Command:
        """Build the command variant from *namespace*.

        Every missing flag is reported at once.  Values are then
        converted in declaration order; the first malformed one aborts.

        Raises
        ------
        EmptyRequiredCollectionError
            When only "at least once" flags are missing.
        MissingRequiredOptionError
            When any other required flag is missing.
        MalformedValueError
            When a token fails validation.
        """
        missing = self.fields.missing(namespace)
        if missing:
            labels = [entry.label for entry in missing]
            hint = f"Run 'cardano-cli {self.name} --help' for the full list of options."
            if all(entry.repeatable for entry in missing):
                raise EmptyRequiredCollectionError(labels, hint=hint)
            raise MissingRequiredOptionError(labels, hint=hint)

        command: Command = self.fields.extract(namespace)
        logger.debug("assembled %s: %r", self.name, command)
        return command


@dataclass(frozen=True, slots=True)
class CommandGroup:
    """Commands listed together in help output.  Selection ignores groups."""

    title: str
    commands: tuple[CommandSpec, ...]
