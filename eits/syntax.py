"""Syntax trees: terms, types, universes, binders and type formers."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import IO, Any

from .level import Level, from_int, zero
from .logger import DEBUG
from .uid import global_uid_generator


def _output(stream: IO[str] | None) -> IO[str]:
    return stream if stream is not None else sys.stdout


class Expression(ABC):
    """Any node of the syntax tree."""

    @abstractmethod
    def to_string(self) -> str:
        """Return the textual form of the expression."""

    def _dump_text(self) -> str:
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return type(self) is type(other) and vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]

    def dump(self) -> None:
        """Write a diagnostic description to stdout."""
        sys.stdout.write(self._dump_text() + "\n")

    def print(self, stream: IO[str] | None = None) -> None:
        """Write the textual form to a stream, stdout by default."""
        _output(stream).write(self.to_string())


class Term(Expression):
    """An inhabitant of some type."""

    def to_string(self) -> str:
        return "[Term]"

    def _dump_text(self) -> str:
        return "[Term]"


class Type(Expression):
    """A type living in a universe level."""

    def __init__(self, level: Level | int | None = None) -> None:
        if level is None:
            level = zero()
        elif isinstance(level, int):
            level = from_int(level)
        self.level = level

    def to_string(self) -> str:
        return f"Type {self.level.to_string()}"

    def _dump_text(self) -> str:
        return "[Type]"


class Universe(Expression):
    """The universe of types."""

    def to_string(self) -> str:
        return "[Universe] 𝒰 "

    def _dump_text(self) -> str:
        return "[Universe]"


@dataclass
class Binder:
    """A name annotated with a type; an empty name is anonymous."""

    name: str
    type: Expression

    def to_string(self) -> str:
        if self.name == "":
            return "_" + self.type.to_string()
        return f"{self.name} : {self.type.to_string()}"

    def __str__(self) -> str:
        return self.to_string()

    def dump(self) -> None:
        """Write the binder's fields to stdout."""
        sys.stdout.write(
            "[Bind]\n"
            f" - name: '{self.name}'\n"
            f" - type: {self.type.to_string()}\n"
        )

    def print(self, stream: IO[str] | None = None) -> None:
        """Write the textual form to a stream, stdout by default."""
        _output(stream).write(self.to_string())


class Variable(Term):
    """A variable: free, or bound with a type.

    Without a name, a fresh unique hexadecimal name is generated.
    """

    def __init__(self, name: str | None = None, type: Expression | None = None) -> None:
        self.name = name if name is not None else global_uid_generator.next_hex()
        self.type = type

    def is_free(self) -> bool:
        """Whether the variable carries no type."""
        return self.type is None

    def to_string(self) -> str:
        if self.type is None:
            return f"[FreeVariable] `{self.name}`"
        return f"[BoundVariable] `{self.name}` : {self.type.to_string()}"

    def dump(self) -> None:
        """Log the variable at debug level."""
        DEBUG("", self.to_string())


class Constant(Term):
    """A named term of a given type."""

    def __init__(self, name: str, type: Type) -> None:
        self.name = name
        self.type = type

    def to_string(self) -> str:
        return f"`{self.name}` : {self.type.to_string()}"

    def _dump_text(self) -> str:
        return "[Constant] " + self.to_string()


class Pi(Type):
    """Dependent function type."""

    def __init__(
        self, binder: Binder, codomain: Expression, level: Level | int | None = None
    ) -> None:
        super().__init__(level)
        self.binder = binder
        self.codomain = codomain

    def to_string(self) -> str:
        return f"Π({self.binder.to_string()}) → {self.codomain.to_string()}"

    def _dump_text(self) -> str:
        return f"[Pi] ({self.binder.to_string()}) → {self.codomain.to_string()}"


class Sigma(Type):
    """Dependent pair type."""

    def __init__(
        self, binder: Binder, codomain: Expression, level: Level | int | None = None
    ) -> None:
        super().__init__(level)
        self.binder = binder
        self.codomain = codomain

    def to_string(self) -> str:
        return f"Σ({self.binder.to_string()}) → {self.codomain.to_string()}"

    def _dump_text(self) -> str:
        return f"[Sigma] ({self.binder.to_string()}) → {self.codomain.to_string()}"


class Id(Type):
    """Identity type over a base type between two endpoints."""

    def __init__(self, base: Expression, lhs: Expression, rhs: Expression) -> None:
        super().__init__()
        self.base = base
        self.endpoints = (lhs, rhs)

    def lhs(self) -> Expression:
        """Left endpoint."""
        return self.endpoints[0]

    def rhs(self) -> Expression:
        """Right endpoint."""
        return self.endpoints[1]

    def to_string(self) -> str:
        return (
            f"Id {self.base.to_string()} "
            f"{self.lhs().to_string()} {self.rhs().to_string()}"
        )

    def _dump_text(self) -> str:
        return "[Id] " + self.to_string()