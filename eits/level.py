"""Universe levels: zero, successor and maximum."""

from __future__ import annotations

from dataclasses import dataclass


class Level:
    """A universe level expression."""

    def to_string(self) -> str:
        return str(self)


@dataclass(frozen=True)
class Zero(Level):
    """The lowest level."""

    def __str__(self) -> str:
        return "0"


@dataclass(frozen=True)
class Succ(Level):
    """The level directly above pred."""

    pred: Level

    def __str__(self) -> str:
        return f"S({self.pred})"


@dataclass(frozen=True)
class Max(Level):
    """The larger of two levels."""

    l1: Level
    l2: Level

    def __str__(self) -> str:
        return f"max({self.l1}, {self.l2})"


def zero() -> Level:
    """Return the zero level."""
    return Zero()


def succ(pred: Level) -> Level:
    """Return the successor of a level."""
    return Succ(pred)


def level_max(left: Level, right: Level) -> Level:
    """Return the maximum of two levels."""
    return Max(left, right)


def from_int(n: int) -> Level:
    """Return zero wrapped in n successors."""
    if n < 0:
        raise ValueError(f"level must be non-negative, got {n}")
    result = zero()
    for _ in range(n):
        result = succ(result)
    return result