"""Numbered history of REPL commands."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from itertools import islice
from typing import IO


@dataclass(frozen=True)
class HistoryLine:
    """One recorded command."""

    id: int
    command: str
    expr: str = ""


@dataclass
class HistoryManager:
    """Records commands with increasing ids."""

    next_id: int = 1
    histories: list[HistoryLine] = field(default_factory=list)

    def add(self, command: str, expr: str = "") -> HistoryLine:
        """Record a command and return its entry."""
        line = HistoryLine(self.next_id, command, expr)
        self.histories.append(line)
        self.next_id += 1
        return line

    def dump(self, n: int, stream: IO[str] | None = None) -> None:
        """Print up to n most recent entries, newest first."""
        out = stream if stream is not None else sys.stdout
        out.write(f"\n\033[1mHistories ({n} recent):\033[0m\n")
        recent = islice(reversed(self.histories), max(n, 0))
        for i, line in enumerate(recent, start=1):
            out.write(f" ~{i}: {line.command}{line.expr}\n")
        out.write("\n")
        out.flush()