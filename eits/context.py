"""Typing contexts: nested scopes mapping names to expressions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import IO

from .logger import DEBUG, WARNING
from .syntax import Expression


@dataclass
class Context:
    """A scope of bindings with an optional enclosing scope."""

    parent: Context | None = None
    gamma: dict[str, Expression] = field(default_factory=dict)
    depth: int = 0

    def clear(self) -> None:
        """Remove every binding of the current scope."""
        self.gamma.clear()

    def add(self, name: str, expr: Expression) -> bool:
        """Bind name in the current scope; return False if already bound there."""
        if name in self.gamma:
            WARNING(f"Variable {name} is already bound in the context.")
            return False
        self.gamma[name] = expr
        return True

    def extend(self) -> None:
        """Open a new empty scope whose parent holds the current bindings."""
        self.parent = Context(self.parent, dict(self.gamma), self.depth)
        self.gamma = {}
        self.depth += 1

    def _scopes(self) -> Iterator[Context]:
        scope: Context | None = self
        while scope is not None:
            yield scope
            scope = scope.parent

    def lookup(self, name: str) -> Expression | None:
        """Return the innermost binding of name, or None."""
        for scope in self._scopes():
            if name in scope.gamma:
                expr = scope.gamma[name]
                DEBUG(f"Γ ⊢ {name} : {expr.to_string()}")
                return expr
        DEBUG(f"{name} not found")
        return None

    def dump(self, stream: IO[str] | None = None) -> None:
        """Write every scope, innermost first."""
        out = stream if stream is not None else sys.stdout
        out.write("Γ := {\n")
        for scope in self._scopes():
            out.write(f"  Scope[{scope.depth}]:\n")
            for name, expr in scope.gamma.items():
                out.write(f"   - {name} ↦ {expr.to_string()}\n")
        out.write("}\n")