"""Labelled copies of a context and their textual form."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import IO

from .context import Context


@dataclass
class ContextSnapshot:
    """A context captured under a label."""

    ctx: Context
    label: str


def create_snapshot(ctx: Context, label: str) -> ContextSnapshot:
    """Capture a copy of the context's current scope and its parents."""
    return ContextSnapshot(replace(ctx, gamma=dict(ctx.gamma)), label)


def save_context(snap: ContextSnapshot, out: IO[str]) -> None:
    """Write the snapshot's current-scope bindings as def lines."""
    out.write("[context]\n")
    for name, expr in snap.ctx.gamma.items():
        out.write(f"def {name} : {expr.to_string()}\n")
    out.write("\n")
    out.flush()