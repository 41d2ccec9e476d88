"""Prints two sample inference rules."""

from __future__ import annotations

from collections.abc import Sequence

from .display import display_inference


def main(argv: Sequence[str] | None = None) -> int:
    """Display the sample rules and return the exit status."""
    display_inference(
        ["Γ ⊢ A : Type", "Γ, x : A ⊢ B : Type"],
        "Γ ⊢ Π(x : A), B : Type",
    )
    display_inference(["1"], "Γ ⊢ Π(x : A), B : Type")
    return 0