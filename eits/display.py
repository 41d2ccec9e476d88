"""Terminal rendering of inference rules."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import IO

from wcwidth import wcwidth

ANSI_UNDERLINE_ON = "\033[4m"
ANSI_UNDERLINE_OFF = "\033[24m"

_ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences."""
    return _ANSI_ESCAPE.sub("", text)


def visual_width(text: str) -> int:
    """Number of terminal columns the text occupies, ignoring escapes."""
    return sum(max(wcwidth(ch), 0) for ch in strip_ansi(text))


def center(text: str, width: int) -> str:
    """Pad text with spaces to centre it in width columns."""
    vis_len = visual_width(text)
    if vis_len >= width:
        return text
    pad_left = (width - vis_len) // 2
    pad_right = width - vis_len - pad_left
    return " " * pad_left + text + " " * pad_right


def join_premises(premises: Sequence[str]) -> str:
    """Join premises with four spaces between them."""
    return "    ".join(premises)


def display_inference(
    premises: Sequence[str], conclusion: str, stream: IO[str] | None = None
) -> None:
    """Print underlined premises centred above the conclusion."""
    out = stream if stream is not None else sys.stdout
    joined = join_premises(premises)
    max_len = max(visual_width(joined), visual_width(conclusion))
    out.write(center(ANSI_UNDERLINE_ON + joined + ANSI_UNDERLINE_OFF, max_len) + "\n")
    out.write(center(conclusion, max_len) + "\n")