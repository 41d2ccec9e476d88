"""Raw-mode terminal line editors with symbol replacement."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass, field
from typing import IO, Any

REVERSE_ON = "\033[7m"
REVERSE_OFF = "\033[0m"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_LINE = "\033[2K"

CTRL_D = "\x04"
ESCAPE = "\033"
BACKSPACE_KEYS = ("\x7f", "\x08")

MAX_LINES = 10
MIN_TERMINAL_ROWS = 12
MAX_TRIGGER_LENGTH = 10
HINT_SECONDS = 3

REPLACEMENT_TABLE = {
    " alpha": " α",
    " beta": " β",
    " gamma": " γ",
    " lambda": " λ",
    " Gamma": " Γ",
    " Pi": " Π",
    " Sigma": " Σ",
    " ->": " →",
    " =>": " ⇒",
    " times": " ×",
    " neg": " ¬",
    " false": " ⊥",
    " true": " ⊤",
    " emptyset": " ∅",
    " in": " ∈",
    " notin": " ∉",
    " subset": " ⊂",
    " subseteq": " ⊆",
    " and": " ∩",
    " or": " ∪",
    " |-": " ⊢",
    " vdash": " ⊢",
    " |=": " ⊨",
    " models": " ⊨",
    " circ": " ∘",
    " bbN": " ℕ",
    " bbZ": " ℤ",
    " bbQ": " ℚ",
    " bbR": " ℝ",
    " bbC": " ℂ",
    " bbP": " ℙ",
    " bbE": " 𝔼",
}


def _goto(row: int, col: int) -> str:
    return f"\033[{row};{col}H"


def make_prompt(line_num: int) -> str:
    """Prompt shown before a line of the multi-line editor."""
    return f" {line_num} | "


def apply_replacement(line: str, cursor: int) -> tuple[str, int]:
    """Replace the shortest trigger ending at the cursor; return (line, cursor)."""
    for length in range(2, MAX_TRIGGER_LENGTH + 1):
        start = cursor - length
        if start < 0:
            break
        replacement = REPLACEMENT_TABLE.get(line[start:cursor])
        if replacement is not None:
            return line[:start] + replacement + line[cursor:], start + len(replacement)
    return line, cursor


def move_cursor_left(text: str, cursor: int) -> int:
    """Cursor position one character to the left."""
    return max(cursor - 1, 0)


def move_cursor_right(text: str, cursor: int) -> int:
    """Cursor position one character to the right."""
    return min(cursor + 1, len(text)) if cursor < len(text) else cursor


def render_line(prompt: str, text: str, cursor: int) -> str:
    """Prompt and text with the character under the cursor shown reversed."""
    parts = [prompt]
    for index, ch in enumerate(text):
        parts.append(f"{REVERSE_ON}{ch}{REVERSE_OFF}" if index == cursor else ch)
    if cursor >= len(text):
        parts.append(f"{REVERSE_ON} {REVERSE_OFF}")
    return "".join(parts)


@dataclass
class EditBuffer:
    """Lines being edited and the cursor within them."""

    lines: list[str] = field(default_factory=lambda: [""])
    current_line: int = 0
    cursor_col: int = 0
    max_lines: int = MAX_LINES
    max_line_hint_time: float | None = None

    @property
    def current_text(self) -> str:
        return self.lines[self.current_line]

    def insert(self, ch: str) -> None:
        """Insert a character at the cursor and apply symbol replacement."""
        text = self.current_text
        text = text[: self.cursor_col] + ch + text[self.cursor_col :]
        text, cursor = apply_replacement(text, self.cursor_col + 1)
        self.lines[self.current_line] = text
        self.cursor_col = cursor

    def backspace(self) -> bool:
        """Delete before the cursor; True when two lines were joined."""
        if self.cursor_col > 0:
            text = self.current_text
            self.lines[self.current_line] = (
                text[: self.cursor_col - 1] + text[self.cursor_col :]
            )
            self.cursor_col -= 1
            return False
        if self.current_line > 0:
            previous = self.lines[self.current_line - 1]
            self.cursor_col = len(previous)
            self.lines[self.current_line - 1] = previous + self.current_text
            del self.lines[self.current_line]
            self.current_line -= 1
            self.max_line_hint_time = None
            return True
        return False

    def newline(self) -> bool:
        """Split the line at the cursor; False when the line limit is reached."""
        if len(self.lines) >= self.max_lines:
            self.max_line_hint_time = time.monotonic()
            return False
        text = self.current_text
        self.lines[self.current_line] = text[: self.cursor_col]
        self.lines.insert(self.current_line + 1, text[self.cursor_col :])
        self.current_line += 1
        self.cursor_col = 0
        return True

    def move_up(self) -> bool:
        """Move to the previous line, keeping the column where possible."""
        if self.current_line == 0:
            return False
        self.current_line -= 1
        self.cursor_col = min(self.cursor_col, len(self.current_text))
        self.max_line_hint_time = None
        return True

    def move_down(self) -> bool:
        """Move to the next line, keeping the column where possible."""
        if self.current_line >= len(self.lines) - 1:
            return False
        self.current_line += 1
        self.cursor_col = min(self.cursor_col, len(self.current_text))
        return True

    def move_left(self) -> None:
        """Move the cursor one character left."""
        self.cursor_col = move_cursor_left(self.current_text, self.cursor_col)

    def move_right(self) -> None:
        """Move the cursor one character right."""
        self.cursor_col = move_cursor_right(self.current_text, self.cursor_col)


class RawTerminal:
    """Puts a terminal in unbuffered, non-echoing mode for the duration."""

    def __init__(self, fd: int | None = None, out: IO[str] | None = None) -> None:
        self.fd = fd if fd is not None else sys.stdin.fileno()
        self.out = out if out is not None else sys.stdout
        self._saved: list[Any] | None = None

    def __enter__(self) -> RawTerminal:
        import termios

        self._saved = termios.tcgetattr(self.fd)
        raw = list(self._saved)
        raw[6] = list(self._saved[6])
        raw[3] &= ~(termios.ECHO | termios.ICANON)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        self.out.write(HIDE_CURSOR)
        self.out.flush()
        return self

    def __exit__(self, *args: Any) -> None:
        import termios

        self.out.write(SHOW_CURSOR)
        self.out.flush()
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
            self._saved = None


def _read_char(fd: int) -> str | None:
    """Read one UTF-8 encoded character; None at end of input."""
    data = os.read(fd, 1)
    if not data:
        return None
    lead = data[0]
    extra = 3 if lead >= 0xF0 else 2 if lead >= 0xE0 else 1 if lead >= 0xC0 else 0
    while extra:
        more = os.read(fd, extra)
        if not more:
            break
        data += more
        extra -= len(more)
    return data.decode("utf-8", errors="replace")


def _read_arrow(fd: int) -> str | None:
    """Read the rest of an escape sequence; return the arrow letter or None."""
    first = _read_char(fd)
    second = _read_char(fd)
    if first == "[":
        return second
    return None


def launch_single_line_editor(prompt_id: int = 0) -> str | None:
    """Edit one line; return it on Enter, or None on Ctrl+D."""
    out = sys.stdout
    fd = sys.stdin.fileno()
    prompt = f"In[{prompt_id}]: "
    buf = EditBuffer()

    with RawTerminal(fd, out):
        out.write(prompt)
        out.write(f"\r{CLEAR_LINE}" + render_line(prompt, "", 0))
        out.flush()
        while True:
            ch = _read_char(fd)
            if ch is None or ch == CTRL_D or ch == "\n":
                out.write(f"\r{CLEAR_LINE}{prompt}{buf.lines[0]}\n")
                out.flush()
                return None if ch != "\n" else buf.lines[0]
            if ch in BACKSPACE_KEYS:
                buf.backspace()
            elif ch == ESCAPE:
                arrow = _read_arrow(fd)
                if arrow == "C":
                    buf.move_right()
                elif arrow == "D":
                    buf.move_left()
            else:
                buf.insert(ch)
            out.write(f"\r{CLEAR_LINE}" + render_line(prompt, buf.lines[0], buf.cursor_col))
            out.flush()


class _Screen:
    """Draws an edit buffer at the top of the terminal."""

    def __init__(self, buf: EditBuffer, out: IO[str]) -> None:
        self.buf = buf
        self.out = out
        self.last_total_lines = 0

    def move_cursor(self) -> None:
        prompt = make_prompt(self.buf.current_line)
        self.out.write(
            _goto(self.buf.current_line + 1, self.buf.cursor_col + len(prompt) + 1)
        )
        self.out.flush()

    def redraw_line(self, line_num: int, highlight: bool = True) -> None:
        prompt = make_prompt(line_num)
        text = self.buf.lines[line_num]
        if highlight and line_num == self.buf.current_line:
            output = render_line(prompt, text, self.buf.cursor_col)
        else:
            output = prompt + text
        self.out.write(_goto(line_num + 1, 1) + CLEAR_LINE + output)

    def redraw_all(self, highlight: bool = True) -> None:
        content_lines = len(self.buf.lines)
        total_lines = content_lines + 2
        for row in range(max(self.last_total_lines, total_lines)):
            self.out.write(_goto(row + 1, 1) + CLEAR_LINE)
        for line_num in range(content_lines):
            self.redraw_line(line_num, highlight)

        if highlight:
            hint_time = self.buf.max_line_hint_time
            if hint_time is not None:
                if time.monotonic() - hint_time < HINT_SECONDS:
                    self.out.write(
                        _goto(content_lines + 1, 1) + "[Max line count reached]"
                    )
                else:
                    self.buf.max_line_hint_time = None
            self.out.write(
                _goto(content_lines + 2, 1)
                + "Edit Mode: ↑ ↓ ← → | Enter | Backspace | Ctrl+D: submit"
            )
            self.move_cursor()

        self.last_total_lines = total_lines
        self.out.flush()


def launch_editor() -> list[str] | None:
    """Edit several lines full-screen; return them on Ctrl+D.

    Returns None when the output is not a terminal or it is too short.
    """
    out = sys.stdout
    try:
        rows = os.get_terminal_size(out.fileno()).lines
    except (OSError, ValueError):
        return None
    if rows < MIN_TERMINAL_ROWS:
        return None

    fd = sys.stdin.fileno()
    buf = EditBuffer()
    screen = _Screen(buf, out)
    out.write("\033[2J\033[H")

    with RawTerminal(fd, out):
        screen.redraw_all()
        while True:
            ch = _read_char(fd)
            full_redraw = False
            if ch is None or ch == CTRL_D:
                screen.redraw_all(False)
                out.write(_goto(len(buf.lines) + 2, 1) + CLEAR_LINE)
                out.flush()
                return list(buf.lines)
            if ch in BACKSPACE_KEYS:
                full_redraw = buf.backspace()
            elif ch == "\n":
                if not buf.newline():
                    screen.redraw_all()
                    continue
                full_redraw = True
            elif ch == ESCAPE:
                arrow = _read_arrow(fd)
                if arrow in ("A", "B"):
                    old_line = buf.current_line
                    if arrow == "A":
                        buf.move_up()
                    else:
                        buf.move_down()
                    screen.redraw_line(old_line)
                    screen.redraw_line(buf.current_line)
                    screen.move_cursor()
                    continue
                if arrow == "C":
                    buf.move_right()
                elif arrow == "D":
                    buf.move_left()
            else:
                buf.insert(ch)

            if full_redraw:
                screen.redraw_all()
            else:
                screen.redraw_line(buf.current_line)
                screen.move_cursor()