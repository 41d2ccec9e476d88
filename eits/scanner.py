"""Character cursor over source text with line and column tracking."""

from __future__ import annotations

from .charutil import decode_utf8

END = "\0"


class Scanner:
    """Walks decoded source text one code point at a time."""

    def __init__(self, source: str | bytes) -> None:
        self.buffer = decode_utf8(source) if isinstance(source, bytes) else source
        self.pos = 0
        self.line = 1
        self.column = 1

    def skip_whitespace(self) -> None:
        """Skip spaces, tabs and newlines."""
        while not self.is_at_end() and self.peek() in ("\n", "\t", " "):
            self.advance()

    def peek(self, offset: int = 0) -> str:
        """Return the character offset places ahead, or NUL past the end."""
        index = self.pos + offset
        if index >= len(self.buffer):
            return END
        return self.buffer[index]

    def _step(self, ch: str) -> None:
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1

    def advance(self) -> str:
        """Consume and return one character, or NUL at the end."""
        if self.is_at_end():
            return END
        ch = self.buffer[self.pos]
        self._step(ch)
        return ch

    def consume(self, count: int) -> None:
        """Consume up to count characters."""
        for _ in range(count):
            if self.is_at_end():
                break
            self._step(self.buffer[self.pos])

    def is_at_end(self) -> bool:
        """Whether every character has been consumed."""
        return self.pos >= len(self.buffer)