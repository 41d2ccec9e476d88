"""Character classes, subscript digits and a lenient UTF-8 codec."""

from __future__ import annotations

from collections.abc import Iterable

LOWER_DIGITS = ("₀", "₁", "₂", "₃", "₄", "₅", "₆", "₇", "₈", "₉")


def is_alpha(ch: str) -> bool:
    """ASCII letter or underscore."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_digit(ch: str) -> bool:
    """ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_whitespace(ch: str) -> bool:
    """Space, tab, newline or carriage return."""
    return ch in (" ", "\t", "\n", "\r")


def is_ident_start(ch: str) -> bool:
    """Whether ch may begin an identifier."""
    return is_alpha(ch)


def is_ident_part(ch: str) -> bool:
    """Whether ch may continue an identifier."""
    return is_alpha(ch) or is_digit(ch)


def subscript(value: int | str) -> str:
    """Render the digits of a number, or of a string, as subscripts.

    Negative numbers give an empty string; non-digit characters are dropped.
    """
    if isinstance(value, int):
        if value == 0:
            return LOWER_DIGITS[0]
        digits = str(value) if value > 0 else ""
    else:
        digits = value
    return "".join(LOWER_DIGITS[int(c)] for c in digits if "0" <= c <= "9")


def to_utf8(text: str | Iterable[int]) -> bytes:
    """Encode code points as UTF-8; values beyond U+10FFFF become '?'."""
    out = bytearray()
    for item in text:
        cp = ord(item) if isinstance(item, str) else item
        if cp <= 0x7F:
            out.append(cp)
        elif cp <= 0x7FF:
            out += bytes((0xC0 | ((cp >> 6) & 0x1F), 0x80 | (cp & 0x3F)))
        elif cp <= 0xFFFF:
            out += bytes(
                (
                    0xE0 | ((cp >> 12) & 0x0F),
                    0x80 | ((cp >> 6) & 0x3F),
                    0x80 | (cp & 0x3F),
                )
            )
        elif cp <= 0x10FFFF:
            out += bytes(
                (
                    0xF0 | ((cp >> 18) & 0x07),
                    0x80 | ((cp >> 12) & 0x3F),
                    0x80 | ((cp >> 6) & 0x3F),
                    0x80 | (cp & 0x3F),
                )
            )
        else:
            out.append(ord("?"))
    return bytes(out)


def _decode_at(data: bytes, i: int) -> tuple[int, int] | None:
    """Decode one sequence starting at i; return (code point, length) or None."""
    byte = data[i]
    if byte <= 0x7F:
        return byte, 1
    if (byte & 0xE0) == 0xC0:
        codepoint, extra = byte & 0x1F, 1
        if codepoint < 0x2:
            return None
    elif (byte & 0xF0) == 0xE0:
        codepoint, extra = byte & 0x0F, 2
    elif (byte & 0xF8) == 0xF0:
        codepoint, extra = byte & 0x07, 3
        if codepoint > 0x10:
            return None
    else:
        return None

    if i + extra >= len(data):
        return None
    for cc in data[i + 1 : i + 1 + extra]:
        if (cc & 0xC0) != 0x80:
            return None
        codepoint = (codepoint << 6) | (cc & 0x3F)

    if 0xD800 <= codepoint <= 0xDFFF or codepoint > 0x10FFFF:
        return None
    return codepoint, extra + 1


def decode_utf8(data: bytes) -> str:
    """Decode UTF-8, replacing each byte of an invalid sequence with '?'."""
    chars: list[str] = []
    i = 0
    while i < len(data):
        decoded = _decode_at(data, i)
        if decoded is None:
            chars.append("?")
            i += 1
        else:
            codepoint, length = decoded
            chars.append(chr(codepoint))
            i += length
    return "".join(chars)