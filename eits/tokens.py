"""Lexical tokens and their diagnostic formatting."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import IO


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    IDENTIFIER = auto()
    NUMBER = auto()

    TYPE = auto()
    NATURAL_NUMBER_TYPE = auto()

    COLON = auto()
    COMMA = auto()
    LPAREN = auto()
    RPAREN = auto()
    ARROW = auto()
    FORALL = auto()

    EOF_TOKEN = auto()
    INVALID_TOKEN = auto()


_TOKEN_NAMES = {
    TokenType.IDENTIFIER: "IDENTIFIER",
    TokenType.NUMBER: "NUMBER",
    TokenType.TYPE: "KEYWORD_Type",
    TokenType.NATURAL_NUMBER_TYPE: "KEYWORD_ℕ",
    TokenType.COLON: "COLON",
    TokenType.COMMA: "COMMA",
    TokenType.LPAREN: "LPAREN",
    TokenType.RPAREN: "RPAREN",
    TokenType.ARROW: "ARROW",
    TokenType.FORALL: "FORALL",
    TokenType.EOF_TOKEN: "EOF",
    TokenType.INVALID_TOKEN: "INVALID",
}


def token_type_name(token_type: TokenType) -> str:
    """Return the display name of a token type."""
    return _TOKEN_NAMES.get(token_type, "UNKNOWN")


@dataclass(frozen=True)
class Token:
    """A lexeme with its kind and 1-based source position."""

    type: TokenType
    lexeme: str
    line: int
    column: int

    def format(self) -> str:
        """Return one row of the token table."""
        return (
            f"{token_type_name(self.type):<16}{self.lexeme:<18}"
            f" @ [{self.line:<5}, {self.column}{']':<5}"
        )

    def dump(self, stream: IO[str] | None = None) -> None:
        """Write the token's table row to a stream, stdout by default."""
        out = stream if stream is not None else sys.stdout
        out.write(self.format() + "\n")