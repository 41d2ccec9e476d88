"""Tokeniser for the surface syntax."""

from __future__ import annotations

import sys

from .dfa import StrategyManager
from .scanner import Scanner
from .tokens import Token, TokenType

_SYMBOLS = {
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "→": TokenType.ARROW,
    "∀": TokenType.FORALL,
    "ℕ": TokenType.NATURAL_NUMBER_TYPE,
}

_KEYWORDS = {"Type": TokenType.TYPE}

TABLE_HEADER = "TOKEN TYPE  LEXME            @ line, offset"


class Lexer:
    """Splits source text into tokens."""

    def __init__(self, source: str | bytes) -> None:
        self.strategies = StrategyManager()
        self.scanner = Scanner(source)
        self.source = self.scanner.buffer

    def next_token(self) -> Token:
        """Return the next token; EOF_TOKEN once the input is exhausted."""
        scanner = self.scanner
        scanner.skip_whitespace()

        line, column = scanner.line, scanner.column
        if scanner.is_at_end():
            return Token(TokenType.EOF_TOKEN, "", line, column)

        ch = scanner.peek()
        symbol = _SYMBOLS.get(ch)
        if symbol is not None:
            scanner.advance()
            return Token(symbol, ch, line, column)

        found = self.strategies.try_all(scanner)
        if found is not None:
            token_type, lexeme = found
            if token_type is TokenType.IDENTIFIER:
                token_type = _KEYWORDS.get(lexeme, token_type)
            scanner.consume(len(lexeme))
            return Token(token_type, lexeme, line, column)

        return Token(TokenType.INVALID_TOKEN, scanner.advance(), line, column)

    def all(self) -> list[Token]:
        """Return every remaining token, ending with EOF, and print a table of them."""
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type is TokenType.EOF_TOKEN:
                break

        sys.stdout.write(TABLE_HEADER + "\n")
        for token in tokens:
            token.dump()
        return tokens