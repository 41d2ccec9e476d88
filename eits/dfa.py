"""Small automata that recognise identifiers and numbers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto

from .charutil import is_alpha, is_digit
from .scanner import Scanner
from .tokens import TokenType


class DFAResult(Enum):
    """Outcome of feeding one character to an automaton."""

    ACCEPT = auto()
    CONTINUE = auto()
    ERROR = auto()


class _State(Enum):
    START = auto()
    BODY = auto()


class DFA(ABC):
    """An automaton accepting a non-empty run of characters of one class."""

    token_type: TokenType

    def __init__(self) -> None:
        self.reset()

    @abstractmethod
    def _accepts(self, ch: str) -> bool:
        """Whether ch belongs to the run."""

    def reset(self) -> None:
        """Return to the start state with an empty lexeme."""
        self.state = _State.START
        self.buffer = ""
        self.accepting = False

    def feed(self, ch: str) -> DFAResult:
        """Advance on one character."""
        if self._accepts(ch):
            self.state = _State.BODY
            self.buffer += ch
            self.accepting = True
            return DFAResult.CONTINUE
        if self.state is _State.START:
            return DFAResult.ERROR
        return DFAResult.ACCEPT

    def is_accepting(self) -> bool:
        """Whether the characters fed so far form a lexeme."""
        return self.accepting

    @property
    def lexeme(self) -> str:
        return self.buffer


class IdentifierDFA(DFA):
    """Recognises runs of letters and underscores."""

    token_type = TokenType.IDENTIFIER

    def _accepts(self, ch: str) -> bool:
        return is_alpha(ch)


class NumberDFA(DFA):
    """Recognises runs of decimal digits."""

    token_type = TokenType.NUMBER

    def _accepts(self, ch: str) -> bool:
        return is_digit(ch)


class StrategyManager:
    """Tries each automaton in turn at the scanner's position."""

    def __init__(self) -> None:
        self.strategies: list[DFA] = [IdentifierDFA(), NumberDFA()]

    def try_all(self, scanner: Scanner) -> tuple[TokenType, str] | None:
        """Return the first recognised (type, lexeme) without consuming input."""
        for dfa in self.strategies:
            dfa.reset()
            result: DFAResult | None = None
            if not scanner.is_at_end():
                while True:
                    result = dfa.feed(scanner.peek(len(dfa.lexeme)))
                    if result is not DFAResult.CONTINUE:
                        break
            if dfa.lexeme and result is DFAResult.ACCEPT:
                return dfa.token_type, dfa.lexeme
        return None