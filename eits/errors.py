"""Engine error kinds and the exception that carries them."""

from __future__ import annotations

from enum import Enum


class Kind(Enum):
    """Where an engine error came from."""

    PARSE = "Parse"
    TYPE = "Type"
    RUNTIME = "Runtime"
    UNKNOWN = "Unknown"


_KIND_LABELS = {
    Kind.PARSE: "[Parse Error]",
    Kind.TYPE: "[Type Error]",
    Kind.RUNTIME: "[Runtime Error]",
    Kind.UNKNOWN: "[Unknown Error]",
}


def kind_to_string(kind: Kind) -> str:
    """Return the bracketed label of an error kind."""
    return _KIND_LABELS.get(kind, "[Invalid Error]")


class EngineError(Exception):
    """An error raised by the engine, tagged with its kind."""

    def __init__(self, kind: Kind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{kind_to_string(self.kind)} {self.message}"