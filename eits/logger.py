"""Coloured console logging with optional mirroring to a log file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from pathlib import Path
from typing import IO, Any


class LogColor(Enum):
    """Terminal colours available for log headers."""

    DEFAULT = auto()
    BLACK = auto()
    RED = auto()
    GREEN = auto()
    YELLOW = auto()
    BLUE = auto()
    MAGENTA = auto()
    CYAN = auto()
    WHITE = auto()
    BRIGHT_BLACK = auto()
    BRIGHT_RED = auto()
    BRIGHT_GREEN = auto()
    BRIGHT_YELLOW = auto()
    BRIGHT_BLUE = auto()
    BRIGHT_MAGENTA = auto()
    BRIGHT_CYAN = auto()
    BRIGHT_WHITE = auto()


_COLOR_CODES = {
    LogColor.BLACK: "\033[30m",
    LogColor.RED: "\033[31m",
    LogColor.GREEN: "\033[32m",
    LogColor.YELLOW: "\033[33m",
    LogColor.BLUE: "\033[34m",
    LogColor.MAGENTA: "\033[35m",
    LogColor.CYAN: "\033[36m",
    LogColor.WHITE: "\033[37m",
    LogColor.BRIGHT_BLACK: "\033[90m",
    LogColor.BRIGHT_RED: "\033[91m",
    LogColor.BRIGHT_GREEN: "\033[92m",
    LogColor.BRIGHT_YELLOW: "\033[93m",
    LogColor.BRIGHT_BLUE: "\033[94m",
    LogColor.BRIGHT_MAGENTA: "\033[95m",
    LogColor.BRIGHT_CYAN: "\033[96m",
    LogColor.BRIGHT_WHITE: "\033[97m",
}

_RESET = "\033[0m"


def current_time_string() -> str:
    """Return the local time formatted as YYYY-mm-dd_HH-MM-SS."""
    return datetime.now().strftime("%Y-%m-%d_%H-%M-%S")


def color_code(color: LogColor) -> str:
    """Return the ANSI escape sequence for a colour."""
    return _COLOR_CODES.get(color, _RESET)


@dataclass
class Format:
    """Text style applied to a log header."""

    color: LogColor = LogColor.DEFAULT
    bold: bool = False
    italic: bool = False
    underlined: bool = False

    def polish(self, text: str) -> str:
        """Wrap text in the escape sequences of this style."""
        result = text
        if self.bold:
            result = "\033[1m" + result
        if self.italic:
            result = "\033[3m" + result
        if self.underlined:
            result = "\033[4m" + result
        if self.color is not LogColor.DEFAULT:
            result = color_code(self.color) + result + color_code(LogColor.DEFAULT)
        return result


class LogStream:
    """One log record: a header, a title and payload lines, emitted once."""

    def __init__(
        self,
        header: str,
        format: Format,
        title: str = "",
        file_out: IO[str] | None = None,
    ) -> None:
        self.header = header
        self.format = format
        self.title = title
        self.file_out = file_out
        self.has_payload = False
        self._lines: list[str] = []
        self._emitted = False

    @property
    def payload(self) -> str:
        return "".join(self._lines)

    def add(self, value: Any) -> LogStream:
        """Append one payload line."""
        self._lines.append(f"  {value}\n")
        self.has_payload = True
        return self

    def emit(self) -> None:
        """Write the record to stdout and, if open, to the log file."""
        if self._emitted:
            return
        self._emitted = True
        payload = self.payload
        if not self.header and not self.title and not payload:
            return

        out = sys.stdout
        out.write(f"[{self.format.polish(self.header)}] {self.title}\n")
        out.write(payload)
        if self.has_payload:
            out.write("\n")
        out.flush()

        if self.file_out is not None and not self.file_out.closed:
            timestamp = current_time_string()
            self.file_out.write(f"[{timestamp}][{self.header}] {self.title}\n{payload}")
            self.file_out.flush()

    def __enter__(self) -> LogStream:
        return self

    def __exit__(self, *args: Any) -> None:
        self.emit()


class LogFactory:
    """Produces log records sharing a header, a style and a log file."""

    def __init__(self, header: str, format: Format | None = None) -> None:
        self.header = header
        self.format = format if format is not None else Format()
        self.log_file: IO[str] | None = None

    def init(self, log_path: str | Path) -> None:
        """Open the log file for appending, creating parent directories."""
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if self.log_file is not None and not self.log_file.closed:
            self.log_file.close()
        self.log_file = open(path, "a", encoding="utf-8")

    def stream(self, title: str = "") -> LogStream:
        """Return a record that is emitted when its context ends."""
        return LogStream(self.header, self.format, title, self.log_file)

    def __call__(self, title: str = "", *args: Any) -> LogStream:
        """Emit a record with a title and payload lines at once."""
        record = self.stream(title)
        for value in args:
            record.add(value)
        record.emit()
        return record


LOG = LogFactory("INFO", Format(LogColor.BRIGHT_BLACK, True, False, False))
INFO = LogFactory("INFO", Format(LogColor.BRIGHT_BLUE, True, False, False))
WARNING = LogFactory("WARN", Format(LogColor.BRIGHT_YELLOW, True, False, False))
DEBUG = LogFactory("DEBUG", Format(LogColor.BRIGHT_GREEN, True, False, False))
ERROR = LogFactory("ERROR", Format(LogColor.BRIGHT_RED, True, False, False))
OK = LogFactory("OK", Format(LogColor.BRIGHT_GREEN, True, False, False))
FAILED = LogFactory("FAILED", Format(LogColor.BRIGHT_RED, True, True, False))

_FACTORIES = (LOG, INFO, WARNING, DEBUG, ERROR, OK, FAILED)


def init(log_path: str = "") -> Path:
    """Direct every default category to one log file and return its path."""
    path_str = log_path or f"log/{current_time_string()}.log"
    abs_path = Path(path_str).absolute()
    print(f'Log file initialized at: "{abs_path}"', flush=True)
    abs_path.parent.mkdir(parents=True, exist_ok=True)
    for factory in _FACTORIES:
        factory.init(abs_path)
    return abs_path