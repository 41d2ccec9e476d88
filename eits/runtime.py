"""The runtime that owns the global context and executes instructions."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import IO

from .context import Context
from .errors import EngineError, Kind
from .logger import DEBUG, INFO
from .snapshot import create_snapshot, save_context
from .syntax import Expression
from .version import version

DEFAULT_SNAPSHOT_NAME = "snapshot"
SNAPSHOT_SUFFIX = ".omac"


class Instruction(Enum):
    """Instructions understood by the runtime."""

    RESET = auto()
    DUMP = auto()
    LOAD = auto()
    SAVE = auto()
    EXIT = auto()
    DEF = auto()


def save_meta(out: IO[str]) -> None:
    """Write the metadata section of a snapshot file."""
    out.write("[meta]\n")
    out.write(f"  - time: {time.ctime()}\n")
    out.write(f"  - version: {version()}\n")
    out.write("\n")
    out.flush()


@dataclass
class Runtime:
    """Holds the typing context and carries out instructions on it."""

    ctx: Context = field(default_factory=Context)
    ask: Callable[[str], str] = field(default=input, repr=False)

    def init(self) -> None:
        """Announce the runtime and the kernel version."""
        INFO("Initiating Runtime...", "HoTT kernel version: " + version())

    def add_bind(self, name: str, expr: Expression) -> bool:
        """Bind a name in the context; False if it was already bound."""
        return self.ctx.add(name, expr)

    def execute(self, instruction: Instruction) -> Path | None:
        """Run the handler of an instruction."""
        handlers = {
            Instruction.RESET: self.handle_reset,
            Instruction.DUMP: self.handle_dump,
            Instruction.LOAD: self.handle_load,
            Instruction.SAVE: self.handle_save,
            Instruction.EXIT: self.handle_exit,
        }
        handler = handlers.get(instruction)
        if handler is None:
            raise EngineError(Kind.RUNTIME, "Unknown instruction.")
        return handler()

    def handle_reset(self) -> None:
        """Drop every binding of the current scope."""
        self.ctx.clear()

    def handle_dump(self) -> None:
        """Print the context."""
        self.ctx.dump(sys.stdout)

    def handle_load(self) -> None:
        """Reserved for reading snapshots back; leaves the context unchanged."""
        return None

    def handle_save(self) -> Path:
        """Ask for a directory and a name, then write a snapshot file there."""
        default_dir = Path.cwd()
        input_dir = self.ask(f"Save directory ({default_dir}): ").strip()
        save_dir = Path(input_dir) if input_dir else default_dir

        input_name = self.ask(f"Snapshot name ({DEFAULT_SNAPSHOT_NAME}): ").strip()
        label = input_name or DEFAULT_SNAPSHOT_NAME

        try:
            save_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise EngineError(
                Kind.RUNTIME, f"Failed to create directory: {exc}"
            ) from exc

        file_path = save_dir / (label + SNAPSHOT_SUFFIX)
        DEBUG("Saving", file_path)
        try:
            with open(file_path, "w", encoding="utf-8") as out:
                save_meta(out)
                save_context(create_snapshot(self.ctx, label), out)
        except OSError as exc:
            raise EngineError(
                Kind.RUNTIME, f"Cannot open file: {file_path}"
            ) from exc

        print(f"[OK] Snapshot saved: {file_path}", flush=True)
        return file_path

    def handle_exit(self) -> None:
        """Leave the program."""
        sys.exit(0)


class Engine:
    """Front end owning a runtime, initialised on construction."""

    def __init__(self) -> None:
        self.runtime = Runtime()
        self.init()

    def init(self) -> None:
        """Initialise the runtime."""
        self.runtime.init()