"""Interactive command loop over the type-theory runtime."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from .editor import launch_editor, launch_single_line_editor
from .errors import EngineError
from .history import HistoryManager
from .lexer import Lexer
from .logger import DEBUG, ERROR
from .parser import Parser
from .runtime import Instruction, Runtime
from .syntax import Constant

CommandFunc = Callable[[str, HistoryManager], "bool | None"]
LineReader = Callable[[int], "str | None"]
Editor = Callable[[], "list[str] | None"]

DEFAULT_HISTORY_COUNT = 10

_HELP_ENTRIES = (
    ("def", "Define a named term"),
    ("eval", "Evaluate expression"),
    ("type", "Show type of expression"),
    ("context", "Show current context"),
    ("reset", "Clear all definitions"),
    ("edit", "Launch multi-line editor"),
    ("help", "Show this help message"),
    ("exit", "Exit the REPL"),
)


def split_command(line: str) -> tuple[str, str]:
    """Split a line into its command word and the rest of its first line."""
    stripped = line.lstrip()
    end = next((i for i, ch in enumerate(stripped) if ch.isspace()), len(stripped))
    command = stripped[:end]
    rest = stripped[end:].split("\n", 1)[0]
    return command, rest.lstrip(" \t")


def _with_space(arg: str) -> str:
    return " " + arg if arg else ""


class Repl:
    """Reads commands and dispatches them to registered handlers.

    A handler receives the argument text and the history; returning True
    ends the loop.
    """

    def __init__(
        self,
        runtime: Runtime | None = None,
        history: HistoryManager | None = None,
        read_line: LineReader | None = None,
        editor: Editor | None = None,
    ) -> None:
        self.runtime = runtime if runtime is not None else Runtime()
        self.history = history if history is not None else HistoryManager()
        self.read_line = read_line if read_line is not None else launch_single_line_editor
        self.editor = editor if editor is not None else launch_editor
        self.commands: dict[str, CommandFunc] = {}
        self._editing = False
        self._register_builtins()

    def register(self, name: str, func: CommandFunc) -> None:
        """Register or replace the handler of a command."""
        self.commands[name] = func

    def _register_builtins(self) -> None:
        self.register("save", self._save)
        self.register("load", self._load)
        self.register("def", self._define)
        self.register("type", self._type)
        self.register("eval", self._eval)
        self.register("context", self._context)
        self.register("clear", self._clear)
        self.register("history", self._history)
        self.register("help", self._help)
        self.register("exit", self._exit)

    def dispatch(self, line: str) -> bool:
        """Run one command line; True when the loop should end."""
        if not line:
            return False
        command, args = split_command(line)
        if command == "edit":
            return self._edit()
        handler = self.commands.get(command)
        if handler is None:
            print("[Unknown command] Try 'help'", flush=True)
            return False
        return bool(handler(args, self.history))

    def dispatch_lines(self, lines: Sequence[str]) -> bool:
        """Run several lines joined by spaces as one command."""
        return self.dispatch(" ".join(lines))

    def run(self) -> None:
        """Read and dispatch lines until end of input or exit."""
        while True:
            line = self.read_line(self.history.next_id)
            if line is None:
                break
            try:
                if self.dispatch(line):
                    break
            except EngineError as err:
                print(str(err), flush=True)

    def _edit(self) -> bool:
        if self._editing:
            print("[Error] Nested editor invocation is not allowed.", flush=True)
            return False
        self._editing = True
        print("[Launching editor...]", flush=True)
        try:
            result = self.editor()
        finally:
            self._editing = False
        if result is None:
            print("[Editor cancelled.]", flush=True)
            return False
        print("[Editor done.]", flush=True)
        return self.dispatch_lines(result)

    def _save(self, arg: str, history: HistoryManager) -> None:
        DEBUG("Saving ...")
        self.runtime.execute(Instruction.SAVE)
        history.add("save")

    def _load(self, arg: str, history: HistoryManager) -> None:
        DEBUG("Loading ...")

    def _define(self, arg: str, history: HistoryManager) -> None:
        if not arg:
            ERROR("def no arg")
            return
        parser = Parser(Lexer(arg))
        parsed = parser.parse_annotated(self.runtime.ctx)
        self.runtime.add_bind(parsed.name, Constant(parsed.name, parsed.type))
        history.add("def ", arg)

    def _type(self, arg: str, history: HistoryManager) -> None:
        DEBUG("type", arg, ";")
        history.add("type", _with_space(arg))

    def _eval(self, arg: str, history: HistoryManager) -> None:
        DEBUG("eval", arg, ";")
        history.add("eval", _with_space(arg))

    def _context(self, arg: str, history: HistoryManager) -> None:
        print(flush=True)
        self.runtime.execute(Instruction.DUMP)
        print(flush=True)
        history.add("context", _with_space(arg))

    def _clear(self, arg: str, history: HistoryManager) -> None:
        print("\033[2J\033[H", end="", flush=True)

    def _history(self, arg: str, history: HistoryManager) -> None:
        n = DEFAULT_HISTORY_COUNT
        if arg:
            if not all("0" <= ch <= "9" for ch in arg):
                print("[Error] Invalid argument. Use: history 5", flush=True)
                return
            n = int(arg)
            if n <= 0:
                print("[Error] Please enter a positive number.", flush=True)
                return
        history.dump(n)
        history.add("history", _with_space(arg))

    def _help(self, arg: str, history: HistoryManager) -> None:
        lines = ["", "\033[1mAvailable commands:\033[0m", ""]
        for name, description in _HELP_ENTRIES:
            lines.append(f"  \033[36m{name:<9}\033[0m                 {description}")
        lines.append("")
        print("\n".join(lines), flush=True)

    def _exit(self, arg: str, history: HistoryManager) -> bool:
        return True


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive loop."""
    argparse.ArgumentParser(
        prog="eits-repl", description="Interactive type-theory shell."
    ).parse_args(argv)
    repl = Repl()
    repl.runtime.init()
    repl.run()
    return 0