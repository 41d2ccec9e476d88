# eits

A small kernel for homotopy type theory, together with an interactive
terminal REPL for defining and inspecting typed constants.

The kernel provides:

- universe levels (`zero`, `succ`, `level_max`, `from_int` in
  `eits.level`) and their printed form, such as `S(S(0))` or
  `max(0, S(0))`;
- a syntax tree in `eits.syntax`: `Type`, `Universe`, `Variable`,
  `Constant`, `Binder` and the `Pi`, `Sigma` and `Id` type formers;
- a Unicode-aware lexer (`eits.lexer.Lexer`) and a parser
  (`eits.parser.Parser`) for annotations such as `x : Type 1`, with a
  `typecheck` function that infers the type of a universe, a variable or
  a constant;
- a scoped typing context (`eits.context.Context`) that can be dumped or
  saved as a snapshot file;
- coloured console logging (`eits.logger`), time-ordered unique ids
  (`eits.uid.UIDGenerator`) and inference-rule display (`eits.display`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

The REPL's editors put the terminal in raw mode through `termios`, so the
REPL needs a POSIX terminal.

## The REPL

Start it with:

```
eits-repl
```

Each prompt `In[n]:` takes one command. Typing a space followed by a word
such as `lambda`, `Pi`, `->` or `|-` turns it into its symbol (`λ`, `Π`,
`→`, `⊢`) as you type.

| Command          | What it does                                         |
|------------------|------------------------------------------------------|
| `def x : Type 0` | bind a named constant of the inferred type           |
| `context`        | print every scope of the current context             |
| `save`           | ask for a directory and a name, write a `.omac` file |
| `history [n]`    | list the `n` most recent commands (default 10)       |
| `edit`           | open the multi-line editor                           |
| `clear`          | clear the screen                                     |
| `help`           | list the commands                                    |
| `exit`           | leave the REPL                                       |

Ctrl+D at the prompt also leaves the REPL. In the multi-line editor (up to
10 lines, and only in a terminal at least 12 rows high), Ctrl+D submits the
lines joined by spaces as one command.

`def` takes `name : Type k` or `name : other`, where `other` must already be
bound to a type; the constant gets the type of that expression, so
`def A : Type 0` binds `` `A` : Type S(0) ``. Errors from parsing or type
checking are printed and the loop continues.

## What the package does not do

- `eval` and `type` only log their argument and record it in the history;
  no expression is evaluated or typed by them.
- `load` only logs a message; snapshot files cannot be read back.
- `reset` appears in `help` but is not a registered command, so typing it
  reports an unknown command. `Runtime.execute(Instruction.RESET)` clears
  the current scope from code.
- The parser understands only `Type` with an optional level and bare
  identifiers; the `Pi`, `Sigma` and `Id` formers exist in the syntax tree
  but have no surface syntax.

## Inference rule display

```
eits-demo
```

prints two typing rules drawn as underlined premises centred over a
conclusion. The same is available as `eits.display.display_inference`.

## Using the library

```python
from eits.lexer import Lexer
from eits.parser import Parser
from eits.context import Context

ctx = Context()
constant = Parser(Lexer("A : Type 0")).parse_annotated(ctx)
print(constant)   # `A` : Type S(0)
```

Building a `Parser` prints a table of the tokens, and type checking writes
debug log lines to stdout.

Universe levels:

```python
from eits.level import zero, succ, level_max, from_int

print(from_int(2))                      # S(S(0))
print(level_max(zero(), succ(zero())))  # max(0, S(0))
```

Log records can be mirrored to a file with `eits.logger.init(path)`; without
a path, a timestamped file under `log/` is used.