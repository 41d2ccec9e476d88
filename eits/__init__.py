"""A small homotopy type theory kernel with a lexer, parser, context and REPL."""

__version__ = "0.1.0"