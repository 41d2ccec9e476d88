"""Parser for annotated definitions and the type inference they use."""

from __future__ import annotations

from .context import Context
from .errors import EngineError, Kind
from .lexer import Lexer
from .level import succ
from .logger import DEBUG
from .syntax import Constant, Expression, Term, Type, Variable
from .tokens import Token, TokenType, token_type_name


def typecheck(expr: Expression, ctx: Context) -> Type:
    """Infer the type of an expression in a context."""
    DEBUG("", "[typecheck] expr: ", expr.to_string())

    if isinstance(expr, Type):
        return Type(succ(expr.level))

    if isinstance(expr, Term):
        if isinstance(expr, Variable):
            if expr.is_free():
                binding = ctx.lookup(expr.name)
                if binding is None:
                    raise EngineError(Kind.TYPE, f"Unbound variable: {expr.name}")
                if isinstance(binding, Type):
                    return binding
                raise EngineError(
                    Kind.TYPE,
                    "[typecheck] Variable bound to non-Type: "
                    + type(binding).__name__,
                )
            return typecheck(expr.type, ctx)
        if isinstance(expr, Constant):
            return typecheck(expr.type, ctx)
        raise EngineError(
            Kind.TYPE, f"[typecheck] Unknown Term subtype: {expr.to_string()}"
        )

    raise EngineError(
        Kind.TYPE,
        "Unsupported expression kind in typecheck: " + type(expr).__name__,
    )


class Parser:
    """Recursive-descent parser over the tokens of a lexer."""

    def __init__(self, lexer: Lexer) -> None:
        self.tokens = lexer.all()
        self.index = 0

    def parse_expr(self, ctx: Context) -> Expression:
        """Parse a universe or a variable."""
        if self.match(TokenType.TYPE):
            return self.parse_type(ctx)
        if self.match(TokenType.IDENTIFIER):
            return Variable(self.expect(TokenType.IDENTIFIER).lexeme)
        raise EngineError(Kind.PARSE, "Invalid expression syntax")

    def parse_type(self, ctx: Context) -> Type:
        """Parse 'Type' with an optional numeric level."""
        self.expect(TokenType.TYPE)
        level = 0
        if self.match(TokenType.NUMBER):
            level = int(self.consume().lexeme)
        return Type(level)

    def parse_annotated(self, ctx: Context) -> Constant:
        """Parse 'name : expr' into a constant of the expression's inferred type."""
        name = self.expect(TokenType.IDENTIFIER).lexeme
        self.expect(TokenType.COLON)
        type_expr = self.parse_expr(ctx)
        return Constant(name, typecheck(type_expr, ctx))

    def peek(self, offset: int = 0) -> Token:
        """Return a token ahead of the cursor, or an EOF token past the end."""
        position = self.index + offset
        if position < len(self.tokens):
            return self.tokens[position]
        return Token(TokenType.EOF_TOKEN, "", 1, len(self.tokens))

    def consume(self) -> Token:
        """Return the current token and move past it."""
        if self.index >= len(self.tokens):
            raise EngineError(Kind.PARSE, "Unexpected end of input")
        token = self.tokens[self.index]
        self.index += 1
        return token

    def match(self, token_type: TokenType) -> bool:
        """Whether the current token has the given type."""
        return self.peek().type is token_type

    def expect(self, token_type: TokenType) -> Token:
        """Consume the current token, logging when its type is not the one expected."""
        token = self.peek()
        if token.type is not token_type:
            DEBUG(
                f"\nExpected token {token_type_name(token_type)}, "
                f"but got {token_type_name(token.type)} "
                f"at line {token.line}, column {token.column}"
            )
        return self.consume()