import pytest

from eits.context import Context
from eits.errors import EngineError, Kind
from eits.level import from_int, succ, zero
from eits.lexer import Lexer
from eits.parser import Parser, typecheck
from eits.syntax import Constant, Type, Universe, Variable
from eits.tokens import TokenType


def parser_for(source):
    return Parser(Lexer(source))


def test_parse_type_with_level():
    result = parser_for("Type 2").parse_type(Context())
    assert result.level == from_int(2)


def test_parse_type_without_level_is_zero():
    result = parser_for("Type").parse_expr(Context())
    assert isinstance(result, Type)
    assert result.level == zero()


def test_parse_expr_identifier_is_free_variable():
    result = parser_for("x").parse_expr(Context())
    assert isinstance(result, Variable)
    assert result.name == "x"
    assert result.is_free()


def test_parse_expr_rejects_symbol():
    with pytest.raises(EngineError) as info:
        parser_for(":").parse_expr(Context())
    assert info.value.kind is Kind.PARSE


def test_typecheck_type_goes_up_one_level():
    assert typecheck(Type(0), Context()).level == succ(zero())


def test_typecheck_unbound_variable():
    with pytest.raises(EngineError, match="Unbound variable: y"):
        typecheck(Variable("y"), Context())


def test_typecheck_variable_bound_to_type():
    ctx = Context()
    bound = Type(3)
    ctx.add("A", bound)
    assert typecheck(Variable("A"), ctx) is bound


def test_typecheck_variable_bound_to_constant_fails():
    ctx = Context()
    ctx.add("c", Constant("c", Type(0)))
    with pytest.raises(EngineError, match="non-Type"):
        typecheck(Variable("c"), ctx)


def test_typecheck_bound_variable_uses_its_type():
    result = typecheck(Variable("x", Type(1)), Context())
    assert result.level == succ(from_int(1))


def test_typecheck_constant_uses_its_type():
    result = typecheck(Constant("c", Type(0)), Context())
    assert result.level == succ(zero())


def test_typecheck_universe_unsupported():
    with pytest.raises(EngineError):
        typecheck(Universe(), Context())


def test_parse_annotated_type():
    constant = parser_for("A : Type").parse_annotated(Context())
    assert constant.name == "A"
    assert constant.type.level == succ(zero())


def test_parse_annotated_refers_to_context():
    ctx = Context()
    bound = Type(3)
    ctx.add("A", bound)
    constant = parser_for("b : A").parse_annotated(ctx)
    assert constant.name == "b"
    assert constant.type is bound


def test_parse_annotated_missing_type_fails():
    with pytest.raises(EngineError):
        parser_for("x :").parse_annotated(Context())


def test_peek_past_end_gives_eof():
    parser = parser_for("x")
    token = parser.peek(5)
    assert token.type is TokenType.EOF_TOKEN
    assert token.column == len(parser.tokens)


def test_expect_mismatch_still_consumes():
    parser = parser_for("x y")
    token = parser.expect(TokenType.COLON)
    assert token.lexeme == "x"
    assert parser.index == 1
    assert parser.match(TokenType.IDENTIFIER)


def test_consume_past_end_raises():
    parser = parser_for("")
    assert parser.consume().type is TokenType.EOF_TOKEN
    with pytest.raises(EngineError):
        parser.consume()