import io

from eits.tokens import Token, TokenType, token_type_name


def test_keyword_names_come_from_the_table():
    assert token_type_name(TokenType.TYPE) == "KEYWORD_Type"
    assert token_type_name(TokenType.NATURAL_NUMBER_TYPE) == "KEYWORD_ℕ"
    assert token_type_name(TokenType.EOF_TOKEN) == "EOF"
    assert token_type_name(TokenType.INVALID_TOKEN) == "INVALID"


def test_every_token_type_has_a_known_name():
    names = [token_type_name(t) for t in TokenType]
    assert "UNKNOWN" not in names
    assert len(set(names)) == len(names)


def test_format_places_lexeme_after_padded_name():
    row = Token(TokenType.IDENTIFIER, "ab", 1, 1).format()
    assert row.startswith("IDENTIFIER")
    assert row.index("ab") == 16
    assert " @ [" in row
    assert row.endswith("]    ")


def test_dump_writes_format_and_newline():
    token = Token(TokenType.COLON, ":", 2, 5)
    out = io.StringIO()
    token.dump(out)
    assert out.getvalue() == token.format() + "\n"


def test_tokens_compare_by_value():
    assert Token(TokenType.NUMBER, "1", 1, 1) == Token(TokenType.NUMBER, "1", 1, 1)
    assert Token(TokenType.NUMBER, "1", 1, 1) != Token(TokenType.NUMBER, "2", 1, 1)