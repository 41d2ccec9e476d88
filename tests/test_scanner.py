from eits.scanner import Scanner


def test_peek_looks_ahead_and_returns_nul_past_end():
    scanner = Scanner("ab")
    assert scanner.peek() == "a"
    assert scanner.peek(1) == "b"
    assert scanner.peek(2) == "\0"
    assert scanner.pos == 0


def test_advance_tracks_lines_and_columns():
    scanner = Scanner("a\nb")
    assert scanner.advance() == "a"
    assert (scanner.line, scanner.column) == (1, 2)
    assert scanner.advance() == "\n"
    assert (scanner.line, scanner.column) == (2, 1)


def test_advance_at_end_returns_nul_without_moving():
    scanner = Scanner("")
    assert scanner.advance() == "\0"
    assert scanner.pos == 0
    assert scanner.is_at_end()


def test_skip_whitespace_skips_space_tab_newline_only():
    scanner = Scanner(" \t\n\rx")
    scanner.skip_whitespace()
    assert scanner.peek() == "\r"
    assert scanner.line == 2


def test_consume_stops_at_end():
    scanner = Scanner("abc")
    scanner.consume(10)
    assert scanner.is_at_end()
    assert scanner.pos == len("abc")
    assert scanner.column == len("abc") + 1


def test_consume_matches_repeated_advance():
    text = "ab\ncd"
    a, b = Scanner(text), Scanner(text)
    a.consume(4)
    for _ in range(4):
        b.advance()
    assert (a.pos, a.line, a.column) == (b.pos, b.line, b.column)


def test_bytes_input_is_decoded():
    scanner = Scanner("λx".encode("utf-8"))
    assert scanner.buffer == "λx"
    assert scanner.advance() == "λ"