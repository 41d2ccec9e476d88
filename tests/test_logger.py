from datetime import datetime

from eits.logger import (
    INFO,
    Format,
    LogColor,
    LogFactory,
    LogStream,
    color_code,
    current_time_string,
    init,
)


def test_color_codes_from_table():
    assert color_code(LogColor.RED) == "\033[31m"
    assert color_code(LogColor.DEFAULT) == "\033[0m"
    assert color_code(LogColor.BRIGHT_WHITE) == "\033[97m"


def test_polish_plain_format_leaves_text():
    assert Format().polish("text") == "text"


def test_polish_colour_wraps_bold_text():
    fmt = Format(LogColor.BRIGHT_RED, bold=True)
    result = fmt.polish("x")
    assert result.startswith(color_code(LogColor.BRIGHT_RED))
    assert result.endswith(color_code(LogColor.DEFAULT))
    assert "\033[1mx" in result


def test_polish_italic_precedes_bold():
    result = Format(bold=True, italic=True).polish("x")
    assert result.index("\033[3m") < result.index("\033[1m")


def test_current_time_string_shape():
    stamp = current_time_string()
    pattern = "%Y-%m-%d_%H-%M-%S"
    parsed = datetime.strptime(stamp, pattern)
    assert parsed.strftime(pattern) == stamp
    assert len(stamp) == 19


def test_factory_call_prints_title_and_payload(capsys):
    fmt = Format(LogColor.GREEN)
    factory = LogFactory("HDR", fmt)
    factory("Title", "a", "b")
    out = capsys.readouterr().out
    assert out == "[" + fmt.polish("HDR") + "] Title\n  a\n  b\n\n"


def test_factory_call_without_payload_has_no_blank_line(capsys):
    factory = LogFactory("HDR")
    record = factory("Only title")
    assert capsys.readouterr().out == "[HDR] Only title\n"
    assert record.has_payload is False


def test_empty_record_is_silent(capsys):
    LogStream("", Format(), "").emit()
    assert capsys.readouterr().out == ""


def test_stream_emits_on_context_exit(capsys):
    factory = LogFactory("HDR")
    with factory.stream("T") as record:
        record.add(1).add("two")
        assert capsys.readouterr().out == ""
    assert capsys.readouterr().out == "[HDR] T\n  1\n  two\n\n"


def test_stream_emits_once(capsys):
    record = LogFactory("HDR").stream("T")
    record.emit()
    record.emit()
    assert capsys.readouterr().out.count("[HDR] T") == 1


def test_factory_writes_to_file(tmp_path, capsys):
    factory = LogFactory("HDR", Format(LogColor.RED))
    path = tmp_path / "sub" / "x.log"
    factory.init(path)
    factory("T", "p")
    factory.log_file.close()
    content = path.read_text(encoding="utf-8")
    assert content.startswith("[")
    assert content.endswith("][HDR] T\n  p\n")
    assert "\033" not in content


def test_global_init_routes_categories(tmp_path, capsys):
    path = init(str(tmp_path / "logs" / "run.log"))
    assert "Log file initialized at:" in capsys.readouterr().out
    INFO("hello", "world")
    text = path.read_text(encoding="utf-8")
    assert "[INFO] hello\n  world\n" in text