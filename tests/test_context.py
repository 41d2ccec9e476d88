import io

from eits.context import Context
from eits.syntax import Constant, Type


def make_const(name):
    return Constant(name, Type())


def test_add_and_lookup():
    ctx = Context()
    expr = make_const("x")
    assert ctx.add("x", expr) is True
    assert ctx.lookup("x") is expr


def test_duplicate_add_keeps_first(capsys):
    ctx = Context()
    first = make_const("x")
    ctx.add("x", first)
    assert ctx.add("x", make_const("other")) is False
    assert ctx.lookup("x") is first
    assert "already bound" in capsys.readouterr().out


def test_lookup_missing():
    assert Context().lookup("missing") is None


def test_extend_creates_child_scope():
    ctx = Context()
    outer = make_const("x")
    ctx.add("x", outer)
    ctx.extend()
    assert ctx.depth == 1
    assert ctx.gamma == {}
    assert ctx.parent is not None
    assert ctx.parent.depth == 0
    assert ctx.lookup("x") is outer


def test_shadowing_in_child_scope():
    ctx = Context()
    outer = make_const("x")
    ctx.add("x", outer)
    ctx.extend()
    inner = make_const("y")
    assert ctx.add("x", inner) is True
    assert ctx.lookup("x") is inner
    assert ctx.parent.gamma["x"] is outer


def test_child_bindings_do_not_leak_to_parent():
    ctx = Context()
    ctx.extend()
    ctx.add("z", make_const("z"))
    assert "z" not in ctx.parent.gamma


def test_clear_only_current_scope():
    ctx = Context()
    outer = make_const("x")
    ctx.add("x", outer)
    ctx.extend()
    ctx.add("y", make_const("y"))
    ctx.clear()
    assert ctx.gamma == {}
    assert ctx.lookup("y") is None
    assert ctx.lookup("x") is outer


def test_dump_format():
    ctx = Context()
    expr = make_const("x")
    ctx.add("x", expr)
    buf = io.StringIO()
    ctx.dump(buf)
    text = buf.getvalue()
    assert text.startswith("Γ := {\n")
    assert text.endswith("}\n")
    assert "  Scope[0]:\n" in text
    assert "   - x ↦ " + expr.to_string() + "\n" in text


def test_dump_innermost_scope_first():
    ctx = Context()
    ctx.add("x", make_const("x"))
    ctx.extend()
    buf = io.StringIO()
    ctx.dump(buf)
    text = buf.getvalue()
    assert text.index("Scope[1]") < text.index("Scope[0]")


def test_dump_defaults_to_stdout(capsys):
    Context().dump()
    out = capsys.readouterr().out
    assert out.startswith("Γ := {\n")
    assert out.endswith("}\n")