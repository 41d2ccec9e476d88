import pytest

from eits.level import Max, Succ, Zero, from_int, level_max, succ, zero


def test_zero():
    level = zero()
    assert isinstance(level, Zero)
    assert str(level) == "0"


def test_succ():
    base = zero()
    level = succ(base)
    assert isinstance(level, Succ)
    assert level.pred is not None
    assert isinstance(level.pred, Zero)
    assert str(level) == "S(0)"


def test_max():
    a = zero()
    b = succ(a)
    m = level_max(a, b)
    assert isinstance(m, Max)
    assert isinstance(m.l1, Zero)
    assert isinstance(m.l2, Succ)
    assert m.to_string() == "max(0, S(0))"


def test_from_int_builds_successors():
    assert from_int(0) == zero()
    assert from_int(2) == succ(succ(zero()))
    assert str(from_int(3)) == "S(S(S(0)))"


def test_from_int_negative_raises():
    with pytest.raises(ValueError):
        from_int(-1)


def test_levels_are_hashable_values():
    assert len({from_int(1), succ(zero()), zero()}) == 2