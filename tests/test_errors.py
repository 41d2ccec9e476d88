import pytest

from eits.errors import EngineError, Kind, kind_to_string


@pytest.mark.parametrize(
    "kind, label",
    [
        (Kind.PARSE, "[Parse Error]"),
        (Kind.TYPE, "[Type Error]"),
        (Kind.RUNTIME, "[Runtime Error]"),
        (Kind.UNKNOWN, "[Unknown Error]"),
    ],
)
def test_kind_labels(kind, label):
    assert kind_to_string(kind) == label


def test_invalid_kind_label():
    assert kind_to_string("bogus") == "[Invalid Error]"


def test_error_string_joins_label_and_message():
    err = EngineError(Kind.TYPE, "mismatch")
    assert str(err) == kind_to_string(Kind.TYPE) + " mismatch"
    assert err.message == "mismatch"


def test_error_is_raisable():
    err = EngineError(Kind.PARSE, "bad token")
    assert str(err) == "[Parse Error] bad token"
    assert err.kind == Kind.PARSE
    with pytest.raises(EngineError, match=r"^\[Parse Error\] bad token$"):
        raise err