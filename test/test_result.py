import dataclasses

import pytest
from hypothesis import given

from verdict import (
    Failure, Ok, Severity, success, failure, info, warn, err, panic, render,
    is_ok, is_failure, none_failed,
)
from strategies import outcomes


@given(outcomes)
def test_result(r):
    assert (r and hasattr(r, "value")) or (not r and isinstance(r, Failure))
    assert is_ok(r) != is_failure(r)


def test_constructors():
    assert success(3) == Ok(3)
    f = failure(message="boom")
    assert f.level is Severity.ERR
    assert f.payload is None
    assert f.children == ()
    assert failure(Severity.WARN, "x", 42).payload == 42
    assert [g.level for g in (info("a"), warn("b"), err("c"), panic("d"))] == list(Severity)
    assert err("c", payload="E042").payload == "E042"


def test_children_are_stored():
    inner = warn("inner")
    outer = failure(Severity.ERR, "outer", children=[inner])
    assert outer.children == (inner,)


def test_render():
    assert render(failure(Severity.WARN, "disk almost full")) == "[Warn] disk almost full"
    assert render(panic("")) == "[Panic] "
    assert str(err("x")) == "[Err] x"


def test_immutable():
    f = err("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        f.message = "y"  # type: ignore
    with pytest.raises(dataclasses.FrozenInstanceError):
        Ok(1).value = 2  # type: ignore


def test_none_failed():
    assert none_failed([Ok(1), Ok(2)])
    assert none_failed([])
    assert not none_failed([Ok(1), info("just saying")])
