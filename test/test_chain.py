from hypothesis import given

from verdict import Ok, Severity, chain, failure, kc, map_err, map_ok, bind, warn, err
from strategies import outcomes


@given(outcomes)
def test_chain_identity(o):
    assert chain(o, []) == o


def test_chain():
    assert chain(Ok(5), [lambda x: Ok(x + 1), lambda x: Ok(x * 2)]) == Ok(12)


def test_chain_short_circuit():
    called = []

    def never(x):
        called.append(x)
        return Ok(x * 100)

    result = chain(Ok(5), [lambda x: Ok(x + 1), lambda x: failure(Severity.ERR, "stop"), never])
    assert result == failure(Severity.ERR, "stop")
    assert called == []


def test_chain_does_not_merge():
    result = chain(warn("first"), [lambda x: err("second")])
    assert result == warn("first")


def test_kleisli():
    assert kc(lambda x: Ok(x + 1), Ok(1)) == Ok(2)
    assert kc(lambda x: Ok(x + 1), err("x")) == err("x")


def test_map_ok():
    assert map_ok(lambda x: Ok(str(x)), Ok(1)) == Ok("1")
    assert map_ok(lambda x: err("nope"), Ok(1)) == err("nope")
    assert bind is map_ok

    def unreachable(_):
        raise AssertionError("should not be called")

    assert map_ok(unreachable, warn("w")) == warn("w")


def test_map_err():
    def recover(f):
        return Ok(0) if f.level < Severity.ERR else f

    assert map_err(recover, warn("meh")) == Ok(0)
    assert map_err(recover, err("bad")) == err("bad")

    def unreachable(_):
        raise AssertionError("should not be called")

    assert map_err(unreachable, Ok(3)) == Ok(3)


@given(outcomes)
def test_one_channel(o):
    assert map_ok(Ok, o) == o
    assert map_err(lambda f: f, o) == o
