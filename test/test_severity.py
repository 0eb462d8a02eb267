import pytest
from hypothesis import given

from verdict import InputError, Severity, max_severity
from strategies import severities


def test_order():
    assert Severity.INFO < Severity.WARN < Severity.ERR < Severity.PANIC
    assert max(Severity) is Severity.PANIC
    assert sorted([Severity.ERR, Severity.INFO, Severity.PANIC, Severity.WARN]) == list(Severity)


def test_label():
    assert [s.label for s in Severity] == ["Info", "Warn", "Err", "Panic"]


def test_from_str():
    assert Severity.from_str("warn") is Severity.WARN
    assert Severity.from_str("Panic") is Severity.PANIC
    assert Severity.from_str("ERR") is Severity.ERR
    with pytest.raises(InputError):
        Severity.from_str("fatal")


@given(severities, severities)
def test_max_commutative(a, b):
    assert max_severity(a, b) is max_severity(b, a)
    assert max_severity(a, b) >= a and max_severity(a, b) >= b


@given(severities, severities, severities)
def test_max_associative(a, b, c):
    assert max_severity(max_severity(a, b), c) is max_severity(a, max_severity(b, c))


@given(severities)
def test_max_idempotent(a):
    assert max_severity(a, a) is a
    assert max_severity(a, Severity.PANIC) is Severity.PANIC
    assert max_severity(Severity.INFO, a) is a
