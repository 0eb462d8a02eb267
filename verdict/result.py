from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeGuard, TypeVar

from .severity import Severity


T = TypeVar("T")
P = TypeVar("P")


@dataclass(frozen=True)
class Failure(Generic[P]):
    """A failed computation.

    The `message` accumulates when failures are merged, `level` escalates to
    the highest severity seen. The `payload` is whatever the caller wants to
    attach: an error code, an offending record, etc. `children` is not filled
    in by any of the combinators; merges fold into `message` only.
    """
    level: Severity = Severity.ERR
    message: str = ""
    payload: P | None = None
    children: tuple[Failure[P], ...] = ()

    def __bool__(self):
        return False

    def __str__(self):
        return render(self)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def __bool__(self):
        return True


Outcome = Ok[T] | Failure[P]


def success(value: T) -> Ok[T]:
    return Ok(value)


def failure(
    level: Severity = Severity.ERR,
    message: str = "",
    payload: P | None = None,
    children: Iterable[Failure[P]] = (),
) -> Failure[P]:
    return Failure(level, message, payload, tuple(children))


def info(message: str, payload: Any = None) -> Failure[Any]:
    return failure(Severity.INFO, message, payload)


def warn(message: str, payload: Any = None) -> Failure[Any]:
    return failure(Severity.WARN, message, payload)


def err(message: str, payload: Any = None) -> Failure[Any]:
    return failure(Severity.ERR, message, payload)


def panic(message: str, payload: Any = None) -> Failure[Any]:
    return failure(Severity.PANIC, message, payload)


def render(f: Failure[Any]) -> str:
    return f"[{f.level.label}] {f.message}"


def is_ok(o: Outcome[T, Any]) -> TypeGuard[Ok[T]]:
    return isinstance(o, Ok)


def is_failure(o: Outcome[Any, P]) -> TypeGuard[Failure[P]]:
    return isinstance(o, Failure)


def none_failed(rs: list[Outcome[Any, Any]]) -> TypeGuard[list[Ok[Any]]]:
    return all(rs)
