"""Combinators over `Outcome` values.

There are two ways of putting outcomes together, and the difference matters:

- Aggregation (`merge_exn`, `apply`, `lift`, `flatten_exn`) is for independent
  computations. Every failure is kept: severities escalate to the maximum and
  messages are concatenated in input order.
- Composition (`map_ok`, `kleisli_composition`, `chain`) is for dependent
  computations. The first failure stops the line and is returned as-is; no
  merging takes place.

None of these functions have side effects.
"""

from __future__ import annotations
from collections.abc import Callable, Iterable
from dataclasses import replace
from functools import reduce
from typing import Any, TypeVar

from .options import DEFAULT_OPTIONS, DEFAULT_SEPARATOR, MergeOptions
from .result import Failure, Ok, Outcome
from .severity import max_severity


T = TypeVar("T")
R = TypeVar("R")
P = TypeVar("P")


def _not_an_outcome(o: Any) -> TypeError:
    return TypeError(f"Expected `Ok` or `Failure`, got: {o!r}")


def with_header(f: Failure[P], header: str, separator: str = DEFAULT_SEPARATOR) -> Failure[P]:
    return replace(f, message=header + separator + f.message)


def merge_exn(a: Failure[P], b: Failure[P], options: MergeOptions = DEFAULT_OPTIONS) -> Failure[P]:
    """Merge two failures into one. The severity is the maximum of both, the
    message is `a.message` and `b.message` joined by the separator. Unless
    `options.payload` is given, the payload of `a` survives."""
    merged = Failure(
        level=max_severity(a.level, b.level),
        message=a.message + options.separator + b.message,
        payload=a.payload if options.payload is None else options.payload,
        children=a.children,
    )
    if options.header is not None:
        return with_header(merged, options.header, options.separator)
    return merged


def apply(
    fn: Outcome[Callable[[T], R], P],
    arg: Outcome[T, P],
    options: MergeOptions = DEFAULT_OPTIONS,
) -> Outcome[R, P]:
    match fn, arg:
        case Ok(f), Ok(x):
            return Ok(f(x))
        case Failure() as a, Failure() as b:
            return merge_exn(a, b, options)
        case Failure() as a, Ok():
            return a
        case Ok(), Failure() as b:
            return b
        case _:
            raise _not_an_outcome((fn, arg))


def flatten_exn(
    outcomes: Iterable[Outcome[T, P]], options: MergeOptions = DEFAULT_OPTIONS
) -> Outcome[list[T], P]:
    """Collapse a sequence of outcomes into a single one.

    If every element is `Ok`, the result is `Ok` of all values in input order.
    Otherwise all failures are merged, left to right, into one `Failure`. The
    header is put in front of the aggregated message once, at the very end;
    the same goes for the payload override.
    """
    pairwise = MergeOptions(separator=options.separator)

    def step(acc: list[T] | Failure[P], o: Outcome[T, P]) -> list[T] | Failure[P]:
        match acc, o:
            case list(), Ok(value):
                acc.append(value)
                return acc
            case list(), Failure():
                return o
            case Failure(), Failure():
                return merge_exn(acc, o, pairwise)
            case Failure(), Ok():
                return acc
            case _:
                raise _not_an_outcome(o)

    result = reduce(step, outcomes, [])
    if isinstance(result, list):
        return Ok(result)
    if options.payload is not None:
        result = replace(result, payload=options.payload)
    if options.header is not None:
        result = with_header(result, options.header, options.separator)
    return result


def lift(
    f: Callable[..., R], *outcomes: Outcome[Any, P], options: MergeOptions = DEFAULT_OPTIONS
) -> Outcome[R, P]:
    """Apply an n-ary function to the values of n outcomes, reporting all
    failures among the arguments."""
    match flatten_exn(outcomes, options):
        case Ok(args):
            return Ok(f(*args))
        case aggregate:
            return aggregate


def remove_exn(outcomes: Iterable[Outcome[T, P]]) -> list[Ok[T]]:
    return [o for o in outcomes if isinstance(o, Ok)]


def get_exns(outcomes: Iterable[Outcome[T, P]]) -> list[Failure[P]]:
    return [o for o in outcomes if isinstance(o, Failure)]


def values(outcomes: Iterable[Outcome[T, P]]) -> list[T]:
    return [o.value for o in remove_exn(outcomes)]


def map_ok(f: Callable[[T], Outcome[R, P]], outcome: Outcome[T, P]) -> Outcome[R, P]:
    """Bind over the success channel: `f` returns an `Outcome` itself."""
    match outcome:
        case Ok(value):
            return f(value)
        case Failure():
            return outcome
        case _:
            raise _not_an_outcome(outcome)


def map_err(f: Callable[[Failure[P]], Outcome[T, Any]], outcome: Outcome[T, P]) -> Outcome[T, Any]:
    match outcome:
        case Failure():
            return f(outcome)
        case Ok():
            return outcome
        case _:
            raise _not_an_outcome(outcome)


kleisli_composition = map_ok
bind = map_ok
kc = map_ok


def chain(
    initial: Outcome[Any, P], functions: Iterable[Callable[[Any], Outcome[Any, P]]]
) -> Outcome[Any, P]:
    """Feed `initial` through `functions`, one after the other. Once a step
    fails, the remaining functions are not called and that failure is the
    result."""
    return reduce(lambda acc, f: kleisli_composition(f, acc), functions, initial)
