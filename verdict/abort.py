from __future__ import annotations
import logging
from typing import Any, Optional, TypeVar

from .errors import Aborted
from .logging import logger
from .result import Failure, Ok, Outcome, render
from .severity import Severity


T = TypeVar("T")


def unwrap_or_abort(outcome: Outcome[T, Any], log: Optional[logging.Logger] = None) -> T:
    """Return the value of an `Ok`. A `Failure` is written to `log` (the
    `verdict` logger by default) and raised as `Aborted`.

    Only call this at the top of a program, where any remaining failure is
    fatal. None of the combinators call it.
    """
    match outcome:
        case Ok(value):
            return value
        case Failure() as f:
            log = log or logger()
            level = logging.CRITICAL if f.level is Severity.PANIC else logging.ERROR
            log.log(level, render(f))
            raise Aborted(f)
        case _:
            raise TypeError(f"Expected `Ok` or `Failure`, got: {outcome!r}")


def unwrap_or(outcome: Outcome[T, Any], default: T) -> T:
    match outcome:
        case Ok(value):
            return value
        case _:
            return default
