from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .result import Failure


class UserError(Exception):
    def __str__(self):
        return "Unknown user error."


@dataclass
class HelpfulUserError(UserError):
    msg: str

    def __str__(self):
        return self.msg


@dataclass
class InputError(UserError):
    expected: str
    got: Any

    def __str__(self):
        return f"Expected {self.expected}, got: {self.got}"


@dataclass
class Aborted(UserError):
    """Raised by `unwrap_or_abort` when it is handed a `Failure`."""
    failure: Failure

    def __str__(self):
        return str(self.failure)
