from __future__ import annotations
from enum import Enum

from .errors import InputError


class Severity(Enum):
    """Severity of a failure. Ordered: `INFO < WARN < ERR < PANIC`."""
    INFO = 1
    WARN = 2
    ERR = 3
    PANIC = 4

    def __lt__(self, other: Severity) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Severity) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Severity) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Severity) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value >= other.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_str(cls, s: str) -> Severity:
        options = {opt.name.lower(): opt for opt in cls}
        if s.lower() not in options:
            raise InputError("one of " + ", ".join(opt.label for opt in cls), s)
        return options[s.lower()]


def max_severity(a: Severity, b: Severity) -> Severity:
    return b if a < b else a
