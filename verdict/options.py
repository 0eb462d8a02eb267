from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .utility import read_from_file


DEFAULT_SEPARATOR = "\n  "


@dataclass(frozen=True)
class MergeOptions:
    """How failures are joined when they are merged.

    - `header`: printed once in front of an aggregated message.
    - `separator`: goes between the header and each merged message.
    - `payload`: replaces the payload of the merged failure; when `None` the
      payload of the left-hand failure is kept.
    """
    header: str | None = None
    separator: str = DEFAULT_SEPARATOR
    payload: Any = None

    @staticmethod
    def load(path: Path, section: Optional[str] = None) -> MergeOptions:
        return read_from_file(MergeOptions, path, section)


DEFAULT_OPTIONS = MergeOptions()
