from __future__ import annotations
from typing import Optional, Type, TypeGuard, TypeVar, Any, Union, cast
from pathlib import Path
import typing
import types
from dataclasses import is_dataclass
import tomllib
import json

from .errors import HelpfulUserError, InputError
from .logging import logger


T = TypeVar("T")

log = logger()


def isgeneric(annot):
    return typing.get_origin(annot) and hasattr(annot, "__args__")


def construct(annot: Any, json: Any) -> Any:
    try:
        return _construct(annot, json)
    except (AssertionError, ValueError) as e:
        raise InputError(annot, json) from e


def is_optional_type(dtype: Type[Any]) -> TypeGuard[Type[Optional[Any]]]:
    return (
        isgeneric(dtype)
        and typing.get_origin(dtype) in (Union, types.UnionType)
        and types.NoneType in typing.get_args(dtype)
    )


def _construct(annot: Type[T], json: Any) -> T:
    """Construct an object from a given type from a JSON stream.

    The `annot` type should be one of: str, int, Optional[T], a class with a
    `from_str` method, or a dataclass, and the JSON data should match exactly
    the given definitions in the dataclass hierarchy.
    """
    if annot is str:
        assert isinstance(json, str)
        return cast(T, json)
    if annot is int:
        assert isinstance(json, int)
        return cast(T, json)
    if annot is Any:
        return cast(T, json)
    if is_optional_type(annot):
        if json is None:
            return cast(T, None)
        (dtype,) = (t for t in typing.get_args(annot) if t is not types.NoneType)
        return cast(T, construct(dtype, json))
    if isinstance(annot, type) and hasattr(annot, "from_str") and isinstance(json, str):
        return cast(T, getattr(annot, "from_str")(json))
    if is_dataclass(annot):
        assert isinstance(json, dict)
        arg_annot = typing.get_type_hints(annot)
        unknown = [k for k in json if k not in arg_annot]
        if unknown:
            raise ValueError(f"Unknown fields for {annot.__name__}: {unknown}")
        args = {k: construct(arg_annot[k], json[k]) for k in json}
        return cast(T, annot(**args))
    raise ValueError(f"Couldn't construct {annot} from {repr(json)}")


def read_from_file(data_type: Type[T], path: Path, section: Optional[str] = None) -> T:
    """Read a config from given `path` in given `section`. The path should refer to
    a TOML or JSON file that should decode to a `data_type` object. If `section` is
    given, only that section is decoded. The `section` string may contain
    periods to indicate deeper nesting.

    Example:

    ```python
    read_from_file(MergeOptions, Path("./pyproject.toml"), "tool.verdict")
    ```
    """
    if not path.exists():
        raise HelpfulUserError(f"File not found: {path}")
    with open(path, "rb") as f:
        if path.suffix == ".toml":
            data: Any = tomllib.load(f)
        elif path.suffix == ".json":
            data = json.load(f)
        else:
            raise HelpfulUserError(f"Unrecognized file format: {path}")

    try:
        if section is not None:
            for s in section.split("."):
                data = data[s]
    except KeyError as e:
        raise HelpfulUserError(
            f"Data file `{path}` should contain section `{section}`."
        ) from e

    log.debug("reading `%s` from `%s`", data_type.__name__, path)
    return construct(data_type, data)
