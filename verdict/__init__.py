from .severity import Severity, max_severity
from .result import (
    Failure, Ok, Outcome, success, failure, info, warn, err, panic, render,
    is_ok, is_failure, none_failed,
)
from .options import MergeOptions, DEFAULT_OPTIONS, DEFAULT_SEPARATOR
from .combinators import (
    with_header, merge_exn, apply, flatten_exn, lift, remove_exn, get_exns, values,
    map_ok, map_err, bind, kleisli_composition, kc, chain,
)
from .abort import unwrap_or_abort, unwrap_or
from .errors import UserError, HelpfulUserError, InputError, Aborted
from .version import __version__

__all__ = [
    "Severity", "max_severity",
    "Failure", "Ok", "Outcome", "success", "failure", "info", "warn", "err", "panic",
    "render", "is_ok", "is_failure", "none_failed",
    "MergeOptions", "DEFAULT_OPTIONS", "DEFAULT_SEPARATOR",
    "with_header", "merge_exn", "apply", "flatten_exn", "lift", "remove_exn",
    "get_exns", "values", "map_ok", "map_err", "bind", "kleisli_composition", "kc",
    "chain", "unwrap_or_abort", "unwrap_or",
    "UserError", "HelpfulUserError", "InputError", "Aborted", "__version__",
]
