"""k1s0 preconditions library."""

from .checker import PreconditionChecker
from .checks import (
    require_all_non_null,
    require_argument,
    require_arguments,
    require_non_null,
    require_string_matches,
)
from .config import PreconditionsConfig, load_config
from .exceptions import (
    InvalidArgumentError,
    NullReferenceError,
    PreconditionError,
    PreconditionErrorCodes,
)
from .predicates import AnyPredicate, Predicate

__all__ = [
    "AnyPredicate",
    "InvalidArgumentError",
    "NullReferenceError",
    "PreconditionChecker",
    "PreconditionError",
    "PreconditionErrorCodes",
    "Predicate",
    "PreconditionsConfig",
    "load_config",
    "require_all_non_null",
    "require_argument",
    "require_arguments",
    "require_non_null",
    "require_string_matches",
]
