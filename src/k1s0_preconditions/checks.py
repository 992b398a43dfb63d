"""Module-level precondition checks bound to the default configuration.

Each check returns its input unchanged so it can be used inline::

    self._name = require_non_null(name, "name is required")
    require_arguments(lambda n: n > 0, value, bitmask)
    require_string_matches(code, "[A-Z]+", "code must be upper-case letters")
"""

from __future__ import annotations

import re
from typing import Any, TypeVar

from .checker import PreconditionChecker
from .predicates import AnyPredicate, Predicate

T = TypeVar("T")

_default_checker = PreconditionChecker()


def require_non_null(value: T | None, message: object = None) -> T:
    """Ensure value is not None."""
    return _default_checker.require_non_null(value, message)


def require_all_non_null(*values: Any) -> tuple[Any, ...]:
    """Ensure none of values is None."""
    return _default_checker.require_all_non_null(*values)


def require_argument(predicate: Predicate[T], value: T, message: object = None) -> T:
    """Validate an argument with a predicate."""
    return _default_checker.require_argument(predicate, value, message)


def require_arguments(predicate: AnyPredicate, *values: Any) -> tuple[Any, ...]:
    """Validate several arguments with one predicate."""
    return _default_checker.require_arguments(predicate, *values)


def require_string_matches(
    string: str, pattern: str | re.Pattern[str], message: object = None
) -> str:
    """Validate that a string fully matches a regular expression."""
    return _default_checker.require_string_matches(string, pattern, message)
