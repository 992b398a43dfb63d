"""Predicate type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

# value -> bool; the result is judged by truthiness
Predicate = Callable[[T], bool]

# type-erased form for heterogeneous variadic checks
AnyPredicate = Callable[[Any], bool]
