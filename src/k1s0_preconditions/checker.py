"""PreconditionChecker implementation."""

from __future__ import annotations

import logging
import re
from typing import Any, TypeVar

from .config import PreconditionsConfig
from .exceptions import InvalidArgumentError, NullReferenceError, PreconditionError
from .predicates import AnyPredicate, Predicate

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PreconditionChecker:
    """Fail-fast argument checks.

    A checker holds only its immutable config, so a single instance can be
    shared between threads.
    """

    def __init__(self, config: PreconditionsConfig | None = None) -> None:
        self._config = config or PreconditionsConfig()

    @property
    def config(self) -> PreconditionsConfig:
        return self._config

    def require_non_null(self, value: T | None, message: object = None) -> T:
        """Return value unchanged, or raise NullReferenceError if it is None.

        Args:
            value: The argument to check
            message: Diagnostic message; None renders as the configured
                absent message ("null" by default)

        Raises:
            NullReferenceError: value is None
        """
        if value is None:
            raise self._fail(NullReferenceError(self._render(message)))
        return value

    def require_all_non_null(self, *values: Any) -> tuple[Any, ...]:
        """Return values unchanged, or raise on the first None (left to right)."""
        for index, value in enumerate(values):
            if value is None:
                raise self._fail(NullReferenceError(self._render(None), index=index))
        return values

    def require_argument(self, predicate: Predicate[T], value: T, message: object = None) -> T:
        """Return value unchanged if predicate(value) holds.

        Raises:
            InvalidArgumentError: predicate(value) is falsy
        """
        if not predicate(value):
            raise self._fail(InvalidArgumentError(self._render(message)))
        return value

    def require_arguments(self, predicate: AnyPredicate, *values: Any) -> tuple[Any, ...]:
        """Return values unchanged if predicate holds for every one of them.

        Stops at the first value the predicate rejects; that failure carries
        no message.
        """
        for index, value in enumerate(values):
            if predicate(value):
                continue
            raise self._fail(InvalidArgumentError(index=index))
        return values

    def require_string_matches(
        self,
        string: str,
        pattern: str | re.Pattern[str],
        message: object = None,
    ) -> str:
        """Return string unchanged if the whole of it matches pattern.

        Raises:
            NullReferenceError: string is None
            InvalidArgumentError: string does not fully match pattern
        """
        if string is None:
            raise self._fail(NullReferenceError(self._render(None)))
        if re.fullmatch(pattern, string) is None:
            raise self._fail(InvalidArgumentError(self._render(message)))
        return string

    def _render(self, message: object) -> str:
        if message is None:
            return self._config.absent_message
        return str(message)

    def _fail(self, error: PreconditionError) -> PreconditionError:
        if self._config.log_failures:
            logger.debug(
                "Precondition failed",
                extra={"code": error.code, "index": error.index},
            )
        return error
