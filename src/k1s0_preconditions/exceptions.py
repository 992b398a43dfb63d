"""Precondition exceptions."""

from __future__ import annotations


class PreconditionError(Exception):
    """Base error of the preconditions library.

    ``str(err)`` is the rendered message itself, or an empty string when the
    failure carries no message.
    """

    def __init__(
        self,
        code: str,
        message: str | None = None,
        *,
        index: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.code = code
        self.message = message
        self.index = index
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message if self.message is not None else ""


class PreconditionErrorCodes:
    """PreconditionError code constants."""

    NULL_REFERENCE: str = "NULL_REFERENCE"
    INVALID_ARGUMENT: str = "INVALID_ARGUMENT"
    CONFIG: str = "CONFIG_ERROR"


class NullReferenceError(PreconditionError, TypeError):
    """Raised when a value that must be present is None."""

    def __init__(self, message: str | None = None, *, index: int | None = None) -> None:
        super().__init__(PreconditionErrorCodes.NULL_REFERENCE, message, index=index)


class InvalidArgumentError(PreconditionError, ValueError):
    """Raised when a value fails a predicate or pattern check."""

    def __init__(self, message: str | None = None, *, index: int | None = None) -> None:
        super().__init__(PreconditionErrorCodes.INVALID_ARGUMENT, message, index=index)
