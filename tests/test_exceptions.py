"""PreconditionError / PreconditionErrorCodes unit tests."""

from k1s0_preconditions.exceptions import (
    InvalidArgumentError,
    NullReferenceError,
    PreconditionError,
    PreconditionErrorCodes,
)


def test_precondition_error_str_is_message() -> None:
    err = PreconditionError(code="CONFIG_ERROR", message="bad config")
    assert str(err) == "bad config"
    assert err.message == "bad config"


def test_precondition_error_without_message() -> None:
    err = PreconditionError(code="INVALID_ARGUMENT")
    assert str(err) == ""
    assert err.message is None
    assert err.index is None


def test_precondition_error_with_cause() -> None:
    cause = OSError("missing")
    err = PreconditionError(code="CONFIG_ERROR", message="read failed", cause=cause)
    assert err.__cause__ is cause


def test_precondition_error_without_cause() -> None:
    err = PreconditionError(code="CONFIG_ERROR", message="read failed")
    assert err.__cause__ is None


def test_null_reference_error_code_and_bases() -> None:
    err = NullReferenceError("name", index=2)
    assert err.code == PreconditionErrorCodes.NULL_REFERENCE
    assert err.index == 2
    assert isinstance(err, PreconditionError)
    assert isinstance(err, TypeError)


def test_invalid_argument_error_code_and_bases() -> None:
    err = InvalidArgumentError("must be positive")
    assert err.code == PreconditionErrorCodes.INVALID_ARGUMENT
    assert str(err) == "must be positive"
    assert isinstance(err, PreconditionError)
    assert isinstance(err, ValueError)


def test_precondition_error_codes_constants() -> None:
    assert PreconditionErrorCodes.NULL_REFERENCE == "NULL_REFERENCE"
    assert PreconditionErrorCodes.INVALID_ARGUMENT == "INVALID_ARGUMENT"
    assert PreconditionErrorCodes.CONFIG == "CONFIG_ERROR"
