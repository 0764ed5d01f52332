# test/test_exceptions.py
import pytest

from xysplit.core import (
    CoreError,
    InvalidInput,
    IndexOutOfRange,
    InternalInvariantViolation,
)


def test_exception_inheritance_core():
    assert issubclass(InvalidInput, CoreError)
    assert issubclass(IndexOutOfRange, CoreError)
    assert issubclass(InternalInvariantViolation, CoreError)


def test_exception_inheritance_builtin():
    assert issubclass(InvalidInput, ValueError)
    assert issubclass(IndexOutOfRange, IndexError)
    assert issubclass(InternalInvariantViolation, RuntimeError)


def test_lookup_errors_can_be_raised_and_caught_as_indexerror():
    with pytest.raises(IndexError):
        raise IndexOutOfRange("index 5 outside [0, 3)")

    with pytest.raises(ValueError):
        raise InvalidInput("bad input")
