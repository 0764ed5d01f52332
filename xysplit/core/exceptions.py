# xysplit/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all xysplit exceptions."""


# ---- Validation / construction errors ----
class InvalidInput(CoreError, ValueError):
    """Raised when a Dataset, threshold or splitter receives invalid inputs."""


# ---- Lookup errors (also behave like IndexError for sequence-like APIs) ----
class IndexOutOfRange(CoreError, IndexError):
    """Raised when an accessor is called with an index outside [0, n)."""


# ---- Should never happen ----
class InternalInvariantViolation(CoreError, RuntimeError):
    """Raised when an algorithm produces output that breaks its own contract."""
