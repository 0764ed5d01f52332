# xysplit/core/__init__.py
"""
Core domain objects for xysplit.

This module defines the algorithm-agnostic data model:
- Point: a single (x, y) sample
- Dataset: validated, immutable XY samples with strictly increasing x
- LinearFit: least-squares line over a Dataset

The core layer is independent from the simplification / splitting algorithms.
"""

from .point import Point
from .fit import LinearFit
from .dataset import Dataset, as_dataset
from .exceptions import (
    CoreError,
    InvalidInput,
    IndexOutOfRange,
    InternalInvariantViolation,
)


__all__ = [
    # data model
    "Point",
    "Dataset",
    "as_dataset",
    "LinearFit",

    # exceptions
    "CoreError",
    "InvalidInput",
    "IndexOutOfRange",
    "InternalInvariantViolation",
]
