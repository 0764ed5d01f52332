# xysplit/core/validation.py
from __future__ import annotations

import numpy as np

from .exceptions import InvalidInput


def as_readonly_1d(values, label: str) -> np.ndarray:
    """Copy `values` into a read-only 1D float64 array."""
    if values is None:
        raise InvalidInput(f"`{label}` must not be None.")
    try:
        arr = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"`{label}` must contain real numbers.") from e
    if arr.ndim != 1:
        raise InvalidInput(f"`{label}` must be 1D, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


def check_strictly_increasing(x: np.ndarray, label: str = "xs") -> None:
    """Raise InvalidInput unless `x` is finite and strictly increasing."""
    if x.size == 0:
        return
    if not np.isfinite(x).all():
        raise InvalidInput(f"`{label}` contains non-finite values (NaN/Inf).")
    if np.any(np.diff(x) <= 0):
        raise InvalidInput(f"`{label}` must be strictly increasing.")


def check_same_length(x: np.ndarray, y: np.ndarray) -> None:
    if x.size != y.size:
        raise InvalidInput(
            f"`xs` and `ys` must have same length, got {x.size} vs {y.size}"
        )
