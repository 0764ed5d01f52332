# xysplit/algorithms/visvalingam_splitter.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from xysplit.core import InternalInvariantViolation

from .simplifier import VisvalingamSimplifier, check_threshold
from .splitter import Splitter, check_input_data, require_splittable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VisvalingamSplitter(Splitter):
    """
    Splits a dataset at the "visually important" points found by a
    VisvalingamSimplifier.

    importance_threshold:
      Pick it from the scale of the x and y data (it is an area in x*y units).
      Smaller values keep more key points and so produce finer splits; a high
      enough value produces a single chunk.
    """
    importance_threshold: float
    simplifier: VisvalingamSimplifier = field(default_factory=VisvalingamSimplifier, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "importance_threshold", check_threshold(self.importance_threshold))

    def compute_splits_for(self, xs, ys) -> np.ndarray:
        data = check_input_data(xs, ys)
        require_splittable(data)

        key = self.simplifier.key_indices(data, self.importance_threshold)

        n = data.n
        if key.size < 2 or key[0] != 0 or key[-1] != n - 1 or np.any(np.diff(key) <= 0):
            raise InternalInvariantViolation(
                f"Key point indices {key.tolist()} do not span [0, {n - 1}] in order."
            )

        # so that xs[b[i]:b[i+1]] also covers the very last point
        boundaries = key.copy()
        boundaries[-1] += 1

        logger.debug("Split %d points into %d chunks", n, boundaries.size - 1)
        return boundaries
