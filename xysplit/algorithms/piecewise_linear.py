# xysplit/algorithms/piecewise_linear.py
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from xysplit.core import Dataset, InvalidInput
from xysplit.core.fit import least_squares_error

from .splitter import Splitter, check_input_data, require_splittable

logger = logging.getLogger(__name__)


def best_cut(data: Dataset) -> int:
    """
    Index k (2 <= k <= n-2) minimising the combined squared error of two
    independent line fits over [0, k) and [k, n). Ties go to the lowest k.
    """
    n = data.n
    if n < 4:
        raise InvalidInput(f"Need at least 4 points to cut in two, got {n}.")

    # center both axes to keep the moment sums well conditioned
    x = data.xs - data.xs.mean()
    y = data.ys - data.ys.mean()

    def prefix(v: np.ndarray) -> np.ndarray:
        return np.concatenate(([0.0], np.cumsum(v)))

    px, py = prefix(x), prefix(y)
    pxx, pyy, pxy = prefix(x * x), prefix(y * y), prefix(x * y)

    k = np.arange(2, n - 1)
    left = least_squares_error(k.astype(float), px[k], py[k], pxx[k], pyy[k], pxy[k])
    right = least_squares_error(
        (n - k).astype(float),
        px[n] - px[k],
        py[n] - py[k],
        pxx[n] - pxx[k],
        pyy[n] - pyy[k],
        pxy[n] - pxy[k],
    )
    return int(k[np.argmin(left + right)])


@dataclass(frozen=True, slots=True)
class PiecewiseLinearSplitter(Splitter):
    """
    Splits a dataset into pieces that are each well described by a straight line.

    tolerance:
      Largest allowed absolute residual between a piece and its least-squares
      line. Pieces that exceed it are cut in two where the two resulting line
      fits have the smallest combined squared error, recursively. Pieces with
      fewer than 4 points are never cut (each side needs 2 points for a line).
    """
    tolerance: float

    def __post_init__(self) -> None:
        try:
            tol = float(self.tolerance)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"tolerance must be a real number, got {self.tolerance!r}") from e
        if not tol >= 0.0:
            raise InvalidInput(f"tolerance must be non-negative, got {self.tolerance!r}")
        object.__setattr__(self, "tolerance", tol)

    def compute_splits_for(self, xs, ys) -> np.ndarray:
        data = check_input_data(xs, ys)
        require_splittable(data)

        starts: list[int] = []
        pending = [(0, data.n)]
        while pending:
            lo, hi = pending.pop()
            piece = data.subrange(lo, hi)
            if piece.n < 4 or self._fits(piece):
                starts.append(lo)
                continue
            cut = lo + best_cut(piece)
            pending.append((lo, cut))
            pending.append((cut, hi))

        boundaries = np.array(sorted(starts) + [data.n], dtype=np.intp)
        logger.debug("Split %d points into %d linear pieces", data.n, boundaries.size - 1)
        return boundaries

    def _fits(self, piece: Dataset) -> bool:
        return piece.approximate_fit().max_abs_residual(piece) <= self.tolerance
