# xysplit/algorithms/simplifier.py
from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass

import numpy as np

from xysplit.core import Dataset, InvalidInput, Point

logger = logging.getLogger(__name__)


def triangle_area(left: Point, center: Point, right: Point) -> float:
    """Area of the triangle spanned by three points (0.0 when collinear)."""
    return _area(left.x, left.y, center.x, center.y, right.x, right.y)


def _area(xl: float, yl: float, xc: float, yc: float, xr: float, yr: float) -> float:
    return 0.5 * abs((xl - xc) * (yr - yc) - (xr - xc) * (yl - yc))


def check_threshold(threshold: float) -> float:
    try:
        t = float(threshold)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"threshold must be a real number, got {threshold!r}") from e
    # `not t >= 0` also rejects NaN
    if not t >= 0.0:
        raise InvalidInput(f"threshold must be non-negative, got {threshold!r}")
    return t


@dataclass(frozen=True, slots=True)
class Removal:
    """One step of the simplification: which point went, and its effective area."""
    index: int
    effective_area: float


@dataclass(frozen=True, slots=True)
class VisvalingamSimplifier:
    """
    Visvalingam-Whyatt simplification of an XY dataset.

    Interior points are removed one at a time, always picking the point whose
    triangle with its current left/right neighbours has the smallest area,
    until every remaining interior point has an effective area >= threshold.
    The first and last points are never removed.

    The simplifier keeps no state between calls and can be shared freely.
    """

    def simplify(self, dataset: Dataset, threshold: float) -> Dataset:
        """Return the key points of `dataset` as a new Dataset."""
        keep = self.key_indices(dataset, threshold)
        out = Dataset(dataset.xs[keep], dataset.ys[keep])
        logger.debug("Simplified %d points to %d (threshold=%s)", dataset.n, out.n, threshold)
        return out

    def key_indices(self, dataset: Dataset, threshold: float) -> np.ndarray:
        """Ascending indices (into `dataset`) of the points that survive."""
        removed = self.removals(dataset, threshold)
        keep = np.ones(dataset.n, dtype=bool)
        keep[[r.index for r in removed]] = False
        return np.flatnonzero(keep)

    def removals(self, dataset: Dataset, threshold: float) -> list[Removal]:
        """
        Run the removal procedure and report every removed point in order.

        Effective areas in the returned list are non-decreasing: a neighbour
        whose recomputed area would drop below the last removed point's
        effective area is clamped up to it. Ties are broken by lowest index.
        """
        t = check_threshold(threshold)
        if not isinstance(dataset, Dataset):
            raise InvalidInput("simplify() expects a Dataset instance.")
        if not np.isfinite(dataset.ys).all():
            raise InvalidInput("`ys` contains non-finite values (NaN/Inf).")

        n = dataset.n
        if n < 3:
            return []

        xs = dataset.xs.tolist()
        ys = dataset.ys.tolist()

        # doubly linked list over the surviving points, addressed by index
        left = list(range(-1, n - 1))
        right = list(range(1, n + 1))
        alive = [True] * n

        area = [math.inf] * n
        for i in range(1, n - 1):
            area[i] = _area(xs[i - 1], ys[i - 1], xs[i], ys[i], xs[i + 1], ys[i + 1])

        heap = [(area[i], i) for i in range(1, n - 1)]
        heapq.heapify(heap)

        removed: list[Removal] = []
        last = 0.0

        while heap:
            a, i = heapq.heappop(heap)
            # stale entry: point already gone or its area was recomputed
            if not alive[i] or a != area[i]:
                continue
            if a >= t:
                break

            last = max(a, last)
            removed.append(Removal(i, last))
            alive[i] = False

            lo, hi = left[i], right[i]
            right[lo] = hi
            left[hi] = lo

            for j in (lo, hi):
                if j == 0 or j == n - 1:
                    continue
                lj, rj = left[j], right[j]
                a_j = _area(xs[lj], ys[lj], xs[j], ys[j], xs[rj], ys[rj])
                area[j] = max(a_j, last)
                heapq.heappush(heap, (area[j], j))

        return removed
