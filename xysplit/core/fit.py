# xysplit/core/fit.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from .exceptions import InvalidInput
from .validation import as_readonly_1d, check_same_length, check_strictly_increasing

if TYPE_CHECKING:
    from .dataset import Dataset


def squared_error_given_slope(slope, cxx, cyy, cxy):
    """
    Sum of squared residuals of a line with `slope` through the centroid,
    from the centered moments Sxx, Syy, Sxy. Vectorises over numpy arrays.
    """
    return np.clip(cyy - 2.0 * slope * cxy + slope * slope * cxx, 0.0, None)


def least_squares_error(n, sx, sy, sxx, syy, sxy):
    """
    Squared error of the least-squares line, from raw moment sums.

    Every argument may be an array, giving one error per window.
    """
    cxx = sxx - sx * sx / n
    cyy = syy - sy * sy / n
    cxy = sxy - sx * sy / n
    return squared_error_given_slope(cxy / cxx, cxx, cyy, cxy)


@dataclass(frozen=True, slots=True)
class LinearFit:
    """
    Least-squares line through a set of (x, y) samples with strictly increasing x.

    The line always passes through (average_x, average_y). A single sample
    yields a horizontal line. The centered moments are kept so the squared
    error of any other slope through the centroid costs O(1).
    """
    slope: float
    intercept: float
    average_x: float
    average_y: float
    sxx: float = field(default=0.0, repr=False)
    syy: float = field(default=0.0, repr=False)
    sxy: float = field(default=0.0, repr=False)

    @classmethod
    def from_arrays(cls, xs: np.ndarray, ys: np.ndarray) -> "LinearFit":
        x = as_readonly_1d(xs, "xs")
        y = as_readonly_1d(ys, "ys")
        check_same_length(x, y)
        check_strictly_increasing(x)
        if x.size == 0:
            raise InvalidInput("Cannot fit a line to an empty dataset.")

        mx = float(x.mean())
        my = float(y.mean())
        dx = x - mx
        dy = y - my
        sxx = float(np.dot(dx, dx))
        syy = float(np.dot(dy, dy))
        sxy = float(np.dot(dx, dy))
        slope = 0.0 if sxx == 0.0 else sxy / sxx

        return cls(
            slope=slope,
            intercept=my - slope * mx,
            average_x=mx,
            average_y=my,
            sxx=sxx,
            syy=syy,
            sxy=sxy,
        )

    @property
    def total_squared_error(self) -> float:
        return self.sum_squared_error_given_slope(self.slope)

    def sum_squared_error_given_slope(self, slope: float) -> float:
        """Squared error of the line with `slope` through (average_x, average_y)."""
        return float(squared_error_given_slope(float(slope), self.sxx, self.syy, self.sxy))

    def predict(self, x: float | np.ndarray) -> float | np.ndarray:
        return self.slope * np.asarray(x, dtype=float) + self.intercept

    def residuals(self, dataset: "Dataset") -> np.ndarray:
        return dataset.ys - self.predict(dataset.xs)

    def max_abs_residual(self, dataset: "Dataset") -> float:
        if dataset.n == 0:
            return 0.0
        return float(np.max(np.abs(self.residuals(dataset))))
