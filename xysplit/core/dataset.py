# xysplit/core/dataset.py
from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

import numpy as np

from .exceptions import IndexOutOfRange, InternalInvariantViolation, InvalidInput
from .fit import LinearFit
from .point import Point
from .validation import as_readonly_1d, check_same_length, check_strictly_increasing

if TYPE_CHECKING:
    from xysplit.algorithms.splitter import Splitter


@dataclass(frozen=True, slots=True, eq=False)
class Dataset:
    """
    Immutable XY dataset: paired (x, y) samples with strictly increasing x.

    Design goals:
    - safe: validated on construction, arrays are read-only copies
    - predictable: every transformation (subrange, derivative, split) returns new Datasets
    - numpy-native: xs / ys are float64 arrays usable directly in vectorised code
    - value semantics: equal samples compare (and hash) equal
    """
    xs: np.ndarray = field(repr=False)
    ys: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        x = as_readonly_1d(self.xs, "xs")
        y = as_readonly_1d(self.ys, "ys")

        check_same_length(x, y)
        check_strictly_increasing(x)

        object.__setattr__(self, "xs", x)
        object.__setattr__(self, "ys", y)

    def __repr__(self) -> str:
        if self.n == 0:
            return "Dataset(n=0)"
        return f"Dataset(n={self.n}, x=[{self.xs[0]}, {self.xs[-1]}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return bool(np.array_equal(self.xs, other.xs) and np.array_equal(self.ys, other.ys))

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0 so equal arrays hash alike
        return hash(((self.xs + 0.0).tobytes(), (self.ys + 0.0).tobytes()))

    # ---- sequence-like API ----
    @property
    def n(self) -> int:
        return int(self.xs.size)

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[Point]:
        for x, y in zip(self.xs.tolist(), self.ys.tolist()):
            yield Point(x, y)

    def _check_index(self, i: int) -> int:
        try:
            idx = operator.index(i)
        except TypeError as e:
            raise IndexOutOfRange(f"index must be an integer, got {i!r}") from e
        if not 0 <= idx < self.n:
            raise IndexOutOfRange(f"index {idx} outside [0, {self.n})")
        return idx

    def x(self, i: int) -> float:
        return float(self.xs[self._check_index(i)])

    def y(self, i: int) -> float:
        return float(self.ys[self._check_index(i)])

    def point(self, i: int) -> Point:
        i = self._check_index(i)
        return Point(float(self.xs[i]), float(self.ys[i]))

    def points(self) -> list[Point]:
        return list(self)

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        if copy:
            return self.xs.copy(), self.ys.copy()
        return self.xs, self.ys

    # ---- derived quantities ----
    @property
    def x_span(self) -> float:
        """Distance between the first and last x value (0.0 below 2 points)."""
        if self.n < 2:
            return 0.0
        return float(self.xs[-1] - self.xs[0])

    def approximate_fit(self) -> LinearFit:
        return LinearFit.from_arrays(self.xs, self.ys)

    def derivative(self) -> "Dataset":
        """
        Estimate dy/dx at every x.

        Interior points use second-order central differences, the two ends use
        one-sided differences (numpy.gradient semantics).
        """
        if self.n < 2:
            raise InvalidInput("derivative() needs at least 2 points.")
        return Dataset(self.xs, np.gradient(self.ys, self.xs))

    # ---- transformations ----
    def subrange(self, start: int, end: int) -> "Dataset":
        """
        Return the points with index in [start, end) as a new Dataset.

        Raises InvalidInput if the window is empty or not inside [0, n].
        """
        if not 0 <= start < end <= self.n:
            raise InvalidInput(
                f"subrange [{start}, {end}) is empty or outside [0, {self.n})"
            )
        return Dataset(self.xs[start:end], self.ys[start:end])

    def split_using(self, splitter: "Splitter") -> list["Dataset"]:
        """
        Partition this Dataset at the boundaries computed by `splitter`.

        The pieces cover every point exactly once, in order.
        """
        boundaries = np.asarray(splitter.compute_splits(self))
        _check_boundaries(boundaries, self.n)
        return [
            self.subrange(int(start), int(end))
            for start, end in zip(boundaries[:-1], boundaries[1:])
        ]


def _check_boundaries(boundaries: np.ndarray, n: int) -> None:
    if (
        not np.issubdtype(boundaries.dtype, np.integer)
        or boundaries.ndim != 1
        or boundaries.size < 2
        or boundaries[0] != 0
        or boundaries[-1] != n
        or np.any(np.diff(boundaries) <= 0)
    ):
        raise InternalInvariantViolation(
            f"Splitter returned malformed boundaries {boundaries.tolist()} for n={n}"
        )


def as_dataset(points: Iterable[Point]) -> Dataset:
    """Build a Dataset from (x, y) points, already ordered by x."""
    pts = list(points)
    return Dataset(
        xs=[p.x for p in pts],
        ys=[p.y for p in pts],
    )
