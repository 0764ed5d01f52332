# xysplit/algorithms/splitter.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from xysplit.core import Dataset, InvalidInput
from xysplit.core.validation import as_readonly_1d, check_strictly_increasing


def check_input_data(xs: Sequence[float] | np.ndarray, ys: Sequence[float] | np.ndarray) -> Dataset:
    """
    Shared input check for every Splitter.

    Confirms (1) inputs are not None, (2) they have the same length,
    (3) xs is strictly increasing. Returns the validated Dataset.
    """
    if xs is None or ys is None:
        raise InvalidInput("`xs` and `ys` must not be None.")
    return Dataset(xs, ys)


def check_ordering(xs: Sequence[float] | np.ndarray) -> None:
    """Raise InvalidInput unless `xs` is strictly increasing."""
    check_strictly_increasing(as_readonly_1d(xs, "xs"))


class Splitter(ABC):
    """
    Partitions an XY dataset into contiguous chunks based on some criterion.

    Implementations return a boundary array: strictly increasing indices that
    start at 0 and end at n, so that xs[b[i]:b[i+1]] is chunk i.
    """

    @abstractmethod
    def compute_splits_for(self, xs, ys) -> np.ndarray:
        """Boundary array for raw, index-aligned x/y sequences."""

    def compute_splits(self, dataset: Dataset) -> np.ndarray:
        return self.compute_splits_for(dataset.xs, dataset.ys)

    def split(self, dataset: Dataset) -> list[Dataset]:
        return dataset.split_using(self)


def require_splittable(data: Dataset) -> None:
    if data.n < 2:
        raise InvalidInput(f"Need at least 2 points to split, got {data.n}.")
