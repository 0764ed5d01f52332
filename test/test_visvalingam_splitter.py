# test/test_visvalingam_splitter.py
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from xysplit.core import Dataset, InvalidInput, InternalInvariantViolation
from xysplit.algorithms import VisvalingamSimplifier, VisvalingamSplitter


def _altitude_track(n: int = 400, seed: int = 3) -> Dataset:
    """Climb, cruise, descend, with sensor noise (feet over seconds)."""
    rng = np.random.default_rng(seed)
    t = np.arange(n, dtype=float) * 4.0
    alt = np.interp(t, [0, 400, 900, 1200, t[-1]], [0, 20_000, 20_000, 8_000, 8_000])
    return Dataset(t, alt + rng.normal(0.0, 40.0, size=n))


class _BrokenSimplifier(VisvalingamSimplifier):
    def key_indices(self, dataset, threshold):
        return np.array([0, 2, 1, dataset.n - 1])


def test_spike_boundaries():
    xs = [0, 1, 2, 3, 4, 5]
    ys = [0, 0, 10, 0, 0, 0]

    splits = VisvalingamSplitter(11.0).compute_splits_for(xs, ys)

    assert splits.tolist() == [0, 2, 6]


def test_spike_segments():
    ds = Dataset([0, 1, 2, 3, 4, 5], [0, 0, 10, 0, 0, 0])

    pieces = VisvalingamSplitter(11.0).split(ds)

    assert [p.xs.tolist() for p in pieces] == [[0.0, 1.0], [2.0, 3.0, 4.0, 5.0]]


def test_collinear_data_is_one_segment():
    splits = VisvalingamSplitter(1.0).compute_splits_for([0, 1, 2, 3], [0, 1, 2, 3])
    assert splits.tolist() == [0, 4]


@pytest.mark.parametrize("threshold", [0.0, 1.0, 1e9])
def test_two_points_is_one_segment(threshold):
    splits = VisvalingamSplitter(threshold).compute_splits_for([0.0, 1.0], [3.0, -3.0])
    assert splits.tolist() == [0, 2]


@pytest.mark.parametrize("xs,ys", [([], []), ([1.0], [1.0])])
def test_too_small_to_split(xs, ys):
    with pytest.raises(InvalidInput):
        VisvalingamSplitter(1.0).compute_splits_for(xs, ys)


def test_rejects_negative_threshold():
    with pytest.raises(InvalidInput):
        VisvalingamSplitter(-1.0)


def test_rejects_bad_input():
    splitter = VisvalingamSplitter(1.0)
    with pytest.raises(InvalidInput):
        splitter.compute_splits_for([0, 2, 1], [0, 0, 0])
    with pytest.raises(InvalidInput):
        splitter.compute_splits_for([0, 1, 2], [0, 0])
    with pytest.raises(InvalidInput):
        splitter.compute_splits_for(None, [0, 0])


def test_broken_simplifier_is_reported():
    splitter = VisvalingamSplitter(1.0, simplifier=_BrokenSimplifier())
    with pytest.raises(InternalInvariantViolation):
        splitter.compute_splits_for([0, 1, 2, 3], [0, 5, 0, 5])


def test_real_track_is_split_well():
    ds = _altitude_track()
    threshold = 300 * 20  # 300 feet of error over 20 seconds

    pieces = VisvalingamSplitter(threshold).split(ds)
    direct = VisvalingamSimplifier().simplify(ds, threshold)

    assert sum(p.n for p in pieces) == ds.n
    assert np.array_equal(np.concatenate([p.xs for p in pieces]), ds.xs)

    # every piece starts at a key point, and there is one piece per key point but the last
    for p in pieces:
        assert p.x(0) in direct.xs
    assert direct.n == len(pieces) + 1


def test_boundaries_partition_the_data():
    ds = _altitude_track()
    for threshold in (10.0, 1_000.0, 100_000.0):
        b = VisvalingamSplitter(threshold).compute_splits(ds)

        assert b[0] == 0
        assert b[-1] == ds.n
        assert np.all(np.diff(b) > 0)

        covered = np.concatenate([np.arange(lo, hi) for lo, hi in zip(b[:-1], b[1:])])
        assert covered.tolist() == list(range(ds.n))


def test_shared_splitter_across_threads():
    splitter = VisvalingamSplitter(5_000.0)
    tracks = [_altitude_track(seed=s) for s in range(8)]

    expected = [splitter.compute_splits(t).tolist() for t in tracks]
    with ThreadPoolExecutor(max_workers=4) as pool:
        got = [b.tolist() for b in pool.map(splitter.compute_splits, tracks)]

    assert got == expected
