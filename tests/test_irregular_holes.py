# -*- coding: utf-8 -*-
"""
Tests for irregular hole filling.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import numpy as np
import pytest

from lanczos_resample.irregular.binning import bin_samples
from lanczos_resample.irregular.holes import (
    fill_holes,
    scan_left,
    scan_right,
    synthesize,
)
from lanczos_resample.vocabulary import NodataMode


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture
def sparse():
    """a=2, dst_w=6 on [0, 6): observed samples only in bins 4 and 6.

    Bin ``ja`` covers positions ``[ja - 2, ja - 1)``.
    """
    return bin_samples(np.array([2.5, 4.5]), np.array([1.0, 3.0]),
                       a=2, dst_w=6, x0=0.0, x1=6.0)


def _hole_values(filled):
    """Map bin -> value of its synthesized record."""
    owned = filled.owned
    return dict(zip(filled.bins[owned].tolist(),
                    filled.values[owned, 0].tolist()))


# ── Neighbor scans ──────────────────────────────────────────────────────


class TestScans:
    """Test bounded left/right searches."""

    def test_adjacent(self, sparse):
        left = scan_left(sparse, 5, 3.5)
        right = scan_right(sparse, 5, 3.5)
        assert sparse.positions[left] == 2.5
        assert sparse.positions[right] == 4.5

    def test_closest_in_first_nonempty_bin(self):
        bins = bin_samples(np.array([2.1, 2.9, 2.5, 4.8, 4.2]), np.ones(5),
                           a=2, dst_w=6, x0=0.0, x1=6.0)
        assert bins.positions[scan_left(bins, 5, 3.5)] == 2.9
        assert bins.positions[scan_right(bins, 5, 3.5)] == 4.2

    def test_bounded_by_a(self, sparse):
        # bin 1 reaches left to bin 0 and right to bin 3 only
        assert scan_left(sparse, 1, -0.5) is None
        assert scan_right(sparse, 1, -0.5) is None

    def test_array_edges(self, sparse):
        assert scan_left(sparse, 0, -1.5) is None
        assert scan_right(sparse, 9, 7.5) is None


class TestSynthesize:
    """Test value synthesis from candidates."""

    def test_weighted_interpolates(self, sparse):
        value = synthesize(sparse, 3.0, 0, 1, NodataMode.WEIGHTED)
        # s = (3.0 - 2.5) / (4.5 - 2.5) = 0.25
        np.testing.assert_allclose(value, [1.5])

    def test_nearest_tie_goes_left(self, sparse):
        value = synthesize(sparse, 3.5, 0, 1, NodataMode.NEAREST)
        np.testing.assert_array_equal(value, [1.0])

    def test_nearest_right(self, sparse):
        value = synthesize(sparse, 4.0, 0, 1, NodataMode.NEAREST)
        np.testing.assert_array_equal(value, [3.0])

    def test_zero(self, sparse):
        value = synthesize(sparse, 3.5, 0, 1, NodataMode.ZERO)
        np.testing.assert_array_equal(value, [0.0])

    def test_single_candidate_copied(self, sparse):
        np.testing.assert_array_equal(
            synthesize(sparse, 1.5, None, 0, NodataMode.WEIGHTED), [1.0])
        np.testing.assert_array_equal(
            synthesize(sparse, 5.5, 1, None, NodataMode.NEAREST), [3.0])

    def test_no_candidates(self, sparse):
        value = synthesize(sparse, 0.0, None, None, NodataMode.WEIGHTED)
        np.testing.assert_array_equal(value, [0.0])

    def test_copy_does_not_alias(self, sparse):
        value = synthesize(sparse, 1.5, None, 0, NodataMode.NEAREST)
        value[0] = 99.0
        assert sparse.values[0, 0] == 1.0


# ── fill_holes ──────────────────────────────────────────────────────────


class TestFillHoles:
    """Test the full hole-filling pass."""

    def test_every_bin_filled(self, sparse):
        filled = fill_holes(sparse)
        assert filled.empty_bins().size == 0
        assert filled.size == sparse.bin_count
        assert int(filled.owned.sum()) == 8

    def test_weighted_values(self, sparse):
        values = _hole_values(fill_holes(sparse, NodataMode.WEIGHTED))
        assert values == pytest.approx({
            0: 0.0, 1: 0.0, 2: 1.0, 3: 1.0,
            5: 2.0,
            7: 3.0, 8: 3.0, 9: 0.0,
        })

    def test_nearest_values(self, sparse):
        values = _hole_values(fill_holes(sparse, NodataMode.NEAREST))
        assert values[5] == 1.0
        assert values[7] == 3.0

    def test_zero_values(self, sparse):
        values = _hole_values(fill_holes(sparse, NodataMode.ZERO))
        assert set(values.values()) == {0.0}

    def test_holes_at_bin_centers(self, sparse):
        filled = fill_holes(sparse)
        owned = filled.owned
        np.testing.assert_allclose(filled.positions[owned],
                                   filled.bins[owned] - 2 + 0.5)

    def test_holes_do_not_seed_holes(self, sparse):
        # bin 1 is within reach of the filled bin 2 but not of any
        # observed sample
        assert _hole_values(fill_holes(sparse))[1] == 0.0

    def test_input_not_modified(self, sparse):
        fill_holes(sparse)
        assert sparse.size == 2
        assert sparse.empty_bins().size == 8

    def test_no_holes_returns_same(self):
        bins = bin_samples(np.arange(-0.5, 4.0), np.ones(5), a=1, dst_w=3,
                           x0=0.0, x1=3.0)
        assert fill_holes(bins) is bins

    def test_multichannel(self):
        bins = bin_samples(np.array([0.5, 2.5]),
                           np.array([[1.0, 10.0], [3.0, 30.0]]),
                           a=1, dst_w=3, x0=0.0, x1=3.0)
        filled = fill_holes(bins)
        hole = filled.owned & (filled.bins == 2)
        np.testing.assert_allclose(filled.values[hole], [[2.0, 20.0]])
