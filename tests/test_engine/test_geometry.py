"""Tests for leaf geometry helpers."""

from __future__ import annotations

import numpy as np
import pytest

from raindrop.utils.geometry import disc_areas, euclidean, pairwise_distances, rects_overlap


def test_euclidean():
    assert euclidean(0, 0, 3, 4) == 5.0


def test_disc_areas():
    areas = disc_areas(np.array([1.0, 2.0]))
    assert areas == pytest.approx([np.pi, 4 * np.pi])


def test_pairwise_distance_count():
    points = np.array([[0, 0], [1, 0], [0, 1], [1, 1]], dtype=np.float64)
    assert len(pairwise_distances(points)) == 6


def test_pairwise_distances_too_few_points():
    assert len(pairwise_distances(np.array([[1.0, 1.0]]))) == 0


def test_rects_overlap_strict():
    assert rects_overlap((0, 0, 10, 10), (5, 5, 10, 10))
    # Shared edge only
    assert not rects_overlap((0, 0, 10, 10), (10, 0, 10, 10))
    assert not rects_overlap((0, 0, 10, 10), (0, 10, 10, 10))
    assert not rects_overlap((0, 0, 10, 10), (30, 30, 5, 5))


def test_rects_overlap_containment():
    assert rects_overlap((0, 0, 100, 100), (10, 10, 5, 5))
