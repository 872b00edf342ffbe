"""Tests for session-wide averages."""

from __future__ import annotations

import pytest

from raindrop.engine.aggregate import aggregate_stats
from raindrop.models.annotation import RegionStats


def _stats(region_id, count=0, pct=0.0, dmin=None, dmax=None) -> RegionStats:
    return RegionStats(
        region_id=region_id,
        count=count,
        percentage_area=pct,
        min_distance=dmin,
        max_distance=dmax,
    )


def test_empty_sequence():
    summary = aggregate_stats([])
    assert summary.region_count == 0
    assert summary.avg_count == 0.0
    assert not summary.has_min_distance


def test_zero_mark_regions_pull_means_down():
    summary = aggregate_stats([
        _stats(0, count=4, pct=2.0, dmin=10.0, dmax=40.0),
        _stats(1),
        _stats(2),
        _stats(3, count=2, pct=1.0, dmin=20.0, dmax=20.0),
    ])
    assert summary.region_count == 4
    assert summary.avg_count == pytest.approx(1.5)
    assert summary.avg_percentage == pytest.approx(0.75)


def test_distance_means_skip_undefined():
    summary = aggregate_stats([
        _stats(0, count=4, dmin=10.0, dmax=40.0),
        _stats(1, count=1),
        _stats(2, count=2, dmin=20.0, dmax=20.0),
    ])
    assert summary.avg_min_distance == pytest.approx(15.0)
    assert summary.avg_max_distance == pytest.approx(30.0)
    assert summary.min_distance_regions == 2
    assert summary.max_distance_regions == 2


def test_no_defined_distances_uses_zero_sentinel():
    summary = aggregate_stats([_stats(0, count=1), _stats(1)])
    assert summary.avg_min_distance == 0.0
    assert summary.avg_max_distance == 0.0
    assert not summary.has_min_distance
    assert not summary.has_max_distance


def test_true_zero_distance_distinguishable():
    summary = aggregate_stats([_stats(0, count=2, dmin=0.0, dmax=0.0)])
    assert summary.avg_min_distance == 0.0
    assert summary.has_min_distance
