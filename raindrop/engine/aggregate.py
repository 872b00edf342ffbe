"""Session-wide averages over per-region statistics."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from raindrop.models.annotation import GlobalStats, RegionStats


def _mean_defined(values: list[float | None]) -> tuple[float, int]:
    """Mean over the non-None values and how many there were; (0.0, 0) if none."""
    defined = [v for v in values if v is not None]
    if not defined:
        return 0.0, 0
    return float(np.mean(defined)), len(defined)


def aggregate_stats(stats: Sequence[RegionStats]) -> GlobalStats:
    """Average count and coverage over all regions, distances over regions that have them.

    Regions with no marks still count towards ``avg_count`` and
    ``avg_percentage`` and pull those means down.
    """
    n = len(stats)
    if n == 0:
        return GlobalStats()

    avg_min, min_n = _mean_defined([s.min_distance for s in stats])
    avg_max, max_n = _mean_defined([s.max_distance for s in stats])

    return GlobalStats(
        region_count=n,
        avg_count=sum(s.count for s in stats) / n,
        avg_percentage=sum(s.percentage_area for s in stats) / n,
        avg_min_distance=avg_min,
        avg_max_distance=avg_max,
        min_distance_regions=min_n,
        max_distance_regions=max_n,
    )
