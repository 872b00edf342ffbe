"""Region analyzer — count, nominal coverage and pairwise extremal distances.

Coverage sums disc areas without removing overlap between discs, so it is a
nominal ink-coverage figure rather than the area of the union, and it can
exceed 100%. Distances use mark centres only; radius plays no part.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import numpy as np

from raindrop.engine.errors import InvalidDimension
from raindrop.models.annotation import Mark, Region, RegionStats
from raindrop.utils.geometry import disc_areas, pairwise_distances


def analyze_region(
    marks: Sequence[Mark],
    region_width: float,
    region_height: float,
    region_id: int,
) -> RegionStats:
    """Compute :class:`RegionStats` for marks given in region-local coordinates."""
    if region_width <= 0 or region_height <= 0:
        raise InvalidDimension(
            f"Region {region_id} dimensions must be positive, got {region_width}x{region_height}"
        )

    count = len(marks)
    if count == 0:
        return RegionStats(region_id=region_id)

    radii = np.array([m.radius for m in marks], dtype=np.float64)
    total_pixel_area = float(np.sum(disc_areas(radii)))
    percentage_area = total_pixel_area / (region_width * region_height) * 100

    min_distance: float | None = None
    max_distance: float | None = None
    if count >= 2:
        points = np.array([(m.x, m.y) for m in marks], dtype=np.float64)
        dists = pairwise_distances(points)
        min_distance = float(np.min(dists))
        max_distance = float(np.max(dists))

    return RegionStats(
        region_id=region_id,
        count=count,
        total_pixel_area=total_pixel_area,
        percentage_area=percentage_area,
        min_distance=min_distance,
        max_distance=max_distance,
    )


def analyze_regions(
    regions: Iterable[Region],
    marks_by_region: Mapping[int, Sequence[Mark]],
) -> list[RegionStats]:
    """Analyze every region in id order; a region with no entry has no marks."""
    return [
        analyze_region(marks_by_region.get(r.id, ()), r.width, r.height, r.id)
        for r in sorted(regions, key=lambda r: r.id)
    ]
