"""Region sampler — random non-overlapping square regions over an image.

Sizing: every region shares one side ``s`` chosen so that
``region_count * s**2 ≈ target_area_fraction * W * H``. The side is then
clamped so regions always fit, which trades area fidelity on small or very
elongated images for a fit guarantee.

Placement: bounded rejection sampling per region. When the retry budget runs
out the region is placed at one last random spot even if it overlaps; the
sampler always returns exactly ``region_count`` regions.
"""

from __future__ import annotations

import logging
import math
import numbers

import numpy as np

from raindrop.engine.config import SamplerConfig
from raindrop.engine.errors import InvalidAreaFraction, InvalidDimension, InvalidRegionCount
from raindrop.models.annotation import Region

logger = logging.getLogger(__name__)


def _validate(
    image_width: float,
    image_height: float,
    region_count: int,
    target_area_fraction: float,
) -> None:
    if image_width <= 0 or image_height <= 0:
        raise InvalidDimension(
            f"Image dimensions must be positive, got {image_width}x{image_height}"
        )
    if isinstance(region_count, bool) or not isinstance(region_count, numbers.Integral):
        raise InvalidRegionCount(f"Region count must be an integer, got {region_count!r}")
    if region_count <= 0:
        raise InvalidRegionCount(f"Region count must be positive, got {region_count}")
    if not 0 < target_area_fraction < 1:
        raise InvalidAreaFraction(
            f"Target area fraction must be in (0, 1), got {target_area_fraction}"
        )


def side_length(
    image_width: float,
    image_height: float,
    region_count: int = 5,
    target_area_fraction: float = 0.25,
    config: SamplerConfig | None = None,
) -> int:
    """Common square side for ``region_count`` regions covering the target fraction."""
    cfg = config or SamplerConfig()
    _validate(image_width, image_height, region_count, target_area_fraction)

    side = math.floor(math.sqrt(image_width * image_height * target_area_fraction / region_count))

    min_edge = min(image_width, image_height)
    upper = math.floor(min_edge * cfg.max_side_fraction)
    if side > upper:
        side = upper
    if side < cfg.min_side:
        side = cfg.min_side
    # Tiny images: the usability floor must not push regions off the image
    if side > min_edge:
        side = math.floor(min_edge)
    return max(side, 1)


def sample_regions(
    image_width: float,
    image_height: float,
    region_count: int = 5,
    target_area_fraction: float = 0.25,
    *,
    rng: np.random.Generator | None = None,
    config: SamplerConfig | None = None,
) -> list[Region]:
    """Place ``region_count`` square regions inside a ``image_width`` x ``image_height`` image.

    ``rng`` is the only source of randomness; pass a seeded generator for
    reproducible layouts. The returned list is ordered by ``id``.
    """
    cfg = config or SamplerConfig()
    rng = rng if rng is not None else np.random.default_rng()

    side = side_length(image_width, image_height, region_count, target_area_fraction, cfg)
    max_x = max(0, math.floor(image_width - side))
    max_y = max(0, math.floor(image_height - side))

    logger.debug(
        "Sampling %d regions of side %d on %sx%s image",
        region_count,
        side,
        image_width,
        image_height,
    )

    regions: list[Region] = []
    fallbacks = 0

    for i in range(region_count):
        placed: Region | None = None
        for _ in range(cfg.max_attempts):
            x = int(rng.integers(0, max_x, endpoint=True))
            y = int(rng.integers(0, max_y, endpoint=True))
            candidate = Region(id=i, x=x, y=y, width=side, height=side)
            if not any(candidate.overlaps(r) for r in regions):
                placed = candidate
                break

        if placed is None:
            x = int(rng.integers(0, max_x, endpoint=True))
            y = int(rng.integers(0, max_y, endpoint=True))
            placed = Region(id=i, x=x, y=y, width=side, height=side)
            fallbacks += 1
            logger.warning(
                "Region %d: no free spot after %d attempts, placed with overlap at (%d, %d)",
                i,
                cfg.max_attempts,
                x,
                y,
            )

        regions.append(placed)

    if fallbacks:
        logger.info("Sampled %d regions (%d overlapping fallbacks)", region_count, fallbacks)

    return sorted(regions, key=lambda r: r.id)
