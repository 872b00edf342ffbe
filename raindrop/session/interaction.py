"""Map pointer input on a zoomed region view to region-local coordinates.

The zoom view fits one region into a container and anchors the region's
top-left corner at the container origin, so a container offset divided by
the fit scale is already a region-local coordinate.
"""

from __future__ import annotations

from raindrop.engine.config import EditorConfig
from raindrop.models.annotation import Region


def fit_scale(region: Region, container_width: float, container_height: float) -> float:
    """Largest uniform scale that fits ``region`` inside the container."""
    if container_width <= 0 or container_height <= 0 or region.width <= 0 or region.height <= 0:
        return 1.0
    return min(container_width / region.width, container_height / region.height)


def pointer_to_local(
    region: Region,
    offset_x: float,
    offset_y: float,
    scale: float,
) -> tuple[float, float] | None:
    """Container pixel offset → region-local point, or None if it misses the region."""
    local_x = offset_x / scale
    local_y = offset_y / scale
    if local_x < 0 or local_x > region.width or local_y < 0 or local_y > region.height:
        return None
    return (local_x, local_y)


def local_to_global(region: Region, x: float, y: float) -> tuple[float, float]:
    return (region.x + x, region.y + y)


def global_to_local(region: Region, x: float, y: float) -> tuple[float, float]:
    return (x - region.x, y - region.y)


def clamp_brush(size: float, editor: EditorConfig | None = None) -> float:
    cfg = editor or EditorConfig()
    return min(max(size, cfg.brush_min), cfg.brush_max)


def erase_radius(brush_size: float, editor: EditorConfig | None = None) -> float:
    """Eraser reach around the pointer; never smaller than ``erase_min_radius``."""
    cfg = editor or EditorConfig()
    return max(cfg.erase_min_radius, brush_size * cfg.erase_brush_factor)
