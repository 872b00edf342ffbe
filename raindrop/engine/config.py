"""Engine configuration — sampling and editor constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raindrop.config import Settings


@dataclass(frozen=True)
class SamplerConfig:
    """Controls region sizing and the placement retry budget."""

    region_count: int = 5
    # Combined region area as a fraction of the image area
    target_area_fraction: float = 0.25

    # Side clamps: usability floor, and a fraction of the short image edge
    min_side: int = 50
    max_side_fraction: float = 0.9

    # Rejection-sampling budget per region before falling back to overlap
    max_attempts: int = 5000

    @classmethod
    def from_settings(cls, settings: Settings) -> SamplerConfig:
        return cls(
            region_count=settings.region_count,
            target_area_fraction=settings.target_area_fraction,
            max_attempts=settings.max_placement_attempts,
        )


@dataclass
class EditorConfig:
    """Brush limits and eraser reach for mark editing."""

    brush_min: float = 2.0
    brush_max: float = 25.0
    default_brush: float = 5.0

    # Eraser reach = max(erase_min_radius, brush * erase_brush_factor)
    erase_min_radius: float = 20.0
    erase_brush_factor: float = 2.0
