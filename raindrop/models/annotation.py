"""Annotation data model — regions, raindrop marks and derived statistics.

Mark coordinates are region-local: (0, 0) is the top-left corner of the
owning region, independent of where that region sits in the image.
"""

from __future__ import annotations

import enum
import uuid

from pydantic import BaseModel, Field

from raindrop.utils.geometry import rects_overlap

_FROZEN = {"frozen": True}


class MarkColor(str, enum.Enum):
    RED = "red"
    BLUE = "blue"


class Region(BaseModel):
    """Axis-aligned square sub-area of the image, in image pixel space."""

    id: int
    x: float = Field(ge=0)
    y: float = Field(ge=0)
    width: float = Field(gt=0)
    height: float = Field(gt=0)

    model_config = _FROZEN

    def as_rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def overlaps(self, other: Region) -> bool:
        """Strict AABB intersection; rectangles sharing only an edge do not overlap."""
        return rects_overlap(self.as_rect(), other.as_rect())


class Mark(BaseModel):
    """One observed raindrop: a disc at region-local (x, y)."""

    id: str
    x: float
    y: float
    radius: float = Field(gt=0)
    color: MarkColor = MarkColor.RED

    model_config = _FROZEN

    @classmethod
    def create(
        cls,
        x: float,
        y: float,
        radius: float,
        color: MarkColor | str = MarkColor.RED,
    ) -> Mark:
        return cls(id=uuid.uuid4().hex[:9], x=x, y=y, radius=radius, color=color)


class RegionStats(BaseModel):
    region_id: int
    count: int = 0
    total_pixel_area: float = 0.0
    percentage_area: float = 0.0
    # None iff count < 2
    min_distance: float | None = None
    max_distance: float | None = None

    model_config = _FROZEN


class GlobalStats(BaseModel):
    """Averages across every region of a session.

    ``avg_min_distance`` / ``avg_max_distance`` are 0.0 when no region has a
    defined distance; use ``has_min_distance`` / ``has_max_distance`` to tell
    that apart from a real zero.
    """

    region_count: int = 0
    avg_count: float = 0.0
    avg_percentage: float = 0.0
    avg_min_distance: float = 0.0
    avg_max_distance: float = 0.0
    min_distance_regions: int = 0
    max_distance_regions: int = 0

    model_config = _FROZEN

    @property
    def has_min_distance(self) -> bool:
        return self.min_distance_regions > 0

    @property
    def has_max_distance(self) -> bool:
        return self.max_distance_regions > 0
