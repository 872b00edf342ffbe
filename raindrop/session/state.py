"""AnnotationSession — immutable state of one annotation session.

Every transition returns a new session; nothing is mutated in place. Marks
are stored per region id in region-local coordinates. Re-sampling replaces
the whole region set and drops every mark, and ids restart from 0.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

import numpy as np
from pydantic import BaseModel, Field

from raindrop.engine.aggregate import aggregate_stats
from raindrop.engine.analyzer import analyze_regions
from raindrop.engine.config import EditorConfig, SamplerConfig
from raindrop.engine.errors import RaindropError
from raindrop.engine.sampler import sample_regions
from raindrop.models.annotation import GlobalStats, Mark, Region, RegionStats
from raindrop.session.interaction import erase_radius
from raindrop.utils.geometry import euclidean

logger = logging.getLogger(__name__)

RegionMarks = tuple[tuple[int, tuple[Mark, ...]], ...]


class SessionStateError(RaindropError):
    """Operation needs a loaded image."""


class UnknownRegion(RaindropError, KeyError):
    """No region with the given id in the current session."""


class AnnotationSession(BaseModel):
    image_width: float | None = None
    image_height: float | None = None
    regions: tuple[Region, ...] = ()
    # (region_id, marks) pairs in region id order
    region_marks: RegionMarks = ()
    active_index: int = 0
    sampler_config: SamplerConfig = Field(default_factory=SamplerConfig)

    model_config = {"frozen": True}

    @property
    def marks(self) -> Mapping[int, tuple[Mark, ...]]:
        """Read-only view of marks keyed by region id."""
        return MappingProxyType(dict(self.region_marks))

    # --- Image lifecycle ---

    @property
    def has_image(self) -> bool:
        return self.image_width is not None and self.image_height is not None

    def load_image(
        self,
        width: float,
        height: float,
        *,
        rng: np.random.Generator | None = None,
        config: SamplerConfig | None = None,
    ) -> AnnotationSession:
        """Start annotating a new image: fresh regions, empty mark lists."""
        cfg = config or self.sampler_config
        regions = self._sample(width, height, rng, cfg)
        logger.info("Loaded %sx%s image with %d regions", width, height, len(regions))
        return self._fresh(width, height, regions, cfg)

    def resample(
        self,
        *,
        rng: np.random.Generator | None = None,
        config: SamplerConfig | None = None,
    ) -> AnnotationSession:
        if not self.has_image:
            raise SessionStateError("Cannot resample regions before an image is loaded")
        cfg = config or self.sampler_config
        dropped = sum(len(m) for _, m in self.region_marks)
        regions = self._sample(self.image_width, self.image_height, rng, cfg)
        logger.info("Resampled %d regions, discarded %d marks", len(regions), dropped)
        return self._fresh(self.image_width, self.image_height, regions, cfg)

    def reset(self) -> AnnotationSession:
        logger.debug("Session reset")
        return AnnotationSession(sampler_config=self.sampler_config)

    @staticmethod
    def _fresh(
        width: float,
        height: float,
        regions: list[Region],
        config: SamplerConfig,
    ) -> AnnotationSession:
        return AnnotationSession(
            image_width=width,
            image_height=height,
            regions=tuple(regions),
            region_marks=tuple((r.id, ()) for r in regions),
            sampler_config=config,
        )

    @staticmethod
    def _sample(
        width: float,
        height: float,
        rng: np.random.Generator | None,
        config: SamplerConfig,
    ) -> list[Region]:
        return sample_regions(
            width,
            height,
            config.region_count,
            config.target_area_fraction,
            rng=rng,
            config=config,
        )

    # --- Region navigation ---

    @property
    def active_region(self) -> Region | None:
        if not self.regions:
            return None
        return self.regions[self.active_index]

    @property
    def is_last_region(self) -> bool:
        return self.active_index == len(self.regions) - 1

    def select_region(self, index: int) -> AnnotationSession:
        if not 0 <= index < len(self.regions):
            raise IndexError(f"Region index {index} out of range (0..{len(self.regions) - 1})")
        return self.model_copy(update={"active_index": index})

    def confirm_region(self) -> AnnotationSession:
        """Move on to the next region; stays put on the last one."""
        if not self.regions or self.is_last_region:
            return self
        return self.model_copy(update={"active_index": self.active_index + 1})

    # --- Mark editing ---

    def region(self, region_id: int) -> Region:
        for r in self.regions:
            if r.id == region_id:
                return r
        raise UnknownRegion(f"No region with id {region_id}")

    def marks_for(self, region_id: int) -> tuple[Mark, ...]:
        self.region(region_id)
        for rid, marks in self.region_marks:
            if rid == region_id:
                return marks
        return ()

    def set_marks(self, region_id: int, marks: Iterable[Mark]) -> AnnotationSession:
        self.region(region_id)
        # model_copy skips validation, so marks are checked here
        validated = tuple(Mark.model_validate(m) for m in marks)
        updated = dict(self.region_marks)
        updated[region_id] = validated
        return self.model_copy(update={"region_marks": tuple(sorted(updated.items()))})

    def add_mark(self, region_id: int, mark: Mark) -> AnnotationSession:
        return self.set_marks(region_id, (*self.marks_for(region_id), mark))

    def erase_at(
        self,
        region_id: int,
        x: float,
        y: float,
        brush_size: float | None = None,
        editor: EditorConfig | None = None,
    ) -> AnnotationSession:
        """Drop every mark whose centre is within the eraser reach of local (x, y).

        ``brush_size`` defaults to the editor's ``default_brush``.
        """
        cfg = editor or EditorConfig()
        reach = erase_radius(cfg.default_brush if brush_size is None else brush_size, cfg)
        current = self.marks_for(region_id)
        kept = [m for m in current if euclidean(m.x, m.y, x, y) > reach]
        logger.debug("Erased %d marks in region %d", len(current) - len(kept), region_id)
        return self.set_marks(region_id, kept)

    def clear_marks(self, region_id: int) -> AnnotationSession:
        return self.set_marks(region_id, ())

    # --- Derived statistics ---

    def region_stats(self) -> list[RegionStats]:
        return analyze_regions(self.regions, self.marks)

    def global_stats(self) -> GlobalStats:
        return aggregate_stats(self.region_stats())
