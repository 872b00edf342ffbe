"""Region sampling and statistics engine."""

from raindrop.engine.aggregate import aggregate_stats
from raindrop.engine.analyzer import analyze_region, analyze_regions
from raindrop.engine.config import EditorConfig, SamplerConfig
from raindrop.engine.errors import (
    InvalidAreaFraction,
    InvalidDimension,
    InvalidRegionCount,
    RaindropError,
)
from raindrop.engine.sampler import sample_regions, side_length

__all__ = [
    "EditorConfig",
    "InvalidAreaFraction",
    "InvalidDimension",
    "InvalidRegionCount",
    "RaindropError",
    "SamplerConfig",
    "aggregate_stats",
    "analyze_region",
    "analyze_regions",
    "sample_regions",
    "side_length",
]
