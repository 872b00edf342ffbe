"""Validation errors raised by the engine before any work is done."""

from __future__ import annotations


class RaindropError(ValueError):
    """Base class for all raindrop validation failures."""


class InvalidDimension(RaindropError):
    """Image or region width/height is not positive."""


class InvalidRegionCount(RaindropError):
    """Requested region count is not a positive integer."""


class InvalidAreaFraction(RaindropError):
    """Target area fraction lies outside the open interval (0, 1)."""
