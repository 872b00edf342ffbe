"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.distance import pdist


def euclidean(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def disc_areas(radii: NDArray[np.float64]) -> NDArray[np.float64]:
    """π r² for each radius."""
    return np.pi * radii**2


def pairwise_distances(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Condensed distances over all C(n, 2) unordered pairs of an Nx2 array."""
    if len(points) < 2:
        return np.empty(0)
    return pdist(points, metric="euclidean")


def rects_overlap(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
) -> bool:
    """Strict intersection of two (x, y, w, h) rectangles. Touching edges don't count."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by
