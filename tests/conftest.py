"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from raindrop.models.annotation import Mark, MarkColor
from raindrop.session.state import AnnotationSession


def make_mark(x: float, y: float, radius: float = 5.0, color: str = "red", id: str | None = None) -> Mark:
    return Mark(id=id or f"m{x:g}_{y:g}", x=x, y=y, radius=radius, color=color)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def pythagorean_marks() -> list[Mark]:
    """Two marks exactly 5 px apart."""
    return [make_mark(0, 0, 5), make_mark(3, 4, 5)]


@pytest.fixture
def square_marks() -> list[Mark]:
    """Corners of a 30x40 rectangle: 6 pairs, min 30, max 50."""
    return [
        make_mark(10, 10, 3),
        make_mark(40, 10, 3, "blue"),
        make_mark(10, 50, 3),
        make_mark(40, 50, 3, MarkColor.BLUE),
    ]


@pytest.fixture
def loaded_session(rng: np.random.Generator) -> AnnotationSession:
    return AnnotationSession().load_image(1000, 1000, rng=rng)
