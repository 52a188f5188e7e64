"""Axis-aligned rectangle geometry shared by every collision check.

All coordinates are screen-style: x grows to the right, y grows downward,
and a rectangle is described by its top-left corner plus width/height.
"""

import random
from dataclasses import dataclass
from typing import Protocol


class RectLike(Protocol):
    """Anything with x, y, w, h attributes can take part in a collision test."""
    x: float
    y: float
    w: float
    h: float


class RandomSource(Protocol):
    """Subset of random.Random used by hazard generation and animation."""

    def random(self) -> float:
        ...

    def uniform(self, a: float, b: float) -> float:
        ...

    def randint(self, a: int, b: int) -> int:
        ...


def default_rng() -> random.Random:
    """Fresh unseeded source for callers that don't inject one."""
    return random.Random()


@dataclass
class Rect:
    """Mutable axis-aligned box (top-left corner + size)."""
    x: float
    y: float
    w: float
    h: float


def overlaps(a: RectLike, b: RectLike) -> bool:
    """AABB intersection test.

    Half-open: boxes that only share an edge do not overlap.
    """
    return (
        a.x < b.x + b.w
        and a.x + a.w > b.x
        and a.y < b.y + b.h
        and a.y + a.h > b.y
    )


def box_around(x: float, y: float, r: float) -> Rect:
    """Square of side 2r centred on (x, y)."""
    return Rect(x - r, y - r, r * 2, r * 2)
