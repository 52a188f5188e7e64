"""Tests for rectangle geometry and the overlap test."""

import itertools
from types import SimpleNamespace

from blob_platformer.physics import Rect, overlaps, box_around
from blob_platformer.entities import Platform


class TestRect:
    def test_box_around(self):
        box = box_around(100, 50, 26)
        assert (box.x, box.y, box.w, box.h) == (74, 24, 52, 52)


class TestOverlaps:
    def test_overlapping(self):
        assert overlaps(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))

    def test_separate(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(20, 0, 10, 10))

    def test_shared_vertical_edge_is_not_overlap(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10))

    def test_shared_horizontal_edge_is_not_overlap(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(0, 10, 10, 10))

    def test_shared_corner_is_not_overlap(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(10, 10, 10, 10))

    def test_containment(self):
        assert overlaps(Rect(0, 0, 100, 100), Rect(40, 40, 5, 5))

    def test_zero_height_inside_overlaps(self):
        """Degenerate boxes follow the same strict inequalities."""
        assert overlaps(Rect(0, 0, 100, 100), Rect(10, 50, 10, 0))

    def test_zero_height_on_edge_does_not_overlap(self):
        assert not overlaps(Rect(0, 0, 100, 100), Rect(10, 100, 10, 0))
        assert not overlaps(Rect(0, 0, 100, 100), Rect(10, 0, 10, 0))

    def test_symmetric(self):
        rects = [
            Rect(0, 0, 10, 10),
            Rect(10, 0, 10, 10),
            Rect(5, 5, 10, 10),
            Rect(-5, -5, 30, 30),
            Rect(3, 3, 0, 4),
            Rect(100, 100, 1, 1),
        ]
        for a, b in itertools.product(rects, repeat=2):
            assert overlaps(a, b) == overlaps(b, a)

    def test_accepts_any_rect_like(self):
        """Platforms and plain records work as collision targets."""
        box = Rect(0, 0, 10, 10)
        assert overlaps(box, Platform(5, 5, 10, 10))
        assert overlaps(box, SimpleNamespace(x=5, y=5, w=10, h=10))
        assert not overlaps(box, SimpleNamespace(x=10, y=0, w=10, h=10))
