"""Unit tests for point-set post-processing."""

from collections import Counter

import pytest

from rasterlab.core.point_ops import (
    dedup,
    lex_sort,
    polyline,
    reflect_horizontal,
    reflect_vertical,
    reorder_adjacent,
)
from rasterlab.core.rasterizer import bresenham_circle, midpoint_circle
from rasterlab.domain import Ordering, Point, PointSequence, Segment


@pytest.fixture
def scattered() -> PointSequence:
    """Points in no particular order, with repeats."""
    return PointSequence.of(
        [(2, 1), (0, 0), (2, 1), (-1, 3), (0, 0, 1), (0, -2), (2, 0), (0, 0)]
    )


class TestLexSort:
    """Tests for lex_sort."""

    def test_orders_by_x_then_y_then_z(self, scattered):
        result = lex_sort(scattered)
        assert result.to_tuples() == [
            (-1, 3, 0.0),
            (0, -2, 0.0),
            (0, 0, 0.0),
            (0, 0, 0.0),
            (0, 0, 1),
            (2, 0, 0.0),
            (2, 1, 0.0),
            (2, 1, 0.0),
        ]
        assert result.ordering is Ordering.LEXICOGRAPHIC

    def test_idempotent(self, scattered):
        once = lex_sort(scattered)
        assert lex_sort(once) == once

    def test_accepts_plain_list(self):
        assert lex_sort([Point(1, 0), Point(0, 5)]) == [Point(0, 5), Point(1, 0)]

    def test_empty(self):
        assert len(lex_sort([])) == 0


class TestDedup:
    """Tests for dedup."""

    def test_removes_adjacent_repeats_only(self):
        seq = PointSequence.of([(0, 0), (0, 0), (1, 0), (0, 0)])
        assert dedup(seq).to_tuples() == [(0, 0, 0.0), (1, 0, 0.0), (0, 0, 0.0)]

    def test_sorted_input_becomes_set(self, scattered):
        result = dedup(lex_sort(scattered))
        assert len(result) == len(set(scattered))

    def test_idempotent_after_sort(self, scattered):
        once = dedup(lex_sort(scattered))
        assert dedup(lex_sort(once)) == once

    def test_keeps_ordering_tag(self, scattered):
        assert dedup(lex_sort(scattered)).ordering is Ordering.LEXICOGRAPHIC
        assert dedup(scattered).ordering is Ordering.NATIVE


class TestReorderAdjacent:
    """Tests for reorder_adjacent."""

    def test_collinear_points(self):
        seq = PointSequence.of([(0, 0, 0), (2, 0, 0), (1, 0, 0)])
        assert reorder_adjacent(seq) == [Point(0, 0, 0), Point(1, 0, 0), Point(2, 0, 0)]

    def test_starts_with_first_input(self, scattered):
        assert reorder_adjacent(scattered)[0] == scattered[0]

    def test_is_permutation(self, scattered):
        result = reorder_adjacent(scattered)
        assert Counter(result) == Counter(scattered)

    def test_tie_goes_to_first_seen(self):
        # (1, 0) and (-1, 0) are both at distance 1 from the origin
        seq = PointSequence.of([(0, 0), (1, 0), (-1, 0)])
        assert reorder_adjacent(seq).to_tuples()[1] == (1, 0, 0.0)

        seq = PointSequence.of([(0, 0), (-1, 0), (1, 0)])
        assert reorder_adjacent(seq).to_tuples()[1] == (-1, 0, 0.0)

    def test_ordering_tag(self, scattered):
        assert reorder_adjacent(scattered).ordering is Ordering.ADJACENT

    def test_empty_and_single(self):
        assert len(reorder_adjacent([])) == 0
        assert reorder_adjacent([Point(3, 3)]) == [Point(3, 3)]

    def test_quadrant_arc_becomes_continuous(self):
        arc = reorder_adjacent(midpoint_circle(0, 0, 10))
        for a, b in zip(arc, arc[1:]):
            assert a.distance_to(b) <= 1.5

    def test_ring_steps_are_short(self):
        ring = reorder_adjacent(bresenham_circle(0, 0, 3))
        steps = [a.distance_to(b) for a, b in zip(ring, ring[1:])]
        assert max(steps) <= 1.5


class TestReflect:
    """Tests for reflect_horizontal and reflect_vertical."""

    def test_reflect_horizontal(self):
        seq = PointSequence.of([(3, 1, 0), (5, 2, 0)])
        assert reflect_horizontal(seq, 2).to_tuples() == [(1, 1, 0), (-1, 2, 0)]

    def test_reflect_vertical(self):
        seq = PointSequence.of([(3, 1, 0), (5, 2, 0)])
        assert reflect_vertical(seq, 2).to_tuples() == [(3, 3, 0), (5, 2, 0)]

    def test_double_reflection_is_identity(self, scattered):
        assert reflect_horizontal(reflect_horizontal(scattered, 7), 7) == scattered
        assert reflect_vertical(reflect_vertical(scattered, -3), -3) == scattered

    def test_keeps_z(self):
        assert reflect_horizontal([Point(1, 1, 4)], 0)[0].z == 4

    def test_adjacent_stays_adjacent(self):
        arc = reorder_adjacent(midpoint_circle(0, 0, 4))
        assert reflect_horizontal(arc, 0).ordering is Ordering.ADJACENT

    def test_sorted_becomes_native(self):
        ring = bresenham_circle(0, 0, 2)
        assert reflect_vertical(ring, 0).ordering is Ordering.NATIVE


class TestPolyline:
    """Tests for polyline."""

    def test_open(self):
        seq = PointSequence.of([(0, 0), (1, 0), (2, 1)])
        assert polyline(seq) == [
            Segment(Point(0, 0), Point(1, 0)),
            Segment(Point(1, 0), Point(2, 1)),
        ]

    def test_closed(self):
        seq = PointSequence.of([(0, 0), (1, 0), (1, 1)])
        segments = polyline(seq, closed=True)
        assert len(segments) == 3
        assert segments[-1] == Segment(Point(1, 1), Point(0, 0))

    def test_single_point_has_no_segments(self):
        assert polyline([Point(0, 0)], closed=True) == []
