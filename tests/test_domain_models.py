"""Tests for domain models to verify they work correctly."""

import pytest

from rasterlab.domain import (
    Algorithm,
    CircleInput,
    LineInput,
    Ordering,
    Point,
    PointSequence,
    Segment,
)
from rasterlab.exceptions import DomainError, InputParseError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(3.0, 4.0)
        assert p.x == 3.0
        assert p.y == 4.0
        assert p.z == 0.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.0, 2.0, 3.0).to_tuple() == (1.0, 2.0, 3.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(1.0, -2.0, 0.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_from_dict_without_z(self) -> None:
        """Test that a missing z defaults to zero."""
        assert Point.from_dict({"x": 1.0, "y": 2.0}) == Point(1.0, 2.0, 0.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2

    def test_int_and_float_points_equal(self) -> None:
        """Test that integer and float coordinates compare equal."""
        assert Point(1, 2) == Point(1.0, 2.0)

    def test_distance_to(self) -> None:
        """Test Euclidean distance."""
        assert Point(0.0, 0.0).distance_to(Point(3.0, 4.0)) == pytest.approx(5.0)


class TestPointSequence:
    """Tests for PointSequence class."""

    def test_default_ordering_is_native(self) -> None:
        seq = PointSequence([Point(0.0, 0.0)])
        assert seq.ordering is Ordering.NATIVE

    def test_sequence_protocol(self) -> None:
        seq = PointSequence.of([(0, 0), (1, 1), (2, 2)])
        assert len(seq) == 3
        assert seq[1] == Point(1.0, 1.0)
        assert list(seq) == [Point(0, 0), Point(1, 1), Point(2, 2)]

    def test_slice_keeps_ordering(self) -> None:
        seq = PointSequence.of([(0, 0), (1, 1), (2, 2)], Ordering.ADJACENT)
        head = seq[:2]
        assert isinstance(head, PointSequence)
        assert head.ordering is Ordering.ADJACENT
        assert len(head) == 2

    def test_equality_ignores_ordering_tag(self) -> None:
        a = PointSequence.of([(0, 0), (1, 0)], Ordering.NATIVE)
        b = PointSequence.of([(0, 0), (1, 0)], Ordering.LEXICOGRAPHIC)
        assert a == b

    def test_equality_with_list(self) -> None:
        seq = PointSequence.of([(0, 0), (1, 0)])
        assert seq == [Point(0.0, 0.0), Point(1.0, 0.0)]

    def test_to_tuples(self) -> None:
        seq = PointSequence.of([(1, 2), (3, 4, 5)])
        assert seq.to_tuples() == [(1, 2, 0.0), (3, 4, 5)]


class TestSegment:
    """Tests for Segment class."""

    def test_length(self) -> None:
        seg = Segment(Point(0.0, 0.0), Point(3.0, 4.0))
        assert seg.length() == pytest.approx(5.0)

    def test_reversed(self) -> None:
        seg = Segment(Point(0.0, 0.0), Point(1.0, 0.0))
        assert seg.reversed() == Segment(Point(1.0, 0.0), Point(0.0, 0.0))


class TestAlgorithm:
    """Tests for Algorithm enum."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("BIA", Algorithm.BASIC_INCREMENTAL_LINE),
            ("dda", Algorithm.DDA_LINE),
            (" Ba ", Algorithm.BRESENHAM_LINE),
            ("mpc", Algorithm.MIDPOINT_CIRCLE),
            ("BCA", Algorithm.BRESENHAM_CIRCLE),
        ],
    )
    def test_parse_any_case(self, token: str, expected: Algorithm) -> None:
        assert Algorithm.parse(token) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(InputParseError, match="expected one of"):
            Algorithm.parse("XYZ")

    def test_line_and_circle_split(self) -> None:
        lines = {a for a in Algorithm if a.is_line}
        circles = {a for a in Algorithm if a.is_circle}
        assert lines == {
            Algorithm.BASIC_INCREMENTAL_LINE,
            Algorithm.DDA_LINE,
            Algorithm.BRESENHAM_LINE,
        }
        assert circles == {Algorithm.MIDPOINT_CIRCLE, Algorithm.BRESENHAM_CIRCLE}

    def test_every_algorithm_has_label(self) -> None:
        assert all(a.label for a in Algorithm)


class TestKernelInputs:
    """Tests for LineInput and CircleInput."""

    def test_line_input_deltas(self) -> None:
        line = LineInput(1.0, 2.0, 6.0, 4.0)
        assert line.dx == 5.0
        assert line.dy == 2.0
        assert line.to_tuple() == (1.0, 2.0, 6.0, 4.0)

    def test_circle_input_valid(self) -> None:
        circle = CircleInput(0.0, 0.0, 3.0)
        assert circle.to_tuple() == (0.0, 0.0, 3.0)

    def test_circle_zero_radius(self) -> None:
        assert CircleInput(1.0, 1.0, 0.0).r == 0.0

    def test_circle_negative_radius(self) -> None:
        with pytest.raises(DomainError, match="radius"):
            CircleInput(0.0, 0.0, -1.0)

    def test_circle_fractional_radius(self) -> None:
        with pytest.raises(DomainError, match="integer"):
            CircleInput(0.0, 0.0, 2.5)

    def test_circle_fractional_center(self) -> None:
        with pytest.raises(DomainError, match="center x"):
            CircleInput(0.5, 0.0, 2.0)

    def test_domain_error_attributes(self) -> None:
        with pytest.raises(DomainError) as exc_info:
            CircleInput(0.0, 0.0, -4.0)
        assert exc_info.value.parameter == "radius"
        assert exc_info.value.value == -4.0
