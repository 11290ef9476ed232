"""Property-based tests using Hypothesis for robust validation."""

import pytest
from hypothesis import assume, given, settings, strategies as st

from bresenham_zip.core.axis import Axis, project
from bresenham_zip.core.error_handling import InvalidCoordinateError
from bresenham_zip.generators.builder import Builder, Builder3d
from bresenham_zip.generators.lattice_line import lattice_line
from bresenham_zip.generators.zip_iterator import Bresenham3dZip, BresenhamZip

coordinates = st.integers(min_value=-60, max_value=60)


def with_axis_value(point, axis, value):
    point = list(point)
    point[axis.index] = value
    return tuple(point)


@st.composite
def triangles(draw, dimension):
    """Start point, two ending points sharing the axis value, and the axis."""
    axes = [Axis.X, Axis.Y] if dimension == 2 else [Axis.X, Axis.Y, Axis.Z]
    axis = draw(st.sampled_from(axes))
    start = tuple(draw(st.lists(coordinates, min_size=dimension, max_size=dimension)))
    goal = draw(coordinates)
    end_a = with_axis_value(
        draw(st.lists(coordinates, min_size=dimension, max_size=dimension)), axis, goal
    )
    end_b = with_axis_value(
        draw(st.lists(coordinates, min_size=dimension, max_size=dimension)), axis, goal
    )
    return start, end_a, end_b, axis


def check_zip(zip_class, start, end_a, end_b, axis):
    pairs = list(zip_class(start, end_a, end_b, axis))
    goal = project(end_a, axis)
    origin = project(start, axis)

    # Every pair shares the axis value
    for a, b in pairs:
        assert project(a, axis) == project(b, axis)

    # One pair per axis value, walking from the start to the goal
    step = 1 if goal >= origin else -1
    assert [project(a, axis) for a, _ in pairs] == list(
        range(origin, goal + step, step)
    )

    # The goal appears exactly once, in the terminal pair at both ends
    assert sum(1 for a, _ in pairs if project(a, axis) == goal) == 1
    assert pairs[-1] == (end_a, end_b)

    # Each side stays on its own line
    line_a = set(lattice_line(start, end_a))
    line_b = set(lattice_line(start, end_b))
    for a, b in pairs:
        assert a in line_a
        assert b in line_b

    return pairs


class TestZipProperties:
    """Invariants of the 2D and 3D zips."""

    @given(triangles(2))
    @settings(max_examples=200)
    def test_2d_invariants(self, triangle):
        check_zip(BresenhamZip, *triangle)

    @given(triangles(3))
    @settings(max_examples=200)
    def test_3d_invariants(self, triangle):
        check_zip(Bresenham3dZip, *triangle)

    @given(triangles(2))
    def test_non_axis_coordinates_are_monotonic(self, triangle):
        """Each side moves toward its own end point, never past it."""
        start, end_a, end_b, axis = triangle
        pairs = list(BresenhamZip(start, end_a, end_b, axis))

        for side, end in ((0, end_a), (1, end_b)):
            for dim in range(2):
                values = [pair[side][dim] for pair in pairs]
                low, high = sorted((start[dim], end[dim]))
                assert all(low <= v <= high for v in values)
                if end[dim] >= start[dim]:
                    assert values == sorted(values)
                else:
                    assert values == sorted(values, reverse=True)

    @given(triangles(3))
    def test_retained_points_agree_at_terminal_pair(self, triangle):
        """At terminal emission both retained points sit on the goal."""
        start, end_a, end_b, axis = triangle
        zip_ = Bresenham3dZip(start, end_a, end_b, axis)
        goal = zip_.goal

        for pair in zip_:
            if zip_.goal != goal:
                a, b = pair
                assert project(a, axis) == project(b, axis) == goal
                break
        else:
            pytest.fail("terminal pair never emitted")

        assert list(zip_) == []

    @given(triangles(2), coordinates)
    def test_mismatched_ends_rejected(self, triangle, offset):
        start, end_a, end_b, axis = triangle
        assume(offset != 0)
        end_b = with_axis_value(end_b, axis, project(end_b, axis) + offset)

        with pytest.raises(InvalidCoordinateError) as exc_info:
            BresenhamZip(start, end_a, end_b, axis)

        assert exc_info.value.axis_name == axis.name
        assert exc_info.value.left == project(end_a, axis)
        assert exc_info.value.right == project(end_b, axis)


class TestBuilderProperties:
    """The builder produces the same zips as direct construction."""

    @given(triangles(2))
    def test_2d_builder_matches_constructor(self, triangle):
        start, end_a, end_b, axis = triangle
        builder = (
            Builder()
            .axis(axis)
            .start_point(start)
            .first_ending_point(end_a)
            .second_ending_point(end_b)
        )
        expected = list(BresenhamZip(start, end_a, end_b, axis))

        assert list(builder.build()) == expected
        assert list(builder.build()) == expected

    @given(triangles(3))
    def test_3d_builder_matches_constructor(self, triangle):
        start, end_a, end_b, axis = triangle
        built = (
            Builder3d()
            .second_ending_point(end_b)
            .first_ending_point(end_a)
            .start_point(start)
            .axis(axis)
            .build()
        )
        assert list(built) == list(Bresenham3dZip(start, end_a, end_b, axis))


class TestLatticeLineProperties:
    """Invariants of the line primitive."""

    @given(
        st.lists(coordinates, min_size=1, max_size=4).flatmap(
            lambda start: st.tuples(
                st.just(tuple(start)),
                st.lists(coordinates, min_size=len(start), max_size=len(start)).map(tuple),
            )
        )
    )
    def test_line_invariants(self, points):
        start, end = points
        line = list(lattice_line(start, end))

        assert line[0] == start
        assert line[-1] == end
        assert len(line) == max(abs(e - s) for s, e in zip(start, end)) + 1
        for previous, current in zip(line, line[1:]):
            assert all(abs(c - p) <= 1 for p, c in zip(previous, current))
