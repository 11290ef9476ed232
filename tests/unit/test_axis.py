"""Tests for axis projection and validation."""

import pytest

from bresenham_zip.core.axis import Axis, accepted_axes, project, validate_axis
from bresenham_zip.core.error_handling import InvalidAxisError


class TestAxis:
    """Test the Axis enum."""

    def test_indices(self):
        assert Axis.X.index == 0
        assert Axis.Y.index == 1
        assert Axis.Z.index == 2

    def test_from_string(self):
        assert Axis.from_string("x") is Axis.X
        assert Axis.from_string("Y") is Axis.Y
        assert Axis.from_string(" z ") is Axis.Z

    def test_from_string_unknown(self):
        with pytest.raises(ValueError, match="Unknown axis name: w"):
            Axis.from_string("w")


class TestProject:
    """Test coordinate projection."""

    def test_2d(self):
        assert project((3, 7), Axis.X) == 3
        assert project((3, 7), Axis.Y) == 7

    def test_3d(self):
        point = (3, 7, -2)
        assert project(point, Axis.X) == 3
        assert project(point, Axis.Y) == 7
        assert project(point, Axis.Z) == -2

    def test_not_an_axis(self):
        with pytest.raises(TypeError):
            project((1, 2), 0)


class TestValidateAxis:
    """Test axis legality per dimension."""

    def test_accepted_axes(self):
        assert accepted_axes(2) == (Axis.X, Axis.Y)
        assert accepted_axes(3) == (Axis.X, Axis.Y, Axis.Z)

    def test_unsupported_dimension(self):
        with pytest.raises(ValueError):
            accepted_axes(4)

    @pytest.mark.parametrize("axis", [Axis.X, Axis.Y])
    def test_2d_accepts(self, axis):
        assert validate_axis(axis, 2) is axis

    @pytest.mark.parametrize("axis", [Axis.X, Axis.Y, Axis.Z])
    def test_3d_accepts(self, axis):
        assert validate_axis(axis, 3) is axis

    def test_2d_rejects_z(self):
        with pytest.raises(InvalidAxisError) as exc_info:
            validate_axis(Axis.Z, 2)
        assert exc_info.value.axis is Axis.Z
        assert exc_info.value.dimension == 2

    def test_rejects_strings(self):
        with pytest.raises(InvalidAxisError):
            validate_axis("X", 3)
