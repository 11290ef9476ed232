"""Axis definitions and coordinate projection for 2D and 3D points."""

from enum import Enum
from typing import Sequence, Tuple

from .constants import Dimensions, ErrorMessages
from .error_handling import InvalidAxisError, InvalidPointError

# Integer lattice points. Any int-like type supporting subtraction, abs()
# and ordering works; plain ``int`` is the common case.
Point2 = Tuple[int, int]
Point3 = Tuple[int, int, int]


class Axis(Enum):
    """Coordinate axis along which both lines of a zip share their end value."""

    X = 0
    Y = 1
    Z = 2

    @property
    def index(self) -> int:
        """Position of this axis' coordinate inside a point tuple."""
        return self.value

    @classmethod
    def from_string(cls, name: str) -> "Axis":
        """Convert a case-insensitive axis name ("x", "Y", ...) to an Axis.

        Raises:
            ValueError: If the name is not an axis
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                ErrorMessages.UNKNOWN_AXIS_NAME.format(
                    name=name, valid=", ".join(a.name for a in cls)
                )
            )


ACCEPTED_AXES = {
    Dimensions.PLANE: (Axis.X, Axis.Y),
    Dimensions.SPACE: (Axis.X, Axis.Y, Axis.Z),
}


def accepted_axes(dimension: int) -> Tuple[Axis, ...]:
    """Get the axes a zip of the given dimension accepts."""
    try:
        return ACCEPTED_AXES[dimension]
    except KeyError:
        raise ValueError(ErrorMessages.UNSUPPORTED_DIMENSION.format(dimension=dimension))


def validate_axis(axis: Axis, dimension: int) -> Axis:
    """Check that ``axis`` can be used with points of ``dimension`` coordinates.

    Args:
        axis: Axis to validate
        dimension: 2 or 3

    Returns:
        The axis itself, for chaining

    Raises:
        InvalidAxisError: If the axis is not legal for the dimension
    """
    accepted = accepted_axes(dimension)
    if not isinstance(axis, Axis) or axis not in accepted:
        raise InvalidAxisError(axis, dimension, accepted)
    return axis


def project(point: Sequence[int], axis: Axis) -> int:
    """Get the coordinate of ``point`` along ``axis``."""
    if axis is Axis.X:
        return point[0]
    if axis is Axis.Y:
        return point[1]
    if axis is Axis.Z:
        return point[2]
    raise TypeError(f"Not an axis: {axis!r}")


def validate_point(point: Sequence[int], dimension: int, name: str) -> tuple:
    """Check that ``point`` has exactly ``dimension`` coordinates.

    Returns:
        The point as a tuple

    Raises:
        InvalidPointError: If the number of coordinates is wrong
    """
    point = tuple(point)
    if len(point) != dimension:
        raise InvalidPointError(name, point, dimension)
    return point
