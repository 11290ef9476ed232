"""Fluent builders for 2D and 3D zips."""

import logging
from typing import Generic, Optional, Tuple, Type, TypeVar

from ..core.axis import Axis, Point2, Point3, project, validate_axis, validate_point
from ..core.constants import Dimensions, PointNames
from ..core.error_handling import (
    InvalidCoordinateError,
    MissingAxisError,
    MissingPointError,
)
from .zip_iterator import Bresenham3dZip, BresenhamZip, _LockstepZip

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=tuple)
Z = TypeVar("Z", bound=_LockstepZip)


class _ZipBuilder(Generic[P, Z]):
    """Accumulates the axis and the three points of a zip.

    Setters can be called in any order and any number of times; the last
    value wins. Validation happens in ``build()``, except for the axis which
    is checked as soon as it is set.
    """

    DIMENSION: int = 0
    ZIP_CLASS: Type[_LockstepZip] = _LockstepZip

    def __init__(self) -> None:
        self._axis: Optional[Axis] = None
        self._start: Optional[P] = None
        self._end_a: Optional[P] = None
        self._end_b: Optional[P] = None

    def axis(self, axis: Axis) -> "_ZipBuilder[P, Z]":
        """Specify the axis both ending points share.

        Every pair returned by the built zip will have the same value along
        this axis.

        Raises:
            InvalidAxisError: If the axis is not accepted for this dimension
        """
        self._axis = validate_axis(axis, self.DIMENSION)
        return self

    def start_point(self, start: P) -> "_ZipBuilder[P, Z]":
        """Specify the starting point shared by both lines."""
        self._start = tuple(start)
        return self

    def first_ending_point(self, end: P) -> "_ZipBuilder[P, Z]":
        """Specify the ending point of the first line."""
        self._end_a = tuple(end)
        return self

    def second_ending_point(self, end: P) -> "_ZipBuilder[P, Z]":
        """Specify the ending point of the second line."""
        self._end_b = tuple(end)
        return self

    def build(self) -> Z:
        """Build a zip from the current configuration.

        The builder is left untouched, so it can be reconfigured and built
        again; every call returns a fresh, independent zip.

        Raises:
            MissingAxisError: If no axis was specified
            MissingPointError: For the first missing point, in the order
                starting point, first ending point, second ending point
            InvalidPointError: If a point has the wrong number of coordinates
            InvalidCoordinateError: If the ending points differ along the axis
        """
        if self._axis is None:
            raise MissingAxisError()

        start, end_a, end_b = self._require_points()

        left = project(end_a, self._axis)
        right = project(end_b, self._axis)
        if left != right:
            raise InvalidCoordinateError(self._axis.name, left, right)

        return self.ZIP_CLASS(start, end_a, end_b, self._axis)

    def _require_points(self) -> Tuple[P, P, P]:
        named_points = (
            (self._start, PointNames.START),
            (self._end_a, PointNames.FIRST_END),
            (self._end_b, PointNames.SECOND_END),
        )
        for value, name in named_points:
            if value is None:
                raise MissingPointError(name)
        return tuple(
            validate_point(value, self.DIMENSION, name) for value, name in named_points
        )

    def __repr__(self) -> str:
        axis = self._axis.name if self._axis is not None else None
        return (
            f"{type(self).__name__}(axis={axis}, start={self._start}, "
            f"end_a={self._end_a}, end_b={self._end_b})"
        )


class Builder(_ZipBuilder[Point2, BresenhamZip]):
    """Builder of 2D :class:`BresenhamZip` iterators.

    Only the X and Y axes are accepted.

    Example:
        >>> zip_ = (
        ...     Builder()
        ...     .axis(Axis.Y)
        ...     .start_point((50, 50))
        ...     .first_ending_point((0, 100))
        ...     .second_ending_point((100, 100))
        ...     .build()
        ... )
    """

    DIMENSION = Dimensions.PLANE
    ZIP_CLASS = BresenhamZip


class Builder3d(_ZipBuilder[Point3, Bresenham3dZip]):
    """Builder of 3D :class:`Bresenham3dZip` iterators."""

    DIMENSION = Dimensions.SPACE
    ZIP_CLASS = Bresenham3dZip
