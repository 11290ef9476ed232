"""Iterators walking two lattice lines of a triangle in lockstep.

Both lines start at the same point and end at points sharing the value of the
chosen axis. Each iteration yields one point of each line, both with the same
coordinate along that axis, which makes every pair the two ends of a scan line
(2D) or of a layer edge (3D).
"""

import logging
from typing import Iterator, Optional, Sequence, Tuple

from ..core.axis import Axis, Point2, Point3, project, validate_axis, validate_point
from ..core.constants import Dimensions, LogMessages, PointNames
from ..core.error_handling import InvalidCoordinateError
from .lattice_line import lattice_line

logger = logging.getLogger(__name__)


class _LockstepZip:
    """Shared engine of the 2D and 3D zips."""

    DIMENSION: int = 0

    def __init__(
        self,
        start: Sequence[int],
        end_a: Sequence[int],
        end_b: Sequence[int],
        axis: Axis,
    ) -> None:
        """Validate the ending points and prepare both lines.

        Args:
            start: Point shared by both lines
            end_a: Ending point of the first line
            end_b: Ending point of the second line
            axis: Axis both ending points share

        Raises:
            InvalidAxisError: If the axis is not accepted for this dimension
            InvalidPointError: If a point has the wrong number of coordinates
            InvalidCoordinateError: If the ending points differ along the axis
        """
        self._retained_a = None
        self._retained_b = None
        self._goal = None
        self._exhausted = True

        self._axis = validate_axis(axis, self.DIMENSION)

        start = validate_point(start, self.DIMENSION, PointNames.START)
        end_a = validate_point(end_a, self.DIMENSION, PointNames.FIRST_END)
        end_b = validate_point(end_b, self.DIMENSION, PointNames.SECOND_END)

        left = project(end_a, axis)
        right = project(end_b, axis)
        if left != right:
            raise InvalidCoordinateError(axis.name, left, right)

        self._line_a = lattice_line(start, end_a)
        self._line_b = lattice_line(start, end_b)
        self._retained_a = start
        self._retained_b = start
        self._goal = left
        self._exhausted = False

        logger.debug(
            LogMessages.ZIP_CREATED.format(
                name=type(self).__name__,
                start=start,
                end_a=end_a,
                end_b=end_b,
                axis=axis.name,
            )
        )

    @property
    def axis(self) -> Axis:
        """Axis shared by every emitted pair."""
        return self._axis

    @property
    def goal(self) -> int:
        """Axis value still to be reached; drops by one after the last pair."""
        return self._goal

    def __iter__(self) -> "_LockstepZip":
        return self

    def __next__(self) -> Tuple[tuple, tuple]:
        if self._exhausted:
            raise StopIteration

        a_candidate, self._retained_a = self._advance(self._line_a, self._retained_a)
        b_candidate, self._retained_b = self._advance(self._line_b, self._retained_b)

        if a_candidate is not None and b_candidate is not None:
            return a_candidate, b_candidate

        if (
            a_candidate is None
            and b_candidate is None
            and project(self._retained_a, self._axis) == self._goal
        ):
            pair = (self._retained_a, self._retained_b)
            logger.debug(LogMessages.TERMINAL_PAIR.format(pair=pair, goal=self._goal))
            self._goal -= 1
            return pair

        self._exhausted = True
        logger.debug(LogMessages.ZIP_EXHAUSTED.format(name=type(self).__name__))
        raise StopIteration

    def _advance(
        self, line: Iterator[tuple], retained: tuple
    ) -> Tuple[Optional[tuple], tuple]:
        """Pull points until the axis coordinate changes.

        Returns:
            Tuple of (candidate, new retained point). The candidate is the
            last point before the change, or None if the line ran out first.
        """
        current = project(retained, self._axis)
        for point in line:
            if abs(project(point, self._axis) - current) > 0:
                return retained, point
            retained = point
        return None, retained

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__} [ {self._retained_a}, {self._retained_b} ]. "
            f"Goal: {self._goal}"
        )


class BresenhamZip(_LockstepZip):
    """Zip over two 2D lines sharing their start and their X or Y end value.

    Example:
        >>> for left, right in BresenhamZip((50, 50), (0, 100), (250, 100), Axis.Y):
        ...     assert left[1] == right[1]
    """

    DIMENSION = Dimensions.PLANE

    def __init__(self, start: Point2, end_a: Point2, end_b: Point2, axis: Axis) -> None:
        super().__init__(start, end_a, end_b, axis)


class Bresenham3dZip(_LockstepZip):
    """Zip over two 3D lines sharing their start and their X, Y or Z end value."""

    DIMENSION = Dimensions.SPACE

    def __init__(self, start: Point3, end_a: Point3, end_b: Point3, axis: Axis) -> None:
        super().__init__(start, end_a, end_b, axis)
