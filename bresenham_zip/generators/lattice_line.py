"""Lazy integer line rasterization in any number of dimensions."""

from typing import Iterator, Sequence, Tuple

from ..core.constants import ErrorMessages


def lattice_line(start: Sequence[int], end: Sequence[int]) -> Iterator[Tuple[int, ...]]:
    """Generate the lattice points of the segment from ``start`` to ``end``.

    Both end points are included. The coordinate with the largest absolute
    delta drives the walk and advances by one unit every step; every other
    coordinate moves by at most one unit per step, always toward its end
    value, following the Bresenham error term.

    Args:
        start: Starting point (integer coordinates)
        end: Ending point, same dimension as ``start``

    Yields:
        Points as tuples, from ``start`` to ``end``

    Raises:
        ValueError: If the two points have different dimensions

    Example:
        >>> list(lattice_line((0, 0, 0), (3, 2, 1)))
        [(0, 0, 0), (1, 1, 0), (2, 1, 1), (3, 2, 1)]
    """
    if len(start) != len(end):
        raise ValueError(
            ErrorMessages.DIMENSION_MISMATCH.format(left=len(start), right=len(end))
        )
    return _walk(tuple(start), tuple(end))


def _walk(start: Tuple[int, ...], end: Tuple[int, ...]) -> Iterator[Tuple[int, ...]]:
    ndim = len(start)
    current = list(start)
    steps = [_sign(e - s) for s, e in zip(start, end)]
    deltas = [abs(e - s) for s, e in zip(start, end)]

    driving_axis = max(range(ndim), key=lambda i: deltas[i]) if ndim else 0
    main_delta = deltas[driving_axis] if ndim else 0

    # errors[i] tracks axis i relative to the driving axis
    errors = [2 * d - main_delta for d in deltas]

    yield tuple(current)

    for _ in range(main_delta):
        current[driving_axis] += steps[driving_axis]
        for i in range(ndim):
            if i == driving_axis:
                continue
            if errors[i] > 0:
                current[i] += steps[i]
                errors[i] -= 2 * main_delta
            errors[i] += 2 * deltas[i]
        yield tuple(current)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)
