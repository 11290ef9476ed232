"""One-call constructors for zips along a fixed axis."""

from ..core.axis import Axis, Point2, Point3
from .zip_iterator import Bresenham3dZip, BresenhamZip


def zip_x(start: Point2, end_a: Point2, end_b: Point2) -> BresenhamZip:
    """2D zip whose pairs share their X; both ending points must share X."""
    return BresenhamZip(start, end_a, end_b, Axis.X)


def zip_y(start: Point2, end_a: Point2, end_b: Point2) -> BresenhamZip:
    """2D zip whose pairs share their Y; both ending points must share Y."""
    return BresenhamZip(start, end_a, end_b, Axis.Y)


def zip3d_x(start: Point3, end_a: Point3, end_b: Point3) -> Bresenham3dZip:
    return Bresenham3dZip(start, end_a, end_b, Axis.X)


def zip3d_y(start: Point3, end_a: Point3, end_b: Point3) -> Bresenham3dZip:
    return Bresenham3dZip(start, end_a, end_b, Axis.Y)


def zip3d_z(start: Point3, end_a: Point3, end_b: Point3) -> Bresenham3dZip:
    return Bresenham3dZip(start, end_a, end_b, Axis.Z)
