"""bresenham_zip - Walk two lattice lines of a triangle in lockstep for rasterization."""

__version__ = "1.0.0"

from bresenham_zip.core.axis import Axis, Point2, Point3, project, validate_axis
from bresenham_zip.core.error_handling import (
    BresenhamZipError,
    ConfigurationError,
    InvalidAxisError,
    InvalidCoordinateError,
    InvalidPointError,
    MissingAxisError,
    MissingPointError,
    ValidationError,
)
from bresenham_zip.generators import (
    Bresenham3dZip,
    BresenhamZip,
    Builder,
    Builder3d,
    lattice_line,
    zip3d_x,
    zip3d_y,
    zip3d_z,
    zip_x,
    zip_y,
)

__all__ = [
    "Axis",
    "Point2",
    "Point3",
    "project",
    "validate_axis",
    "BresenhamZip",
    "Bresenham3dZip",
    "Builder",
    "Builder3d",
    "lattice_line",
    "zip_x",
    "zip_y",
    "zip3d_x",
    "zip3d_y",
    "zip3d_z",
    "BresenhamZipError",
    "ValidationError",
    "ConfigurationError",
    "InvalidAxisError",
    "InvalidCoordinateError",
    "InvalidPointError",
    "MissingAxisError",
    "MissingPointError",
]
