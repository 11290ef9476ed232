"""Line and zip generators."""

from .builder import Builder, Builder3d
from .lattice_line import lattice_line
from .shortcuts import zip3d_x, zip3d_y, zip3d_z, zip_x, zip_y
from .zip_iterator import Bresenham3dZip, BresenhamZip

__all__ = [
    "Builder",
    "Builder3d",
    "BresenhamZip",
    "Bresenham3dZip",
    "lattice_line",
    "zip_x",
    "zip_y",
    "zip3d_x",
    "zip3d_y",
    "zip3d_z",
]
