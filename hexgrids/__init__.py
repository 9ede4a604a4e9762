"""Coordinate geometry for hexagonal tile grids."""

from .cartesian import CartesianPoint, CartesianSize
from .config import LayoutSettings, OrientationName
from .errors import CubeInvariantError
from .grid import HexGrid
from .hexagonal import FLAT_TOP, ORIGIN, POINTY_TOP, Axial, Cube, CubeDirection, Layout, Orientation

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "CartesianPoint",
    "CartesianSize",
    "Cube",
    "CubeDirection",
    "CubeInvariantError",
    "FLAT_TOP",
    "HexGrid",
    "Layout",
    "LayoutSettings",
    "ORIGIN",
    "Orientation",
    "OrientationName",
    "POINTY_TOP",
    "__version__",
]
