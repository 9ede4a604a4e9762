from __future__ import annotations

from .conversions import axial_to_cube
from .coords import Axial, Cube


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return max(abs(a.q - b.q), abs(a.r - b.r), abs(a.s - b.s))


def hex_distance_axial(a: Axial, b: Axial) -> int:
    return hex_distance_cube(axial_to_cube(a), axial_to_cube(b))
