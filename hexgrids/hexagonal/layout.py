from __future__ import annotations

from dataclasses import dataclass
from math import cos, pi, sin, sqrt

import numpy as np

from ..cartesian import CartesianPoint, CartesianSize
from .coords import Cube, cubes_from_tuples
from .rounding import cube_round_array


_SQRT3 = sqrt(3.0)


@dataclass(frozen=True, slots=True)
class Orientation:
    """Coefficients of one 60 degree hex tiling.

    ``f0..f3`` map hex ``(q, r)`` to unit pixel space and ``b0..b3`` are their
    inverse. ``start_angle`` is the angle of the first polygon corner, in
    multiples of 60 degrees.
    """

    f0: float
    f1: float
    f2: float
    f3: float
    b0: float
    b1: float
    b2: float
    b3: float
    start_angle: float


POINTY_TOP = Orientation(
    _SQRT3, _SQRT3 / 2.0, 0.0, 3.0 / 2.0,
    _SQRT3 / 3.0, -1.0 / 3.0, 0.0, 2.0 / 3.0,
    0.5,
)
FLAT_TOP = Orientation(
    3.0 / 2.0, 0.0, _SQRT3 / 2.0, _SQRT3,
    2.0 / 3.0, 0.0, -1.0 / 3.0, _SQRT3 / 3.0,
    0.0,
)


@dataclass(frozen=True, slots=True)
class Layout:
    """Affine mapping between hex coordinates and cartesian space.

    ``size`` holds the per-axis hex half-extent and should be positive; zero or
    negative sizes are not checked and give meaningless results.
    """

    orientation: Orientation
    origin: CartesianPoint
    size: CartesianSize

    def hex_to_pixel(self, q: float, r: float) -> CartesianPoint:
        M = self.orientation
        x = self.origin.x + (M.f0 * q + M.f1 * r) * self.size.width
        y = self.origin.y + (M.f2 * q + M.f3 * r) * self.size.height
        return CartesianPoint(x, y)

    def pixel_to_hex_fractional(self, point: CartesianPoint) -> tuple[float, float, float]:
        M = self.orientation
        px = (point.x - self.origin.x) / self.size.width
        py = (point.y - self.origin.y) / self.size.height
        q = M.b0 * px + M.b1 * py
        r = M.b2 * px + M.b3 * py
        s = -q - r
        return q, r, s

    def pixels_to_cubes(self, xs, ys) -> list[Cube]:
        """Map many cartesian points to cells at once.

        ``xs`` and ``ys`` are array-likes of equal length. Rounding follows
        :func:`~hexgrids.hexagonal.rounding.cube_round` element by element.
        """
        M = self.orientation
        px = (np.asarray(xs, dtype=float) - self.origin.x) / self.size.width
        py = (np.asarray(ys, dtype=float) - self.origin.y) / self.size.height
        q = M.b0 * px + M.b1 * py
        r = M.b2 * px + M.b3 * py
        return cubes_from_tuples(cube_round_array(q, r, -q - r).tolist())

    def corner_offset(self, corner: int) -> CartesianPoint:
        angle = 2.0 * pi * (self.orientation.start_angle + corner) / 6.0
        return CartesianPoint(self.size.width * cos(angle), self.size.height * sin(angle))

    def polygon_corners(self, center: CartesianPoint) -> list[CartesianPoint]:
        corners = []
        for i in range(6):
            offset = self.corner_offset(i)
            corners.append(CartesianPoint(center.x + offset.x, center.y + offset.y))
        return corners
