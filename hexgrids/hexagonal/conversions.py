from __future__ import annotations

from ..cartesian import CartesianPoint
from .coords import Axial, Cube
from .layout import Layout
from .rounding import cube_round


def axial_to_cube(a: Axial) -> Cube:
    # r and s are swapped relative to the usual s = -q - r form; the
    # direction units are defined against this mapping.
    q = a.q
    r = -a.q - a.r
    s = a.r
    return Cube(q, r, s)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.q, c.s)


def axial_to_pixel(a: Axial, layout: Layout) -> CartesianPoint:
    return layout.hex_to_pixel(a.q, a.r)


def cube_to_pixel(c: Cube, layout: Layout) -> CartesianPoint:
    return layout.hex_to_pixel(c.q, c.r)


def pixel_to_cube(point: CartesianPoint, layout: Layout) -> Cube:
    q, r, s = layout.pixel_to_hex_fractional(point)
    return cube_round(q, r, s)
