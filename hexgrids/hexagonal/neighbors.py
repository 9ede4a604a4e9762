from __future__ import annotations

from typing import Iterable

from .conversions import axial_to_cube, cube_to_axial
from .coords import Axial, Cube
from .directions import CubeDirection


def neighbor(c: Cube, direction: CubeDirection) -> Cube:
    return c + direction.unit


def neighbors_cube(c: Cube) -> Iterable[Cube]:
    for d in CubeDirection:
        yield c + d.unit


def neighbors_axial(a: Axial) -> Iterable[Axial]:
    center = axial_to_cube(a)
    for n in neighbors_cube(center):
        yield cube_to_axial(n)


def ring(center: Cube, radius: int) -> list[Cube]:
    """Cells at exactly ``radius`` steps from ``center``, in traversal order.

    The walk starts at ``center + D150 * radius`` and takes ``radius`` steps
    along each direction in :class:`CubeDirection` order, recording each cell
    before stepping off it. The result has ``6 * radius`` cells (one for
    ``radius == 0``).
    """
    if radius < 0:
        raise ValueError("radius must be non-negative")
    if radius == 0:
        return [center]

    results: list[Cube] = []
    point = center + CubeDirection.D150.unit * radius
    for d in CubeDirection:
        for _ in range(radius):
            results.append(point)
            point = point + d.unit
    return results


def spiral(center: Cube, radius: int) -> list[Cube]:
    """Rings 0 through ``radius`` concatenated, innermost first."""
    if radius < 0:
        raise ValueError("radius must be non-negative")
    results: list[Cube] = []
    for k in range(radius + 1):
        results.extend(ring(center, k))
    return results
