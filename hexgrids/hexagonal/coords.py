from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from ..errors import CubeInvariantError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..cartesian import CartesianPoint
    from .directions import CubeDirection
    from .layout import Layout


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    def to_cube(self) -> Cube:
        from .conversions import axial_to_cube

        return axial_to_cube(self)

    def cartesian(self, layout: Layout) -> CartesianPoint:
        return layout.hex_to_pixel(self.q, self.r)


@dataclass(frozen=True, slots=True)
class Cube:
    """Cube coordinate; ``q + r + s == 0`` holds for every instance.

    Equality and hashing use the full ``(q, r, s)`` triple.
    """

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise CubeInvariantError(self.q, self.r, self.s)

    # --- construction -------------------------------------------------------

    @classmethod
    def from_fractional(cls, q: float, r: float, s: float) -> Cube:
        from .rounding import cube_round

        return cls._rebuild(cube_round(q, r, s))

    @classmethod
    def from_axial(cls, axial: Axial) -> Cube:
        from .conversions import axial_to_cube

        return cls._rebuild(axial_to_cube(axial))

    @classmethod
    def from_cartesian(cls, point: CartesianPoint, layout: Layout) -> Cube:
        from .conversions import pixel_to_cube

        return cls._rebuild(pixel_to_cube(point, layout))

    @classmethod
    def _rebuild(cls, cube: Cube) -> Cube:
        if type(cube) is cls:
            return cube
        return cls(cube.q, cube.r, cube.s)

    def to_axial(self) -> Axial:
        from .conversions import cube_to_axial

        return cube_to_axial(self)

    def cartesian(self, layout: Layout) -> CartesianPoint:
        return layout.hex_to_pixel(self.q, self.r)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.q, self.r, self.s)

    # --- arithmetic ---------------------------------------------------------

    def add(self, other: Cube) -> Cube:
        return Cube(self.q + other.q, self.r + other.r, self.s + other.s)

    def subtract(self, other: Cube) -> Cube:
        return Cube(self.q - other.q, self.r - other.r, self.s - other.s)

    def scale(self, factor: int) -> Cube:
        return Cube(self.q * factor, self.r * factor, self.s * factor)

    def __add__(self, other: object) -> Cube:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Cube:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: object) -> Cube:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    # --- neighbourhoods -----------------------------------------------------

    def distance(self, other: Cube) -> int:
        from .heuristics import hex_distance_cube

        return hex_distance_cube(self, other)

    def neighbor(self, direction: CubeDirection) -> Cube:
        return self + direction.unit

    def ring(self, radius: int) -> list[Cube]:
        from .neighbors import ring

        return ring(self, radius)

    def spiral(self, radius: int) -> list[Cube]:
        from .neighbors import spiral

        return spiral(self, radius)


ORIGIN = Cube(0, 0, 0)


def cubes_from_tuples(triples: Sequence[Sequence[int]]) -> list[Cube]:
    return [Cube(int(q), int(r), int(s)) for q, r, s in triples]
