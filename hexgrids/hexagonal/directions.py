from __future__ import annotations

from enum import Enum

from .coords import Cube


class CubeDirection(Enum):
    """The six unit steps between adjacent cells, named by their angle.

    Definition order is the traversal order used by rings: walking the members
    in order, starting from the ``D150`` vertex, goes once around a ring.
    """

    D30 = (+1, -1, 0)
    D330 = (+1, 0, -1)
    D270 = (0, +1, -1)
    D210 = (-1, +1, 0)
    D150 = (-1, 0, +1)
    D90 = (0, -1, +1)

    @property
    def unit(self) -> Cube:
        return Cube(*self.value)

    @property
    def angle(self) -> int:
        return int(self.name[1:])

    @classmethod
    def from_angle(cls, degrees: int) -> CubeDirection:
        try:
            return cls[f"D{int(degrees) % 360}"]
        except KeyError:
            raise ValueError(f"No hex direction at {degrees} degrees") from None


ALL_DIRECTIONS: tuple[CubeDirection, ...] = tuple(CubeDirection)
