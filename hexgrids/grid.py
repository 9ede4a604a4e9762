"""Storage of per-cell payloads keyed by cube coordinate."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, MutableMapping, TypeVar

from .hexagonal.coords import Cube
from .hexagonal.neighbors import neighbors_cube

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HexGrid(MutableMapping[Cube, T]):
    """Mapping from :class:`Cube` locations to cell payloads.

    The grid has no notion of shape; it stores whatever locations are assigned.
    """

    def __init__(self, cells: Iterable[tuple[Cube, T]] | None = None) -> None:
        self._cells: dict[Cube, T] = {}
        if cells is not None:
            for location, cell in cells:
                self[location] = cell

    @classmethod
    def filled(cls, locations: Iterable[Cube], factory: Callable[[Cube], T]) -> HexGrid[T]:
        """Build a grid holding ``factory(location)`` for every location."""

        grid: HexGrid[T] = cls()
        for location in locations:
            grid[location] = factory(location)
        logger.debug("Filled hex grid with %d cells", len(grid))
        return grid

    def __getitem__(self, location: Cube) -> T:
        return self._cells[location]

    def __setitem__(self, location: Cube, cell: T) -> None:
        if not isinstance(location, Cube):
            raise TypeError(f"HexGrid keys must be Cube, not {type(location).__name__}")
        self._cells[location] = cell

    def __delitem__(self, location: Cube) -> None:
        del self._cells[location]

    def __iter__(self) -> Iterator[Cube]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._cells)} cells)"

    def neighbors_of(self, location: Cube) -> list[Cube]:
        """Stored neighbours of ``location`` in direction order."""

        return [n for n in neighbors_cube(location) if n in self._cells]
