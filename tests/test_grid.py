import pytest

from hexgrids import HexGrid
from hexgrids.hexagonal import Cube, CubeDirection


def test_store_and_lookup_by_equal_location():
    grid: HexGrid[str] = HexGrid()
    grid[Cube(1, -1, 0)] = "forest"
    grid[Cube(-1, 1, 0)] = "water"
    assert grid[Cube(1, -1, 0)] == "forest"
    assert grid[Cube(-1, 1, 0)] == "water"
    assert len(grid) == 2


def test_rejects_non_cube_keys():
    grid: HexGrid[int] = HexGrid()
    with pytest.raises(TypeError):
        grid[(1, -1, 0)] = 3  # type: ignore[index]


def test_filled_and_neighbors_of():
    center = Cube(0, 0, 0)
    grid = HexGrid.filled(center.spiral(1), lambda c: c.distance(center))
    assert len(grid) == 7
    assert grid[center] == 0
    assert grid.neighbors_of(center) == [center.neighbor(d) for d in CubeDirection]

    edge = center.neighbor(CubeDirection.D30)
    assert len(grid.neighbors_of(edge)) == 3


def test_mapping_protocol():
    grid = HexGrid([(Cube(0, 0, 0), "a"), (Cube(1, 0, -1), "b")])
    del grid[Cube(0, 0, 0)]
    assert Cube(0, 0, 0) not in grid
    assert list(grid) == [Cube(1, 0, -1)]
    assert grid.get(Cube(5, -5, 0)) is None
