import pytest

from hexgrids.hexagonal import ALL_DIRECTIONS, ORIGIN, Cube, CubeDirection


def test_canonical_order():
    assert [d.angle for d in ALL_DIRECTIONS] == [30, 330, 270, 210, 150, 90]
    assert [d.unit for d in ALL_DIRECTIONS] == [
        Cube(1, -1, 0),
        Cube(1, 0, -1),
        Cube(0, 1, -1),
        Cube(-1, 1, 0),
        Cube(-1, 0, 1),
        Cube(0, -1, 1),
    ]


def test_consecutive_directions_are_adjacent():
    units = [d.unit for d in ALL_DIRECTIONS]
    for a, b in zip(units, units[1:] + units[:1]):
        assert a.distance(b) == 1


def test_opposite_directions_cancel():
    for d in ALL_DIRECTIONS:
        opposite = CubeDirection.from_angle(d.angle + 180)
        assert d.unit + opposite.unit == ORIGIN


@pytest.mark.parametrize(
    ("degrees", "expected"),
    [(30, CubeDirection.D30), (90, CubeDirection.D90), (330, CubeDirection.D330), (-30, CubeDirection.D330)],
)
def test_from_angle(degrees: int, expected: CubeDirection):
    assert CubeDirection.from_angle(degrees) is expected


def test_from_angle_rejects_unknown_angle():
    with pytest.raises(ValueError):
        CubeDirection.from_angle(45)
