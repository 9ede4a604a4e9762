from hexgrids.hexagonal import ALL_DIRECTIONS, ORIGIN, Axial, Cube
from hexgrids.hexagonal import hex_distance_axial, hex_distance_cube


def test_hex_distance_axial():
    a = Axial(0, 0)
    b = Axial(2, -1)
    assert hex_distance_axial(a, b) == 2


def test_hex_distance_cube():
    a = ORIGIN
    b = Cube(1, -2, 1)
    assert hex_distance_cube(a, b) == 2
    assert a.distance(b) == 2


def test_distance_to_self_is_zero():
    p = Cube(3, -5, 2)
    assert p.distance(p) == 0


def test_distance_is_symmetric():
    p = Cube(3, -5, 2)
    q = Cube(-4, 1, 3)
    assert p.distance(q) == q.distance(p) == 7


def test_every_neighbor_is_one_step_away():
    origin = ORIGIN
    for d in ALL_DIRECTIONS:
        assert origin.distance(origin.neighbor(d)) == 1
