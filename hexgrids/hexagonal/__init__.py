from .coords import ORIGIN, Axial, Cube
from .directions import ALL_DIRECTIONS, CubeDirection
from .layout import FLAT_TOP, POINTY_TOP, Layout, Orientation
from .conversions import axial_to_cube, axial_to_pixel, cube_to_axial, cube_to_pixel, pixel_to_cube
from .rounding import cube_round, cube_round_array, round_half_away
from .heuristics import hex_distance_axial, hex_distance_cube
from .neighbors import neighbor, neighbors_axial, neighbors_cube, ring, spiral

__all__ = [
    "ORIGIN",
    "Axial",
    "Cube",
    "ALL_DIRECTIONS",
    "CubeDirection",
    "FLAT_TOP",
    "POINTY_TOP",
    "Layout",
    "Orientation",
    "axial_to_cube",
    "axial_to_pixel",
    "cube_to_axial",
    "cube_to_pixel",
    "pixel_to_cube",
    "cube_round",
    "cube_round_array",
    "round_half_away",
    "hex_distance_axial",
    "hex_distance_cube",
    "neighbor",
    "neighbors_axial",
    "neighbors_cube",
    "ring",
    "spiral",
]
