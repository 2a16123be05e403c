"""Coordinate algebra for hexagonal grids."""

from .config import HexGridSettings
from .conversions import (
    axial_to_cube,
    axial_to_offset,
    cube_to_axial,
    cube_to_offset,
    offset_to_axial,
    offset_to_cube,
)
from .coords import (
    Axial,
    Cube,
    FractionalCube,
    Offset,
    Point,
    axial_add,
    axial_negate,
    axial_subtract,
    cube_add,
    cube_negate,
    cube_subtract,
    offset_add,
)
from .distance import axial_distance, cube_distance, offset_distance
from .errors import CubeInvariantError, HexGridError, InvalidDirection
from .lines import axial_linedraw, cube_lerp, cube_linedraw, cube_round, iter_cube_line
from .neighbors import (
    axial_direction,
    axial_neighbor,
    cube_direction,
    cube_neighbor,
    hex_direction,
    hex_neighbor,
    neighbors_axial,
    neighbors_cube,
    neighbors_offset,
    normalize_direction,
    offset_direction,
    offset_neighbor,
)
from .projection import hex_corner, hex_corners
from .rotation import cube_rotate, cube_rotate_about
from .unit import Unit, unit_neighbor, unit_rotate, unit_translate

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "Cube",
    "CubeInvariantError",
    "FractionalCube",
    "HexGridError",
    "HexGridSettings",
    "InvalidDirection",
    "Offset",
    "Point",
    "Unit",
    "axial_add",
    "axial_direction",
    "axial_distance",
    "axial_linedraw",
    "axial_negate",
    "axial_neighbor",
    "axial_subtract",
    "axial_to_cube",
    "axial_to_offset",
    "cube_add",
    "cube_direction",
    "cube_distance",
    "cube_lerp",
    "cube_linedraw",
    "cube_negate",
    "cube_neighbor",
    "cube_rotate",
    "cube_rotate_about",
    "cube_round",
    "cube_subtract",
    "cube_to_axial",
    "cube_to_offset",
    "hex_corner",
    "hex_corners",
    "hex_direction",
    "hex_neighbor",
    "iter_cube_line",
    "neighbors_axial",
    "neighbors_cube",
    "neighbors_offset",
    "normalize_direction",
    "offset_add",
    "offset_direction",
    "offset_distance",
    "offset_neighbor",
    "offset_to_axial",
    "offset_to_cube",
    "unit_neighbor",
    "unit_rotate",
    "unit_translate",
]
