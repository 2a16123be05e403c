from __future__ import annotations

from .conversions import axial_to_cube, offset_to_cube
from .coords import Axial, Cube, Offset, cube_subtract


def cube_distance(a: Cube, b: Cube) -> int:
    d = cube_subtract(a, b)
    total = abs(d.x) + abs(d.y) + abs(d.z)
    # A sum-zero difference always has an even absolute sum.
    assert total % 2 == 0, total
    return total // 2


def axial_distance(a: Axial, b: Axial) -> int:
    return cube_distance(axial_to_cube(a), axial_to_cube(b))


def offset_distance(a: Offset, b: Offset) -> int:
    return cube_distance(offset_to_cube(a), offset_to_cube(b))


__all__ = ["axial_distance", "cube_distance", "offset_distance"]
