from __future__ import annotations

from .coords import Axial, Cube, Offset


def axial_to_cube(a: Axial) -> Cube:
    x = a.q
    z = a.r
    y = -x - z
    return Cube(x, y, z)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.x, c.z)


def cube_to_offset(c: Cube) -> Offset:
    # z - (z & 1) is always even, so floor division is exact for negative rows.
    col = c.x + (c.z - (c.z & 1)) // 2
    row = c.z
    return Offset(col, row)


def offset_to_cube(o: Offset) -> Cube:
    x = o.col - (o.row - (o.row & 1)) // 2
    z = o.row
    y = -x - z
    return Cube(x, y, z)


def axial_to_offset(a: Axial) -> Offset:
    return cube_to_offset(axial_to_cube(a))


def offset_to_axial(o: Offset) -> Axial:
    return cube_to_axial(offset_to_cube(o))


__all__ = [
    "axial_to_cube",
    "axial_to_offset",
    "cube_to_axial",
    "cube_to_offset",
    "offset_to_axial",
    "offset_to_cube",
]
