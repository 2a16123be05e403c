from __future__ import annotations

from .coords import Cube


def cube_rotate(c: Cube, clockwise: bool = True, *, steps: int = 1) -> Cube:
    """Rotate ``c`` about the origin by ``steps`` sixths of a turn."""
    for _ in range(steps % 6):
        if clockwise:
            c = Cube(-c.z, -c.x, -c.y)
        else:
            c = Cube(-c.y, -c.z, -c.x)
    return c


def cube_rotate_about(c: Cube, pivot: Cube, clockwise: bool = True, *, steps: int = 1) -> Cube:
    return cube_rotate(c - pivot, clockwise, steps=steps) + pivot


__all__ = ["cube_rotate", "cube_rotate_about"]
