"""Line rasterisation in cube space.

A segment between two cells is sampled at evenly spaced parameters, each
sample is interpolated in continuous cube space and then snapped back onto
the lattice with :func:`cube_round`.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator

from .conversions import axial_to_cube, cube_to_axial
from .coords import Axial, Cube, FractionalCube
from .distance import cube_distance

logger = logging.getLogger(__name__)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _round_half_away(value: float) -> int:
    # Compare the fractional part instead of adding 0.5, which can carry
    # values just below a half up to the next integer.
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(whole) if value >= 0 else -int(whole)


def cube_lerp(a: Cube, b: Cube, t: float) -> FractionalCube:
    """Interpolate between ``a`` (``t == 0``) and ``b`` (``t == 1``)."""
    return FractionalCube(
        _lerp(float(a.x), float(b.x), t),
        _lerp(float(a.y), float(b.y), t),
        _lerp(float(a.z), float(b.z), t),
    )


def cube_round(point: FractionalCube) -> Cube:
    """Snap a fractional cube position to the nearest valid cell.

    Each component is rounded independently (halves away from zero). The
    component that moved the furthest is then rebuilt from the other two so
    the result sums to zero. Ties resolve in x, y, z order.
    """
    rx = _round_half_away(point.x)
    ry = _round_half_away(point.y)
    rz = _round_half_away(point.z)

    dx = abs(rx - point.x)
    dy = abs(ry - point.y)
    dz = abs(rz - point.z)

    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    else:
        rz = -rx - ry
    return Cube(rx, ry, rz)


def iter_cube_line(a: Cube, b: Cube, *, include_end: bool = False) -> Iterator[Cube]:
    """Yield the cells along the segment from ``a`` towards ``b``.

    ``b`` itself is only produced when ``include_end`` is set. A zero-length
    segment yields ``a`` once.
    """
    n = cube_distance(a, b)
    if n == 0:
        logger.debug("degenerate line at %s", a)
        yield a
        return
    stop = n + 1 if include_end else n
    for i in range(stop):
        yield cube_round(cube_lerp(a, b, i / n))


def cube_linedraw(a: Cube, b: Cube, *, include_end: bool = False) -> list[Cube]:
    return list(iter_cube_line(a, b, include_end=include_end))


def axial_linedraw(a: Axial, b: Axial, *, include_end: bool = False) -> list[Axial]:
    return [
        cube_to_axial(c)
        for c in iter_cube_line(axial_to_cube(a), axial_to_cube(b), include_end=include_end)
    ]


__all__ = [
    "axial_linedraw",
    "cube_lerp",
    "cube_linedraw",
    "cube_round",
    "iter_cube_line",
]
