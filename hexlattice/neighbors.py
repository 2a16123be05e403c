from __future__ import annotations

from numbers import Integral
from typing import Iterable

from .coords import Axial, Cube, Offset
from .errors import InvalidDirection

_CUBE_DIRS = (
    Cube(+1, -1, 0),
    Cube(+1, 0, -1),
    Cube(0, +1, -1),
    Cube(-1, +1, 0),
    Cube(-1, 0, +1),
    Cube(0, -1, +1),
)

_AXIAL_DIRS = (
    Axial(+1, 0),
    Axial(+1, -1),
    Axial(0, -1),
    Axial(-1, 0),
    Axial(-1, +1),
    Axial(0, +1),
)

# Indexed by row parity (row & 1), then by direction.
_OFFSET_DIRS = (
    (
        Offset(+1, 0),
        Offset(0, -1),
        Offset(-1, -1),
        Offset(-1, 0),
        Offset(-1, +1),
        Offset(0, +1),
    ),
    (
        Offset(+1, 0),
        Offset(+1, -1),
        Offset(0, -1),
        Offset(-1, 0),
        Offset(0, +1),
        Offset(+1, +1),
    ),
)


def normalize_direction(direction: int) -> int:
    """Wrap any integer direction into ``0..5``; ``-1`` becomes ``5``."""
    if isinstance(direction, bool) or not isinstance(direction, Integral):
        raise InvalidDirection(direction)
    index = int(direction) % 6
    if not 0 <= index < 6:
        raise InvalidDirection(direction)
    return index


def cube_direction(direction: int) -> Cube:
    return _CUBE_DIRS[normalize_direction(direction)]


def axial_direction(direction: int) -> Axial:
    return _AXIAL_DIRS[normalize_direction(direction)]


def offset_direction(parity: int, direction: int) -> Offset:
    if parity not in (0, 1):
        raise ValueError(f"parity must be 0 or 1, got {parity!r}")
    return _OFFSET_DIRS[parity][normalize_direction(direction)]


def cube_neighbor(c: Cube, direction: int) -> Cube:
    return c + cube_direction(direction)


def axial_neighbor(a: Axial, direction: int) -> Axial:
    return a + axial_direction(direction)


def offset_neighbor(o: Offset, direction: int) -> Offset:
    return o + offset_direction(o.parity, direction)


hex_direction = axial_direction
hex_neighbor = axial_neighbor


def neighbors_cube(c: Cube) -> Iterable[Cube]:
    for d in _CUBE_DIRS:
        yield c + d


def neighbors_axial(a: Axial) -> Iterable[Axial]:
    for d in _AXIAL_DIRS:
        yield a + d


def neighbors_offset(o: Offset) -> Iterable[Offset]:
    for d in _OFFSET_DIRS[o.parity]:
        yield o + d


__all__ = [
    "axial_direction",
    "axial_neighbor",
    "cube_direction",
    "cube_neighbor",
    "hex_direction",
    "hex_neighbor",
    "neighbors_axial",
    "neighbors_cube",
    "neighbors_offset",
    "normalize_direction",
    "offset_direction",
    "offset_neighbor",
]
