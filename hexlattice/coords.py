from __future__ import annotations

from dataclasses import dataclass

from .errors import CubeInvariantError


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    def __add__(self, other: Axial) -> Axial:
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Axial) -> Axial:
        return self + (-other)

    def __neg__(self) -> Axial:
        return Axial(-self.q, -self.r)


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise CubeInvariantError(self.x, self.y, self.z)

    def __add__(self, other: Cube) -> Cube:
        return Cube(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Cube) -> Cube:
        return self + (-other)

    def __neg__(self) -> Cube:
        return Cube(-self.x, -self.y, -self.z)


@dataclass(frozen=True, slots=True)
class FractionalCube:
    """Continuous cube-space position, e.g. an interpolated point on a line."""

    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class Offset:
    """Odd-row offset coordinate: odd rows are shoved half a cell to the right."""

    col: int  # q-like
    row: int  # r-like

    def __add__(self, other: Offset) -> Offset:
        return Offset(self.col + other.col, self.row + other.row)

    @property
    def parity(self) -> int:
        return self.row & 1


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


def axial_add(a: Axial, b: Axial) -> Axial:
    return a + b


def axial_subtract(a: Axial, b: Axial) -> Axial:
    return a - b


def axial_negate(a: Axial) -> Axial:
    return -a


def cube_add(a: Cube, b: Cube) -> Cube:
    return a + b


def cube_subtract(a: Cube, b: Cube) -> Cube:
    return cube_add(a, cube_negate(b))


def cube_negate(c: Cube) -> Cube:
    return -c


def offset_add(a: Offset, b: Offset) -> Offset:
    return a + b


__all__ = [
    "Axial",
    "Cube",
    "FractionalCube",
    "Offset",
    "Point",
    "axial_add",
    "axial_negate",
    "axial_subtract",
    "cube_add",
    "cube_negate",
    "cube_subtract",
    "offset_add",
]
