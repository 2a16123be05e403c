"""Groups of cells that move and turn together around a shared pivot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .coords import Cube
from .neighbors import cube_direction
from .rotation import cube_rotate_about


@dataclass(frozen=True, slots=True)
class Unit:
    """Ordered cube members plus the pivot they rotate around.

    The pivot does not have to be one of the members, and members are not
    deduplicated.
    """

    members: tuple[Cube, ...] = field(default_factory=tuple)
    pivot: Cube = Cube(0, 0, 0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))

    @classmethod
    def from_cells(cls, members: Iterable[Cube], pivot: Cube) -> "Unit":
        return cls(tuple(members), pivot)

    def __iter__(self) -> Iterator[Cube]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def rotate(self, clockwise: bool = True) -> "Unit":
        return unit_rotate(self, clockwise)

    def neighbor(self, direction: int) -> "Unit":
        return unit_neighbor(self, direction)

    def translate(self, offset: Cube) -> "Unit":
        return unit_translate(self, offset)


def unit_rotate(u: Unit, clockwise: bool = True) -> Unit:
    return Unit(tuple(cube_rotate_about(h, u.pivot, clockwise) for h in u.members), u.pivot)


def unit_neighbor(u: Unit, direction: int) -> Unit:
    """Step every member once in ``direction``; the pivot stays put."""
    step = cube_direction(direction)
    return Unit(tuple(h + step for h in u.members), u.pivot)


def unit_translate(u: Unit, offset: Cube) -> Unit:
    return Unit(tuple(h + offset for h in u.members), u.pivot + offset)


__all__ = ["Unit", "unit_neighbor", "unit_rotate", "unit_translate"]
