"""Validated settings bundling the caller-facing choices of the engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .coords import Cube, Point
from .lines import cube_linedraw
from .projection import hex_corners
from .unit import Unit, unit_rotate


class HexGridSettings(BaseModel):
    """Corner size, line endpoint policy and rotation sense for a grid."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    corner_size: float = Field(default=1.0, gt=0.0)
    include_line_end: bool = Field(default=False)
    rotate_clockwise: bool = Field(default=True)

    def linedraw(self, a: Cube, b: Cube) -> list[Cube]:
        return cube_linedraw(a, b, include_end=self.include_line_end)

    def corners(self, center: Point) -> list[Point]:
        return hex_corners(center, self.corner_size)

    def rotate(self, unit: Unit) -> Unit:
        return unit_rotate(unit, self.rotate_clockwise)


__all__ = ["HexGridSettings"]
