from __future__ import annotations

from math import cos, pi, sin

from .coords import Point


def hex_corner(center: Point, size: float, i: int) -> Point:
    """Pixel position of corner ``i`` of a pointy-top hex centred on ``center``."""
    angle_deg = 60 * i + 30
    angle_rad = pi / 180 * angle_deg
    return Point(center.x + size * cos(angle_rad), center.y + size * sin(angle_rad))


def hex_corners(center: Point, size: float) -> list[Point]:
    return [hex_corner(center, size, i) for i in range(6)]


__all__ = ["hex_corner", "hex_corners"]
