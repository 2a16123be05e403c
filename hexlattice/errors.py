"""Exceptions raised by the hex coordinate engine."""

from __future__ import annotations


class HexGridError(ValueError):
    """Base class for invalid hex-grid input."""


class InvalidDirection(HexGridError):
    """Raised when a direction index cannot be resolved to one of the six steps."""

    def __init__(self, direction: object) -> None:
        super().__init__(f"direction must be an integer resolving to 0..5, got {direction!r}")
        self.direction = direction


class CubeInvariantError(HexGridError):
    """Raised when a cube coordinate does not satisfy x + y + z == 0."""

    def __init__(self, x: int, y: int, z: int) -> None:
        super().__init__(f"For cube coords, x + y + z must be 0 (got {x}, {y}, {z})")
        self.components = (x, y, z)


__all__ = ["CubeInvariantError", "HexGridError", "InvalidDirection"]
