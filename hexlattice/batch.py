"""Vectorised counterparts of the scalar coordinate functions.

Cube arrays have shape ``(n, 3)`` with columns x, y, z; axial and offset
arrays have shape ``(n, 2)`` with columns q, r and col, row. Integer results
are ``int64``; overflow wraps silently as usual for numpy.
"""

from __future__ import annotations

import logging

import numpy as np

from .errors import CubeInvariantError

logger = logging.getLogger(__name__)


def _as_columns(values: np.ndarray | list, width: int, dtype: type) -> np.ndarray:
    arr = np.asarray(values, dtype=dtype)
    if arr.ndim == 1 and arr.shape[0] == width:
        arr = arr.reshape(1, width)
    if arr.ndim != 2 or arr.shape[1] != width:
        raise ValueError(f"expected an array of shape (n, {width}), got {arr.shape}")
    return arr


def _check_sum_zero(cubes: np.ndarray) -> None:
    bad = cubes.sum(axis=1) != 0
    if bad.any():
        x, y, z = (int(v) for v in cubes[bad][0])
        raise CubeInvariantError(x, y, z)


def axial_to_cube_array(axial: np.ndarray) -> np.ndarray:
    a = _as_columns(axial, 2, np.int64)
    q, r = a[:, 0], a[:, 1]
    return np.stack([q, -q - r, r], axis=1)


def cube_to_axial_array(cubes: np.ndarray) -> np.ndarray:
    c = _as_columns(cubes, 3, np.int64)
    return c[:, [0, 2]].copy()


def cube_to_offset_array(cubes: np.ndarray) -> np.ndarray:
    c = _as_columns(cubes, 3, np.int64)
    x, z = c[:, 0], c[:, 2]
    col = x + (z - (z & 1)) // 2
    return np.stack([col, z], axis=1)


def offset_to_cube_array(offsets: np.ndarray) -> np.ndarray:
    o = _as_columns(offsets, 2, np.int64)
    col, row = o[:, 0], o[:, 1]
    x = col - (row - (row & 1)) // 2
    return np.stack([x, -x - row, row], axis=1)


def cube_distance_array(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Row-wise hex distance; ``b`` may be a single cube broadcast against ``a``."""
    left = _as_columns(a, 3, np.int64)
    right = _as_columns(b, 3, np.int64)
    if right.shape[0] not in (1, left.shape[0]):
        raise ValueError(f"cannot pair {left.shape[0]} cubes with {right.shape[0]}")
    _check_sum_zero(left)
    _check_sum_zero(right)
    return np.abs(left - right).sum(axis=1) // 2


def cube_round_array(points: np.ndarray) -> np.ndarray:
    """Snap fractional cube rows onto the lattice, matching ``cube_round``."""
    p = _as_columns(points, 3, np.float64)
    magnitude = np.abs(p)
    whole = np.floor(magnitude)
    rounded = np.copysign(np.where(magnitude - whole >= 0.5, whole + 1, whole), p)
    diff = np.abs(rounded - p)
    rx, ry, rz = rounded[:, 0].copy(), rounded[:, 1].copy(), rounded[:, 2].copy()
    dx, dy, dz = diff[:, 0], diff[:, 1], diff[:, 2]

    fix_x = (dx > dy) & (dx > dz)
    fix_y = ~fix_x & (dy > dz)
    fix_z = ~fix_x & ~fix_y
    rx[fix_x] = -ry[fix_x] - rz[fix_x]
    ry[fix_y] = -rx[fix_y] - rz[fix_y]
    rz[fix_z] = -rx[fix_z] - ry[fix_z]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("rounded %d cube points (x=%d, y=%d, z=%d repairs)",
                     p.shape[0], int(fix_x.sum()), int(fix_y.sum()), int(fix_z.sum()))
    return np.stack([rx, ry, rz], axis=1).astype(np.int64)


__all__ = [
    "axial_to_cube_array",
    "cube_distance_array",
    "cube_round_array",
    "cube_to_axial_array",
    "cube_to_offset_array",
    "offset_to_cube_array",
]
