"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def polar_point(center: tuple[float, float], angle: float, radius: float) -> tuple[float, float]:
    """Point at ``radius`` from ``center`` in direction ``angle`` (radians)."""
    return (center[0] + math.cos(angle) * radius, center[1] + math.sin(angle) * radius)


def to_path(points: NDArray[np.float64]) -> list[tuple[float, float]]:
    """Nx2 array → list of (x, y) float tuples."""
    return [(float(x), float(y)) for x, y in points]


def as_array(path: list[tuple[float, float]]) -> NDArray[np.float64]:
    if len(path) == 0:
        return np.empty((0, 2))
    return np.asarray(path, dtype=np.float64)


def stack_paths(paths: list[list[tuple[float, float]]]) -> NDArray[np.float64]:
    """All points of all paths as one Nx2 array, in draw order."""
    arrays = [as_array(p) for p in paths if len(p) > 0]
    if not arrays:
        return np.empty((0, 2))
    return np.vstack(arrays)


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def all_finite(paths: list[list[tuple[float, float]]]) -> bool:
    return all(math.isfinite(x) and math.isfinite(y) for path in paths for x, y in path)
