"""Path-data checks and descriptors: validation, cleanup, bounds and symmetry.

None of these feed back into generation; they describe or tidy a finished
path set for storage and export.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from sigilforge.engine.bounds import unit_square_violations
from sigilforge.engine.context import BoundingBox, SigilPaths, SymmetryAnalysis
from sigilforge.utils.geometry import all_finite, centroid, stack_paths

DUPLICATE_TOLERANCE = 0.001
SYMMETRY_TOLERANCE = 0.1


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _is_point(point: object) -> bool:
    if not isinstance(point, (tuple, list)) or len(point) != 2:
        return False
    return all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in point)


def validate_paths(paths: SigilPaths) -> bool:
    """True for a non-empty path set of non-empty paths with finite points in [0, 1]²."""
    if not isinstance(paths, list) or len(paths) == 0:
        return False
    for path in paths:
        if not isinstance(path, list) or len(path) == 0:
            return False
        if not all(_is_point(pt) for pt in path):
            return False
    return all_finite(paths) and unit_square_violations(paths) == 0


def optimize_paths(paths: SigilPaths, tolerance: float = DUPLICATE_TOLERANCE) -> SigilPaths:
    """Clamp into the unit square and drop near-duplicate consecutive points.

    A point is a duplicate when both coordinates are within ``tolerance`` of
    the last kept (clamped) point. Non-finite points are skipped. Paths left
    with fewer than two points are removed.
    """
    optimized: SigilPaths = []
    for path in paths:
        kept: list[tuple[float, float]] = []
        last: tuple[float, float] | None = None
        for x, y in path:
            if not (math.isfinite(x) and math.isfinite(y)):
                continue
            if last is None or abs(x - last[0]) > tolerance or abs(y - last[1]) > tolerance:
                last = (max(0.0, min(1.0, float(x))), max(0.0, min(1.0, float(y))))
                kept.append(last)
        if len(kept) > 1:
            optimized.append(kept)
    return optimized


def bounding_box(paths: SigilPaths) -> BoundingBox:
    """Bounds of every non-NaN point, seeded with the inverted unit square.

    The seed means a path set lying entirely beyond one edge reports that
    edge as its min (or max). An empty path set gives the unit square.
    """
    points = stack_paths(paths)
    points = points[~np.isnan(points).any(axis=1)]
    if len(points) == 0:
        return BoundingBox()
    return BoundingBox(
        min_x=min(1.0, float(np.min(points[:, 0]))),
        min_y=min(1.0, float(np.min(points[:, 1]))),
        max_x=max(0.0, float(np.max(points[:, 0]))),
        max_y=max(0.0, float(np.max(points[:, 1]))),
    )


def _mirror_matches(points: NDArray[np.float64], targets: NDArray[np.float64], tolerance: float) -> int:
    """How many targets have some point within ``tolerance`` on both axes."""
    diff = np.abs(points[None, :, :] - targets[:, None, :])
    return int(np.count_nonzero((diff < tolerance).all(axis=2).any(axis=1)))


def analyze_symmetry(paths: SigilPaths, tolerance: float = SYMMETRY_TOLERANCE) -> SymmetryAnalysis:
    """Mirror matches about the center of mass: across x, across y, and 180°."""
    points = stack_paths(paths)
    if len(points) == 0:
        return SymmetryAnalysis()

    cx, cy = centroid(points)
    x = points[:, 0]
    y = points[:, 1]
    total = len(points)

    def pct(targets: NDArray[np.float64]) -> int:
        return _round_half_up(_mirror_matches(points, targets, tolerance) / total * 100)

    return SymmetryAnalysis(
        horizontal=pct(np.column_stack([2 * cx - x, y])),
        vertical=pct(np.column_stack([x, 2 * cy - y])),
        radial=pct(np.column_stack([2 * cx - x, 2 * cy - y])),
    )
