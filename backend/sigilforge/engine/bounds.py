"""Bounds handling for generated points.

Two separate concerns live here:

* the inset-box filter, applied per sample by the engine to the output of
  generators registered with ``filters_bounds=True`` (heart, spiral);
* the unit-square policy, applied by the engine to the final path set so the
  caller can decide what happens to points outside ``[0, 1]²``. The
  constellation, ward and tree generators never filter and rely on this.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from sigilforge.engine.context import SigilPaths
from sigilforge.utils.geometry import as_array, to_path

logger = logging.getLogger(__name__)

UNIT_SQUARE = (0.0, 0.0, 1.0, 1.0)
POLICIES = ("allow", "clamp", "reject")


class UnitSquareViolation(ValueError):
    """Raised by the ``reject`` policy when a point leaves the unit square."""

    def __init__(self, count: int) -> None:
        super().__init__(f"{count} point(s) fall outside the unit square")
        self.count = count


def inset_mask(points: NDArray[np.float64], box: tuple[float, float, float, float]) -> NDArray[np.bool_]:
    """Boolean mask of rows inside ``box`` (inclusive on every edge)."""
    if len(points) == 0:
        return np.zeros(0, dtype=bool)
    xmin, ymin, xmax, ymax = box
    x = points[:, 0]
    y = points[:, 1]
    return (x >= xmin) & (x <= xmax) & (y >= ymin) & (y <= ymax)


def filter_inset(points: NDArray[np.float64], box: tuple[float, float, float, float]) -> NDArray[np.float64]:
    """Keep only the samples inside ``box``, preserving order."""
    return points[inset_mask(points, box)]


def filter_paths(paths: SigilPaths, box: tuple[float, float, float, float]) -> SigilPaths:
    """Clip every path to ``box``; paths left with fewer than two points are dropped."""
    kept: SigilPaths = []
    for path in paths:
        inside = filter_inset(as_array(path), box)
        if len(inside) > 1:
            kept.append(to_path(inside))
    return kept


def unit_square_violations(paths: SigilPaths) -> int:
    """Number of points with a coordinate outside [0, 1]."""
    total = 0
    for path in paths:
        total += int(np.count_nonzero(~inset_mask(as_array(path), UNIT_SQUARE)))
    return total


def apply_unit_square_policy(paths: SigilPaths, policy: str = "allow") -> SigilPaths:
    """Allow, clamp or reject paths with points outside the unit square."""
    if policy not in POLICIES:
        raise ValueError(f"Unknown unit-square policy: {policy!r}")
    if policy == "allow":
        return paths

    violations = unit_square_violations(paths)
    if violations == 0:
        return paths
    if policy == "reject":
        raise UnitSquareViolation(violations)

    logger.debug("Clamping %d point(s) into the unit square", violations)
    return [to_path(np.clip(as_array(path), 0.0, 1.0)) for path in paths]
