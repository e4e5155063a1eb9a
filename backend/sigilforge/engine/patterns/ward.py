"""Protection — ward.

Two closed rings (radius 0.3 and 0.18) with at least six sides, starting at
the top of the canvas, tied together by spokes at every other vertex. Never
empty and never bounds-filtered.
"""

from __future__ import annotations

import math

from sigilforge.engine.config import EngineConfig
from sigilforge.engine.context import SigilPaths
from sigilforge.engine.registry import Category, generator
from sigilforge.utils.geometry import polar_point


def ward_sides(symbols: str, min_sides: int = 6) -> int:
    return max(min_sides, len(symbols))


@generator(
    category=Category.PROTECTION,
    description="Outer and inner polygon rings joined by alternate spokes",
)
def ward(symbols: str, center: tuple[float, float], config: EngineConfig) -> SigilPaths:
    sides = ward_sides(symbols, config.ward_min_sides)

    outer = []
    inner = []
    # k == sides closes the ring on the starting vertex
    for k in range(sides + 1):
        angle = (k / sides) * math.pi * 2 - math.pi / 2
        outer.append(polar_point(center, angle, config.ward_outer_radius))
        inner.append(polar_point(center, angle, config.ward_inner_radius))

    paths: SigilPaths = [outer, inner]
    for i in range(0, sides, 2):
        paths.append([outer[i], inner[i]])
    return paths
