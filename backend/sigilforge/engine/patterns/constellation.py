"""General — constellation.

Stars on a ring of radius 0.25 (nudged by each symbol's code point), a hub
polyline visiting the center between every spoke, and chords linking each
star to the one half-way around the ring.
"""

from __future__ import annotations

import math

from sigilforge.engine.config import EngineConfig
from sigilforge.engine.context import SigilPaths
from sigilforge.engine.registry import Category, generator
from sigilforge.utils.geometry import polar_point


def star_variance(symbol: str, step: float = 0.002) -> float:
    """Radius offset in [-0.04, 0.038] keyed on the raw code point."""
    return (ord(symbol) % 40 - 20) * step


@generator(
    category=Category.GENERAL,
    description="Constellation: hub spokes plus half-ring chords",
)
def constellation(symbols: str, center: tuple[float, float], config: EngineConfig) -> SigilPaths:
    n = len(symbols)
    if n == 0:
        return []

    stars = [
        polar_point(
            center,
            (i / n) * math.pi * 2,
            config.star_radius + star_variance(symbols[i], config.star_variance_step),
        )
        for i in range(n)
    ]

    hub = [center]
    for star in stars:
        hub.append(star)
        hub.append(center)
    paths: SigilPaths = [hub]

    half = n // 2
    for i in range(n):
        j = (i + half) % n
        if j != i:
            paths.append([stars[i], stars[j]])

    return paths
