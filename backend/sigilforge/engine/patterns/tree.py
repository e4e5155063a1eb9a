"""Wisdom — tree.

A fixed trunk below the center, one branch per symbol radiating from the
center, and a short forked twig on every even branch. Branch length wobbles
with ``sin(i)`` of the raw branch index in radians; that quirk is part of the
visual identity and is kept as is.
"""

from __future__ import annotations

import math

from sigilforge.engine.config import EngineConfig
from sigilforge.engine.context import SigilPaths
from sigilforge.engine.registry import Category, generator
from sigilforge.utils.geometry import polar_point


@generator(
    category=Category.WISDOM,
    description="Trunk, radial branches and twigs on even branches",
)
def tree(symbols: str, center: tuple[float, float], config: EngineConfig) -> SigilPaths:
    cx, cy = center
    paths: SigilPaths = [[(cx, cy + config.trunk_length), center]]

    branches = len(symbols)
    if branches == 0:
        return paths

    for i in range(branches):
        angle = (i / branches) * math.pi * 2
        length = config.branch_length + math.sin(i) * config.branch_wobble
        end = polar_point(center, angle, length)
        paths.append([center, end])

        if i % 2 == 0:
            twig = polar_point(end, angle + config.sub_branch_angle, config.sub_branch_length)
            paths.append([end, twig])

    return paths
