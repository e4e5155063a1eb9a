"""Prosperity — layered spiral.

Three concentric spirals (base radius 0.08, 0.16, 0.24), each winding 2.5
turns while growing to 2.5x its base radius. Eight samples per symbol per
layer. Registered with ``filters_bounds``: the engine clips each layer to
the inset box and drops layers left with fewer than two points.
"""

from __future__ import annotations

import numpy as np

from sigilforge.engine.config import EngineConfig
from sigilforge.engine.context import SigilPaths
from sigilforge.engine.registry import Category, generator
from sigilforge.utils.geometry import to_path


@generator(
    category=Category.PROSPERITY,
    filters_bounds=True,
    description="Three growing spirals, inset-box filtered",
)
def layered_spiral(symbols: str, center: tuple[float, float], config: EngineConfig) -> SigilPaths:
    samples = len(symbols) * config.spiral_samples_per_symbol
    if samples == 0:
        return []

    cx, cy = center
    progress = np.arange(samples) / samples
    angle = progress * np.pi * 2 * config.spiral_turns

    paths: SigilPaths = []
    for layer in range(config.spiral_layers):
        radius = config.spiral_base_radius + layer * config.spiral_layer_step
        current = radius * (1 + progress * config.spiral_growth)
        paths.append(to_path(np.column_stack([cx + np.cos(angle) * current, cy + np.sin(angle) * current])))
    return paths
