"""Love — parametric heart.

x = cx + s·16·sin³t
y = cy − s·(13·cos t − 5·cos 2t − 2·cos 3t − cos 4t)

Four samples per symbol. Registered with ``filters_bounds`` so the engine
drops samples outside the inset box.
"""

from __future__ import annotations

import numpy as np

from sigilforge.engine.config import EngineConfig
from sigilforge.engine.context import SigilPaths
from sigilforge.engine.registry import Category, generator
from sigilforge.utils.geometry import to_path


@generator(
    category=Category.LOVE,
    filters_bounds=True,
    description="Heart curve sampled 4x per symbol, inset-box filtered",
)
def heart(symbols: str, center: tuple[float, float], config: EngineConfig) -> SigilPaths:
    samples = len(symbols) * config.heart_samples_per_symbol
    if samples == 0:
        return []

    cx, cy = center
    s = config.heart_scale
    t = (np.arange(samples) / samples) * np.pi * 2
    x = cx + s * (16 * np.sin(t) ** 3)
    y = cy - s * (13 * np.cos(t) - 5 * np.cos(2 * t) - 2 * np.cos(3 * t) - np.cos(4 * t))
    return [to_path(np.column_stack([x, y]))]
