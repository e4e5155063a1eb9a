"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sigilforge.engine.config import EngineConfig
from sigilforge.engine.pipeline import SigilEngine


# Intentions with known processed symbols
LOVE_AND_LIGHT = "Love and Light"  # -> "lvndght" (7 symbols)
PROTECTION_FROM_HARM = "protection from harm"  # -> "prtcnfmh" (8 symbols)
ALL_VOWELS = "aeiou aeiou"  # -> "" (0 symbols)
THREE_SYMBOLS = "bcd"  # -> "bcd"

CATEGORIES = ["general", "love", "prosperity", "protection", "wisdom"]

INTENTIONS = [LOVE_AND_LIGHT, PROTECTION_FROM_HARM, ALL_VOWELS, THREE_SYMBOLS, "Seek the hidden path"]


def is_closed(path, tol: float = 1e-9) -> bool:
    """True when the path has at least 3 points and ends where it starts."""
    if len(path) < 3:
        return False
    (x0, y0), (x1, y1) = path[0], path[-1]
    return abs(x0 - x1) <= tol and abs(y0 - y1) <= tol


@pytest.fixture
def engine() -> SigilEngine:
    return SigilEngine()


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def center(config: EngineConfig) -> tuple[float, float]:
    return config.center
