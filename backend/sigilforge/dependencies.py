"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from sigilforge.config import Settings, settings
from sigilforge.engine.config import EngineConfig
from sigilforge.engine.pipeline import SigilEngine


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_engine() -> SigilEngine:
    return SigilEngine(EngineConfig(unit_square_policy=settings.unit_square_policy))
