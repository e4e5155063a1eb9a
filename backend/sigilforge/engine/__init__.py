"""SigilForge pattern engine."""

from sigilforge.engine.registry import Category, generator, get_registry
from sigilforge.engine.context import GenerationResult, SigilPaths
from sigilforge.engine.pipeline import SigilEngine, generate_sigil_paths

__all__ = [
    "Category",
    "generator",
    "get_registry",
    "GenerationResult",
    "SigilPaths",
    "SigilEngine",
    "generate_sigil_paths",
]
