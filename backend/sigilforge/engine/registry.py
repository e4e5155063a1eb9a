"""Pattern registry — every category's generator is a function registered via decorator.

Usage:
    @generator(category=Category.WISDOM, description="Tree with forked branches")
    def tree(symbols: str, center: tuple[float, float], config: EngineConfig) -> SigilPaths:
        ...

Adding a pattern = creating one module under ``engine/patterns`` with the
decorator. Every Category must end up with exactly one generator.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from sigilforge.engine.config import EngineConfig
    from sigilforge.engine.context import SigilPaths

logger = logging.getLogger(__name__)

PatternFn = Callable[[str, tuple[float, float], "EngineConfig"], "SigilPaths"]


class Category(str, enum.Enum):
    GENERAL = "general"
    LOVE = "love"
    PROSPERITY = "prosperity"
    PROTECTION = "protection"
    WISDOM = "wisdom"

    @classmethod
    def parse(cls, value: Any) -> Category:
        """Total mapping: anything that is not an exact category value is GENERAL."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.GENERAL


@dataclass(frozen=True)
class GeneratorSpec:
    category: Category
    fn: PatternFn
    # Engine clips this generator's samples to the inset box
    filters_bounds: bool = False
    description: str = ""


class GeneratorRegistry:
    """Registry mapping each Category to its pattern generator."""

    def __init__(self) -> None:
        self._generators: dict[Category, GeneratorSpec] = {}

    def register(self, spec: GeneratorSpec) -> None:
        if spec.category in self._generators:
            raise ValueError(f"Duplicate generator for category: {spec.category.value}")
        self._generators[spec.category] = spec
        logger.debug("Registered generator %s (%s)", spec.fn.__name__, spec.category.value)

    def get(self, category: Category | str | None) -> GeneratorSpec:
        return self._generators[Category.parse(category)]

    def all(self) -> list[GeneratorSpec]:
        order = list(Category)
        return sorted(self._generators.values(), key=lambda s: order.index(s.category))

    def missing(self) -> list[Category]:
        return [c for c in Category if c not in self._generators]

    def validate(self) -> None:
        """Raise LookupError unless every Category has a generator."""
        missing = self.missing()
        if missing:
            names = ", ".join(c.value for c in missing)
            raise LookupError(f"No generator registered for: {names}")

    @property
    def count(self) -> int:
        return len(self._generators)


# Module-level singleton
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def generator(
    *,
    category: Category,
    filters_bounds: bool = False,
    description: str = "",
):
    """Decorator to register a pattern generator."""

    def decorator(fn: PatternFn):
        spec = GeneratorSpec(
            category=category,
            fn=fn,
            filters_bounds=filters_bounds,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator


def load_patterns() -> GeneratorRegistry:
    """Import every module in ``engine.patterns`` so @generator decorators fire."""
    package = importlib.import_module("sigilforge.engine.patterns")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
    return _registry
