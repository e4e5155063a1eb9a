"""Engine orchestrator: preprocess, dispatch by category, describe the result."""

from __future__ import annotations

import logging
import time

from sigilforge.engine.analysis import analyze_symmetry, bounding_box
from sigilforge.engine.bounds import apply_unit_square_policy, filter_paths
from sigilforge.engine.config import EngineConfig
from sigilforge.engine.context import GenerationResult, SigilPaths
from sigilforge.engine.metadata import build_metadata, derive_tags, score_complexity
from sigilforge.engine.preprocess import preprocess, trim
from sigilforge.engine.registry import Category, GeneratorRegistry, load_patterns

logger = logging.getLogger(__name__)


class SigilEngine:
    """Turns an intention and a category into sigil paths.

    Holds only read-only configuration; one instance can serve concurrent
    callers.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        registry: GeneratorRegistry | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.registry = registry or load_patterns()
        self.registry.validate()

    def generate_paths(self, symbols: str, category: Category | str | None = None) -> SigilPaths:
        """Run the category's generator on already processed symbols.

        Generators registered with ``filters_bounds`` have their samples clipped
        to the inset box here.
        """
        spec = self.registry.get(category)
        paths = spec.fn(symbols, self.config.center, self.config)
        if spec.filters_bounds:
            paths = filter_paths(paths, self.config.inset_box)
        return paths

    def generate(self, intention: str, category: Category | str | None = None) -> GenerationResult:
        """Full generation for a raw intention.

        An empty ``paths`` list in the result is the failure signal; nothing
        is raised for any intention unless the unit-square policy is
        ``reject``.
        """
        resolved = Category.parse(category)
        trimmed = trim(intention)

        start = time.perf_counter()
        symbols = preprocess(trimmed)
        paths = self.generate_paths(symbols, resolved)
        paths = apply_unit_square_policy(paths, self.config.unit_square_policy)
        elapsed = round((time.perf_counter() - start) * 1000, 3)

        result = GenerationResult(
            intention=trimmed,
            category=resolved.value,
            paths=paths,
            metadata=build_metadata(intention, elapsed),
            complexity=score_complexity(paths),
            tags=derive_tags(trimmed, resolved.value),
            bounding_box=bounding_box(paths),
            symmetry=analyze_symmetry(paths),
        )

        if result.succeeded:
            logger.info(
                "Generated %s sigil: %d paths, %d points in %.2fms",
                resolved.value,
                result.complexity.path_count,
                result.complexity.point_count,
                elapsed,
            )
        else:
            logger.warning(
                "Generation produced no paths (category=%s, symbols=%r)",
                resolved.value,
                symbols,
            )
        return result


def create_engine(config: EngineConfig | None = None) -> SigilEngine:
    """Factory function for creating an engine instance."""
    return SigilEngine(config=config)


def generate_sigil_paths(intention: str, category: Category | str | None = None) -> SigilPaths:
    """Paths only, with the default configuration."""
    return create_engine().generate(intention, category).paths
