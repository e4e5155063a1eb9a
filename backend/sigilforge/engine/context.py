"""Value types flowing out of the engine.

Paths are plain lists of ``(x, y)`` tuples so results serialize straight to
JSON; numpy is used inside the generators and converted on the way out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Point = tuple[float, float]
Path = list[Point]
SigilPaths = list[Path]


@dataclass(frozen=True)
class GenerationMetadata:
    """Descriptive statistics computed alongside the geometry."""

    processed_text: str
    original_length: int
    unique_characters: int
    # Wall clock; never compare this in determinism checks
    generation_time_ms: float = 0.0


@dataclass(frozen=True)
class ComplexityScore:
    path_count: int = 0
    point_count: int = 0

    @property
    def score(self) -> int:
        return 2 * self.path_count + self.point_count


@dataclass(frozen=True)
class BoundingBox:
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 1.0
    max_y: float = 1.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> tuple[float, float]:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


@dataclass(frozen=True)
class SymmetryAnalysis:
    """Percentages of points that have a mirror partner."""

    horizontal: int = 0
    vertical: int = 0
    radial: int = 0

    @property
    def average(self) -> int:
        # half-up rounding, as the stored percentages use
        return int(math.floor((self.horizontal + self.vertical + self.radial) / 3 + 0.5))


@dataclass
class GenerationResult:
    """Everything one ``SigilEngine.generate`` call produces."""

    intention: str
    category: str
    paths: SigilPaths = field(default_factory=list)
    metadata: GenerationMetadata | None = None
    complexity: ComplexityScore = field(default_factory=ComplexityScore)
    tags: list[str] = field(default_factory=list)
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    symmetry: SymmetryAnalysis = field(default_factory=SymmetryAnalysis)
    generation_method: str = "server"

    @property
    def succeeded(self) -> bool:
        return len(self.paths) > 0
