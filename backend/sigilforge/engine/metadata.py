"""Descriptive data derived alongside the geometry: metadata, complexity, tags."""

from __future__ import annotations

from sigilforge.engine.context import ComplexityScore, GenerationMetadata, SigilPaths
from sigilforge.engine.preprocess import is_whitespace, preprocess, split_words

MAX_TAG_WORDS = 5
MIN_TAG_WORD_LENGTH = 3


def count_unique_characters(intention: str) -> int:
    """Distinct characters of the lowercased intention, whitespace dropped.

    Vowels are counted, so this is not ``len(preprocess(intention))``.
    """
    return len({ch for ch in intention.lower() if not is_whitespace(ch)})


def build_metadata(intention: str, generation_time_ms: float = 0.0) -> GenerationMetadata:
    """Metadata for the raw (untrimmed) intention."""
    return GenerationMetadata(
        processed_text=preprocess(intention),
        original_length=len(intention),
        unique_characters=count_unique_characters(intention),
        generation_time_ms=generation_time_ms,
    )


def score_complexity(paths: SigilPaths) -> ComplexityScore:
    """score = 2·paths + points."""
    return ComplexityScore(
        path_count=len(paths),
        point_count=sum(len(path) for path in paths),
    )


def derive_tags(intention: str, category: str) -> list[str]:
    """Category first, then up to five words longer than two characters."""
    words = [w for w in split_words(intention.lower()) if len(w) >= MIN_TAG_WORD_LENGTH]
    return list(dict.fromkeys([category, *words[:MAX_TAG_WORDS]]))
