"""End-to-end tests for SigilEngine."""

from __future__ import annotations

import math

import pytest

from sigilforge.engine.bounds import UnitSquareViolation
from sigilforge.engine.config import EngineConfig
from sigilforge.engine.pipeline import SigilEngine, generate_sigil_paths
from sigilforge.engine.preprocess import preprocess
from sigilforge.engine.registry import Category, GeneratorRegistry, GeneratorSpec
from sigilforge.utils.geometry import all_finite
from tests.conftest import (
    ALL_VOWELS,
    CATEGORIES,
    INTENTIONS,
    LOVE_AND_LIGHT,
    PROTECTION_FROM_HARM,
    is_closed,
)


@pytest.mark.parametrize("category", CATEGORIES)
@pytest.mark.parametrize("intention", INTENTIONS)
def test_geometry_is_deterministic(engine, intention, category):
    first = engine.generate(intention, category)
    second = engine.generate(intention, category)
    assert first.paths == second.paths
    assert first.metadata.processed_text == second.metadata.processed_text


@pytest.mark.parametrize("category", CATEGORIES)
@pytest.mark.parametrize("intention", INTENTIONS)
def test_no_non_finite_coordinates(engine, intention, category):
    assert all_finite(engine.generate(intention, category).paths)


@pytest.mark.parametrize("category", ["love", "prosperity"])
@pytest.mark.parametrize("intention", INTENTIONS)
def test_filtered_categories_stay_in_inset_box(engine, intention, category):
    for path in engine.generate(intention, category).paths:
        for x, y in path:
            assert 0.05 <= x <= 0.95
            assert 0.05 <= y <= 0.95


def test_protection_end_to_end(engine):
    result = engine.generate(PROTECTION_FROM_HARM, "protection")
    sides = max(6, len(preprocess(PROTECTION_FROM_HARM)))
    assert sides == 8
    assert len(result.paths) == 2 + sides // 2
    assert len(result.paths[0]) == sides + 1
    assert len(result.paths[1]) == sides + 1
    assert is_closed(result.paths[0])
    assert is_closed(result.paths[1])
    assert result.complexity.score == 2 * 6 + (9 + 9 + 4 * 2)


@pytest.mark.parametrize("intention", INTENTIONS)
def test_protection_never_empty(engine, intention):
    result = engine.generate(intention, "protection")
    sides = max(6, len(preprocess(intention)))
    assert result.succeeded
    assert len(result.paths) == 2 + math.ceil(sides / 2)


def test_love_all_vowels_fails(engine):
    result = engine.generate(ALL_VOWELS, "love")
    assert result.paths == []
    assert not result.succeeded


def test_prosperity_all_vowels_fails(engine):
    assert engine.generate(ALL_VOWELS, "prosperity").paths == []


def test_wisdom_all_vowels_is_trunk(engine):
    result = engine.generate(ALL_VOWELS, "wisdom")
    assert len(result.paths) == 1
    assert all_finite(result.paths)


def test_unknown_category_is_general(engine):
    result = engine.generate(LOVE_AND_LIGHT, "chaos")
    assert result.category == "general"
    assert result.paths == engine.generate(LOVE_AND_LIGHT, "general").paths
    assert result.paths == engine.generate(LOVE_AND_LIGHT, None).paths


def test_result_metadata_and_tags(engine):
    result = engine.generate("  Love and Light  ", "wisdom")
    assert result.intention == "Love and Light"
    assert result.metadata.processed_text == "lvndght"
    assert result.metadata.original_length == 18
    assert result.metadata.unique_characters == 11
    assert result.metadata.generation_time_ms >= 0
    assert result.tags == ["wisdom", "love", "and", "light"]
    assert result.generation_method == "server"


def test_symbols_independent_of_category(engine):
    texts = {engine.generate(LOVE_AND_LIGHT, c).metadata.processed_text for c in CATEGORIES}
    assert texts == {"lvndght"}


def test_generate_sigil_paths_shortcut():
    paths = generate_sigil_paths(PROTECTION_FROM_HARM, "protection")
    assert len(paths) == 6


def test_clamp_policy_keeps_unit_square():
    # A ward with radius 0.7 leaves the canvas on every side
    engine = SigilEngine(EngineConfig(ward_outer_radius=0.7, unit_square_policy="clamp"))
    paths = engine.generate(LOVE_AND_LIGHT, "protection").paths
    assert all(0.0 <= v <= 1.0 for path in paths for pt in path for v in pt)


def test_reject_policy_raises():
    engine = SigilEngine(EngineConfig(ward_outer_radius=0.7, unit_square_policy="reject"))
    with pytest.raises(UnitSquareViolation):
        engine.generate(LOVE_AND_LIGHT, "protection")


def test_reject_policy_passes_default_geometry():
    engine = SigilEngine(EngineConfig(unit_square_policy="reject"))
    for category in CATEGORIES:
        engine.generate(PROTECTION_FROM_HARM, category)


def _stray(symbols, center, config):
    return [[(0.5, 0.5), (2.0, 2.0), (0.6, 0.6)], [(0.5, 0.5), (3.0, 3.0)]]


def _stray_registry(flagged):
    registry = GeneratorRegistry()
    for category in Category:
        registry.register(
            GeneratorSpec(category=category, fn=_stray, filters_bounds=category in flagged)
        )
    return registry


def test_engine_clips_flagged_generators():
    engine = SigilEngine(registry=_stray_registry({Category.LOVE}))
    assert engine.generate_paths("bcd", "love") == [[(0.5, 0.5), (0.6, 0.6)]]
    assert engine.generate_paths("bcd", "general") == _stray("bcd", None, None)


def test_incomplete_registry_rejected():
    registry = GeneratorRegistry()
    registry.register(GeneratorSpec(category=Category.GENERAL, fn=_stray))
    with pytest.raises(LookupError):
        SigilEngine(registry=registry)


def test_result_describes_bounds_and_symmetry(engine):
    result = engine.generate(PROTECTION_FROM_HARM, "protection")
    assert result.bounding_box.min_x == pytest.approx(0.2)
    assert result.bounding_box.max_x == pytest.approx(0.8)
    assert result.bounding_box.center == pytest.approx((0.5, 0.5))
    assert 0 <= result.symmetry.average <= 100


def test_failed_result_has_unit_box(engine):
    result = engine.generate("aeiou", "love")
    assert not result.succeeded
    assert (result.bounding_box.min_x, result.bounding_box.max_x) == (0.0, 1.0)
    assert result.symmetry.average == 0
