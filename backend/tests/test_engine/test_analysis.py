"""Tests for path validation, cleanup, bounds and symmetry."""

import math

import pytest

from sigilforge.engine.analysis import (
    analyze_symmetry,
    bounding_box,
    optimize_paths,
    validate_paths,
)
from tests.conftest import PROTECTION_FROM_HARM

SQUARE = [[(0.25, 0.25), (0.75, 0.25), (0.75, 0.75), (0.25, 0.75)]]


# --- validate_paths --------------------------------------------------------


def test_generated_paths_are_valid(engine):
    assert validate_paths(engine.generate(PROTECTION_FROM_HARM, "protection").paths)


def test_single_point_on_the_edge_is_valid():
    assert validate_paths([[(0, 1)]])


@pytest.mark.parametrize(
    "paths",
    [
        [],
        [[]],
        [[(0.5, 0.5)], []],
        [[(0.5, math.nan)]],
        [[(0.5, math.inf)]],
        [[(1.2, 0.5)]],
        [[(0.5, -0.01)]],
        [[(0.5,)]],
        [[(True, 0.5)]],
        [[("0.5", 0.5)]],
        "not paths",
    ],
)
def test_invalid_paths(paths):
    assert not validate_paths(paths)


# --- optimize_paths --------------------------------------------------------


def test_optimize_drops_near_duplicates_and_clamps():
    paths = [
        [(0.5, 0.5), (0.5005, 0.5), (0.6, 0.5), (1.2, 0.5)],
        [(0.1, 0.1), (0.1, 0.1)],
    ]
    assert optimize_paths(paths) == [[(0.5, 0.5), (0.6, 0.5), (1.0, 0.5)]]


def test_optimize_skips_non_finite_points():
    paths = [[(math.nan, 0.5), (0.2, 0.2), (0.3, math.inf), (0.4, 0.4)]]
    assert optimize_paths(paths) == [[(0.2, 0.2), (0.4, 0.4)]]


def test_optimize_compares_against_clamped_point():
    # 1.5 clamps to 1.0, so the following 1.0005 is a duplicate of it
    assert optimize_paths([[(1.5, 0.5), (1.0005, 0.5), (0.2, 0.5)]]) == [[(1.0, 0.5), (0.2, 0.5)]]


def test_optimized_paths_validate():
    paths = [[(-0.3, 0.5), (0.5, 1.4), (0.5, 0.5)]]
    assert not validate_paths(paths)
    assert validate_paths(optimize_paths(paths))


# --- bounding_box ----------------------------------------------------------


def test_bounding_box_ignores_nan():
    box = bounding_box([[(0.2, 0.3), (0.6, 0.9)], [(0.4, math.nan)]])
    assert (box.min_x, box.min_y, box.max_x, box.max_y) == pytest.approx((0.2, 0.3, 0.6, 0.9))
    assert box.width == pytest.approx(0.4)
    assert box.height == pytest.approx(0.6)
    assert box.center == pytest.approx((0.4, 0.6))


def test_bounding_box_empty_is_unit_square():
    box = bounding_box([])
    assert (box.min_x, box.min_y, box.max_x, box.max_y) == (0.0, 0.0, 1.0, 1.0)


def test_bounding_box_seeded_with_unit_square():
    box = bounding_box([[(1.2, 1.5), (1.4, 1.6)]])
    assert box.min_x == 1.0
    assert box.min_y == 1.0
    assert box.max_x == pytest.approx(1.4)
    assert box.max_y == pytest.approx(1.6)


# --- analyze_symmetry ------------------------------------------------------


def test_square_fully_symmetric():
    s = analyze_symmetry(SQUARE)
    assert (s.horizontal, s.vertical, s.radial) == (100, 100, 100)
    assert s.average == 100


def test_lopsided_points_have_no_symmetry():
    s = analyze_symmetry([[(0.1, 0.1), (0.2, 0.1), (0.9, 0.9)]])
    assert (s.horizontal, s.vertical, s.radial, s.average) == (0, 0, 0, 0)


def test_vertical_only_symmetry():
    # centroid (0.6333, 0.5); mirroring y maps the set onto itself
    s = analyze_symmetry([[(0.5, 0.2), (0.5, 0.8), (0.9, 0.5)]])
    assert (s.horizontal, s.vertical, s.radial) == (0, 100, 0)
    assert s.average == 33


def test_symmetry_empty():
    s = analyze_symmetry([])
    assert (s.horizontal, s.vertical, s.radial, s.average) == (0, 0, 0, 0)


def test_symmetry_counts_points_across_paths():
    s = analyze_symmetry([[(0.25, 0.5)], [(0.75, 0.5)]])
    assert s.horizontal == 100
