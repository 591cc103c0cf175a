"""Tests for point and subset membership."""

import math

import pytest

from exterval import (
    INFINITY,
    NEG_INFINITY,
    Bracket,
    I,
    Interval,
    InvalidSpecification,
    contains_interval,
    contains_point,
    make_interval,
)


def test_point_in_continuous_interval():
    assert 1 in I("[1, 10]")
    assert 10 in I("[1, 10]")
    assert 5.5 in I("(1, 10)")
    assert 1 not in I("(1, 10]")
    assert 10 not in I("[1, 10)")
    assert 0 not in I("[1, 10]")


def test_point_on_grid():
    assert 1 in I("[1, 10)//2")
    assert 3 in I("(1, 10)//2")
    assert 9 in I("[1, 10)//2")
    assert 1 not in I("(1, 10)//2")


def test_point_off_grid():
    assert 2 not in I("[1, 10)//2")
    assert 1.5 not in I("[1, 10]//1")


def test_fractional_grid():
    assert 1.5 in I("[1, 2]//0.5")
    assert -1.25 in I("[-2, -1]//0.75")
    assert -1 not in I("[-2, -1]//0.75")


def test_descending_grid_is_anchored_at_lower_bound():
    """Test that a negative step aligns points from min, like a positive one."""
    ivl = I("[1, 10]//-2")

    assert 1 in ivl
    assert 3 in ivl
    assert 9 in ivl
    assert 2 not in ivl
    assert 10 not in ivl


def test_descending_grid_with_width_a_multiple_of_step():
    ivl = I("[0, 1]//-0.25")

    assert 1 in ivl
    assert 0.75 in ivl
    assert 0 in ivl
    assert 0.6 not in ivl


def test_membership_on_extreme_finite_bounds():
    """Test that alignment works when the offset from min overflows a float."""
    ivl = I("[-1e308, 1e308]//1")

    assert 0 in ivl
    assert 1e308 in ivl
    assert 1e308 not in I("[-1e308, 1e308]//3e307")


def test_infinite_bounds_place_no_constraint():
    assert -1e300 in I("(:neg_infinity, 0]")
    assert -1e300 in I("[:neg_infinity, 0]")
    assert 1e300 in I("[0, :infinity]")
    assert 0 in I("(:neg_infinity, :infinity)")
    assert 1 not in I("(:neg_infinity, 0]")
    assert 0 not in I("(0, :infinity)")


def test_infinite_bound_skips_grid_alignment():
    assert 2.5 in I("[1, :infinity)//2")
    assert 2.5 in I("(:neg_infinity, 10]//2")


def test_empty_interval_contains_nothing():
    assert 3 not in I("(3, 3]//1")
    assert 5 not in make_interval("[", "]", INFINITY, 5, 1)
    assert 0 not in make_interval("[", "]", 0, NEG_INFINITY, 1)


def test_non_finite_and_non_numeric_queries():
    assert math.inf not in I("[0, :infinity]")
    assert math.nan not in I("(:neg_infinity, :infinity)")
    assert "1" not in I("[0, 10]")
    assert True not in I("[0, 10]")


def test_tolerance_accepts_rounding_error():
    ivl = I("[0, 1]//0.1")
    point = 0.1 * 3

    assert point in list(ivl)
    assert not contains_point(ivl, point)
    assert contains_point(ivl, point, tolerance=1e-9)
    assert contains_point(ivl, 0.7, tolerance=1e-9)
    assert not contains_point(ivl, 0.75, tolerance=1e-9)


def test_continuous_superset_checks_endpoints_only():
    outer = I("[0, 10]")

    assert I("[1, 5]") in outer
    assert I("[1, 5]//3") in outer
    assert I("[0, 10)//0.7") in outer
    assert I("[1, 11]") not in outer
    assert I("[-1, 5]//1") not in outer


def test_continuous_subset_of_stepped_superset_is_false():
    assert I("[2, 4]") not in I("[0, 10]//2")


def test_stepped_subset_requires_grid_alignment():
    outer = I("[0, 10]//2")

    assert I("[2, 6]//4") in outer
    assert I("[2, 6]//2") in outer
    assert I("[2, 6]//3") not in outer
    assert I("[1, 5]//4") not in outer
    assert I("[2, 12]//4") not in outer


def test_subset_with_infinite_endpoints():
    outer = I("(:neg_infinity, :infinity)")

    assert I("(:neg_infinity, 0]") in outer
    assert I("[0, :infinity)") in outer
    assert I("[0, :infinity)") not in I("[0, 100]")
    assert I("(:neg_infinity, 5]") not in I("[0, :infinity)")


def test_contains_interval_function_matches_operator():
    outer = I("[1, 10)//2")
    inner = I("[3, 7]//4")

    assert contains_interval(outer, inner) == (inner in outer)


def test_unrecognised_bracket_raises_invalid_specification():
    """Test that a bracket that slipped past validation is reported."""
    ivl = Interval(left=Bracket.INCLUSIVE, right=Bracket.INCLUSIVE, min=0, max=5)
    object.__setattr__(ivl, "left", "[")

    with pytest.raises(InvalidSpecification, match="left bracket"):
        contains_point(ivl, 1)
