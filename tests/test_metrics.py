"""Tests for the size oracle and its agreement with enumeration."""

from exterval import (
    INFINITY,
    NEG_INFINITY,
    Exact,
    I,
    Unbounded,
    UnboundedReason,
    make_interval,
    size,
    to_list,
)


def test_stepped_interval_sizes():
    assert size(I("[1, 10)//2")) == Exact(5)
    assert size(I("[-2,-2]//1.0")) == Exact(1)
    assert size(I("[1,2]//0.5")) == Exact(3)
    assert size(I("[-2,-1]//0.75")) == Exact(2)


def test_step_sign_does_not_change_size():
    assert size(I("[1,2]//-0.5")) == Exact(3)
    assert size(I("[1,2]//0.5")) == size(I("[1,2]//-0.5"))


def test_continuous_interval_is_unbounded():
    result = size(I("[1, 10]"))

    assert isinstance(result, Unbounded)
    assert result.reason is UnboundedReason.CONTINUOUS


def test_infinite_bound_with_step_is_unbounded():
    for literal in ["[1, :infinity)//1", "(:neg_infinity, 0]//1", "(:neg_infinity, 0]//-1"]:
        assert size(I(literal)) == Unbounded(UnboundedReason.INFINITE_BOUND)


def test_structurally_empty_intervals_have_size_zero():
    assert size(make_interval("[", "]", INFINITY, 5, 1)) == Exact(0)
    assert size(make_interval("[", "]", 0, NEG_INFINITY, 1)) == Exact(0)


def test_excluded_singleton_is_empty():
    assert size(I("(3, 3]//1")) == Exact(0)
    assert size(I("[3, 3)//-1")) == Exact(0)
    assert size(I("(3, 3)//0.5")) == Exact(0)


def test_step_wider_than_interval():
    assert size(I("[0, 1]//5")) == Exact(1)
    assert size(I("(0, 1]//5")) == Exact(0)
    assert size(I("[0, 1)//-5")) == Exact(0)


def test_size_property_matches_function():
    ivl = I("(1, 10)//2")

    assert ivl.size == size(ivl) == Exact(4)


def test_size_is_idempotent():
    ivl = I("[-1, 3)//-0.5")

    assert size(ivl) == size(ivl) == Exact(8)


def test_size_agrees_with_enumeration_for_all_bracket_pairs():
    """Test every bracket pair with both step signs, on and off the grid."""
    bounds = [(0, 10), (1, 10), (-2, -1), (-3.5, 4.25), (0, 1), (5, 5), (0, 0.3)]
    steps = [1, 2, 0.75, 0.5, 0.1, 3, 0.3]
    for lo, hi in bounds:
        for magnitude in steps:
            for step in (magnitude, -magnitude):
                for left in "[(":
                    for right in "])":
                        ivl = make_interval(left, right, lo, hi, step)
                        assert size(ivl) == Exact(len(to_list(ivl))), str(ivl)


def test_size_on_extreme_finite_bounds():
    """Test that a span wider than the largest float still has an exact count."""
    assert size(I("[-1e308, 1e308]//1")) == Exact(2 * int(1e308) + 1)
    assert size(I("(-1e308, 1e308)//1e308")) == Exact(1)
    assert size(I("(1e308, 1.7e308]//1e308")) == Exact(0)


def test_size_returns_for_counts_beyond_float_resolution():
    """Test that counts far larger than the float grid can resolve are closed form."""
    assert size(I("[0, 1e30]//1")) == Exact(int(1e30) + 1)
    assert size(I("(0, 1e30]//-1")) == Exact(int(1e30))
    assert size(I("[1e-300, 1e300]//5e-324")).count > 10**600
