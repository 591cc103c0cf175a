"""Point and subset membership.

Both checks work from bounds and step arithmetic alone; neither enumerates.
"""

import math
from fractions import Fraction
from typing import Any

from exterval.bounds import INFINITY, NEG_INFINITY, Bound, is_infinite
from exterval.errors import InvalidSpecification
from exterval.interval import Bracket, Interval
from exterval.metrics import Exact, size
from exterval.util import DEFAULT_TOLERANCE


def _is_multiple(value: float, step: float, tolerance: float) -> bool:
    remainder = abs(math.fmod(value, step))
    if tolerance <= 0:
        return remainder == 0
    return remainder <= tolerance or abs(step) - remainder <= tolerance


def _above(value: float, bound: Bound, bracket: Bracket) -> bool:
    if bound is NEG_INFINITY:
        return True
    if bound is INFINITY:
        return False
    if bracket is Bracket.INCLUSIVE:
        return value >= bound
    if bracket is Bracket.EXCLUSIVE:
        return value > bound
    raise InvalidSpecification(f"Unrecognised left bracket {bracket!r}")


def _below(value: float, bound: Bound, bracket: Bracket) -> bool:
    if bound is INFINITY:
        return True
    if bound is NEG_INFINITY:
        return False
    if bracket is Bracket.INCLUSIVE:
        return value <= bound
    if bracket is Bracket.EXCLUSIVE:
        return value < bound
    raise InvalidSpecification(f"Unrecognised right bracket {bracket!r}")


def contains_point(
    interval: Interval, value: Any, *, tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """Return True if ``value`` is an element of the interval.

    Checks the bounds (an infinite bound constrains nothing on its side,
    whatever its bracket), and for stepped intervals with two finite bounds,
    that ``value`` lies on the grid anchored at ``min``, whatever the step's
    sign. For a negative step whose width is not a multiple of the step, the
    points enumeration emits from ``max`` are therefore not all members.

    Grid alignment uses ``math.fmod`` and is exact by default, so steps that
    are not representable in binary (0.1, 0.3, ...) can reject points that
    enumeration produces. Pass ``tolerance`` to accept remainders within that
    distance of a grid point.

    Example:
        >>> 1 in I("[1, 10)//2"), 2 in I("[1, 10)//2")
        (True, False)
    """
    if size(interval) == Exact(0):
        return False
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if not math.isfinite(value):
        return False

    within = _above(value, interval.min, interval.left) and _below(
        value, interval.max, interval.right
    )
    if not within:
        return False

    step = interval.step
    if step is None or is_infinite(interval.min) or is_infinite(interval.max):
        return True

    offset = value - interval.min
    if math.isinf(offset):
        # The difference overflows; take the remainder in exact arithmetic
        offset = float((Fraction(value) - Fraction(interval.min)) % Fraction(step))
    return _is_multiple(offset, step, tolerance)


def _contains_endpoint(
    outer: Interval, value: Bound, tolerance: float
) -> bool:
    # An infinite endpoint fits only under the same infinite bound
    if value is NEG_INFINITY:
        return outer.min is NEG_INFINITY
    if value is INFINITY:
        return outer.max is INFINITY
    return contains_point(outer, value, tolerance=tolerance)


def contains_interval(
    outer: Interval, inner: Interval, *, tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """Return True if ``inner`` is a subset of ``outer``.

    - ``outer`` continuous: both endpoints of ``inner`` are members of ``outer``
    - ``outer`` stepped, ``inner`` continuous: never a subset
    - both stepped: endpoints are members and ``inner.step`` is a multiple of
      ``outer.step``

    Endpoints are tested as values, regardless of ``inner``'s own brackets.
    """
    if not _contains_endpoint(outer, inner.max, tolerance):
        return False
    if not _contains_endpoint(outer, inner.min, tolerance):
        return False
    if outer.step is None:
        return True
    if inner.step is None:
        return False
    return _is_multiple(inner.step, outer.step, tolerance)
