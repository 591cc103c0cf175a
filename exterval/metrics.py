"""Cardinality of intervals.

:func:`size` answers in closed form, without walking the grid, using exact
rational arithmetic so extreme finite bounds neither overflow nor stall. While
grid indices stay exactly representable as floats (below 2**53) the count
agrees with the number of elements :func:`exterval.core.iterate` yields for
the same interval.
"""

import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import TypeAlias

from exterval.bounds import INFINITY, NEG_INFINITY, is_infinite
from exterval.core import Cursor, cursor
from exterval.interval import Bracket, Interval


class UnboundedReason(Enum):
    CONTINUOUS = "continuous"
    INFINITE_BOUND = "infinite_bound"


@dataclass(frozen=True)
class Exact:
    count: int


@dataclass(frozen=True)
class Unbounded:
    """No finite count exists, either because there is no step or a bound is infinite."""

    reason: UnboundedReason


Size: TypeAlias = Exact | Unbounded

# Largest grid index whose float conversion is exact
_EXACT_INDEX_LIMIT = 2**53


def _grid_count(start: Cursor) -> int:
    if not math.isfinite(start.origin):
        # The exclusive start overflowed past the far bound
        return 0

    # Signed number of steps from the origin to the far bound, in exact
    # rational arithmetic; negative when the origin already lies past it.
    span = (Fraction(start.bound) - Fraction(start.origin)) / Fraction(start.step)
    if start.bracket is Bracket.INCLUSIVE:
        count = math.floor(span) + 1 if span >= 0 else 0
    else:
        count = math.ceil(span) if span > 0 else 0

    # origin + index * step rounds, so the float grid point at the edge can
    # land on the other side of the bound. Settle it with the traversal's own
    # predicate while indices are still exact floats.
    if count <= _EXACT_INDEX_LIMIT:
        if start.at(count).accepts():
            count += 1
        elif count > 0 and not start.at(count - 1).accepts():
            count -= 1
    return count


def size(interval: Interval) -> Size:
    """Return the number of grid points in the interval.

    - No step: ``Unbounded(CONTINUOUS)``
    - ``max`` is ``NEG_INFINITY`` or ``min`` is ``INFINITY``: ``Exact(0)``
    - Any other infinite bound: ``Unbounded(INFINITE_BOUND)``
    - Otherwise the exact count, which does not depend on the step's sign

    Example:
        >>> size(I("[1,2]//0.5")), size(I("[1,2]//-0.5"))
        (Exact(count=3), Exact(count=3))
    """
    if interval.step is None:
        return Unbounded(UnboundedReason.CONTINUOUS)
    if interval.max is NEG_INFINITY or interval.min is INFINITY:
        return Exact(0)
    if is_infinite(interval.min) or is_infinite(interval.max):
        return Unbounded(UnboundedReason.INFINITE_BOUND)

    start = cursor(interval)
    if start is None:
        return Exact(0)
    return Exact(_grid_count(start))
