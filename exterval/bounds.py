"""Extended-real bound values.

A bound is either a finite ``float`` or one of the two :class:`Infinite`
symbols. The symbols never take part in arithmetic; code that needs to step
from a bound checks :func:`is_infinite` first.
"""

import math
from enum import Enum
from typing import Any, TypeAlias

from typing_extensions import override

from exterval.errors import ConstructionError
from exterval.util import INFINITY_TOKEN, NEG_INFINITY_TOKEN


class Infinite(Enum):
    NEG_INFINITY = NEG_INFINITY_TOKEN
    INFINITY = INFINITY_TOKEN

    @override
    def __str__(self) -> str:
        return self.value


NEG_INFINITY = Infinite.NEG_INFINITY
INFINITY = Infinite.INFINITY

Bound: TypeAlias = float | Infinite


def is_infinite(value: Any) -> bool:
    return isinstance(value, Infinite)


def coerce_bound(value: Any, edge: str) -> Bound:
    """Normalise a user-supplied bound.

    Accepts ints, floats and :class:`Infinite` members. Float infinities are
    mapped onto the matching symbol so the rest of the package only ever sees
    one representation.

    Raises:
        ConstructionError: If the value is not a real number, or is NaN
    """
    if isinstance(value, Infinite):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConstructionError(
            f"Interval {edge} bound must be a real number or an Infinite symbol.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: use exterval.NEG_INFINITY / exterval.INFINITY for open ends"
        )
    value = float(value)
    if math.isnan(value):
        raise ConstructionError(f"Interval {edge} bound cannot be NaN")
    if math.isinf(value):
        return INFINITY if value > 0 else NEG_INFINITY
    return value


def format_bound(value: Bound) -> str:
    """Render a bound the way interval literals spell it."""
    if isinstance(value, Infinite):
        return str(value)
    return repr(float(value))
