import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from exterval.bounds import Bound, coerce_bound, format_bound, is_infinite
from exterval.errors import (
    ConstructionError,
    InvalidBracketError,
    RangeOrderError,
    ZeroStepError,
)
from exterval.util import STEP_SEPARATOR

if TYPE_CHECKING:
    from exterval.metrics import Size


class Bracket(Enum):
    """Whether an endpoint belongs to the interval."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"

    @classmethod
    def from_left(cls, char: str) -> "Bracket":
        return _bracket_from(char, {"[": cls.INCLUSIVE, "(": cls.EXCLUSIVE}, "left")

    @classmethod
    def from_right(cls, char: str) -> "Bracket":
        return _bracket_from(char, {"]": cls.INCLUSIVE, ")": cls.EXCLUSIVE}, "right")

    def left_char(self) -> str:
        return "[" if self is Bracket.INCLUSIVE else "("

    def right_char(self) -> str:
        return "]" if self is Bracket.INCLUSIVE else ")"


def _bracket_from(char: Any, table: dict[str, Bracket], edge: str) -> Bracket:
    if isinstance(char, Bracket):
        return char
    if char not in table:
        valid = " or ".join(repr(c) for c in table)
        raise InvalidBracketError(
            f"Invalid {edge} bracket {char!r}. Valid brackets: {valid}"
        )
    return table[char]


@dataclass(frozen=True, kw_only=True)
class Interval:
    """A real interval, optionally discretized by a step.

    Attributes:
        left: Inclusivity of ``min``
        right: Inclusivity of ``max``
        min: Lower bound, a float or ``NEG_INFINITY``
        max: Upper bound, a float or ``INFINITY``
        step: Spacing between grid points. Its sign sets the direction of
            enumeration; ``None`` makes the interval continuous.

    Instances are immutable. All validation happens here, so any
    ``Interval`` that exists satisfies ``min <= max`` (when both are finite)
    and has a nonzero step.
    """

    left: Bracket
    right: Bracket
    min: Bound
    max: Bound
    step: float | None = None

    def __post_init__(self) -> None:
        for name in ("left", "right"):
            if not isinstance(getattr(self, name), Bracket):
                raise InvalidBracketError(
                    f"Interval {name} bracket must be a Bracket member.\n"
                    f"Got {getattr(self, name)!r}\n"
                    f"Hint: use make_interval() to pass bracket characters"
                )

        lower = coerce_bound(self.min, "lower")
        upper = coerce_bound(self.max, "upper")
        object.__setattr__(self, "min", lower)
        object.__setattr__(self, "max", upper)

        if not is_infinite(lower) and not is_infinite(upper) and upper < lower:
            raise RangeOrderError(
                f"Interval lower bound must not exceed upper bound.\n"
                f"Got: min={lower}, max={upper}\n"
                f"Hint: to enumerate from the upper bound down, keep the bounds "
                f"ordered and use a negative step"
            )

        if self.step is not None:
            if isinstance(self.step, bool) or not isinstance(self.step, (int, float)):
                raise ConstructionError(
                    f"Interval step must be a real number or None, "
                    f"got {type(self.step).__name__!r}: {self.step!r}"
                )
            step = float(self.step)
            if step == 0:
                raise ZeroStepError("Interval step cannot be zero")
            if not math.isfinite(step):
                raise ConstructionError(f"Interval step must be finite, got {step}")
            object.__setattr__(self, "step", step)

    @property
    def size(self) -> "Size":
        from exterval.metrics import size

        return size(self)

    def __iter__(self) -> Iterator[float]:
        from exterval.core import iterate

        return iterate(self)

    def __contains__(self, item: Any) -> bool:
        from exterval.membership import contains_interval, contains_point

        if isinstance(item, Interval):
            return contains_interval(self, item)
        return contains_point(self, item)

    @override
    def __str__(self) -> str:
        text = (
            f"{self.left.left_char()}{format_bound(self.min)},"
            f"{format_bound(self.max)}{self.right.right_char()}"
        )
        if self.step is not None:
            text += f"{STEP_SEPARATOR}{self.step!r}"
        return text

    @override
    def __repr__(self) -> str:
        return f"I({str(self)!r})"


def make_interval(
    left: Bracket | str,
    right: Bracket | str,
    min: Any,
    max: Any,
    step: float | None = None,
) -> Interval:
    """Build an interval from brackets given as members or characters.

    Example:
        >>> make_interval("[", ")", 1, 10, 2)
        I('[1.0,10.0)//2.0')
    """
    return Interval(
        left=Bracket.from_left(left),
        right=Bracket.from_right(right),
        min=min,
        max=max,
        step=step,
    )
