"""Parse interval literals.

Grammar::

    interval := left min "," max right ["//" step]
    left     := "[" | "("
    right    := "]" | ")"
    min, max := signed-number | ":neg_infinity" | ":infinity"
    step     := signed-number

Whitespace is allowed inside the brackets around the bounds and the comma.

Example:
    >>> from exterval import I
    >>> I("[1, 10)//2")
    I('[1.0,10.0)//2.0')
    >>> list(I("[-1, 3)//-0.5"))
    [2.5, 2.0, 1.5, 1.0, 0.5, 0.0, -0.5, -1.0]
"""

import logging
import math
import re

from exterval.bounds import INFINITY, NEG_INFINITY, Bound
from exterval.errors import ParseError, ZeroStepError
from exterval.interval import Bracket, Interval
from exterval.util import INFINITY_TOKEN, NEG_INFINITY_TOKEN, STEP_SEPARATOR

logger = logging.getLogger(__name__)

_NUMBER = r"[-+]?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?"
_BOUND = rf"{_NUMBER}|{re.escape(NEG_INFINITY_TOKEN)}|{re.escape(INFINITY_TOKEN)}"

_LITERAL = re.compile(
    rf"^(?P<left>[\[(])\s*(?P<min>{_BOUND})\s*,\s*(?P<max>{_BOUND})\s*(?P<right>[\])])"
    rf"(?:{re.escape(STEP_SEPARATOR)}(?P<step>{_NUMBER}))?$"
)

_SYMBOLS: dict[str, Bound] = {
    NEG_INFINITY_TOKEN: NEG_INFINITY,
    INFINITY_TOKEN: INFINITY,
}


def _number(token: str, text: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ParseError(
            f"Number {token!r} overflows double precision in literal {text!r}\n"
            f"Hint: write {NEG_INFINITY_TOKEN} or {INFINITY_TOKEN} for an open end"
        )
    return value


def _bound(token: str, text: str) -> Bound:
    if token in _SYMBOLS:
        return _SYMBOLS[token]
    return _number(token, text)


def parse(text: str) -> Interval:
    """Build an :class:`Interval` from its literal notation.

    Raises:
        ParseError: If ``text`` does not match the grammar, or a number in it
            overflows double precision
        RangeOrderError: If both bounds are finite and ``max < min``
        ZeroStepError: If the step is zero
    """
    if not isinstance(text, str):
        raise ParseError(
            f"Interval literal must be a string, got {type(text).__name__!r}"
        )

    match = _LITERAL.match(text.strip())
    if match is None:
        raise ParseError(
            f"Invalid interval literal: {text!r}\n"
            f"Expected: <[|(> min, max <]|)> [//step]\n"
            f"Examples: '[1, 10)', '(0, :infinity]//0.5', "
            f"'[{NEG_INFINITY_TOKEN}, 0]'"
        )

    step_token = match["step"]
    step = _number(step_token, text) if step_token is not None else None
    if step == 0:
        raise ZeroStepError(f"Interval step cannot be zero, got {text!r}")

    interval = Interval(
        left=Bracket.from_left(match["left"]),
        right=Bracket.from_right(match["right"]),
        min=_bound(match["min"], text),
        max=_bound(match["max"], text),
        step=step,
    )
    logger.debug("parsed %r as %s", text, interval)
    return interval


I = parse
