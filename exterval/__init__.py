from .bounds import INFINITY, NEG_INFINITY, Bound, Infinite
from .core import (
    Cont,
    Cursor,
    Done,
    Halt,
    Halted,
    Suspend,
    Suspended,
    fold,
    iterate,
    take,
    to_list,
)
from .errors import (
    ConstructionError,
    ExtervalError,
    InvalidBracketError,
    InvalidSpecification,
    NotEnumerableError,
    ParseError,
    RangeOrderError,
    ZeroStepError,
)
from .interval import Bracket, Interval, make_interval
from .membership import contains_interval, contains_point
from .metrics import Exact, Size, Unbounded, UnboundedReason, size
from .parser import I, parse

__all__ = [
    "Interval",
    "Bracket",
    "Bound",
    "Infinite",
    "INFINITY",
    "NEG_INFINITY",
    "make_interval",
    "parse",
    "I",
    "size",
    "Size",
    "Exact",
    "Unbounded",
    "UnboundedReason",
    "contains_point",
    "contains_interval",
    "iterate",
    "take",
    "to_list",
    "fold",
    "Cursor",
    "Cont",
    "Halt",
    "Suspend",
    "Done",
    "Halted",
    "Suspended",
    "ExtervalError",
    "ConstructionError",
    "ParseError",
    "RangeOrderError",
    "ZeroStepError",
    "InvalidBracketError",
    "NotEnumerableError",
    "InvalidSpecification",
]
