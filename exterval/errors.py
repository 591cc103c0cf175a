"""Exception types raised by exterval.

Every error derives from :class:`ExtervalError`, and also from the builtin
exception a caller would expect (``ValueError`` for bad values, ``TypeError``
for refusing to iterate), so both styles of ``except`` clause work.
"""


class ExtervalError(Exception):
    """Base class for all exterval errors."""


class ConstructionError(ExtervalError, ValueError):
    """An interval could not be built from the given fields or literal."""


class ParseError(ConstructionError):
    """The text is not a valid interval literal."""


class RangeOrderError(ConstructionError):
    """The lower bound exceeds the upper bound."""


class ZeroStepError(ConstructionError):
    """The step is zero."""


class InvalidBracketError(ConstructionError):
    """A bracket is not one of the recognised markers."""


class NotEnumerableError(ExtervalError, TypeError):
    """The interval has no step, or no finite traversal where one is required."""


class InvalidSpecification(ExtervalError, ValueError):
    """Membership was evaluated on a bracket/bound combination it cannot handle."""
