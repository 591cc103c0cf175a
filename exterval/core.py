import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from itertools import islice
from typing import Any, Generic, TypeAlias, TypeVar

from exterval.bounds import INFINITY, NEG_INFINITY, Bound, is_infinite
from exterval.errors import NotEnumerableError
from exterval.interval import Bracket, Interval

logger = logging.getLogger(__name__)

Acc = TypeVar("Acc")


@dataclass(frozen=True)
class Cursor:
    """Remaining traversal of an interval's grid.

    ``bound`` and ``bracket`` describe the far side being approached. Grid
    points are ``origin + index * step`` so rounding error does not build up
    over long traversals.
    """

    origin: float
    step: float
    bound: Bound
    bracket: Bracket
    index: int = 0

    @property
    def current(self) -> float:
        return self.origin + self.index * self.step

    def accepts(self) -> bool:
        """Return True if ``current`` lies on the near side of the far bound."""
        if is_infinite(self.bound):
            return True
        value = self.current
        if self.step > 0:
            if self.bracket is Bracket.INCLUSIVE:
                return value <= self.bound
            return value < self.bound
        if self.bracket is Bracket.INCLUSIVE:
            return value >= self.bound
        return value > self.bound

    def advance(self) -> "Cursor":
        return replace(self, index=self.index + 1)

    def at(self, index: int) -> "Cursor":
        return replace(self, index=index)


def _not_enumerable(interval: Interval) -> NotEnumerableError:
    logger.debug("refusing to enumerate continuous interval %s", interval)
    return NotEnumerableError(
        f"Cannot enumerate a continuous interval (no step).\n"
        f"Got: {interval}\n"
        f"Hint: add a step, e.g. I('{interval}//1')"
    )


def cursor(interval: Interval) -> Cursor | None:
    """Return the starting state of a traversal, or None if it has no elements.

    A positive step starts at ``min`` and walks up toward ``max``; a negative
    step starts at ``max`` and walks down toward ``min``. An exclusive start
    bracket moves the origin one step inward.

    Raises:
        NotEnumerableError: If the interval has no step
    """
    step = interval.step
    if step is None:
        raise _not_enumerable(interval)

    if interval.max is NEG_INFINITY or interval.min is INFINITY:
        return None

    if step > 0:
        near, near_bracket = interval.min, interval.left
        far, far_bracket = interval.max, interval.right
    else:
        near, near_bracket = interval.max, interval.right
        far, far_bracket = interval.min, interval.left

    if is_infinite(near):
        # Stepping away from an infinite bound never reaches a first grid point
        logger.debug("traversal of %s starts at %s; nothing to emit", interval, near)
        return None

    origin = near if near_bracket is Bracket.INCLUSIVE else near + step
    return Cursor(origin=origin, step=step, bound=far, bracket=far_bracket)


@dataclass(frozen=True)
class Cont(Generic[Acc]):
    """Keep folding with this accumulator."""

    acc: Acc


@dataclass(frozen=True)
class Halt(Generic[Acc]):
    """Stop folding and return this accumulator."""

    acc: Acc


@dataclass(frozen=True)
class Suspend(Generic[Acc]):
    """Pause folding; the result carries a continuation."""

    acc: Acc


Signal: TypeAlias = Cont[Any] | Halt[Any] | Suspend[Any]
Reducer: TypeAlias = Callable[[float, Any], Signal]


@dataclass(frozen=True)
class Done(Generic[Acc]):
    acc: Acc


@dataclass(frozen=True)
class Halted(Generic[Acc]):
    acc: Acc


@dataclass(frozen=True)
class Suspended(Generic[Acc]):
    """A paused fold.

    ``cursor`` is the untouched remainder of the traversal (None once the
    traversal has nothing left). Calling :meth:`resume` does not change this
    object, so the same suspension can be resumed more than once.
    """

    acc: Acc
    cursor: Cursor | None
    fun: Reducer

    def resume(self, signal: Signal) -> "Result":
        return _fold(self.cursor, signal, self.fun)


Result: TypeAlias = Done[Any] | Halted[Any] | Suspended[Any]


def _fold(position: Cursor | None, signal: Signal, fun: Reducer) -> Result:
    while True:
        if isinstance(signal, Halt):
            logger.debug("fold halted at %s", position)
            return Halted(signal.acc)
        if isinstance(signal, Suspend):
            logger.debug("fold suspended at %s", position)
            return Suspended(signal.acc, position, fun)
        if not isinstance(signal, Cont):
            raise TypeError(
                f"Reducer must return Cont, Halt or Suspend, "
                f"got {type(signal).__name__!r}: {signal!r}"
            )
        if position is None or not position.accepts():
            return Done(signal.acc)
        signal = fun(position.current, signal.acc)
        position = position.advance()


def fold(interval: Interval, signal: Signal, fun: Reducer) -> Result:
    """Reduce over the interval's grid points under caller control.

    ``fun(value, acc)`` is called for each grid point in traversal order and
    returns the next signal: :class:`Cont` to go on, :class:`Halt` to stop
    with its accumulator, or :class:`Suspend` to pause. A paused fold comes
    back as :class:`Suspended`; pass a new signal to its ``resume`` method to
    carry on from the next grid point.

    The initial ``signal`` is interpreted the same way, so a fold can be
    started already halted or suspended.

    Raises:
        NotEnumerableError: If the interval has no step

    Example:
        >>> fold(I("[1, 10)//2"), Cont(0.0), lambda v, acc: Cont(acc + v))
        Done(acc=25.0)
    """
    return _fold(cursor(interval), signal, fun)


def _walk(position: Cursor | None) -> Iterator[float]:
    while position is not None and position.accepts():
        yield position.current
        position = position.advance()


def iterate(interval: Interval) -> Iterator[float]:
    """Return a fresh lazy iterator over the interval's grid points.

    The iterator is infinite when the far bound is infinite; use
    :func:`take` or ``itertools.islice`` to consume a prefix.

    The n-th point is computed as ``origin + n * step`` rather than by adding
    ``step`` to the previous point, so values can differ in the last bit from
    a running sum, but rounding error does not build up along the traversal.

    Raises:
        NotEnumerableError: Immediately, if the interval has no step
    """
    return _walk(cursor(interval))


def take(interval: Interval, n: int) -> list[float]:
    """Return at most the first ``n`` grid points."""
    if n < 0:
        raise ValueError(f"take() count must be non-negative, got {n}")
    return list(islice(iterate(interval), n))


def to_list(interval: Interval) -> list[float]:
    """Return every grid point of a finite traversal.

    Raises:
        NotEnumerableError: If the interval has no step, or the traversal
            never ends because the far bound is infinite
    """
    start = cursor(interval)
    if start is not None and is_infinite(start.bound):
        raise NotEnumerableError(
            f"Cannot collect an unbounded traversal into a list.\n"
            f"Got: {interval}\n"
            f"Hint: use take(interval, n) or itertools.islice(iter(interval), n)"
        )
    return list(_walk(start))
