"""
Fallback combinators
====================

Комбинаторы "первая последовательность, а если она пуста - вторая".

The choice is made by a single probe of the first source, on the first
consumption request of any kind. After that every pull goes to the chosen
source only; the other one is never touched again.
"""

from __future__ import annotations

import enum
import logging
import typing
from collections.abc import Iterable, Iterator
from typing import assert_never

from kungfu import Nothing, Some

from .._helpers import (
    END,
    check_index,
    count_of,
    fold_of,
    is_exact,
    last_of,
    nth_of,
    size_hint_of,
)
from .._types import Folder
from ..base import SeqBase
from ..lift.up import from_iter
from ..sizing import SizeHint

if typing.TYPE_CHECKING:
    from kungfu import Option

    from .._helpers import End

logger = logging.getLogger(__name__)


class State(enum.Enum):
    """Which source a FallbackSeq pulls from."""

    UNRESOLVED = enum.auto()
    COMMITTED_FIRST = enum.auto()
    COMMITTED_SECOND = enum.auto()


class FallbackSeq[T](SeqBase[T]):
    """
    Everything from `first` if it yields at least one element, otherwise
    everything from `second`.

    Not a chain: elements of the two sources are never mixed.

    Example:
        list(FallbackSeq(iter([]), iter([3])))   # [3]
        list(FallbackSeq(iter([1]), iter([3])))  # [1]
    """

    __slots__ = ("_first", "_second", "_state")

    def __init__(self, first: Iterator[T], second: Iterator[T], /) -> None:
        self._first = first
        self._second = second
        self._state = State.UNRESOLVED

    @property
    def state(self) -> State:
        return self._state

    def _probe(self) -> T | End:
        """Pull once from first and commit. Only valid while UNRESOLVED."""
        item = next(self._first, END)
        self._state = State.COMMITTED_SECOND if item is END else State.COMMITTED_FIRST
        logger.debug("fallback committed: %s", self._state.name)
        return item

    def __next__(self) -> T:
        match self._state:
            case State.UNRESOLVED:
                item = self._probe()
                if item is END:
                    return next(self._second)
                return item
            case State.COMMITTED_FIRST:
                return next(self._first)
            case State.COMMITTED_SECOND:
                return next(self._second)
            case _ as unreachable:
                assert_never(unreachable)

    def size_hint(self) -> SizeHint:
        match self._state:
            case State.UNRESOLVED:
                match size_hint_of(self._first):
                    case SizeHint(_, 0):
                        return size_hint_of(self._second)
                    case SizeHint(0, first_upper):
                        # first may be empty: then second is all there is
                        second = size_hint_of(self._second)
                        lower = 1 if second.lower > 0 else 0
                        if first_upper is None or second.upper is None:
                            return SizeHint(lower, None)
                        return SizeHint(lower, max(first_upper, second.upper))
                    case first_hint:
                        return first_hint
            case State.COMMITTED_FIRST:
                return size_hint_of(self._first)
            case State.COMMITTED_SECOND:
                return size_hint_of(self._second)
            case _ as unreachable:
                assert_never(unreachable)

    def fold[A](self, init: A, f: Folder[A, T], /) -> A:
        match self._state:
            case State.UNRESOLVED:
                item = self._probe()
                if item is END:
                    return fold_of(self._second, init, f)
                return fold_of(self._first, f(init, item), f)
            case State.COMMITTED_FIRST:
                return fold_of(self._first, init, f)
            case State.COMMITTED_SECOND:
                return fold_of(self._second, init, f)
            case _ as unreachable:
                assert_never(unreachable)

    def nth(self, n: int, /) -> Option[T]:
        check_index("nth", n)
        match self._state:
            case State.UNRESOLVED:
                item = self._probe()
                if item is END:
                    return nth_of(self._second, n)
                if n == 0:
                    return Some(item)
                return nth_of(self._first, n - 1)
            case State.COMMITTED_FIRST:
                return nth_of(self._first, n)
            case State.COMMITTED_SECOND:
                return nth_of(self._second, n)
            case _ as unreachable:
                assert_never(unreachable)

    def last(self) -> Option[T]:
        match self._state:
            case State.UNRESOLVED:
                item = self._probe()
                if item is END:
                    return last_of(self._second)
                match last_of(self._first):
                    case Nothing():
                        # the probe was the only element
                        return Some(item)
                    case found:
                        return found
            case State.COMMITTED_FIRST:
                return last_of(self._first)
            case State.COMMITTED_SECOND:
                return last_of(self._second)
            case _ as unreachable:
                assert_never(unreachable)

    def count(self) -> int:
        match self._state:
            case State.UNRESOLVED:
                item = self._probe()
                if item is END:
                    return count_of(self._second)
                return 1 + count_of(self._first)
            case State.COMMITTED_FIRST:
                return count_of(self._first)
            case State.COMMITTED_SECOND:
                return count_of(self._second)
            case _ as unreachable:
                assert_never(unreachable)

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}({self._first!r}, {self._second!r}, state={self._state.name})"


class ExactFallbackSeq[T](FallbackSeq[T]):
    """FallbackSeq over two exact-size sources; supports len()."""

    __slots__ = ()

    def __len__(self) -> int:
        # exact sources make the hint exact in every state
        return self.size_hint().lower


# ============================================================================
# Sugar
# ============================================================================


def or_else[T](first: Iterable[T], second: Iterable[T], /) -> FallbackSeq[T]:
    """
    Prefer first, use second only when first is empty.

    Both arguments are lifted with `lift.up.from_iter`. The result supports
    len() when both sides do.
    """
    a = from_iter(first)
    b = from_iter(second)
    if is_exact(a) and is_exact(b):
        return ExactFallbackSeq(a, b)
    return FallbackSeq(a, b)


def or_else_chain[T](*seqs: Iterable[T]) -> SeqBase[T]:
    """
    Try each in order, take the first non-empty one.

    `or_else_chain(x, y, z)` is `or_else(x, or_else(y, z))`.
    """
    if not seqs:
        raise ValueError("or_else_chain() requires at least one sequence")
    logger.debug("or_else_chain over %d sequences", len(seqs))

    *init, tail = seqs
    result: SeqBase[T] = from_iter(tail)
    for seq in reversed(init):
        result = or_else(seq, result)
    return result


__all__ = (
    "State",
    "FallbackSeq",
    "ExactFallbackSeq",
    "or_else",
    "or_else_chain",
)
