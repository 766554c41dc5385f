"""
SeqBase - базовый класс ленивой последовательности
===================================================

Implements the full lazy-sequence contract on top of a single abstract
`__next__`. Subclasses override the bulk operations when they can do better
than stepping one element at a time.
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Iterable, Iterator, Sized

from ._helpers import check_index, count_steps, fold_steps, last_steps, nth_steps
from ._types import Folder
from .sizing import SizeHint

if typing.TYPE_CHECKING:
    from kungfu import Option

    from .control.fallback import FallbackSeq


class SeqBase[T](Iterator[T]):
    """
    Forward-only, destructive lazy sequence.

    Bulk operations must agree with repeated `next()`: same elements, same
    order, same count.
    """

    __slots__ = ()

    @abc.abstractmethod
    def __next__(self) -> T:
        """Single-step advance. Raises StopIteration at the end."""
        raise NotImplementedError

    def size_hint(self) -> SizeHint:
        """Sound bounds on the remaining length, without consuming."""
        if isinstance(self, Sized):
            return SizeHint.exact(len(self))
        return SizeHint.unknown()

    def __length_hint__(self) -> int:
        return self.size_hint().lower

    def fold[A](self, init: A, f: Folder[A, T], /) -> A:
        """Combine every remaining element into init, left to right."""
        return fold_steps(self, init, f)

    def nth(self, n: int, /) -> Option[T]:
        """Discard n elements and return the next one, or Nothing()."""
        check_index("nth", n)
        return nth_steps(self, n)

    def last(self) -> Option[T]:
        """Consume everything, return the final element."""
        return last_steps(self)

    def count(self) -> int:
        """Consume everything, return how many elements there were."""
        return count_steps(self)

    # Fluent sugar

    def or_else(self, other: Iterable[T], /) -> FallbackSeq[T]:
        """
        This sequence if it yields anything, otherwise other.

        Example:
            cached.or_else(fetched).or_else(defaults)
        """
        from .control.fallback import or_else
        return or_else(self, other)


__all__ = ("SeqBase",)
