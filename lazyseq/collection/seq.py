"""Seq adapters

Обёртки над обычными Python iterable, реализующие полный контракт."""

from __future__ import annotations

import itertools
import typing
from collections.abc import Iterable, Sized

from kungfu import Nothing, Some

from .._helpers import END, check_index, size_hint_of
from ..base import SeqBase
from ..sizing import SizeHint

if typing.TYPE_CHECKING:
    from kungfu import Option


class Seq[T](SeqBase[T]):
    """Lazy sequence over any iterable. Size is unknown unless the iterator says so."""

    __slots__ = ("_it",)

    def __init__(self, iterable: Iterable[T], /) -> None:
        self._it = iter(iterable)

    def __next__(self) -> T:
        return next(self._it)

    def size_hint(self) -> SizeHint:
        return size_hint_of(self._it)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._it!r})"


class ExactSeq[T](Seq[T]):
    """
    Lazy sequence over a sized collection.

    The remaining length is tracked on every step, so `len()` and `count()`
    never need to walk the collection. fold() and last() step through
    `__next__`, so the count stays right if a folder raises midway.
    """

    __slots__ = ("_remaining",)

    def __init__(self, items: Iterable[T], /) -> None:
        if not isinstance(items, Sized):
            raise TypeError(f"ExactSeq() requires a sized iterable, got {type(items).__name__}")
        self._remaining = len(items)
        super().__init__(items)

    def __next__(self) -> T:
        item = next(self._it)
        self._remaining -= 1
        return item

    def __len__(self) -> int:
        return self._remaining

    def size_hint(self) -> SizeHint:
        return SizeHint.exact(self._remaining)

    def nth(self, n: int, /) -> Option[T]:
        check_index("nth", n)
        item = next(itertools.islice(self._it, n, None), END)
        if item is END:
            self._remaining = 0
            return Nothing()
        self._remaining -= n + 1
        return Some(item)

    def count(self) -> int:
        n = self._remaining
        self._remaining = 0
        self._it = iter(())
        return n


class Repeat[T](SeqBase[T]):
    """The same element forever."""

    __slots__ = ("_item",)

    def __init__(self, item: T, /) -> None:
        self._item = item

    def __next__(self) -> T:
        return self._item

    def size_hint(self) -> SizeHint:
        return SizeHint.infinite()

    def nth(self, n: int, /) -> Option[T]:
        check_index("nth", n)
        return Some(self._item)

    def __repr__(self) -> str:
        return f"Repeat({self._item!r})"


__all__ = ("Seq", "ExactSeq", "Repeat")
