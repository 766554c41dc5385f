"""
Подъем значений в ленивую последовательность.

Функции для превращения обычных значений и Python iterable в SeqBase.
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import Never

from ..base import SeqBase
from ..collection.seq import ExactSeq, Repeat, Seq


def from_iter[T](iterable: Iterable[T], /) -> SeqBase[T]:
    """
    Lift any iterable into a lazy sequence.

    **When to use:** Whenever a list, generator or plain iterator has to be
    used as a source with the full contract.

    Example:
        from lazyseq import lift as L

        L.up.from_iter([1, 2, 3])       # ExactSeq, len() == 3
        L.up.from_iter(x for x in xs)   # Seq, size unknown

    NOTE: SeqBase instances are returned as-is. Sized collections get an ExactSeq;
          the collection itself is not copied, only iterated.
    """
    if isinstance(iterable, SeqBase):
        return iterable
    if isinstance(iterable, Sized):
        return ExactSeq(iterable)
    return Seq(iterable)


def of[T](*items: T) -> SeqBase[T]:
    """
    Lazy sequence over the given items.

    Example:
        L.up.of(1, 2, 3)
    """
    return ExactSeq(items)


def once[T](item: T, /) -> SeqBase[T]:
    """Exactly one element."""
    return ExactSeq((item,))


def empty() -> SeqBase[Never]:
    """
    No elements at all.

    **Grammar:** `x.or_else(L.up.empty())` reads as "x, or else nothing".
    """
    return ExactSeq(())


def repeat[T](item: T, /) -> SeqBase[T]:
    """
    The same element forever.

    NOTE: count(), last() and fold() on it never return.
    """
    return Repeat(item)


__all__ = (
    "from_iter",
    "of",
    "once",
    "empty",
    "repeat",
)
