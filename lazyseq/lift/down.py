"""
Опускание ленивой последовательности в обычные значения.
"""

from __future__ import annotations

import typing
from collections.abc import Iterator

from .._helpers import fold_of, nth_of

if typing.TYPE_CHECKING:
    from kungfu import Option


def to_list[T](seq: Iterator[T], /) -> list[T]:
    """
    Consume the sequence into a list, through its own fold.

    Example:
        from lazyseq import lift as L

        L.down.to_list(L.up.of(1, 2).or_else(L.up.of(3)))  # [1, 2]
    """
    items: list[T] = []

    def push(acc: list[T], item: T) -> list[T]:
        acc.append(item)
        return acc

    return fold_of(seq, items, push)


def first[T](seq: Iterator[T], /) -> Option[T]:
    """
    Next element as Some(...), or Nothing() if the sequence is exhausted.

    **Grammar:** `L.down.first(seq)` reads as "take down the first element"
    """
    return nth_of(seq, 0)


__all__ = ("to_list", "first")
