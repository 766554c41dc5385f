"""Internal helpers for lazyseq.

Stepwise defaults for the bulk operations and dispatchers that prefer a
source's own accelerated version when it has one. These are not part of the
public API but can be used for writing custom sequences."""

from __future__ import annotations

import enum
import itertools
import typing
from collections.abc import Iterator, Sized

from kungfu import Nothing, Some

from ._types import Folder
from .sizing import SizeHint

if typing.TYPE_CHECKING:
    from kungfu import Option


# End-of-sequence marker for single-step pulls (`next(it, END)`)
class End(enum.Enum):
    END = enum.auto()


END: typing.Final = End.END


# Stepwise defaults (everything in terms of __next__)
def fold_steps[A, T](it: Iterator[T], init: A, f: Folder[A, T], /) -> A:
    """Left fold by repeated single steps."""
    acc = init
    for item in it:
        acc = f(acc, item)
    return acc


def nth_steps[T](it: Iterator[T], n: int, /) -> Option[T]:
    """Discard n elements, return the next one."""
    item = next(itertools.islice(it, n, None), END)
    if item is END:
        return Nothing()
    return Some(item)


def last_steps[T](it: Iterator[T], /) -> Option[T]:
    """Drain the iterator, keep the final element."""
    last: T | End = END
    for item in it:
        last = item
    if last is END:
        return Nothing()
    return Some(last)


def count_steps(it: Iterator[typing.Any], /) -> int:
    """Drain the iterator, count what it yielded."""
    return sum(1 for _ in it)


# Dispatchers (accelerated if the source has it, stepwise otherwise)
def size_hint_of(src: Iterator[typing.Any], /) -> SizeHint:
    """
    Size hint of any iterator.

    Sized sources are exact; plain iterators report nothing.
    NOTE: `operator.length_hint` is not used, it is allowed to overestimate.
    """
    size_hint = getattr(src, "size_hint", None)
    if size_hint is not None:
        return size_hint()
    if isinstance(src, Sized):
        return SizeHint.exact(len(src))
    return SizeHint.unknown()


def fold_of[A, T](src: Iterator[T], init: A, f: Folder[A, T], /) -> A:
    fold = getattr(src, "fold", None)
    if fold is not None:
        return fold(init, f)
    return fold_steps(src, init, f)


def nth_of[T](src: Iterator[T], n: int, /) -> Option[T]:
    nth = getattr(src, "nth", None)
    if nth is not None:
        return nth(n)
    return nth_steps(src, n)


def last_of[T](src: Iterator[T], /) -> Option[T]:
    last = getattr(src, "last", None)
    if last is not None:
        return last()
    return last_steps(src)


def count_of(src: Iterator[typing.Any], /) -> int:
    count = getattr(src, "count", None)
    if count is not None:
        return count()
    return count_steps(src)


def is_exact(src: object, /) -> bool:
    """Whether src can report its exact remaining length via len()."""
    return isinstance(src, Sized)


def check_index(fn_name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{fn_name}(): n must be >= 0, got {n}")


__all__ = (
    # Sentinel
    "END",
    "End",
    # Stepwise defaults
    "fold_steps",
    "nth_steps",
    "last_steps",
    "count_steps",
    # Dispatchers
    "size_hint_of",
    "fold_of",
    "nth_of",
    "last_of",
    "count_of",
    "is_exact",
    # Argument checks
    "check_index",
)
