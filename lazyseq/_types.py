"""
Core type definitions for lazyseq.

Типы и протоколы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator

if typing.TYPE_CHECKING:
    from kungfu import Option

    from .sizing import SizeHint

# ============================================================================
# Type aliases
# ============================================================================

# Folder = step function of a left fold: (accumulator, element) -> accumulator
type Folder[A, T] = Callable[[A, T], A]

# ============================================================================
# Lazy sequence capability
# ============================================================================


@typing.runtime_checkable
class LazySeq[T](typing.Protocol):
    """
    Full lazy-sequence capability set.

    Plain iterators only provide `__next__`; everything else has a stepwise
    default in `lazyseq._helpers`.
    """

    def __iter__(self) -> Iterator[T]: ...

    def __next__(self) -> T: ...

    def size_hint(self) -> SizeHint: ...

    def fold[A](self, init: A, f: Folder[A, T], /) -> A: ...

    def nth(self, n: int, /) -> Option[T]: ...

    def last(self) -> Option[T]: ...

    def count(self) -> int: ...


@typing.runtime_checkable
class ExactSizeSeq[T](LazySeq[T], typing.Protocol):
    """Lazy sequence that knows exactly how many elements remain."""

    def __len__(self) -> int: ...


__all__ = (
    # Type aliases
    "Folder",
    # Protocols
    "LazySeq",
    "ExactSizeSeq",
)
