"""Shared fixtures: sources that record how they are used."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from lazyseq import ExactSeq, SeqBase, SizeHint


class Tracked(SeqBase[int]):
    """Source that records every operation called on it."""

    def __init__(self, items: Iterable[int]) -> None:
        self._inner = ExactSeq(list(items))
        self.calls: list[str] = []

    def __next__(self) -> int:
        self.calls.append("next")
        return next(self._inner)

    def size_hint(self) -> SizeHint:
        self.calls.append("size_hint")
        return self._inner.size_hint()

    def fold(self, init, f, /):
        self.calls.append("fold")
        return self._inner.fold(init, f)

    def nth(self, n, /):
        self.calls.append("nth")
        return self._inner.nth(n)

    def last(self):
        self.calls.append("last")
        return self._inner.last()

    def count(self) -> int:
        self.calls.append("count")
        return self._inner.count()

    @property
    def pulls(self) -> list[str]:
        """Consuming calls only (size_hint is read-only)."""
        return [call for call in self.calls if call != "size_hint"]

    @property
    def touched(self) -> bool:
        return bool(self.calls)


class Hinted(SeqBase[int]):
    """Source that reports a fixed size hint and yields the given items."""

    def __init__(self, items: Iterable[int], hint: SizeHint) -> None:
        self._it = iter(list(items))
        self._hint = hint

    def __next__(self) -> int:
        return next(self._it)

    def size_hint(self) -> SizeHint:
        return self._hint


@pytest.fixture
def tracked() -> type[Tracked]:
    return Tracked


@pytest.fixture
def hinted() -> type[Hinted]:
    return Hinted
