"""Tests for the Seq adapters, the lift helpers and the stepwise defaults."""

from __future__ import annotations

import operator

import pytest
from kungfu import Nothing

from lazyseq import (
    ExactSeq,
    ExactSizeSeq,
    FallbackSeq,
    LazySeq,
    Repeat,
    Seq,
    SeqBase,
    SizeHint,
    or_else,
)
from lazyseq import _helpers
from lazyseq import lift as L


class Countdown(SeqBase[int]):
    """Only implements __next__; everything else is the SeqBase default."""

    def __init__(self, start: int) -> None:
        self._n = start

    def __next__(self) -> int:
        if self._n <= 0:
            raise StopIteration
        self._n -= 1
        return self._n + 1


class TestSeqBaseDefaults:
    def test_next(self):
        assert list(Countdown(3)) == [3, 2, 1]

    def test_size_hint_unknown(self):
        assert Countdown(3).size_hint() == SizeHint.unknown()

    def test_fold(self):
        assert Countdown(4).fold(0, operator.add) == 10

    def test_nth(self):
        seq = Countdown(5)
        assert seq.nth(1).unwrap() == 4
        assert next(seq) == 3
        assert isinstance(seq.nth(5), Nothing)

    def test_nth_negative(self):
        with pytest.raises(ValueError, match="nth"):
            Countdown(1).nth(-2)

    def test_last(self):
        assert Countdown(3).last().unwrap() == 1
        assert isinstance(Countdown(0).last(), Nothing)

    def test_count(self):
        assert Countdown(6).count() == 6

    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            SeqBase()  # type: ignore[abstract]


class TestExactSeq:
    def test_len_tracks_next(self):
        seq = ExactSeq([1, 2, 3])
        assert len(seq) == 3
        next(seq)
        assert len(seq) == 2
        assert seq.size_hint() == SizeHint.exact(2)

    def test_nth(self):
        seq = ExactSeq([1, 2, 3, 4])
        assert seq.nth(2).unwrap() == 3
        assert len(seq) == 1
        assert isinstance(seq.nth(3), Nothing)
        assert len(seq) == 0

    def test_count_without_stepping(self):
        seq = ExactSeq(range(1000))
        assert seq.count() == 1000
        assert len(seq) == 0
        assert list(seq) == []

    def test_fold_and_last_drain(self):
        seq = ExactSeq([1, 2])
        assert seq.fold(0, operator.add) == 3
        assert len(seq) == 0
        seq = ExactSeq([1, 2])
        assert seq.last().unwrap() == 2
        assert len(seq) == 0

    def test_fold_raising_midway_keeps_len(self):
        seq = ExactSeq([1, 2, 3])

        def boom(acc: int, item: int) -> int:
            raise RuntimeError(item)

        with pytest.raises(RuntimeError):
            seq.fold(0, boom)
        assert len(seq) == 2
        assert list(seq) == [2, 3]

    def test_rejects_unsized(self):
        with pytest.raises(TypeError, match="sized"):
            ExactSeq(x for x in [1])


class TestSeq:
    def test_wraps_generator(self):
        seq = Seq(x * 2 for x in range(3))
        assert seq.size_hint() == SizeHint.unknown()
        assert list(seq) == [0, 2, 4]

    def test_not_sized(self):
        with pytest.raises(TypeError):
            len(Seq(iter([1])))  # type: ignore[arg-type]


class TestRepeat:
    def test_infinite(self):
        seq = Repeat("x")
        assert [next(seq) for _ in range(3)] == ["x", "x", "x"]
        assert seq.size_hint() == SizeHint.infinite()
        assert seq.nth(100).unwrap() == "x"


class TestLift:
    def test_from_iter_picks_adapter(self):
        assert isinstance(L.up.from_iter([1]), ExactSeq)
        assert isinstance(L.up.from_iter(iter([1])), Seq)
        assert not isinstance(L.up.from_iter(iter([1])), ExactSeq)

    def test_from_iter_keeps_sequences(self):
        seq = L.up.of(1, 2)
        assert L.up.from_iter(seq) is seq

    def test_constructors(self):
        assert list(L.up.of(1, 2, 3)) == [1, 2, 3]
        assert list(L.up.once(5)) == [5]
        assert list(L.up.empty()) == []
        assert len(L.up.empty()) == 0  # type: ignore[arg-type]

    def test_to_list(self):
        assert L.down.to_list(L.up.of(1, 2).or_else(L.up.of(3))) == [1, 2]
        assert L.to_list(iter([4])) == [4]

    def test_first(self):
        seq = L.up.of(7, 8)
        assert L.down.first(seq).unwrap() == 7
        assert L.first(seq).unwrap() == 8
        assert isinstance(L.first(seq), Nothing)


class TestDispatch:
    def test_plain_iterator_uses_stepwise(self):
        assert _helpers.fold_of(iter([1, 2]), 0, operator.add) == 3
        assert _helpers.nth_of(iter([1, 2]), 1).unwrap() == 2
        assert _helpers.last_of(iter([1, 2])).unwrap() == 2
        assert _helpers.count_of(iter([1, 2])) == 2

    def test_sized_source_is_exact(self):
        class Sized3:
            def __iter__(self):
                return self

            def __next__(self):
                raise StopIteration

            def __len__(self):
                return 3

        assert _helpers.size_hint_of(Sized3()) == SizeHint.exact(3)
        assert _helpers.is_exact(Sized3())
        assert not _helpers.is_exact(iter([]))

    def test_sized_seq_subclass_is_exact(self):
        class Buffered(SeqBase[int]):
            def __init__(self, items: list[int]) -> None:
                self._items = list(items)

            def __next__(self) -> int:
                if not self._items:
                    raise StopIteration
                return self._items.pop(0)

            def __len__(self) -> int:
                return len(self._items)

        assert Buffered([1, 2, 3]).size_hint() == SizeHint.exact(3)
        assert _helpers.size_hint_of(Buffered([1, 2, 3])) == SizeHint.exact(3)

        seq = or_else(Buffered([1, 2, 3]), [9])
        assert len(seq) == 3
        assert list(seq) == [1, 2, 3]
        assert len(or_else(Buffered([]), [9])) == 1


class TestProtocols:
    def test_fallback_is_a_lazy_seq(self):
        seq = FallbackSeq(iter([1]), iter([2]))
        assert isinstance(seq, LazySeq)
        assert not isinstance(seq, ExactSizeSeq)

    def test_exact_fallback_is_exact(self):
        assert isinstance(or_else([1], [2]), ExactSizeSeq)

    def test_plain_iterator_is_not(self):
        assert not isinstance(iter([1]), LazySeq)
