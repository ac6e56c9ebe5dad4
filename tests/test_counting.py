# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import numpy as np
import pytest

import lazyseq
from lazyseq import _types
from lazyseq._config import DEBUG_CHECKS_ENV
from lazyseq.iterators import CountingCursor, CountingSequence, CursorProtocol

DTYPE_LIST = [
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
]

bounds_params = [(0, 0), (0, 1), (0, 10), (2, 5), (7, 7), (3, 100), (250, 255)]


@pytest.fixture(autouse=True)
def _unchecked(monkeypatch):
    monkeypatch.delenv(DEBUG_CHECKS_ENV, raising=False)


def as_ints(seq):
    return [int(v) for v in seq]


@pytest.mark.parametrize("start,end", bounds_params)
def test_counting_matches_index_loop(start, end):
    seq = lazyseq.range(start, end)
    assert as_ints(seq) == list(range(start, end))
    assert len(seq) == end - start


def test_counting_concrete():
    assert as_ints(lazyseq.range(2, 5)) == [2, 3, 4]


@pytest.mark.parametrize("end", [0, 1, 5, 64])
def test_counting_implicit_start(end):
    seq = lazyseq.range(end)
    assert seq.start == 0
    assert seq.stop == end
    assert as_ints(seq) == list(range(end))


@pytest.mark.parametrize("n", [0, 1, 42, 2**32])
def test_counting_empty_when_bounds_equal(n):
    seq = lazyseq.range(n, n)
    assert list(seq) == []
    assert len(seq) == 0
    assert not (seq.begin() != seq.end())


@pytest.mark.parametrize("dtype", DTYPE_LIST)
def test_counting_dtype(dtype):
    seq = lazyseq.range(1, 4, dtype=dtype)
    values = list(seq)
    assert all(v.dtype == np.dtype(dtype) for v in values)
    np.testing.assert_array_equal(np.array(values, dtype=dtype), [1, 2, 3])
    assert seq.value_type == _types.from_numpy_dtype(np.dtype(dtype))


def test_counting_default_dtype_is_uint64():
    seq = lazyseq.range(3)
    assert seq.dtype == np.dtype(np.uint64)
    assert seq.value_type == _types.uint64


def test_counting_restartable():
    seq = lazyseq.range(3, 9)
    first = as_ints(seq)
    second = as_ints(seq)
    assert first == second == [3, 4, 5, 6, 7, 8]


def test_counting_nested_loops():
    outer = lazyseq.range(4)
    got = [(int(i), int(j)) for i in outer for j in lazyseq.range(int(i), 4)]
    expected = [(i, j) for i in range(4) for j in range(i, 4)]
    assert got == expected


def test_counting_accepts_numpy_integers():
    seq = lazyseq.range(np.int64(1), np.uint32(3))
    assert as_ints(seq) == [1, 2]


def test_counting_values_index_lists():
    names = ["a", "b", "c", "d"]
    assert [names[i] for i in lazyseq.range(1, 3)] == ["b", "c"]


class TestCountingConstruction:
    def test_start_greater_than_end(self):
        with pytest.raises(ValueError, match="must not exceed"):
            lazyseq.range(5, 2)

    def test_start_greater_than_end_fails_before_iteration(self):
        with pytest.raises(ValueError):
            for _ in lazyseq.range(1, 0):
                pytest.fail("iteration must not start")

    @pytest.mark.parametrize("start,end", [(-1, 3), (0, -3), (-5, -1)])
    def test_negative_bounds(self, start, end):
        with pytest.raises(ValueError, match="non-negative"):
            lazyseq.range(start, end)

    @pytest.mark.parametrize("bad", [1.5, "3", [1]])
    def test_non_integer_end(self, bad):
        with pytest.raises(TypeError, match="end must be an integer"):
            lazyseq.range(0, bad)

    def test_non_integer_start(self):
        with pytest.raises(TypeError, match="start must be an integer"):
            lazyseq.range(0.5, 3)

    @pytest.mark.parametrize("dtype", [np.int32, np.int64, np.float64, np.bool_])
    def test_rejects_non_unsigned_dtype(self, dtype):
        with pytest.raises(ValueError, match="unsigned integer dtype"):
            lazyseq.range(3, dtype=dtype)

    def test_end_must_fit_dtype(self):
        assert len(lazyseq.range(255, dtype=np.uint8)) == 255
        with pytest.raises(ValueError, match="does not fit"):
            lazyseq.range(256, dtype=np.uint8)
        with pytest.raises(ValueError, match="does not fit"):
            lazyseq.range(2**64)


class TestCountingCursor:
    def test_begin_and_end_positions(self):
        seq = lazyseq.range(2, 5)
        assert seq.begin().position == 2
        assert seq.end().position == 5
        assert seq.begin().bound == 5

    def test_cursor_satisfies_protocol(self):
        assert isinstance(lazyseq.range(3).begin(), CursorProtocol)

    def test_manual_loop(self):
        seq = lazyseq.range(2, 5)
        got = []
        cursor = seq.begin()
        last = seq.end()
        while cursor != last:
            got.append(int(cursor.dereference()))
            cursor.advance()
        assert got == [2, 3, 4]
        assert cursor == last

    def test_advance_returns_cursor(self):
        cursor = lazyseq.range(10).begin()
        assert cursor.advance() is cursor
        assert cursor.advance().advance().position == 3

    def test_cursors_are_independent(self):
        seq = lazyseq.range(10)
        a = seq.begin()
        b = seq.begin()
        a.advance()
        assert a.position == 1
        assert b.position == 0
        assert a != b

    def test_equality_ignores_originating_sequence(self):
        assert lazyseq.range(0, 5).end() == lazyseq.range(3, 5).end()
        assert lazyseq.range(10).begin().advance() == lazyseq.range(1, 4).begin()
        assert lazyseq.range(0, 5).begin() != lazyseq.range(1, 5).begin()

    def test_advance_past_end_is_unchecked(self):
        cursor = lazyseq.range(2).end()
        cursor.advance()
        assert cursor.position == 3
        assert int(cursor.dereference()) == 3

    def test_cursor_is_unhashable(self):
        with pytest.raises(TypeError):
            hash(lazyseq.range(1).begin())

    def test_cursor_repr(self):
        assert repr(CountingCursor(4, 9, np.uint64)) == "CountingCursor(position=4)"


def test_counting_random_access():
    seq = lazyseq.range(3, 7)
    assert int(seq[0]) == 3
    assert int(seq[3]) == 6
    assert int(seq[-1]) == 6
    assert seq[1].dtype == np.dtype(np.uint64)
    with pytest.raises(IndexError):
        seq[4]
    with pytest.raises(IndexError):
        seq[-5]
    with pytest.raises(IndexError):
        lazyseq.range(0)[0]


def test_counting_sequence_equality_and_repr():
    assert CountingSequence(3) == CountingSequence(0, 3)
    assert CountingSequence(3) != CountingSequence(3, dtype=np.uint8)
    assert hash(CountingSequence(1, 4)) == hash(lazyseq.range(1, 4))
    assert repr(CountingSequence(1, 4)) == "CountingSequence(1, 4, dtype=uint64)"


@pytest.mark.parametrize("dtype", [">u4", "<u4", ">u8", "=u2"])
def test_counting_accepts_any_byte_order(dtype):
    seq = lazyseq.range(1, 4, dtype=np.dtype(dtype))
    assert as_ints(seq) == [1, 2, 3]
    assert _types.is_unsigned(seq.value_type)


class TestCountingBeyondIndexRange:
    """uint64 bounds above sys.maxsize: only an explicit len() is limited."""

    @pytest.mark.parametrize(
        "start,end", [(0, 2**63), (0, 2**64 - 1), (2**63, 2**64 - 1)]
    )
    def test_size(self, start, end):
        seq = lazyseq.range(start, end)
        assert seq.size == end - start
        assert int(seq[-1]) == end - 1
        assert int(seq[2**62]) == start + 2**62

    def test_len_overflows(self):
        with pytest.raises(OverflowError):
            len(lazyseq.range(2**63))

    def test_iteration_near_top_of_domain(self):
        top = 2**64 - 1
        assert as_ints(lazyseq.range(top - 3, top)) == [top - 3, top - 2, top - 1]
