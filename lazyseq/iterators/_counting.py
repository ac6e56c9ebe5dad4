# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""CountingSequence implementation."""

from __future__ import annotations

import operator

import numpy as np

from .._types import TypeDescriptor, from_numpy_dtype, is_unsigned
from ._base import CursorBase, SequenceBase


def _as_index(value, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value)}") from None


class CountingCursor(CursorBase):
    """
    Cursor over a counting sequence.

    Dereferencing yields the position itself, as a numpy scalar of the
    sequence's dtype. Two counting cursors are equal when their positions
    are, whichever sequence produced them.
    """

    __slots__ = ["_scalar_type"]

    def __init__(self, position: int, bound: int, scalar_type, checked: bool = False):
        super().__init__(position, bound, checked)
        self._scalar_type = scalar_type

    def dereference(self) -> np.unsignedinteger:
        self._check_dereferenceable()
        return self._scalar_type(self._position)

    def _identity(self) -> int:
        return self._position


class CountingSequence(SequenceBase):
    """
    Sequence of ascending unsigned integers ``start, start + 1, ..., end - 1``.

    Called as ``CountingSequence(end)`` or ``CountingSequence(start, end)``.
    Only the two bounds are stored, so the sequence can be iterated any
    number of times.
    """

    __slots__ = ["_start", "_end", "_dtype", "_value_type"]

    def __init__(self, start, end=None, *, dtype=np.uint64):
        """
        Create a counting sequence.

        Args:
            start: First value, or the exclusive end if `end` is omitted
            end: Exclusive end of the sequence
            dtype: Unsigned integer numpy dtype of the produced values

        Raises:
            TypeError: if a bound is not an integer
            ValueError: if the dtype is not unsigned, a bound does not fit
                the dtype, or ``start > end``
        """
        if end is None:
            start, end = 0, start

        dtype = np.dtype(dtype)
        value_type = from_numpy_dtype(dtype)
        if not is_unsigned(value_type):
            raise ValueError(
                f"CountingSequence requires an unsigned integer dtype, got {dtype}"
            )

        start = _as_index(start, "start")
        end = _as_index(end, "end")

        if start < 0 or end < 0:
            raise ValueError(
                f"CountingSequence bounds must be non-negative, got ({start}, {end})"
            )
        max_value = int(np.iinfo(dtype).max)
        if end > max_value:
            raise ValueError(f"end ({end}) does not fit in {dtype} (max {max_value})")
        if start > end:
            raise ValueError(f"start ({start}) must not exceed end ({end})")

        self._start = start
        self._end = end
        self._dtype = dtype
        self._value_type = value_type

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._end

    @property
    def size(self) -> int:
        """Number of values, as a Python int; unlike ``len()`` not capped at
        ``sys.maxsize``."""
        return self._end - self._start

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def value_type(self) -> TypeDescriptor:
        """Return the TypeDescriptor for dereferenced values."""
        return self._value_type

    def begin(self) -> CountingCursor:
        return CountingCursor(
            self._start, self._end, self._dtype.type, self._checked()
        )

    def end(self) -> CountingCursor:
        return CountingCursor(self._end, self._end, self._dtype.type, self._checked())

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index) -> np.unsignedinteger:
        """Random access, so a counting sequence can itself be zipped."""
        index = _as_index(index, "index")
        length = self.size
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError(f"{self!r} index out of range")
        return self._dtype.type(self._start + index)

    def __eq__(self, other) -> bool:
        if isinstance(other, CountingSequence):
            return (self._start, self._end, self._dtype) == (
                other._start,
                other._end,
                other._dtype,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._start, self._end, self._dtype))

    def __repr__(self) -> str:
        return f"CountingSequence({self._start}, {self._end}, dtype={self._dtype})"
