# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Base classes for cursors and sequences.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterator

from .._config import debug_checks_enabled


class CursorBase:
    """
    Base class for cursors.

    Subclasses must implement:
    - dereference() -> value at the current position
    - _identity() -> hashable key compared by ``==`` and ``!=``

    The base class handles advancing and the optional bound checks.
    """

    __slots__ = ["_position", "_bound", "_checked"]

    def __init__(self, position: int, bound: int, checked: bool = False):
        self._position = position
        self._bound = bound
        self._checked = checked

    @property
    def position(self) -> int:
        """Return the current index of the cursor."""
        return self._position

    @property
    def bound(self) -> int:
        """Return the position of the ending cursor of the same sequence."""
        return self._bound

    def advance(self) -> "CursorBase":
        """
        Move forward by exactly one and return ``self``.

        Nothing stops a cursor from moving past its bound; loops stop by
        comparing against the ending cursor.
        """
        if self._checked:
            assert self._position < self._bound, (
                f"cannot advance {self!r} past its bound {self._bound}"
            )
        self._position += 1
        return self

    def _check_dereferenceable(self) -> None:
        if self._checked:
            assert self._position < self._bound, (
                f"cannot dereference {self!r} at or past its bound {self._bound}"
            )

    def dereference(self) -> Any:
        raise NotImplementedError

    def _identity(self) -> Hashable:
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._identity() == other._identity()

    def __ne__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._identity() != other._identity()

    # cursors are mutable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self._position})"


class SequenceBase:
    """
    Base class for lazy sequences.

    Subclasses must implement ``begin()`` and ``end()``. Iteration with a
    ``for`` statement runs the cursor loop below, so every pass starts from
    fresh cursors and the sequence itself is never consumed.
    """

    __slots__ = []

    def begin(self) -> CursorBase:
        raise NotImplementedError

    def end(self) -> CursorBase:
        raise NotImplementedError

    def _checked(self) -> bool:
        """Whether cursors handed out now should check their bounds."""
        return __debug__ and debug_checks_enabled()

    def __iter__(self) -> Iterator[Any]:
        cursor = self.begin()
        last = self.end()
        while cursor != last:
            yield cursor.dereference()
            cursor.advance()
