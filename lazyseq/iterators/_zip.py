# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""ZipSequence implementation."""

from __future__ import annotations

import copy
import uuid
from typing import TYPE_CHECKING, Any

from .._types import TypeDescriptor, element_type
from ._base import CursorBase, SequenceBase
from ._counting import CountingSequence

if TYPE_CHECKING:
    from ._protocol import IndexableProtocol


def _unique_suffix() -> str:
    return uuid.uuid4().hex


def _length(array) -> int:
    # len() overflows past sys.maxsize, which a uint64 counting sequence reaches
    if isinstance(array, CountingSequence):
        return array.size
    return len(array)


class ZipCursor(CursorBase):
    """
    Cursor over a zip sequence.

    All containers share the cursor's single position. Dereferencing builds
    a new tuple holding a copy of each container's element at that position.
    """

    __slots__ = ["_arrays", "_uid"]

    def __init__(
        self,
        arrays: tuple[IndexableProtocol, ...],
        uid: str,
        position: int,
        bound: int,
        checked: bool = False,
    ):
        super().__init__(position, bound, checked)
        self._arrays = arrays
        self._uid = uid

    def dereference(self) -> tuple[Any, ...]:
        self._check_dereferenceable()
        i = self._position
        return tuple(copy.copy(array[i]) for array in self._arrays)

    def _identity(self) -> tuple[str, int]:
        return (self._uid, self._position)


class ZipSequence(SequenceBase):
    """
    Sequence that zips multiple random-access containers together.

    At each position, yields a tuple of values from all containers. The
    sequence stops at the shortest container; elements past it are ignored.

    The containers are referenced, not copied. Their lengths are read once,
    at construction; resizing a container while the sequence is alive is a
    caller error.
    """

    __slots__ = ["_arrays", "_limit", "_uid"]

    def __init__(self, *arrays: IndexableProtocol):
        """
        Create a zip sequence.

        Args:
            *arrays: Containers supporting ``len()`` and integer indexing
        """
        if len(arrays) < 1:
            raise ValueError("ZipSequence requires at least one container")

        self._arrays = arrays
        self._limit = min(_length(array) for array in arrays)
        self._uid = _unique_suffix()

    @property
    def arrays(self) -> tuple[IndexableProtocol, ...]:
        """The referenced containers, in declaration order."""
        return self._arrays

    @property
    def limit(self) -> int:
        """Length of the shortest container, fixed at construction."""
        return self._limit

    @property
    def value_type(self) -> tuple[TypeDescriptor, ...]:
        """Return the element TypeDescriptor of each container."""
        return tuple(element_type(array) for array in self._arrays)

    def begin(self) -> ZipCursor:
        return ZipCursor(self._arrays, self._uid, 0, self._limit, self._checked())

    def end(self) -> ZipCursor:
        return ZipCursor(
            self._arrays, self._uid, self._limit, self._limit, self._checked()
        )

    def __len__(self) -> int:
        return self._limit

    def __repr__(self) -> str:
        names = ", ".join(type(array).__name__ for array in self._arrays)
        return f"ZipSequence({names}; limit={self._limit})"
