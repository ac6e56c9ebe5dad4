# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Cursor and container protocols for lazyseq.

Defines the interface that cursors implement so that a sequence can be
driven the way a generalized for-loop drives it, and the capability that
zip sequences require from the containers they view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .._types import TypeDescriptor


@runtime_checkable
class CursorProtocol(Protocol):
    """
    Protocol defining the interface for cursors in lazyseq.

    A cursor is the mutable iteration state handed out by a sequence's
    ``begin()`` and ``end()``. Loops compare a moving cursor against the
    ending cursor with ``!=`` and stop when they become equal.
    """

    @property
    def position(self) -> int:
        """Return the current index of the cursor."""
        ...

    def advance(self) -> CursorProtocol:
        """Move the cursor forward by one and return it."""
        ...

    def dereference(self) -> Any:
        """Return the value at the current position."""
        ...


@runtime_checkable
class IndexableProtocol(Protocol):
    """
    Capability required from every container passed to a zip sequence:
    a length and index-based element access.

    This is documentation, not validation: zip sequences do not check it,
    and passing something without random access is a caller error.
    """

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Any: ...


@runtime_checkable
class SequenceProtocol(Protocol):
    """Anything that can hand out a beginning and an ending cursor."""

    def begin(self) -> CursorProtocol: ...

    def end(self) -> CursorProtocol: ...

    @property
    def value_type(self) -> TypeDescriptor | tuple[TypeDescriptor, ...]: ...
