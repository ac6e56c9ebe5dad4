# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Factory functions for sequences.

These provide the user-facing API, named after the idioms they emulate.
They shadow the builtins of the same name only where imported explicitly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ._counting import CountingSequence
from ._zip import ZipSequence

if TYPE_CHECKING:
    from ._protocol import IndexableProtocol


def range(start, end=None, *, dtype=np.uint64) -> CountingSequence:  # noqa: A001
    """
    Create a counting sequence.

    Called as ``range(end)`` or ``range(start, end)`` with non-negative
    integers and ``start <= end``.

    Example:
        >>> from lazyseq import range
        >>> [int(i) for i in range(2, 5)]
        [2, 3, 4]
    """
    return CountingSequence(start, end, dtype=dtype)


def zip(*arrays: IndexableProtocol) -> ZipSequence:  # noqa: A001
    """
    Create a zip sequence over random-access containers.

    Example:
        >>> from lazyseq import zip
        >>> list(zip([10, 20, 30], ["a", "b"]))
        [(10, 'a'), (20, 'b')]
    """
    return ZipSequence(*arrays)
