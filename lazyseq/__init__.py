# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
lazyseq: lazy counting and zipping views.

Example:
    >>> from lazyseq import range, zip
    >>> [int(i) for i in range(3)]
    [0, 1, 2]
    >>> list(zip([1, 2, 3], "ab"))
    [(1, 'a'), (2, 'b')]
"""

from ._types import TypeDescriptor
from .iterators import (
    CountingCursor,
    CountingSequence,
    CursorProtocol,
    IndexableProtocol,
    ZipCursor,
    ZipSequence,
    range,
    zip,
)

__version__ = "0.1.0"

__all__ = [
    "CountingCursor",
    "CountingSequence",
    "CursorProtocol",
    "IndexableProtocol",
    "TypeDescriptor",
    "ZipCursor",
    "ZipSequence",
    "range",
    "zip",
]
