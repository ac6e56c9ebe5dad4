# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Lazy sequence views and their cursors.
"""

from ._base import CursorBase, SequenceBase
from ._counting import CountingCursor, CountingSequence
from ._factories import range, zip
from ._protocol import CursorProtocol, IndexableProtocol, SequenceProtocol
from ._zip import ZipCursor, ZipSequence

__all__ = [
    "CountingCursor",
    "CountingSequence",
    "CursorBase",
    "CursorProtocol",
    "IndexableProtocol",
    "SequenceBase",
    "SequenceProtocol",
    "ZipCursor",
    "ZipSequence",
    "range",
    "zip",
]
