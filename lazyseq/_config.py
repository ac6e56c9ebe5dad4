# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Runtime configuration for lazyseq.

The only setting is whether cursors check their bounds. It is off by
default: cursors trust the caller to stop at the ending cursor, exactly
like hand-written index loops do.
"""

import os
import warnings

DEBUG_CHECKS_ENV = "LAZYSEQ_DEBUG_CHECKS"

_TRUTHY = ("1", "true", "yes", "on")

# set once the "debug checks enabled" warning has been emitted
_warned: bool = False


def debug_checks_enabled() -> bool:
    """
    Return True if ``LAZYSEQ_DEBUG_CHECKS`` asks for cursor bound checks.

    The environment is read on every call so that the setting can be
    toggled (e.g. with ``unittest.mock.patch.dict``) without reimporting.
    Checks are implemented with ``assert`` and vanish under ``python -O``.
    """
    global _warned

    value = os.environ.get(DEBUG_CHECKS_ENV, "")
    enabled = value.strip().lower() in _TRUTHY
    if enabled and not _warned:
        _warned = True
        warnings.warn(
            f"{DEBUG_CHECKS_ENV} is set: lazyseq cursors check their bounds "
            "on every advance and dereference",
            RuntimeWarning,
            stacklevel=2,
        )
    return enabled
