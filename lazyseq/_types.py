# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Internal type descriptors for lazyseq.

This module provides TypeDescriptor, a lightweight representation of the
values a sequence produces. Counting sequences describe their index domain
with one; zip sequences describe each participating container's element
type with one.

This is an internal module - TypeDescriptor is re-exported for inspection
but sequences never require callers to build one.
"""

from __future__ import annotations

import enum
import functools

import numpy as np


class TypeEnum(enum.IntEnum):
    INT8 = 0
    INT16 = 1
    INT32 = 2
    INT64 = 3
    UINT8 = 4
    UINT16 = 5
    UINT32 = 6
    UINT64 = 7
    FLOAT16 = 8
    FLOAT32 = 9
    FLOAT64 = 10
    BOOLEAN = 11
    STORAGE = 12
    OBJECT = 13


class TypeDescriptor:
    """
    A type descriptor that wraps a type enumeration and a name.

    Two descriptors are equal when both fields are; the name tells apart
    the STORAGE types (structs, complex, strings).

    Attributes:
        type_enum: The TypeEnum classification (INT32, UINT64, OBJECT, etc.)
        name: Human-readable name for debugging
    """

    __slots__ = ("type_enum", "name")

    def __init__(self, type_enum: TypeEnum, name: str):
        self.type_enum = type_enum
        self.name = name

    def __repr__(self) -> str:
        return f"TypeDescriptor({self.name})"

    def __eq__(self, other) -> bool:
        if isinstance(other, TypeDescriptor):
            return self.type_enum == other.type_enum and self.name == other.name
        return False

    def __hash__(self) -> int:
        return hash((self.type_enum, self.name))


# =============================================================================
# Standard type descriptors
# =============================================================================

# Signed integer types
int8 = TypeDescriptor(TypeEnum.INT8, "int8")
int16 = TypeDescriptor(TypeEnum.INT16, "int16")
int32 = TypeDescriptor(TypeEnum.INT32, "int32")
int64 = TypeDescriptor(TypeEnum.INT64, "int64")

# Unsigned integer types
uint8 = TypeDescriptor(TypeEnum.UINT8, "uint8")
uint16 = TypeDescriptor(TypeEnum.UINT16, "uint16")
uint32 = TypeDescriptor(TypeEnum.UINT32, "uint32")
uint64 = TypeDescriptor(TypeEnum.UINT64, "uint64")

# Floating point types
float16 = TypeDescriptor(TypeEnum.FLOAT16, "float16")
float32 = TypeDescriptor(TypeEnum.FLOAT32, "float32")
float64 = TypeDescriptor(TypeEnum.FLOAT64, "float64")

# Boolean
boolean = TypeDescriptor(TypeEnum.BOOLEAN, "bool")

# Any Python object (lists, tuples, strings, ...)
object_ = TypeDescriptor(TypeEnum.OBJECT, "object")

_UNSIGNED_ENUMS = frozenset(
    (TypeEnum.UINT8, TypeEnum.UINT16, TypeEnum.UINT32, TypeEnum.UINT64)
)

# Mapping from numpy dtype to pre-defined TypeDescriptor
_NUMPY_DTYPE_TO_DESCRIPTOR = {
    np.dtype("int8"): int8,
    np.dtype("int16"): int16,
    np.dtype("int32"): int32,
    np.dtype("int64"): int64,
    np.dtype("uint8"): uint8,
    np.dtype("uint16"): uint16,
    np.dtype("uint32"): uint32,
    np.dtype("uint64"): uint64,
    np.dtype("float16"): float16,
    np.dtype("float32"): float32,
    np.dtype("float64"): float64,
    np.dtype("bool"): boolean,
    np.dtype("object"): object_,
}


@functools.lru_cache(maxsize=256)
def from_numpy_dtype(dtype: np.dtype) -> TypeDescriptor:
    """
    Create a TypeDescriptor from a numpy dtype.

    Scalar dtypes map to the pre-defined descriptors above. Structured,
    complex and string dtypes get a STORAGE descriptor named after the
    dtype. Byte order is ignored: ``>u4`` and ``<u4`` are both ``uint32``.

    Example:
        from lazyseq._types import from_numpy_dtype
        import numpy as np

        int_type = from_numpy_dtype(np.dtype('int32'))
        struct_type = from_numpy_dtype(np.dtype([('x', 'i4'), ('y', 'f8')]))
    """
    dtype = np.dtype(dtype)
    if not dtype.isnative:
        dtype = dtype.newbyteorder("=")

    if dtype in _NUMPY_DTYPE_TO_DESCRIPTOR:
        return _NUMPY_DTYPE_TO_DESCRIPTOR[dtype]

    if dtype.fields is not None:
        return TypeDescriptor(TypeEnum.STORAGE, f"struct({dtype})")

    return TypeDescriptor(TypeEnum.STORAGE, dtype.name)


def element_type(container) -> TypeDescriptor:
    """
    Return the TypeDescriptor of the elements held by `container`.

    Containers exposing a numpy-style ``dtype`` are described precisely;
    anything else (lists, tuples, strings, user sequences) is ``object_``.
    """
    dtype = getattr(container, "dtype", None)
    if dtype is None:
        return object_
    try:
        return from_numpy_dtype(np.dtype(dtype))
    except TypeError:
        # dtype attribute that numpy cannot interpret (e.g. a torch dtype)
        return object_


def is_unsigned(type_desc: TypeDescriptor) -> bool:
    """Return True if `type_desc` is an unsigned integer type."""
    return type_desc.type_enum in _UNSIGNED_ENUMS
