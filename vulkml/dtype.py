"""Element types and devices that tensors can use."""

from __future__ import annotations

from enum import Enum, IntEnum

import numpy as np


class DType(IntEnum):
    """Element type of a tensor's data or gradient."""

    F32 = 0
    I32 = 1
    BOOL = 2

    @property
    def numpy_dtype(self) -> np.dtype:
        """The numpy dtype used to store elements of this type."""
        return np.dtype(_NUMPY_TYPES[self])

    @property
    def size(self) -> int:
        """Size in bytes of one element."""
        return dtype_size(self)


class Device(IntEnum):
    """Where a tensor's data lives."""

    CPU = 0
    GPU_VULKAN = 1


_NUMPY_TYPES = {
    DType.F32: np.float32,
    DType.I32: np.int32,
    DType.BOOL: np.bool_,
}

_SIZES = {
    DType.F32: 4,
    DType.I32: 4,
    DType.BOOL: 1,
}


def dtype_size(dtype: DType | int) -> int:
    """Return the size in bytes of one element of ``dtype``.

    Raises ValueError for a value that is not a known element type.
    """
    return _SIZES[DType(dtype)]


__all__ = ["DType", "Device", "dtype_size"]

# Keep Enum imported names referenced for type checkers.
_ = Enum