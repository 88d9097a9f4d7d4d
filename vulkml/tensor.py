"""Tensor container and the functions that create tensors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np

from vulkml.dtype import Device, DType, dtype_size

MAX_DIMS = 255
MAX_DIM_SIZE = 255


class DeviceUnavailableError(RuntimeError):
    """Raised when a tensor is requested on a device that has no backend."""


@dataclass(eq=False)
class Tensor:
    """An n-dimensional array of one element type, with optional gradient."""

    shape: tuple[int, ...]
    dtype: DType = DType.F32
    device: Device = Device.CPU
    requires_grad: bool = False
    data: np.ndarray | None = None
    grad: np.ndarray | None = None
    grad_dtype: DType = DType.F32

    @property
    def dims(self) -> int:
        """Number of dimensions."""
        return len(self.shape)

    @property
    def dtype_size(self) -> int:
        """Size in bytes of one data element."""
        return dtype_size(self.dtype)

    @property
    def grad_dtype_size(self) -> int:
        """Size in bytes of one gradient element."""
        return dtype_size(self.grad_dtype)

    def numel(self) -> int:
        """Total number of elements the shape describes."""
        return math.prod(self.shape)


def _check_shape(shape: Iterable[int]) -> tuple[int, ...]:
    dims = tuple(int(s) for s in shape)
    if len(dims) > MAX_DIMS:
        raise ValueError(f"a tensor has at most {MAX_DIMS} dimensions, got {len(dims)}")
    for size in dims:
        if not 0 <= size <= MAX_DIM_SIZE:
            raise ValueError(f"dimension size {size} is outside 0..{MAX_DIM_SIZE}")
    return dims


def _check_device(device: Device | int) -> Device:
    device = Device(device)
    if device is not Device.CPU:
        raise DeviceUnavailableError(f"no backend is available for device {device.name}")
    return device


def _as_array(values: Any, shape: tuple[int, ...], dtype: DType) -> np.ndarray:
    array = np.array(values, dtype=dtype.numpy_dtype)
    expected = math.prod(shape)
    if array.size != expected:
        raise ValueError(
            f"{array.size} values given for shape {shape}, which holds {expected}"
        )
    return array.reshape(shape)


def init_tensor(
    data: Any,
    shape: Iterable[int],
    dtype: DType = DType.F32,
    device: Device = Device.CPU,
    requires_grad: bool = False,
    grad: Any = None,
    grad_dtype: DType = DType.F32,
) -> Tensor:
    """Create a tensor holding a copy of ``data`` laid out in ``shape``."""
    dims = _check_shape(shape)
    dtype = DType(dtype)
    grad_dtype = DType(grad_dtype)
    device = _check_device(device)
    return Tensor(
        shape=dims,
        dtype=dtype,
        device=device,
        requires_grad=bool(requires_grad),
        data=None if data is None else _as_array(data, dims, dtype),
        grad=None if grad is None else _as_array(grad, dims, grad_dtype),
        grad_dtype=grad_dtype,
    )


def full_tensor(
    shape: Iterable[int],
    fill_value: Any,
    dtype: DType = DType.F32,
    device: Device = Device.CPU,
    requires_grad: bool = False,
    grad_dtype: DType = DType.F32,
) -> Tensor:
    """Create a tensor with every element set to ``fill_value``."""
    tensor = init_tensor(None, shape, dtype, device, requires_grad, None, grad_dtype)
    tensor.data = np.full(tensor.shape, fill_value, dtype=tensor.dtype.numpy_dtype)
    return tensor


def empty_tensor(
    shape: Iterable[int],
    dtype: DType = DType.F32,
    device: Device = Device.CPU,
    requires_grad: bool = False,
    grad_dtype: DType = DType.F32,
) -> Tensor:
    """Create a tensor whose elements are left uninitialised."""
    tensor = init_tensor(None, shape, dtype, device, requires_grad, None, grad_dtype)
    tensor.data = np.empty(tensor.shape, dtype=tensor.dtype.numpy_dtype)
    return tensor


def zeros_tensor(
    shape: Iterable[int],
    dtype: DType = DType.F32,
    device: Device = Device.CPU,
    requires_grad: bool = False,
    grad_dtype: DType = DType.F32,
) -> Tensor:
    """Create a tensor with every element zero."""
    tensor = init_tensor(None, shape, dtype, device, requires_grad, None, grad_dtype)
    tensor.data = np.zeros(tensor.shape, dtype=tensor.dtype.numpy_dtype)
    return tensor


def like_tensor(other: Tensor, device: Device | None = None) -> Tensor:
    """Create a tensor with the metadata of ``other`` but no data or gradient."""
    return init_tensor(
        None,
        other.shape,
        other.dtype,
        other.device if device is None else device,
        other.requires_grad,
        None,
        other.grad_dtype,
    )


def copy_tensor(other: Tensor, device: Device | None = None) -> Tensor:
    """Create an independent copy of ``other``, data and gradient included."""
    return init_tensor(
        other.data,
        other.shape,
        other.dtype,
        other.device if device is None else device,
        other.requires_grad,
        other.grad,
        other.grad_dtype,
    )


__all__ = [
    "DeviceUnavailableError",
    "Tensor",
    "copy_tensor",
    "empty_tensor",
    "full_tensor",
    "init_tensor",
    "like_tensor",
    "zeros_tensor",
]