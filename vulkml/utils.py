"""Slicing and text rendering of tensors."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np

from vulkml.dtype import DType
from vulkml.tensor import Tensor, like_tensor


def _triples(indices: Iterable[Any], dims: int) -> list[tuple[int, int, int]]:
    items = list(indices)
    if all(isinstance(item, (int, np.integer)) for item in items):
        if len(items) != 3 * dims:
            raise ValueError(f"expected {3 * dims} index values, got {len(items)}")
        flat = iter(int(item) for item in items)
        return list(zip(flat, flat, flat))
    triples = [tuple(int(v) for v in item) for item in items]
    if len(triples) != dims or any(len(t) != 3 for t in triples):
        raise ValueError(f"expected {dims} (start, stop, step) triples")
    return triples  # type: ignore[return-value]


def index_tensor(tensor: Tensor, indices: Iterable[Any]) -> Tensor:
    """Return a new tensor holding the slice ``start:stop:step`` of each dimension.

    ``indices`` is either one (start, stop, step) triple per dimension or the
    same values flattened into one sequence.
    """
    if tensor.data is None:
        raise ValueError("tensor has no data to index")
    slices = []
    for (start, stop, step), size in zip(_triples(indices, tensor.dims), tensor.shape):
        if step < 1:
            raise ValueError(f"step must be positive, got {step}")
        if not 0 <= start <= stop <= size:
            raise ValueError(f"range {start}:{stop} does not fit a dimension of size {size}")
        slices.append(slice(start, stop, step))
    result = like_tensor(tensor)
    result.data = tensor.data[tuple(slices)].copy()
    result.shape = tuple(result.data.shape)
    return result


def _format_value(value: Any, dtype: DType) -> str:
    if dtype is DType.F32:
        return f"{float(value):f}"
    if dtype is DType.I32:
        return str(int(value))
    return "true" if bool(value) else "false"


def _format_level(data: np.ndarray, dtype: DType, level: int) -> str:
    size = data.shape[0]
    if data.ndim == 1:
        if size > 4:
            head = "".join(f"{_format_value(v, dtype)}, " for v in data[:2])
            tail = ", ".join(_format_value(v, dtype) for v in data[-2:])
            return f"[{head} ... {tail}]"
        return "[" + ", ".join(_format_value(v, dtype) for v in data) + "]"

    parts = ["["]
    if size > 8:
        for i, block in enumerate(data[:4]):
            if level == 0 and i > 0:
                parts.append("\n")
            parts.append(_format_level(block, dtype, level + 1))
            parts.append(", \n")
        parts.append("  ... \n")
        last = data[-4:]
        for i, block in enumerate(last):
            if level == 0 and i > 0:
                parts.append("\n")
            parts.append(_format_level(block, dtype, level + 1))
            if i != len(last) - 1:
                parts.append(", \n")
    else:
        for i, block in enumerate(data):
            if level == 0 and i > 0:
                parts.append("\n")
            parts.append(_format_level(block, dtype, level + 1))
            if i != size - 1:
                parts.append(", \n")
    parts.append("]")
    return "".join(parts)


def format_tensor(tensor: Tensor) -> str:
    """Render the shape and (abridged) contents of a tensor as text."""
    if tensor.data is None:
        raise ValueError("tensor has no data to format")
    shape_text = ", ".join(str(s) for s in tensor.shape)
    data = np.asarray(tensor.data).reshape(tensor.shape)
    if data.ndim == 0:
        body = "[" + _format_value(data.item(), tensor.dtype) + "]"
    else:
        body = _format_level(data, tensor.dtype, 0)
    return f"Shape: ({shape_text}), {body}"


def print_tensor(tensor: Tensor) -> None:
    """Write the rendering of a tensor to standard output."""
    print(format_tensor(tensor))


__all__: Sequence[str] = ["format_tensor", "index_tensor", "print_tensor"]