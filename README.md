# vulkml

A small tensor library built on numpy. A tensor has a shape, an element type
(`DType.F32`, `DType.I32` or `DType.BOOL`), a device tag, a `requires_grad`
flag and an optional gradient array with its own element type. Tensors can be
created from data, filled with a value, zeroed, left uninitialised, copied,
sliced with a start/stop/step range per dimension, and rendered as compact,
truncated text.

## Installation

```
pip install .
```

## Usage

```python
from vulkml.dtype import DType, Device, dtype_size
from vulkml.tensor import full_tensor, init_tensor, copy_tensor
from vulkml.utils import index_tensor, format_tensor, print_tensor

t = full_tensor((10, 28, 28), 0.5, DType.F32, Device.CPU, False, DType.F32)
print(t.numel())              # 7840
print(t.dims)                 # 3
print(dtype_size(DType.F32))  # 4

# One (start, stop, step) triple per dimension, flat or as tuples.
part = index_tensor(t, [2, 5, 1, 4, 12, 1, 3, 8, 1])
part = index_tensor(t, [(2, 5, 1), (4, 12, 1), (3, 8, 1)])
print(part.shape)             # (3, 8, 5)
print_tensor(part)            # Shape: (3, 8, 5), [[[0.500000, 0.500000,  ... 

m = init_tensor([1, 2, 3, 4, 5, 6], (2, 3), DType.I32)
print(format_tensor(m))
# Shape: (2, 3), [[1, 2, 3], 
# 
# [4, 5, 6]]
```

### `vulkml.dtype`

- `DType`: element types `F32`, `I32`, `BOOL`; each has `.size` (bytes) and
  `.numpy_dtype`.
- `Device`: `CPU` and `GPU_VULKAN`.
- `dtype_size(dtype)`: bytes per element (4, 4 and 1); raises `ValueError` for
  an unknown value.

### `vulkml.tensor`

- `Tensor`: a dataclass with `shape`, `dtype`, `device`, `requires_grad`,
  `data`, `grad`, `grad_dtype`, the properties `dims`, `dtype_size` and
  `grad_dtype_size`, and `numel()`.
- `init_tensor(data, shape, dtype, device, requires_grad, grad, grad_dtype)`:
  copies `data` (and `grad`, if given) into arrays of `shape`; `data` may be
  `None`. The number of values must match the shape, or `ValueError` is raised.
- `full_tensor(shape, fill_value, dtype, device, requires_grad, grad_dtype)`
- `empty_tensor(shape, dtype, device, requires_grad, grad_dtype)`
- `zeros_tensor(shape, dtype, device, requires_grad, grad_dtype)`
- `like_tensor(other, device)`: same shape and settings as `other`, no data or
  gradient.
- `copy_tensor(other, device)`: an independent copy of data, gradient and shape.

All arguments after the first of each constructor have defaults (`F32`, `CPU`,
`False`, `None`). A shape has at most 255 dimensions, each of size 0 to 255;
other shapes raise `ValueError`.

### `vulkml.utils`

- `index_tensor(tensor, indices)`: a new tensor holding `start:stop:step` of
  each dimension. The step must be positive and `0 <= start <= stop <= size`,
  otherwise `ValueError`; a tensor without data also raises `ValueError`.
- `format_tensor(tensor)`: the text rendering. Innermost rows longer than four
  elements show the first two and last two; outer dimensions longer than eight
  show the first four and last four. Floats use six decimals, booleans print as
  `true`/`false`.
- `print_tensor(tensor)`: writes `format_tensor(tensor)` to standard output.

## What it does not do

- There is no GPU backend. Creating a tensor with `Device.GPU_VULKAN` raises
  `DeviceUnavailableError`; only `Device.CPU` works.
- There is no arithmetic and no automatic differentiation: `grad` and
  `requires_grad` are only stored and copied.

## Tests

```
pip install .[test]
pytest
```