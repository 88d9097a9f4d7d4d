import numpy as np
import pytest

from vulkml.dtype import DType
from vulkml.tensor import full_tensor, init_tensor
from vulkml.utils import format_tensor, index_tensor, print_tensor


@pytest.fixture
def full_case():
    return full_tensor((10, 28, 28), 0.5, DType.F32)


def test_source_case_index_shape(full_case):
    indexed = index_tensor(full_case, [2, 5, 1, 4, 12, 1, 3, 8, 1])
    assert indexed.shape == (3, 8, 5)
    assert indexed.data.shape == (3, 8, 5)
    assert np.all(indexed.data == np.float32(0.5))


def test_source_case_original_is_untouched(full_case):
    indexed = index_tensor(full_case, [2, 5, 1, 4, 12, 1, 3, 8, 1])
    indexed.data[0, 0, 0] = 1.0
    assert full_case.data[2, 4, 3] == np.float32(0.5)
    assert full_case.shape == (10, 28, 28)


def test_source_case_printing(full_case, capsys):
    print_tensor(full_case)
    out = capsys.readouterr().out
    assert out.startswith("Shape: (10, 28, 28), [[[")
    assert "0.500000, 0.500000,  ... 0.500000, 0.500000]" in out
    assert "  ... \n" in out
    assert out.endswith("]]]\n")


def test_source_case_indexed_printing(full_case):
    indexed = index_tensor(full_case, [2, 5, 1, 4, 12, 1, 3, 8, 1])
    text = format_tensor(indexed)
    assert text.startswith("Shape: (3, 8, 5), ")
    assert "  ... " not in text


def test_index_selects_values_with_triples():
    tensor = init_tensor(list(range(24)), (2, 3, 4), DType.I32)
    indexed = index_tensor(tensor, [(0, 2, 1), (1, 3, 1), (1, 4, 2)])
    assert indexed.data.tolist() == [[[5, 7], [9, 11]], [[17, 19], [21, 23]]]
    assert indexed.dtype is DType.I32


def test_index_flat_and_triples_agree():
    tensor = init_tensor(list(range(24)), (2, 3, 4), DType.I32)
    flat = index_tensor(tensor, [1, 2, 1, 0, 3, 2, 0, 4, 3])
    grouped = index_tensor(tensor, [(1, 2, 1), (0, 3, 2), (0, 4, 3)])
    assert np.array_equal(flat.data, grouped.data)


def test_index_wrong_count_raises():
    tensor = init_tensor(list(range(4)), (2, 2), DType.I32)
    with pytest.raises(ValueError):
        index_tensor(tensor, [0, 1, 1])


def test_index_out_of_range_raises():
    tensor = init_tensor(list(range(4)), (2, 2), DType.I32)
    with pytest.raises(ValueError):
        index_tensor(tensor, [0, 3, 1, 0, 2, 1])


def test_index_zero_step_raises():
    tensor = init_tensor(list(range(4)), (2, 2), DType.I32)
    with pytest.raises(ValueError):
        index_tensor(tensor, [0, 2, 0, 0, 2, 1])


def test_format_small_matrix():
    tensor = init_tensor([1, 2, 3, 4], (2, 2), DType.I32)
    assert format_tensor(tensor) == "Shape: (2, 2), [[1, 2], \n\n[3, 4]]"


def test_format_long_row_is_abridged():
    tensor = init_tensor(list(range(6)), (6,), DType.I32)
    assert format_tensor(tensor) == "Shape: (6), [0, 1,  ... 4, 5]"


def test_format_bool_values():
    tensor = init_tensor([True, False], (2,), DType.BOOL)
    assert format_tensor(tensor) == "Shape: (2), [true, false]"


def test_format_without_data_raises():
    tensor = init_tensor(None, (2,), DType.F32)
    with pytest.raises(ValueError):
        format_tensor(tensor)