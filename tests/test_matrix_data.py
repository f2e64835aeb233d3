import numpy as np
import pytest

from toynet import IndexOutOfRange, InvalidDimensions, ShapeMismatch
from toynet.matrix_data import MatrixData, index_to_position, to_index


def test_row_major_position():
    assert index_to_position(0, 0, 3) == 0
    assert index_to_position(0, 2, 3) == 2
    assert index_to_position(1, 0, 3) == 3
    assert index_to_position(2, 1, 4) == 9


def test_to_index_inverts_position():
    for ordinal in range(12):
        row, col = to_index(ordinal, 4)
        assert index_to_position(row, col, 4) == ordinal


def test_indices_are_row_major():
    data = MatrixData([0.0] * 6, 2, 3)
    assert list(data.indices()) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_length_must_match_shape():
    with pytest.raises(ShapeMismatch):
        MatrixData([1.0, 2.0, 3.0], 2, 2)
    with pytest.raises(ShapeMismatch):
        MatrixData(np.zeros(5), 2, 2)


@pytest.mark.parametrize("rows, cols", [(-1, 2), (2, -3), (1.5, 2), (True, 1), ("2", 2)])
def test_invalid_dimensions(rows, cols):
    with pytest.raises(InvalidDimensions):
        MatrixData([], rows, cols)


def test_index_bounds():
    data = MatrixData([1.0, 2.0, 3.0, 4.0], 2, 2)
    assert data.get(1, 0) == 3.0
    for row, col in [(2, 0), (0, 2), (-1, 0), (0, -1)]:
        with pytest.raises(IndexOutOfRange):
            data.index(row, col)


def test_set_and_copy_are_independent():
    data = MatrixData([1.0, 2.0], 1, 2)
    other = data.copy()
    data.set(0, 1, 9.0)
    assert data.get(0, 1) == 9.0
    assert other.get(0, 1) == 2.0


def test_to_string():
    data = MatrixData([1.0, 2.0, 3.0, 4.0], 2, 2)
    assert data.to_string() == "[[1.00 2.00]\n [3.00 4.00]]"


def test_nested_storage_rejected():
    with pytest.raises(ShapeMismatch):
        MatrixData([[1.0, 2.0], [3.0, 4.0]], 2, 2)
    with pytest.raises(ShapeMismatch):
        MatrixData(np.zeros((2, 2)), 2, 2)


def test_index_accepts_numpy_integers():
    data = MatrixData([1.0, 2.0, 3.0, 4.0], 2, 2)
    assert data.get(np.int64(1), np.int32(1)) == 4.0
    with pytest.raises(IndexOutOfRange):
        data.index(np.float64(1.0), 0)
