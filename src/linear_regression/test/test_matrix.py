import numpy as np
import pytest

from linear_regression.errors import DimensionMismatch
from linear_regression.matrix import (
    Matrix,
    add,
    multiply,
    scalar_multiply,
    subtract,
    transpose,
)


def test_multiply():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5], [6]])
    assert multiply(a, b) == Matrix([[17], [39]])
    assert (a @ b).shape == (2, 1)


def test_add_subtract_scalar():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[0.5, -1], [2, 0]])
    assert add(a, b) == Matrix([[1.5, 1], [5, 4]])
    assert subtract(a, b) == Matrix([[0.5, 3], [1, 4]])
    assert scalar_multiply(a, 2) == Matrix([[2, 4], [6, 8]])
    assert a * 2 == 2 * a == a + a


def test_transpose():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    assert transpose(a) == Matrix([[1, 4], [2, 5], [3, 6]])
    assert a.T.shape == (3, 2)


@pytest.mark.parametrize(
    "a_shape, b_shape",
    [
        ((2, 2), (3, 1)),
        ((1, 3), (1, 3)),
        ((4, 2), (1, 4)),
    ],
)
def test_multiply_mismatch(a_shape, b_shape):
    a = Matrix.zeros(*a_shape)
    b = Matrix.zeros(*b_shape)
    with pytest.raises(DimensionMismatch):
        multiply(a, b)


@pytest.mark.parametrize("op", [add, subtract])
def test_elementwise_mismatch(op):
    with pytest.raises(DimensionMismatch):
        op(Matrix.zeros(2, 1), Matrix.zeros(1, 2))


def test_mismatch_is_value_error():
    # existing `except ValueError` handlers keep working
    with pytest.raises(ValueError):
        Matrix.zeros(2, 2) @ Matrix.zeros(3, 3)


@pytest.mark.parametrize(
    "values",
    [
        [[1, 2], [3]],
        [],
        [[]],
        [[[1.0]]],
        3.0,
    ],
)
def test_invalid_construction(values):
    with pytest.raises(DimensionMismatch):
        Matrix(values)


def test_flat_sequence_is_column_vector():
    v = Matrix([1, 2, 3])
    assert v.shape == (3, 1)
    assert v.rows == 3 and v.cols == 1
    assert v[2, 0] == 3.0


def test_single_precision():
    m = Matrix([[0.1, 0.2]])
    assert m.to_numpy().dtype == np.float32
    assert (m @ m.T).to_numpy().dtype == np.float32
    assert (m * 0.3).to_numpy().dtype == np.float32


def test_operations_are_pure():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[1, 1], [1, 1]])
    before_a, before_b = a.tolist(), b.tolist()
    add(a, b), subtract(a, b), multiply(a, b), scalar_multiply(a, 3.0), transpose(a)
    assert a.tolist() == before_a
    assert b.tolist() == before_b


def test_copies_do_not_leak():
    source = np.array([[1.0, 2.0]], dtype=np.float32)
    m = Matrix(source)
    source[0, 0] = 100.0
    arr = m.to_numpy()
    arr[0, 1] = 100.0
    assert m == Matrix([[1, 2]])


def test_full_and_zeros():
    assert Matrix.full(2, 1, 1.0) == Matrix([[1], [1]])
    assert Matrix.zeros(1, 3) == Matrix([[0, 0, 0]])
    with pytest.raises(DimensionMismatch):
        Matrix.zeros(0, 3)


def test_matrix_times_matrix_is_not_scalar_multiply():
    with pytest.raises(TypeError):
        Matrix([[1]]) * Matrix([[1]])
