# -*- coding: utf-8 -*-
"""
tests/unit/test_construction.py

Storage & Construction: constructors, accessors, introspection.
"""
import pytest
import numpy as np
from coordmatrix import (
    CoordMatrix, new_matrix, empty_matrix, zeros, identity,
    InsufficientDataError, IndexOutOfRangeError, ShapeMismatchError,
)


class TestConstructors:
    """Build matrices from flat data, zeros, identity, placeholder."""

    def test_new_matrix_row_major(self):
        """Flat data fills row by row."""
        A = new_matrix([1, 2, 3, 4, 5, 6], 2, 3)
        assert A.dims() == (2, 3)
        assert A.at(0, 2) == 3.0
        assert A.at(1, 0) == 4.0

    def test_new_matrix_copies_data(self):
        """Mutating the source list does not reach the matrix."""
        data = [1.0, 2.0, 3.0, 4.0]
        A = new_matrix(data, 2, 2)
        data[0] = 99.0
        assert A.at(0, 0) == 1.0

    def test_new_matrix_extra_data_ignored(self):
        """Elements past rows*cols are dropped."""
        A = new_matrix(range(10), 2, 2)
        np.testing.assert_array_equal(A.as_array(), [[0, 1], [2, 3]])

    def test_insufficient_data(self):
        """Fewer than rows*cols elements fails."""
        with pytest.raises(InsufficientDataError):
            new_matrix([1.0, 2.0, 3.0], 2, 2)

    def test_negative_dims(self):
        """Negative dimensions are a shape error."""
        with pytest.raises(ShapeMismatchError):
            zeros(-1, 3)

    @pytest.mark.parametrize("rows,cols", [(0, 0), (0, 4), (1, 1), (3, 5), (7, 2)])
    def test_zeros_sum(self, rows, cols):
        """Zeros(r, c).sum() == 0."""
        Z = zeros(rows, cols)
        assert Z.dims() == (rows, cols)
        assert Z.sum() == 0.0

    @pytest.mark.parametrize("n", [0, 1, 3, 6])
    def test_identity_square(self, n):
        """Identity is its own transpose and sums to n."""
        I = identity(n, n)
        T = zeros(n, n)
        T.transpose(I)
        assert T == I
        assert I.sum() == n

    def test_identity_rectangular(self):
        """Diagonal runs to min(rows, cols)."""
        I = identity(2, 4)
        np.testing.assert_array_equal(I.as_array(), [[1, 0, 0, 0], [0, 1, 0, 0]])
        assert identity(4, 2).sum() == 2.0

    def test_empty_matrix(self):
        """Placeholder is 0x0 and empty."""
        E = empty_matrix()
        assert E.dims() == (0, 0)
        assert E.is_empty
        assert E.sum() == 0.0

    def test_from_array(self):
        """from_array copies a 2-D array; 1-D becomes a single row."""
        src = np.array([[1.0, 2.0], [3.0, 4.0]])
        A = CoordMatrix.from_array(src)
        src[0, 0] = -1.0
        assert A.at(0, 0) == 1.0
        assert CoordMatrix.from_array([1, 2, 3]).dims() == (1, 3)

    def test_from_array_rejects_3d(self):
        """Only 1-D or 2-D input."""
        with pytest.raises(ShapeMismatchError):
            CoordMatrix.from_array(np.zeros((2, 2, 2)))


class TestAccessors:
    """Bounds-checked element access."""

    def test_set_then_at(self):
        A = zeros(3, 3)
        A.set(1, 2, 7.5)
        assert A.at(1, 2) == 7.5
        assert A.sum() == 7.5

    @pytest.mark.parametrize("i,j", [(3, 0), (0, 3), (-1, 0), (0, -1)])
    def test_at_out_of_range(self, i, j):
        """No wrap-around for negative indices."""
        A = zeros(3, 3)
        with pytest.raises(IndexOutOfRangeError):
            A.at(i, j)
        with pytest.raises(IndexOutOfRangeError):
            A.set(i, j, 1.0)

    def test_index_error_is_index_error(self):
        """Taxonomy errors are also builtin exception types."""
        with pytest.raises(IndexError):
            zeros(1, 1).at(2, 0)

    def test_row_is_independent(self):
        """row() returns a copy."""
        A = new_matrix([1, 2, 3, 4, 5, 6], 2, 3)
        r = A.row(1)
        assert r == [4.0, 5.0, 6.0]
        r[0] = 0.0
        assert A.at(1, 0) == 4.0

    def test_row_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            zeros(2, 3).row(2)

    def test_copy_owns_data(self):
        """copy() gives an independent owner."""
        A = new_matrix([1, 2, 3, 4], 2, 2)
        B = A.copy()
        B.set(0, 0, 10.0)
        assert A.at(0, 0) == 1.0
        assert B.owns_data
        assert not A.shares_storage(B)

    def test_repr(self):
        A = zeros(3, 2)
        assert repr(A) == "CoordMatrix(3x2)"
        V = empty_matrix()
        V.row_view(A, 0)
        assert repr(V) == "CoordMatrix(1x2, view)"
