# -*- coding: utf-8 -*-
"""
matrix.py - CoordMatrix and its constructors

Dense, shape-checked, row-major float64 matrix. Operations write into the
receiver (F.add(A, B) puts A + B in F), which must already have the shape
the operation's contract requires.
"""

from typing import List, Optional, Sequence

import numpy as np

from .algebra import AlgebraMixin
from .errors import (
    check_index, check_shape, InsufficientDataError, ShapeMismatchError,
)
from .storage import Storage
from .views import ViewMixin


class CoordMatrix(ViewMixin, AlgebraMixin):
    """
    Dense matrix over a Storage record.

    The record either owns its buffer or is a window on another matrix's
    buffer (see view). A 0 x 0 matrix is the empty placeholder.
    """
    DECIMALS = 5  # Print precision for __str__

    def __init__(self, storage: Optional[Storage] = None):
        self._storage = storage if storage is not None else Storage.empty()

    @classmethod
    def from_array(cls, array) -> 'CoordMatrix':
        """Owned copy of a 2-D array-like. 1-D input becomes one row."""
        arr = np.array(array, dtype=np.float64)
        if arr.ndim == 1:
            arr = arr.reshape(1, -1)
        if arr.ndim != 2:
            raise ShapeMismatchError(f"expected 2-D data, got {arr.ndim}-D")
        return cls(Storage.adopt(arr))

    def _bind(self, storage: Storage) -> None:
        self._storage = storage

    @property
    def _grid(self) -> np.ndarray:
        return self._storage.grid

    # === Introspection ===

    @property
    def rows(self) -> int: return self._storage.rows

    @property
    def cols(self) -> int: return self._storage.cols

    @property
    def is_empty(self) -> bool: return self.rows * self.cols == 0

    @property
    def owns_data(self) -> bool: return self._storage.owned

    def dims(self):
        return self.rows, self.cols

    def shares_storage(self, other: 'CoordMatrix') -> bool:
        """True if some element of self and other is the same memory."""
        return self._storage.shares_memory(other._storage)

    # === Element access ===

    def at(self, i: int, j: int) -> float:
        check_index(i, self.rows, "row")
        check_index(j, self.cols, "column")
        return float(self._grid[i, j])

    def set(self, i: int, j: int, value: float) -> None:
        check_index(i, self.rows, "row")
        check_index(j, self.cols, "column")
        self._grid[i, j] = value

    def row(self, i: int) -> List[float]:
        """Row i as an independent list."""
        check_index(i, self.rows, "row")
        return self._grid[i].tolist()

    def copy(self) -> 'CoordMatrix':
        """New owned matrix with the same contents."""
        return type(self)(Storage.adopt(self._grid.copy()))

    def as_array(self) -> np.ndarray:
        """Independent ndarray copy of the contents."""
        return self._grid.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordMatrix): return False
        return self.dims() == other.dims() and bool(np.array_equal(self._grid, other._grid))

    def __repr__(self) -> str:
        suffix = "" if self.owns_data else ", view"
        return f"CoordMatrix({self.rows}x{self.cols}{suffix})"

    def __str__(self) -> str:
        return np.array2string(self._grid, precision=self.DECIMALS)


# === Constructors ===

def new_matrix(data: Sequence[float], rows: int, cols: int) -> CoordMatrix:
    """
    Build a rows x cols matrix from flat row-major data.

    Data is copied; elements past rows*cols are ignored.

    Raises:
        ShapeMismatchError: negative rows or cols
        InsufficientDataError: len(data) < rows*cols
    """
    check_shape(rows >= 0 and cols >= 0, (rows, cols))
    flat = np.asarray(data, dtype=np.float64).reshape(-1)
    if flat.size < rows * cols:
        raise InsufficientDataError(f"{flat.size} elements for {rows}x{cols}")
    return CoordMatrix(Storage.adopt(flat[:rows * cols].reshape(rows, cols).copy()))


def empty_matrix() -> CoordMatrix:
    """0 x 0 placeholder, meant to be rebound by view or sub_matrix."""
    return CoordMatrix()


def zeros(rows: int, cols: int) -> CoordMatrix:
    check_shape(rows >= 0 and cols >= 0, (rows, cols))
    return CoordMatrix(Storage.allocate(rows, cols))


def identity(rows: int, cols: int) -> CoordMatrix:
    """Ones on the main diagonal (up to min(rows, cols)), zeros elsewhere."""
    check_shape(rows >= 0 and cols >= 0, (rows, cols))
    return CoordMatrix(Storage.adopt(np.eye(rows, cols, dtype=np.float64)))


__all__ = ['CoordMatrix', 'new_matrix', 'empty_matrix', 'zeros', 'identity']
