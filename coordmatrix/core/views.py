# -*- coding: utf-8 -*-
"""
views.py - View/Aliasing Subsystem

Operations that rebind the receiver to a window of another matrix
(view, row_view, col_view) and the structural copies built on top of
them (clone, sub_matrix, del_row, select_rows, scatter_rows, stack).

Aliasing:  view, row_view, col_view
Copying:   everything else
"""

from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np

from .errors import (
    MatrixError, IndexOutOfRangeError,
    as_index, check_shape, check_index, maybe,
)
from .storage import Storage

if TYPE_CHECKING:
    from .matrix import CoordMatrix


def _as_indices(indices: Sequence[int]) -> np.ndarray:
    return np.array([as_index(i, "row") for i in indices], dtype=np.intp)


class ViewMixin:
    """Windowing and row-structural operations for CoordMatrix."""

    # === Aliasing ===

    def view(self, parent: 'CoordMatrix', i: int, j: int, rows: int, cols: int) -> None:
        """
        Rebind the receiver to the rows x cols window of parent at (i, j).

        Writes through the receiver mutate parent. Whatever the receiver
        held before is dropped, not copied.
        """
        check_shape(parent._storage.contains(i, j, rows, cols),
                    (i + rows, j + cols), parent.dims())
        self._bind(parent._storage.window(i, j, rows, cols))

    def row_view(self, parent: 'CoordMatrix', i: int) -> None:
        """Rebind the receiver to row i of parent (1 x cols)."""
        self.view(parent, i, 0, 1, parent.cols)

    def col_view(self, parent: 'CoordMatrix', j: int) -> None:
        """Rebind the receiver to column j of parent (rows x 1)."""
        self.view(parent, 0, j, parent.rows, 1)

    # === Copies ===

    def clone(self, source: 'CoordMatrix') -> None:
        """Copy source element-wise into the receiver's own storage."""
        check_shape(self.dims() == source.dims(), self.dims(), source.dims())
        self._grid[...] = source._grid

    def sub_matrix(self, source: 'CoordMatrix', i: int, j: int, rows: int, cols: int) -> None:
        """Rebind the receiver to a fresh copy of a block of source."""
        block = type(self)()
        block.view(source, i, j, rows, cols)
        self._bind(Storage.allocate(rows, cols))
        self.clone(block)

    def del_row(self, source: 'CoordMatrix', i: int) -> None:
        """
        Copy every row of source except row i, keeping their order.

        Receiver must be (source.rows - 1) x source.cols. Prefix [0, i) and
        suffix [i+1, end) are copied independently through views.
        """
        ar, ac = source.dims()
        fr, fc = self.dims()
        check_index(i, ar, "row")
        check_shape(fc == ac and fr == ar - 1, (fr, fc), (ar, ac))

        head_src, head_dst = type(self)(), type(self)()
        head_src.view(source, 0, 0, i, ac)
        head_dst.view(self, 0, 0, i, fc)
        head_dst.clone(head_src)

        tail_src, tail_dst = type(self)(), type(self)()
        tail_src.view(source, i + 1, 0, ar - i - 1, ac)
        tail_dst.view(self, i, 0, ar - i - 1, fc)
        tail_dst.clone(tail_src)

    def select_rows(self, source: 'CoordMatrix', indices: Sequence[int]) -> None:
        """
        Receiver row k becomes source row indices[k].

        Indices may repeat and come in any order. Every index is checked
        before anything is written.
        """
        idx = _as_indices(indices)
        ar, ac = source.dims()
        fr, fc = self.dims()
        check_shape(ac == fc and fr == len(idx) and ar >= len(idx), (fr, fc), (ar, ac))
        for val in idx:
            check_index(int(val), ar, "row")
        self._grid[...] = source._grid[idx]

    def select_rows_safe(self, source: 'CoordMatrix', indices: Sequence[int]) -> Optional[MatrixError]:
        """Like select_rows, but returns the MatrixError instead of raising."""
        return maybe(self.select_rows, source, indices)

    def scatter_rows(self, source: 'CoordMatrix', indices: Sequence[int]) -> None:
        """
        Inverse of select_rows: source row k is written to receiver row
        indices[k]. With repeated targets the last write wins.
        """
        idx = _as_indices(indices)
        ar, ac = source.dims()
        fr, fc = self.dims()
        check_shape(ac == fc and ar >= len(idx), (fr, fc), (ar, ac))
        if len(idx) == 0:
            return
        if idx.min() < 0:
            raise IndexOutOfRangeError(f"row {int(idx.min())} is negative")
        check_shape(fr >= int(idx.max()) + 1, (fr, fc), (int(idx.max()) + 1, ac))

        src = source._grid[:len(idx)].copy()
        for k, dst in enumerate(idx):
            self._grid[dst] = src[k]

    def scatter_rows_safe(self, source: 'CoordMatrix', indices: Sequence[int]) -> Optional[MatrixError]:
        """Like scatter_rows, but returns the MatrixError instead of raising."""
        return maybe(self.scatter_rows, source, indices)

    def stack(self, top: 'CoordMatrix', bottom: 'CoordMatrix') -> None:
        """Copy top above bottom into the receiver."""
        tr, tc = top.dims()
        br, bc = bottom.dims()
        fr, fc = self.dims()
        check_shape(tc == bc and tc == fc and tr + br == fr,
                    (fr, fc), (tr, tc), (br, bc))
        self._grid[...] = np.vstack([top._grid, bottom._grid])


__all__ = ['ViewMixin']
