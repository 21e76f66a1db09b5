# -*- coding: utf-8 -*-
"""
storage.py - Dense backing buffers and window geometry

A Storage is either the owner of a row-major float64 buffer or an aliasing
window into someone else's. Windows are numpy basic slices of the owner's
root array, so writes through a window land in the owner's memory.
"""

import numpy as np
from dataclasses import dataclass, field


@dataclass(eq=False)
class Storage:
    """
    Tagged storage record.

    root:       owner's 2-D buffer (shared by every window on it)
    row_offset: first row of the window inside root
    col_offset: first column of the window inside root
    rows, cols: window extent
    owned:      False for views
    """
    root: np.ndarray
    row_offset: int = 0
    col_offset: int = 0
    rows: int = 0
    cols: int = 0
    owned: bool = True
    grid: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        r0, c0 = self.row_offset, self.col_offset
        self.grid = self.root[r0:r0 + self.rows, c0:c0 + self.cols]

    @classmethod
    def allocate(cls, rows: int, cols: int) -> 'Storage':
        """Fresh zero-filled buffer."""
        return cls.adopt(np.zeros((rows, cols), dtype=np.float64))

    @classmethod
    def adopt(cls, array: np.ndarray) -> 'Storage':
        """Take ownership of a 2-D float64 array (no copy)."""
        rows, cols = array.shape
        return cls(array, rows=rows, cols=cols, owned=True)

    @classmethod
    def empty(cls) -> 'Storage':
        return cls.allocate(0, 0)

    @property
    def stride(self) -> int:
        """Distance, in elements, between two consecutive rows."""
        return self.root.shape[1]

    @property
    def offset(self) -> int:
        """Flat row-major offset of the window's first element in root."""
        return self.row_offset * self.stride + self.col_offset

    def contains(self, i: int, j: int, rows: int, cols: int) -> bool:
        """True if the rows x cols block at (i, j) lies inside this window."""
        if min(i, j, rows, cols) < 0:
            return False
        return i + rows <= self.rows and j + cols <= self.cols

    def window(self, i: int, j: int, rows: int, cols: int) -> 'Storage':
        """Aliasing window relative to this one. Caller checks bounds."""
        return Storage(
            self.root,
            row_offset=self.row_offset + i,
            col_offset=self.col_offset + j,
            rows=rows,
            cols=cols,
            owned=False,
        )

    def shares_memory(self, other: 'Storage') -> bool:
        if self.grid.size == 0 or other.grid.size == 0:
            return False
        return bool(np.shares_memory(self.grid, other.grid))


__all__ = ['Storage']
