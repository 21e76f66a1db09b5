# -*- coding: utf-8 -*-
"""
algebra.py - Elementwise & Linear-Algebra Operations

Every method writes into the receiver, which may also be an operand:
right-hand sides are evaluated before assignment.
"""

import logging
from typing import Optional, TYPE_CHECKING

import numpy as np
from scipy.linalg import norm as _norm

from .errors import (
    check_shape, UnsupportedNormOrderError, DegenerateNormError,
)
from .kernel import parallel_product
from .storage import Storage

if TYPE_CHECKING:
    from .matrix import CoordMatrix

logger = logging.getLogger(__name__)


class AlgebraMixin:
    """Arithmetic for CoordMatrix."""

    NORM_ORDER = 2

    # === Addition ===

    def add(self, a: 'CoordMatrix', b: 'CoordMatrix') -> None:
        """F = A + B."""
        check_shape(a.dims() == b.dims() == self.dims(), self.dims(), a.dims(), b.dims())
        self._grid[...] = a._grid + b._grid

    def add_scalar(self, a: 'CoordMatrix', c: float) -> None:
        """F = A + c."""
        if a is not self:
            self.clone(a)
        self._grid[...] += c

    def add_row(self, a: 'CoordMatrix', row: 'CoordMatrix') -> None:
        """Add the 1 x N matrix row to every row of A."""
        ar, ac = a.dims()
        rr, rc = row.dims()
        check_shape(ac == rc and rr == 1 and self.dims() == (ar, ac),
                    self.dims(), (ar, ac), (rr, rc))
        self._grid[...] = a._grid + row._grid

    def sub_row(self, a: 'CoordMatrix', row: 'CoordMatrix') -> None:
        """Subtract the 1 x N matrix row from every row of A. row is untouched."""
        neg = row.copy()
        neg.scale(-1.0, neg)
        self.add_row(a, neg)

    # === Products & Scaling ===

    def mul_elem(self, a: 'CoordMatrix', b: 'CoordMatrix') -> None:
        """Hadamard product F = A ∘ B."""
        check_shape(a.dims() == b.dims() == self.dims(), self.dims(), a.dims(), b.dims())
        self._grid[...] = a._grid * b._grid

    def scale(self, c: float, a: 'CoordMatrix') -> None:
        """F = c·A. In place when the receiver is A."""
        if a is not self:
            self.clone(a)
        self._grid[...] *= c

    def scale_by_col(self, a: 'CoordMatrix', col: 'CoordMatrix') -> None:
        """Multiply every column of A element-wise by the M x 1 matrix col."""
        ar, ac = a.dims()
        cr, cc = col.dims()
        check_shape(ar == cr and cc == 1 and self.dims() == (ar, ac),
                    self.dims(), (ar, ac), (cr, cc))
        self._grid[...] = a._grid * col._grid

    def scale_by_row(self, a: 'CoordMatrix', row: 'CoordMatrix') -> None:
        """Multiply every row of A element-wise by the 1 x N matrix row."""
        ar, ac = a.dims()
        rr, rc = row.dims()
        check_shape(ac == rc and rr == 1 and self.dims() == (ar, ac),
                    self.dims(), (ar, ac), (rr, rc))
        self._grid[...] = a._grid * row._grid

    def pow(self, a: 'CoordMatrix', exponent: float) -> None:
        """F = A ** exponent, element-wise."""
        check_shape(self.dims() == a.dims(), self.dims(), a.dims())
        self._grid[...] = np.power(a._grid, exponent)

    def transpose(self, a: 'CoordMatrix') -> None:
        """F = Aᵀ. Receiver must be (A.cols, A.rows)."""
        ar, ac = a.dims()
        check_shape(self.dims() == (ac, ar), self.dims(), (ac, ar))
        self._grid[...] = a._grid.T.copy()

    def mul(self, a: 'CoordMatrix', b: 'CoordMatrix', workers: Optional[int] = None) -> None:
        """
        Matrix product F = A × B, computed row-parallel.

        Blocks until every row of F is written. If F shares memory with
        A or B the product goes through a scratch buffer first.
        """
        ar, ac = a.dims()
        br, bc = b.dims()
        check_shape(ac == br and self.dims() == (ar, bc), self.dims(), (ar, ac), (br, bc))

        if self._storage.shares_memory(a._storage) or self._storage.shares_memory(b._storage):
            logger.debug("mul receiver aliases an operand; using scratch buffer")
            scratch = Storage.allocate(ar, bc).grid
            parallel_product(a._grid, b._grid, scratch, workers)
            self._grid[...] = scratch
        else:
            parallel_product(a._grid, b._grid, self._grid, workers)

    # === Reductions ===

    def sum(self) -> float:
        """Sum of all elements."""
        return float(self._grid.sum())

    def dot(self, b: 'CoordMatrix') -> float:
        """Frobenius inner product: sum of the element-wise product."""
        check_shape(self.dims() == b.dims(), self.dims(), b.dims())
        prod = type(self)(Storage.allocate(*self.dims()))
        prod.mul_elem(self, b)
        return prod.sum()

    def norm(self, order: int = 2) -> float:
        """Euclidean (Frobenius) norm. No other order is implemented."""
        if order != self.NORM_ORDER:
            raise UnsupportedNormOrderError(f"order {order}")
        return float(_norm(self._grid, check_finite=False))

    def unit(self, a: 'CoordMatrix') -> None:
        """F = A / ‖A‖₂."""
        n = a.norm(2)
        if n == 0:
            raise DegenerateNormError(f"{a.rows}x{a.cols} matrix has zero norm")
        self.scale(1.0 / n, a)


__all__ = ['AlgebraMixin']
