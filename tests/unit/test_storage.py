# -*- coding: utf-8 -*-
"""
tests/unit/test_storage.py

Window geometry of Storage records.
"""
from coordmatrix import zeros, empty_matrix
from coordmatrix.core.storage import Storage


class TestGeometry:

    def test_owned_geometry(self):
        s = Storage.allocate(4, 5)
        assert s.owned
        assert s.stride == 5
        assert s.offset == 0

    def test_view_offset_and_stride(self):
        """A 2x2 window at (1, 2) of a 4x5 owner starts at flat offset 7."""
        M = zeros(4, 5)
        V = empty_matrix()
        V.view(M, 1, 2, 2, 2)
        s = V._storage
        assert not s.owned
        assert s.stride == 5
        assert s.offset == 7
        assert s.root is M._storage.root

    def test_nested_view_composes_offsets(self):
        """Windows of windows are still addressed in the owner's buffer."""
        M = zeros(4, 5)
        V, W = empty_matrix(), empty_matrix()
        V.view(M, 1, 2, 3, 3)
        W.view(V, 2, 1, 1, 2)
        s = W._storage
        assert (s.row_offset, s.col_offset) == (3, 3)
        assert s.offset == 18
        assert s.stride == 5
        W.set(0, 0, 1.0)
        assert M.as_array().ravel()[18] == 1.0

    def test_contains(self):
        s = Storage.allocate(4, 5)
        assert s.contains(1, 2, 3, 3)
        assert not s.contains(2, 2, 3, 3)
        assert not s.contains(-1, 0, 1, 1)
