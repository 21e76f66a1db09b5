"""
coordmatrix core - dense matrix engine.
"""

from coordmatrix.core.matrix import CoordMatrix, new_matrix, empty_matrix, zeros, identity
from coordmatrix.core.errors import (
    ErrorKind, MatrixError,
    ShapeMismatchError, IndexOutOfRangeError, InsufficientDataError,
    UnsupportedNormOrderError, DegenerateNormError,
    maybe,
)

__all__ = [
    "CoordMatrix", "new_matrix", "empty_matrix", "zeros", "identity",
    "ErrorKind", "MatrixError",
    "ShapeMismatchError", "IndexOutOfRangeError", "InsufficientDataError",
    "UnsupportedNormOrderError", "DegenerateNormError",
    "maybe",
]
