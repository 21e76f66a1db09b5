# -*- coding: utf-8 -*-
"""
errors.py - Shape & Error Layer

Closed taxonomy of matrix failures plus the `maybe` boundary that turns a
raised taxonomy error into a returned value.

Every operation raises at the point of detection. Callers that must
degrade gracefully (e.g. row indices read from untrusted input) wrap the
call:

    >>> err = maybe(F.select_rows, A, [0, 7])
    >>> if err is not None:
    ...     handle(err)

Anything outside the taxonomy keeps propagating.
"""

import logging
import operator
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Recognized matrix failure kinds."""
    SHAPE_MISMATCH = "matrix: dimension mismatch"
    INDEX_OUT_OF_RANGE = "matrix: index out of range"
    INSUFFICIENT_DATA = "matrix: not enough elements"
    UNSUPPORTED_NORM_ORDER = "matrix: invalid norm order for matrix"
    DEGENERATE_NORM = "matrix: zero norm"


class MatrixError(Exception):
    """Base class of every error `maybe` is allowed to recover."""
    kind: ErrorKind = None

    def __init__(self, detail: str = ""):
        self.detail = detail
        msg = self.kind.value if self.kind is not None else "matrix: error"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class ShapeMismatchError(MatrixError, ValueError):
    """Operand/receiver dimensions break the operation's shape contract."""
    kind = ErrorKind.SHAPE_MISMATCH


class IndexOutOfRangeError(MatrixError, IndexError):
    """Row, column or list index beyond bounds."""
    kind = ErrorKind.INDEX_OUT_OF_RANGE


class InsufficientDataError(MatrixError, ValueError):
    """Construction given fewer than rows*cols elements."""
    kind = ErrorKind.INSUFFICIENT_DATA


class UnsupportedNormOrderError(MatrixError, ValueError):
    """Only the 2-norm is implemented."""
    kind = ErrorKind.UNSUPPORTED_NORM_ORDER


class DegenerateNormError(MatrixError, ZeroDivisionError):
    """Unit normalization of an all-zero matrix."""
    kind = ErrorKind.DEGENERATE_NORM


def maybe(fn: Callable, *args, **kwargs) -> Optional[MatrixError]:
    """
    Run fn(*args, **kwargs) and return the MatrixError it raised, if any.

    Returns None on success. Exceptions that are not MatrixError
    (implementation bugs, KeyboardInterrupt, ...) are re-raised untouched.
    """
    try:
        fn(*args, **kwargs)
    except MatrixError as err:
        logger.debug("recovered %s from %s: %s",
                     getattr(err.kind, "name", "MATRIX"), getattr(fn, "__name__", fn), err)
        return err
    return None


def check_shape(ok: bool, *shapes) -> None:
    """Raise ShapeMismatchError unless ok; shapes go into the message."""
    if not ok:
        raise ShapeMismatchError(" vs ".join(f"{r}x{c}" for r, c in shapes))


def as_index(i, what: str = "index") -> int:
    """Integer value of i; anything without __index__ is out of range."""
    try:
        return operator.index(i)
    except TypeError:
        raise IndexOutOfRangeError(f"{what} {i!r} is not an integer") from None


def check_index(i: int, bound: int, what: str = "index") -> None:
    """Raise IndexOutOfRangeError unless i is an integer in [0, bound)."""
    if not 0 <= as_index(i, what) < bound:
        raise IndexOutOfRangeError(f"{what} {i} not in [0, {bound})")


__all__ = [
    'ErrorKind', 'MatrixError',
    'ShapeMismatchError', 'IndexOutOfRangeError', 'InsufficientDataError',
    'UnsupportedNormOrderError', 'DegenerateNormError',
    'maybe', 'check_shape', 'check_index', 'as_index',
]
