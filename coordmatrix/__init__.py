"""
coordmatrix - Dense, shape-checked matrices for 3-D coordinate geometry.

Core modules:
- coordmatrix.core.matrix: CoordMatrix and constructors
- coordmatrix.core.views: aliasing windows and row-structural copies
- coordmatrix.core.algebra: arithmetic
- coordmatrix.core.kernel: row-parallel product
- coordmatrix.core.errors: error taxonomy and the `maybe` boundary
"""

import logging

from coordmatrix.core import *  # noqa: F401,F403
from coordmatrix.core import __all__ as _core_all

__version__ = "1.0.0"
__all__ = list(_core_all)

logging.getLogger(__name__).addHandler(logging.NullHandler())
