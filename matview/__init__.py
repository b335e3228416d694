# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matview
=======

Lazy matrix views and entrywise numeric analysis on top of NumPy.

Public API
~~~~~~~~~~
- Matrix type and construction
    - `Matrix`, `matrix`, `identity_matrix`, `zero_matrix`, `build_lazy`
- Views and concatenation
    - `ref`, `submatrix`, `row`, `col`, `rows`, `cols`, `diagonal`,
      `upper_triangle`, `lower_triangle`, `augment`, `stack`
- Norms and inner products
    - `one_norm`, `two_norm`, `inf_norm`, `p_norm`, `norm`,
      `dot`, `cos_angle`, `angle`, `normalize`
- Structural operators
    - `transpose`, `conjugate`, `hermitian`, `trace`
- Row / column combinators
    - `map_rows`, `map_cols`, `normalize_rows`, `normalize_cols`
- Approximate predicates
    - `is_zero`, `rows_orthogonal`, `cols_orthogonal`

Example
-------
>>> import matview as mv
>>> M = mv.matrix([[3, 4]])
>>> float(mv.two_norm(M)), int(mv.inf_norm(M)), int(mv.one_norm(M))
(5.0, 4, 7)
>>> mv.rows_orthogonal(mv.identity_matrix(3))
True
"""

from importlib.metadata import version as _pkg_version

from .combinators import map_cols, map_rows, normalize_cols, normalize_rows
from .errors import (
    InvalidArgumentError,
    MatrixError,
    MatrixIndexError,
    ShapeMismatchError,
    ZeroMatrixError,
)
from .matrix import (
    Matrix,
    ViewRule,
    build_lazy,
    identity_matrix,
    is_square,
    matrix,
    zero_matrix,
)
from .norms import (
    angle,
    cos_angle,
    dot,
    inf_norm,
    norm,
    normalize,
    one_norm,
    p_norm,
    two_norm,
)
from .operators import conjugate, hermitian, trace, transpose
from .predicates import cols_orthogonal, is_zero, rows_orthogonal
from .utils import MACHINE_EPS, ORTHOGONAL_EPS, scale_tol
from .views import (
    augment,
    col,
    cols,
    diagonal,
    lower_triangle,
    ref,
    row,
    rows,
    stack,
    submatrix,
    upper_triangle,
)

__all__ = [
    "Matrix",
    "ViewRule",
    "matrix",
    "identity_matrix",
    "zero_matrix",
    "build_lazy",
    "is_square",
    "ref",
    "submatrix",
    "row",
    "col",
    "rows",
    "cols",
    "diagonal",
    "upper_triangle",
    "lower_triangle",
    "augment",
    "stack",
    "one_norm",
    "two_norm",
    "inf_norm",
    "p_norm",
    "norm",
    "dot",
    "cos_angle",
    "angle",
    "normalize",
    "transpose",
    "conjugate",
    "hermitian",
    "trace",
    "map_rows",
    "map_cols",
    "normalize_rows",
    "normalize_cols",
    "is_zero",
    "rows_orthogonal",
    "cols_orthogonal",
    "MatrixError",
    "MatrixIndexError",
    "ShapeMismatchError",
    "InvalidArgumentError",
    "ZeroMatrixError",
    "MACHINE_EPS",
    "ORTHOGONAL_EPS",
    "scale_tol",
]

# ---------------------------------------------------------------------
# Version string
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
