# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Structural extraction and concatenation.

Everything here returns views or lazy matrices; no element is copied
until the result is forced. The two exceptions are ``augment`` and
``stack`` over ndarray-backed inputs, which concatenate eagerly.
"""

from typing import Iterable, List, Tuple

import numpy as np

from .errors import InvalidArgumentError
from .matrix import Matrix, ViewRule, append, build_lazy, make_view
from .utils import check_index, check_same_cols, check_same_rows, check_square


def ref(A: Matrix, i: int, j: int):
    """Element (i, j) of A, bounds-checked."""
    check_index(i, A.rows, "row")
    check_index(j, A.cols, "col")
    return A.element_at(i, j)


def _resolve(spec, bound: int, axis: str) -> Tuple[int, ...]:
    if isinstance(spec, slice):
        return tuple(range(*spec.indices(bound)))
    if isinstance(spec, (int, np.integer)) and not isinstance(spec, bool):
        spec = (spec,)
    idx = tuple(spec)
    for k in idx:
        check_index(k, bound, axis)
    return tuple(int(k) for k in idx)


def submatrix(A: Matrix, row_spec, col_spec) -> Matrix:
    """
    View of the rows and columns of A selected by ``row_spec`` / ``col_spec``.

    Each spec is a slice, a range, a single index, or a sequence of
    indices (repeats and any order allowed).
    """
    rows_ = _resolve(row_spec, A.rows, "row")
    cols_ = _resolve(col_spec, A.cols, "col")
    return make_view(A, ViewRule.RANGE, rows_, cols_)


def row(A: Matrix, i: int) -> Matrix:
    """1 x n view of row i."""
    check_index(i, A.rows, "row")
    return make_view(A, ViewRule.ROW, int(i))


def col(A: Matrix, j: int) -> Matrix:
    """m x 1 view of column j."""
    check_index(j, A.cols, "col")
    return make_view(A, ViewRule.COL, int(j))


def rows(A: Matrix) -> List[Matrix]:
    return [make_view(A, ViewRule.ROW, i) for i in range(A.rows)]


def cols(A: Matrix) -> List[Matrix]:
    return [make_view(A, ViewRule.COL, j) for j in range(A.cols)]


def diagonal(A: Matrix) -> Matrix:
    """Diagonal of a square matrix as a lazy 1 x n row."""
    check_square(A, "diagonal")
    return build_lazy((1, A.cols), lambda _i, j: A.element_at(j, j))


def upper_triangle(A: Matrix) -> Matrix:
    """Entries below the diagonal replaced by 0."""
    return build_lazy(A.shape, lambda i, j: A.element_at(i, j) if j >= i else 0)


def lower_triangle(A: Matrix) -> Matrix:
    """Entries above the diagonal replaced by 0."""
    return build_lazy(A.shape, lambda i, j: A.element_at(i, j) if j <= i else 0)


def _nonempty(mats: Iterable[Matrix], where: str) -> List[Matrix]:
    mats = list(mats)
    if not mats:
        raise InvalidArgumentError("mats", mats, "a non-empty list of matrices", where)
    for M in mats:
        if not isinstance(M, Matrix):
            raise TypeError(f"{where}: expected Matrix, got {type(M).__name__}")
    return mats


def augment(mats: Iterable[Matrix]) -> Matrix:
    """Join matrices side by side; all must have the same number of rows."""
    mats = _nonempty(mats, "augment")
    check_same_rows(mats, "augment")
    if len(mats) == 1:
        return mats[0]
    return append(mats, axis=1)


def stack(mats: Iterable[Matrix]) -> Matrix:
    """Join matrices top to bottom; all must have the same number of columns."""
    mats = _nonempty(mats, "stack")
    check_same_cols(mats, "stack")
    if len(mats) == 1:
        return mats[0]
    return append(mats, axis=0)
