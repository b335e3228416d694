# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers

import numpy as np

from .errors import InvalidArgumentError, MatrixIndexError, ShapeMismatchError

EPS: float = 1e-12
MACHINE_EPS: float = float(np.finfo(float).eps)
# default tolerance for rows_orthogonal / cols_orthogonal
ORTHOGONAL_EPS: float = 10 * MACHINE_EPS


def scale_tol(A) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    A = np.asarray(A)
    peak = float(np.max(np.abs(A))) if A.size else 0.0
    return EPS * max(1.0, peak)


def is_real_number(x) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool) and not np.isnan(x)


def check_tolerance(eps, where: str) -> None:
    """Tolerances are non-negative reals."""
    if not is_real_number(eps) or eps < 0:
        raise InvalidArgumentError("eps", eps, "a non-negative real number", where)


def check_index(index, bound: int, axis: str) -> None:
    if (
        isinstance(index, bool)
        or not isinstance(index, (int, np.integer))
        or not 0 <= index < bound
    ):
        raise MatrixIndexError(index, axis, bound)


def check_square(A, where: str) -> None:
    m, n = A.shape
    if m != n:
        raise ShapeMismatchError("a square matrix", (A.shape,), where)


def check_same_shape(A, B, where: str) -> None:
    if A.shape != B.shape:
        shapes = (A.shape, B.shape)
        raise ShapeMismatchError("matrices of identical shape", shapes, where)


def check_same_rows(mats, where: str) -> None:
    m = mats[0].rows
    bad = [k for k, M in enumerate(mats) if M.rows != m]
    if bad:
        shapes = tuple(M.shape for M in mats)
        raise ShapeMismatchError(
            f"every matrix to have {m} rows (matrices {bad} differ)", shapes, where
        )


def check_same_cols(mats, where: str) -> None:
    n = mats[0].cols
    bad = [k for k, M in enumerate(mats) if M.cols != n]
    if bad:
        shapes = tuple(M.shape for M in mats)
        raise ShapeMismatchError(
            f"every matrix to have {n} columns (matrices {bad} differ)", shapes, where
        )
