# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np
import pytest

from matview.combinators import map_cols, map_rows, normalize_cols, normalize_rows
from matview.errors import InvalidArgumentError, ShapeMismatchError, ZeroMatrixError
from matview.matrix import Matrix, matrix
from matview.norms import one_norm, two_norm
from matview.views import cols, rows

M = matrix([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])


def _double(v):
    return Matrix(2 * v.to_numpy())


def test_map_rows_and_cols():
    assert map_rows(lambda r: r, M) == M
    assert map_cols(lambda c: c, M) == M
    assert map_rows(_double, M).tolist() == [[2, 4], [6, 8], [10, 12]]
    assert map_cols(_double, M).tolist() == [[2, 4], [6, 8], [10, 12]]


def test_map_rows_may_change_row_width():
    out = map_rows(lambda r: Matrix(np.repeat(r.to_numpy(), 2, axis=1)), M)
    assert out.shape == (3, 4)
    assert out.tolist()[0] == [1, 1, 2, 2]


def test_map_rows_rejects_inconsistent_widths():
    widths = iter([1, 2, 1])

    def f(r):
        return Matrix(r.to_numpy()[:, : next(widths)])

    with pytest.raises(ShapeMismatchError):
        map_rows(f, M)


def test_map_rows_requires_matrix_results():
    with pytest.raises(TypeError):
        map_rows(lambda r: None, M)


def test_on_fail_short_circuits():
    seen = []

    def f(r):
        seen.append(r.tolist())
        if r.tolist() == [[3.0, 4.0]]:
            return None
        return r

    assert map_rows(f, M, lambda: "failed") == "failed"
    # the third row is never visited
    assert seen == [[[1.0, 2.0]], [[3.0, 4.0]]]


def test_on_fail_unused_when_every_row_succeeds():
    def fail():
        raise AssertionError("on_fail should not run")

    assert map_cols(_double, M, fail) == map_cols(_double, M)


def test_on_fail_logs_the_failing_index(caplog):
    caplog.set_level(logging.DEBUG, logger="matview.combinators")
    map_cols(lambda c: None, M, lambda: 0)
    assert "col 0" in caplog.text


def test_normalize_rows():
    N = normalize_rows(M)
    assert N.shape == M.shape
    for r in rows(N):
        assert math.isclose(two_norm(r), 1.0, rel_tol=1e-12)
    N1 = normalize_rows(M, 1)
    for r in rows(N1):
        assert math.isclose(one_norm(r), 1.0, rel_tol=1e-12)


def test_normalize_cols():
    N = normalize_cols(M)
    for c in cols(N):
        assert math.isclose(two_norm(c), 1.0, rel_tol=1e-12)
    np.testing.assert_allclose(
        N.to_numpy()[:, 0], np.array([1.0, 3.0, 5.0]) / math.sqrt(35)
    )


def test_normalize_rows_with_zero_row():
    Z = matrix([[1.0, 0.0], [0.0, 0.0], [0.0, 1.0]])
    with pytest.raises(ZeroMatrixError):
        normalize_rows(Z)
    assert normalize_rows(Z, 2, lambda: "zero") == "zero"
    # columns are all non-zero here
    assert normalize_cols(Z) == Z


def test_normalize_cols_with_zero_col():
    Z = matrix([[1.0, 0.0], [2.0, 0.0]])
    with pytest.raises(ZeroMatrixError):
        normalize_cols(Z)
    assert normalize_cols(Z, on_fail=lambda: None) is None


def test_on_fail_short_circuits_columns():
    seen = []

    def f(c):
        seen.append(c.tolist())
        return None if c.tolist() == [[1.0], [3.0], [5.0]] else c

    W = matrix([[0.0, 1.0, 2.0], [1.0, 3.0, 4.0], [2.0, 5.0, 6.0]])
    assert map_cols(f, W, lambda: "failed") == "failed"
    # the third column is never visited
    assert seen == [[[0.0], [1.0], [2.0]], [[1.0], [3.0], [5.0]]]


def test_combinators_reject_empty_matrices():
    with pytest.raises(InvalidArgumentError) as exc:
        map_rows(lambda r: r, matrix(np.zeros((0, 3))))
    assert exc.value.name == "M"
    assert exc.value.value == (0, 3)
    assert "map_rows" in str(exc.value)
    with pytest.raises(InvalidArgumentError) as exc:
        normalize_cols(matrix(np.zeros((2, 0))))
    assert "map_cols" in str(exc.value)
