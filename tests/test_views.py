# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from matview.errors import InvalidArgumentError, MatrixIndexError, ShapeMismatchError
from matview.matrix import ViewRule, build_lazy, matrix
from matview.views import (
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

M3 = matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


def test_ref():
    assert ref(M3, 0, 0) == 1
    assert ref(M3, 2, 1) == 8


def test_ref_out_of_range_names_bound():
    M = matrix([[1, 2], [3, 4]])
    with pytest.raises(MatrixIndexError) as exc:
        ref(M, 5, 0)
    assert exc.value.index == 5
    assert exc.value.axis == "row"
    assert exc.value.bound == 2
    assert "2" in str(exc.value)
    assert isinstance(exc.value, IndexError)

    with pytest.raises(MatrixIndexError) as exc:
        ref(M, 0, 2)
    assert exc.value.axis == "col"


@pytest.mark.parametrize("i", [-1, 3, 1.0, True])
def test_row_col_reject_bad_indices(i):
    with pytest.raises(MatrixIndexError):
        row(M3, i)
    with pytest.raises(MatrixIndexError):
        col(M3, i)


def test_row_and_col_are_views():
    r = row(M3, 1)
    c = col(M3, 2)
    assert r.is_view and r.rule is ViewRule.ROW
    assert c.is_view and c.rule is ViewRule.COL
    assert r.shape == (1, 3)
    assert c.shape == (3, 1)
    assert r.tolist() == [[4, 5, 6]]
    assert c.tolist() == [[3], [6], [9]]


def test_views_dispatch_to_source_on_access():
    calls = []

    def fn(i, j):
        calls.append((i, j))
        return i * 10 + j

    L = build_lazy((3, 3), fn)
    r = row(L, 1)
    assert calls == []
    assert ref(r, 0, 2) == 12
    assert calls == [(1, 2)]


def test_rows_and_cols():
    rs = rows(M3)
    cs = cols(M3)
    assert [r.tolist() for r in rs] == [[[1, 2, 3]], [[4, 5, 6]], [[7, 8, 9]]]
    assert [c.tolist() for c in cs] == [[[1], [4], [7]], [[2], [5], [8]], [[3], [6], [9]]]
    assert rows(matrix(np.zeros((0, 2)))) == []


def test_submatrix():
    S = submatrix(M3, slice(0, 2), [2, 0])
    assert S.shape == (2, 2)
    assert S.tolist() == [[3, 1], [6, 4]]
    assert submatrix(M3, range(1, 3), 1).tolist() == [[5], [8]]
    assert submatrix(M3, slice(None), slice(None)) == M3
    assert submatrix(M3, [], slice(None)).shape == (0, 3)
    with pytest.raises(MatrixIndexError):
        submatrix(M3, [0, 3], slice(None))


def test_diagonal():
    Id = matrix([[1, 0], [0, 1]])
    assert diagonal(Id).tolist()[0] == [1, 1]
    assert diagonal(M3).tolist() == [[1, 5, 9]]
    with pytest.raises(ShapeMismatchError):
        diagonal(matrix([[1, 2, 3]]))


def test_triangles():
    assert upper_triangle(M3).tolist() == [[1, 2, 3], [0, 5, 6], [0, 0, 9]]
    assert lower_triangle(M3).tolist() == [[1, 0, 0], [4, 5, 0], [7, 8, 9]]
    # diagonal belongs to both
    W = matrix([[1, 2, 3], [4, 5, 6]])
    assert upper_triangle(W).tolist() == [[1, 2, 3], [0, 5, 6]]
    assert lower_triangle(W).tolist() == [[1, 0, 0], [4, 5, 0]]


def test_augment_and_stack():
    A = matrix([[1, 2]])
    B = matrix([[3, 4]])
    assert augment([A, B]).tolist() == [[1, 2, 3, 4]]
    assert stack([A, matrix([[5, 6]])]).tolist() == [[1, 2], [5, 6]]
    assert augment([A]) is A
    assert stack(iter([A, B, A])).shape == (3, 2)


def test_concatenation_shape_mismatch():
    A = matrix([[1, 2]])
    C = matrix([[1], [2]])
    with pytest.raises(ShapeMismatchError) as exc:
        augment([A, C])
    assert exc.value.shapes == ((1, 2), (2, 1))
    assert "rows" in str(exc.value)
    with pytest.raises(ShapeMismatchError) as exc:
        stack([A, C])
    assert "columns" in str(exc.value)


def test_concatenation_of_nothing_is_an_error():
    with pytest.raises(InvalidArgumentError):
        augment([])
    with pytest.raises(InvalidArgumentError):
        stack([])


def test_concatenation_rejects_non_matrices():
    with pytest.raises(TypeError):
        stack([matrix([[1]]), [[2]]])
