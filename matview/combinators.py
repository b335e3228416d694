# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Row / column map-then-reassemble pipelines.

``map_rows(f, M)`` applies ``f`` to every 1 x n row view of M and stacks
the results; ``map_cols`` does the same for m x 1 column views and
augments. When an ``on_fail`` callable is supplied, ``f`` may return
None to say "no result for this row / column": the first None stops the
pipeline, ``on_fail()`` is called and its value returned. Rows after the
failing one are never visited.

A matrix with no rows (no columns) has nothing to reassemble and is
rejected with InvalidArgumentError.
"""

import logging
from typing import Callable, List, Optional

from .errors import InvalidArgumentError, ZeroMatrixError
from .matrix import Matrix
from .norms import normalize
from .views import augment, cols, rows, stack

logger = logging.getLogger(__name__)


def _map_parts(
    f: Callable,
    M: Matrix,
    parts: List[Matrix],
    reassemble: Callable[[List[Matrix]], Matrix],
    on_fail: Optional[Callable[[], object]],
    where: str,
    axis: str,
):
    if not parts:
        raise InvalidArgumentError(
            "M", M.shape, f"a matrix with at least one {axis}", where
        )
    results = []
    for k, part in enumerate(parts):
        out = f(part)
        if on_fail is not None and out is None:
            logger.debug(f"{where}(): no result for {axis} {k}, short-circuiting")
            return on_fail()
        if not isinstance(out, Matrix):
            got = type(out).__name__
            raise TypeError(f"{where}: f returned {got} for {axis} {k}, not a Matrix")
        results.append(out)
    return reassemble(results)


def map_rows(f: Callable, M: Matrix, on_fail: Optional[Callable[[], object]] = None):
    """Stack ``f(row)`` for every row of M (see module docstring for ``on_fail``)."""
    return _map_parts(f, M, rows(M), stack, on_fail, "map_rows", "row")


def map_cols(f: Callable, M: Matrix, on_fail: Optional[Callable[[], object]] = None):
    """Augment ``f(col)`` for every column of M."""
    return _map_parts(f, M, cols(M), augment, on_fail, "map_cols", "col")


def _raise_zero(where: str, axis: str) -> Callable[[], object]:
    def fail():
        raise ZeroMatrixError(f"{where}: expected a matrix with non-zero {axis}s")

    return fail


def _no_result():
    return None


def normalize_rows(
    M: Matrix, p: float = 2, on_fail: Optional[Callable[[], object]] = None
):
    """Scale every row to unit p-norm; a zero row triggers ``on_fail``."""
    if on_fail is None:
        on_fail = _raise_zero("normalize_rows", "row")
    return map_rows(lambda r: normalize(r, p, _no_result), M, on_fail)


def normalize_cols(
    M: Matrix, p: float = 2, on_fail: Optional[Callable[[], object]] = None
):
    """Scale every column to unit p-norm; a zero column triggers ``on_fail``."""
    if on_fail is None:
        on_fail = _raise_zero("normalize_cols", "col")
    return map_cols(lambda c: normalize(c, p, _no_result), M, on_fail)
