# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List

from .matrix import Matrix
from .norms import cos_angle, inf_norm
from .utils import ORTHOGONAL_EPS, check_tolerance
from .views import cols, rows

logger = logging.getLogger(__name__)


def is_zero(M: Matrix, eps: float = 0.0) -> bool:
    """True iff every |m_ij| <= eps."""
    check_tolerance(eps, "is_zero")
    return bool(inf_norm(M) <= eps)


def _pairwise_orthogonal(vs: List[Matrix], eps: float, axis: str) -> bool:
    # each vector takes part in len(vs) - 1 pairs, so force once up front
    vs = [v.force() for v in vs]
    for i0 in range(len(vs)):
        for i1 in range(i0 + 1, len(vs)):
            c = abs(cos_angle(vs[i0], vs[i1]))
            if c >= eps:
                logger.debug(f"{axis}s {i0} and {i1} not orthogonal: |cos| = {c}")
                return False
    return True


def rows_orthogonal(M: Matrix, eps: float = ORTHOGONAL_EPS) -> bool:
    """
    True iff |cos_angle| < eps for every pair of distinct rows.

    Pairs are checked in ascending (i0, i1) order and the first failing
    pair ends the scan.
    """
    check_tolerance(eps, "rows_orthogonal")
    return _pairwise_orthogonal(rows(M), eps, "row")


def cols_orthogonal(M: Matrix, eps: float = ORTHOGONAL_EPS) -> bool:
    """Column analogue of rows_orthogonal."""
    check_tolerance(eps, "cols_orthogonal")
    return _pairwise_orthogonal(cols(M), eps, "col")
