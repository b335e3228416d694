# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from .matrix import Matrix, conjugate_elements, full_sum, swap_axes
from .utils import check_square
from .views import diagonal


def transpose(A: Matrix) -> Matrix:
    """O(1) view with transpose(A)[i, j] == A[j, i]."""
    return swap_axes(A)


def conjugate(A: Matrix) -> Matrix:
    """Elementwise complex conjugate; real matrices come back unchanged."""
    return conjugate_elements(A)


def hermitian(A: Matrix) -> Matrix:
    """Conjugate transpose."""
    return transpose(conjugate(A))


def trace(A: Matrix):
    check_square(A, "trace")
    return full_sum(diagonal(A))
