# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Entrywise norms and the Frobenius inner product.

All norms treat the matrix as a flat collection of magnitudes, so they
are non-negative reals for real and complex input alike.

The 2- and p-norms scale every magnitude by the largest one before
raising it to a power:

    ‖A‖_p = mx · (Σ (|a_ij| / mx)^p)^(1/p),   mx = max |a_ij|

Each scaled term lies in [0, 1], so the sum neither overflows for huge
entries nor loses small entries to underflow. The magnitude matrix is
forced once and read twice (max, then scaled sum).
"""

import logging
from typing import Callable, Optional

import numpy as np

from .errors import InvalidArgumentError, ZeroMatrixError
from .matrix import Matrix, full_max, full_sum, magnitude, scale
from .utils import MACHINE_EPS, check_same_shape, is_real_number

logger = logging.getLogger(__name__)


def one_norm(A: Matrix):
    """Σ |a_ij| (entrywise, not the induced operator norm)."""
    return full_sum(magnitude(A))


def inf_norm(A: Matrix):
    """max |a_ij|; 0 for an empty matrix."""
    return full_max(magnitude(A))


def two_norm(A: Matrix):
    """Frobenius norm sqrt(Σ |a_ij|²) with max-scaling."""
    mags = magnitude(A)
    mx = full_max(mags)
    # zero, nan and inf are returned as-is; the comparisons also work for
    # exact (Fraction, arbitrary-size int) entries
    if not (mx > 0 and mx < np.inf):
        return mx
    s = mags.to_numpy() / mx
    return mx * np.sum(s * s) ** 0.5


def p_norm(A: Matrix, p: float):
    """(Σ |a_ij|^p)^(1/p) for finite p >= 1, with max-scaling."""
    if not is_real_number(p) or not 1 <= p < np.inf:
        raise InvalidArgumentError("p", p, "a finite real number >= 1", "p_norm")
    mags = magnitude(A)
    mx = full_max(mags)
    if not (mx > 0 and mx < np.inf):
        return mx
    s = mags.to_numpy() / mx
    return mx * np.sum(s**p) ** (1.0 / p)


def norm(A: Matrix, p: float = 2):
    """
    Entrywise p-norm of A.

    p == 1    -> one_norm
    p == 2    -> two_norm
    p == inf  -> inf_norm
    p > 1     -> p_norm
    Anything else (p < 1, -inf, nan, non-real) raises InvalidArgumentError.
    """
    if not is_real_number(p):
        raise InvalidArgumentError("p", p, "a real number >= 1 or inf", "norm")
    if p == 1:
        return one_norm(A)
    if p == 2:
        return two_norm(A)
    if p == np.inf:
        return inf_norm(A)
    if p > 1:
        return p_norm(A, p)
    raise InvalidArgumentError("p", p, "a real number >= 1 or inf", "norm")


def dot(A: Matrix, B: Optional[Matrix] = None):
    """
    Frobenius inner product Σ a_ij · conj(b_ij).

    The conjugate is applied to the second argument, so
    dot(A, B) == conj(dot(B, A)) for complex input. With one argument
    the result is the real number Σ |a_ij|².
    """
    a = A.to_numpy()
    if B is None:
        return np.sum((a * np.conj(a)).real)
    check_same_shape(A, B, "dot")
    return np.sum(a * np.conj(B.to_numpy()))


def _unit_peak(A: Matrix) -> Matrix:
    # divide by max |a_ij| so dot and two_norm stay in range
    A = A.force()
    mx = inf_norm(A)
    if not (mx > 0 and mx < np.inf):
        return A
    return Matrix(A.to_numpy() / mx)


def cos_angle(A: Matrix, B: Matrix):
    """
    dot(A, B) / (‖A‖₂ ‖B‖₂); nan when either matrix is zero.

    Both operands are rescaled to a peak magnitude of 1 first, so the
    cosine of very large or very small matrices does not overflow or
    underflow.
    """
    A = _unit_peak(A)
    B = _unit_peak(B)
    with np.errstate(divide="ignore", invalid="ignore"):
        return dot(A, B) / (two_norm(A) * two_norm(B))


def angle(A: Matrix, B: Matrix):
    """
    arccos(cos_angle(A, B)).

    Real cosines are clamped to [-1, 1] first to absorb rounding; complex
    cosines use numpy's complex arccos and give a complex angle.
    """
    c = cos_angle(A, B)
    if np.iscomplexobj(c):
        return np.arccos(c)
    if abs(c) - 1 > 10 * MACHINE_EPS:
        logger.warning(f"angle(): clamping cosine {c!r} into [-1, 1]")
    return np.arccos(np.clip(c, -1.0, 1.0))


def normalize(
    A: Matrix,
    p: float = 2,
    on_zero: Optional[Callable[[], object]] = None,
):
    """
    Scale A to unit p-norm.

    If the norm is exactly zero, ``on_zero()`` is called and its result
    returned instead; without ``on_zero`` a ZeroMatrixError is raised.
    """
    A = A.force()
    x = norm(A, p)
    if x == 0:
        logger.debug(f"normalize(): zero matrix of shape {A.shape}")
        if on_zero is None:
            raise ZeroMatrixError("normalize: expected a non-zero matrix")
        return on_zero()
    return scale(A, 1 / x)
