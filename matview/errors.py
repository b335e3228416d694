# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception types raised by matview.

Each error also derives from the built-in exception callers would expect
from numpy-style code (IndexError / ValueError).
"""

from typing import Optional, Tuple


class MatrixError(Exception):
    """Base class for matview errors."""


class MatrixIndexError(MatrixError, IndexError):
    """A row or column index fell outside ``[0, bound)``."""

    def __init__(self, index, axis: str, bound: int):
        self.index = index
        self.axis = axis
        self.bound = bound
        super().__init__(
            f"{axis} index {index!r} out of range; expected 0 <= {axis} < {bound}"
        )


class ShapeMismatchError(MatrixError, ValueError):
    """Matrices (or a single matrix) have incompatible dimensions."""

    def __init__(
        self,
        expected: str,
        shapes: Tuple[Tuple[int, ...], ...],
        where: Optional[str] = None,
    ):
        self.expected = expected
        self.shapes = tuple(shapes)
        self.where = where
        prefix = f"{where}: " if where else ""
        got = ", ".join(str(s) for s in self.shapes)
        super().__init__(f"{prefix}expected {expected}; got shape(s) {got}")


class InvalidArgumentError(MatrixError, ValueError):
    """An argument value lies outside its documented domain."""

    def __init__(self, name: str, value, expected: str, where: Optional[str] = None):
        self.name = name
        self.value = value
        self.expected = expected
        self.where = where
        prefix = f"{where}: " if where else ""
        super().__init__(f"{prefix}{name} must be {expected}, got {value!r}")


class ZeroMatrixError(MatrixError, ValueError):
    """Default outcome when a zero matrix (or row / column) cannot be normalized."""
