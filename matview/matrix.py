# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
The Matrix value type and the array primitives the rest of matview is
built from.

A Matrix is one of three kinds:

- strict : backed by a read-only 2-D ndarray, O(1) element access
- lazy   : a shape plus an index function ``fn(i, j)``
- view   : a source Matrix plus a ViewRule describing how indices are
           remapped onto the source

Views and lazy matrices cost O(1) to build; their elements are computed
on access. ``force()`` turns any of them into a strict Matrix.
"""

import bisect
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidArgumentError, ShapeMismatchError
from .utils import check_index

Shape = Tuple[int, int]


class ViewRule(Enum):
    IDENTITY = "identity"
    ROW = "row"
    COL = "col"
    TRANSPOSE = "transpose"
    RANGE = "range"


def _remap(rule: ViewRule, args: tuple, i: int, j: int) -> Tuple[int, int]:
    """Map view coordinates (i, j) onto source coordinates."""
    if rule is ViewRule.IDENTITY:
        return i, j
    if rule is ViewRule.ROW:
        return args[0], j
    if rule is ViewRule.COL:
        return i, args[0]
    if rule is ViewRule.TRANSPOSE:
        return j, i
    # RANGE
    return args[0][i], args[1][j]


def _index_array(A: np.ndarray, rule: ViewRule, args: tuple) -> np.ndarray:
    """Apply a view rule to an ndarray with numpy indexing."""
    if rule is ViewRule.IDENTITY:
        return A
    if rule is ViewRule.ROW:
        r = args[0]
        return A[r : r + 1, :]
    if rule is ViewRule.COL:
        c = args[0]
        return A[:, c : c + 1]
    if rule is ViewRule.TRANSPOSE:
        return A.T
    rows = np.asarray(args[0], dtype=np.intp)
    cols = np.asarray(args[1], dtype=np.intp)
    return A[np.ix_(rows, cols)]


def _view_shape(source: "Matrix", rule: ViewRule, args: tuple) -> Shape:
    m, n = source.shape
    if rule is ViewRule.IDENTITY:
        return m, n
    if rule is ViewRule.ROW:
        return 1, n
    if rule is ViewRule.COL:
        return m, 1
    if rule is ViewRule.TRANSPOSE:
        return n, m
    return len(args[0]), len(args[1])


def _strict_array(data) -> np.ndarray:
    try:
        A = np.array(data)
    except ValueError as err:
        # ragged nested rows
        lengths = tuple((len(r),) for r in data)
        raise ShapeMismatchError("rows of equal length", lengths, "matrix") from err
    if A.ndim != 2:
        raise ShapeMismatchError("a 2-dimensional, rectangular input", (A.shape,))
    A.setflags(write=False)
    return A


class Matrix:
    """Immutable two-dimensional matrix; see the module docstring."""

    __slots__ = ("_shape", "_data", "_fn", "_source", "_rule", "_args")

    def __init__(self, data):
        A = _strict_array(data)
        self._shape: Shape = (int(A.shape[0]), int(A.shape[1]))
        self._data: Optional[np.ndarray] = A
        self._fn: Optional[Callable] = None
        self._source: Optional["Matrix"] = None
        self._rule: Optional[ViewRule] = None
        self._args: tuple = ()

    @classmethod
    def _blank(cls, shape: Shape) -> "Matrix":
        M = cls.__new__(cls)
        M._shape = shape
        M._data = None
        M._fn = None
        M._source = None
        M._rule = None
        M._args = ()
        return M

    @classmethod
    def _from_fn(cls, shape: Shape, fn: Callable) -> "Matrix":
        M = cls._blank(shape)
        M._fn = fn
        return M

    @classmethod
    def _from_view(cls, source: "Matrix", rule: ViewRule, args: tuple) -> "Matrix":
        M = cls._blank(_view_shape(source, rule, args))
        M._source = source
        M._rule = rule
        M._args = args
        return M

    # ------------------------------------------------------------------
    # shape / kind
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def rows(self) -> int:
        return self._shape[0]

    @property
    def cols(self) -> int:
        return self._shape[1]

    @property
    def is_strict(self) -> bool:
        return self._data is not None

    @property
    def is_view(self) -> bool:
        return self._source is not None

    @property
    def rule(self) -> Optional[ViewRule]:
        return self._rule

    # ------------------------------------------------------------------
    # element access
    # ------------------------------------------------------------------
    def element_at(self, i: int, j: int):
        """Unchecked element access; callers validate (i, j)."""
        if self._data is not None:
            return self._data[i, j]
        if self._fn is not None:
            return self._fn(i, j)
        si, sj = _remap(self._rule, self._args, i, j)
        return self._source.element_at(si, sj)

    def __getitem__(self, key):
        i, j = key
        check_index(i, self.rows, "row")
        check_index(j, self.cols, "col")
        return self.element_at(i, j)

    # ------------------------------------------------------------------
    # materialization
    # ------------------------------------------------------------------
    def _backing_array(self) -> Optional[np.ndarray]:
        # ndarray reachable through views alone, or None if a lazy
        # index function sits somewhere below this matrix
        if self._data is not None:
            return self._data
        if self._source is None:
            return None
        base = self._source._backing_array()
        if base is None:
            return None
        return _index_array(base, self._rule, self._args)

    def force(self) -> "Matrix":
        """Return a strict Matrix with the same elements."""
        if self._data is not None:
            return self
        A = self._backing_array()
        if A is None:
            m, n = self._shape
            values = [[self.element_at(i, j) for j in range(n)] for i in range(m)]
            A = np.array(values).reshape(m, n)
        return Matrix(A)

    def to_numpy(self) -> np.ndarray:
        """Read-only ndarray of the (forced) elements."""
        return self.force()._data

    def __array__(self, dtype=None, copy=None):
        return np.array(self.to_numpy(), dtype=dtype)

    def tolist(self) -> list:
        return self.to_numpy().tolist()

    # ------------------------------------------------------------------
    # value semantics
    # ------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self.to_numpy(), other.to_numpy()))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.tolist()!r})"


# ---------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------
def matrix(data) -> Matrix:
    """Build a strict Matrix from nested rows or a 2-D array."""
    if isinstance(data, Matrix):
        return data
    return Matrix(data)


def identity_matrix(n: int, dtype=float) -> Matrix:
    return Matrix(np.eye(n, dtype=dtype))


def zero_matrix(m: int, n: int, dtype=float) -> Matrix:
    return Matrix(np.zeros((m, n), dtype=dtype))


def is_square(A: Matrix) -> bool:
    return A.rows == A.cols


def build_lazy(shape: Sequence[int], fn: Callable) -> Matrix:
    """Matrix whose element (i, j) is ``fn(i, j)``, evaluated on access."""
    if len(shape) != 2 or any(
        isinstance(d, bool) or not isinstance(d, (int, np.integer)) or d < 0
        for d in shape
    ):
        raise InvalidArgumentError("shape", shape, "a pair of non-negative integers")
    return Matrix._from_fn((int(shape[0]), int(shape[1])), fn)


def make_view(source: Matrix, rule: ViewRule, *args) -> Matrix:
    """O(1) view of ``source``; indices in ``args`` must already be valid."""
    return Matrix._from_view(source, rule, tuple(args))


# ---------------------------------------------------------------------
# Shape transforms
# ---------------------------------------------------------------------
def swap_axes(A: Matrix) -> Matrix:
    if A.rule is ViewRule.TRANSPOSE:
        return A._source
    return make_view(A, ViewRule.TRANSPOSE)


def append(mats: List[Matrix], axis: int) -> Matrix:
    """
    Concatenate along ``axis`` (0: stacked rows, 1: side by side).

    Shapes must already agree on the other axis. Inputs backed by
    ndarrays are concatenated eagerly; otherwise the result is lazy and
    dispatches each index to the block that owns it.
    """
    arrays = [M._backing_array() for M in mats]
    if all(A is not None for A in arrays):
        return Matrix(np.concatenate(arrays, axis=axis))

    offsets = [0]
    for M in mats:
        offsets.append(offsets[-1] + M.shape[axis])

    def fn(i, j):
        k = i if axis == 0 else j
        b = bisect.bisect_right(offsets, k) - 1
        if axis == 0:
            return mats[b].element_at(i - offsets[b], j)
        return mats[b].element_at(i, j - offsets[b])

    if axis == 0:
        shape = (offsets[-1], mats[0].cols)
    else:
        shape = (mats[0].rows, offsets[-1])
    return build_lazy(shape, fn)


# ---------------------------------------------------------------------
# Whole-array reductions and elementwise maps
# ---------------------------------------------------------------------
def full_sum(A: Matrix):
    return np.sum(A.to_numpy())


def full_max(A: Matrix):
    """Largest element; 0 for an empty matrix."""
    arr = A.to_numpy()
    if arr.size == 0:
        return 0
    return np.max(arr)


def map_elements(f: Callable, A: Matrix) -> Matrix:
    return build_lazy(A.shape, lambda i, j: f(A.element_at(i, j)))


def magnitude(A: Matrix) -> Matrix:
    """Strict matrix of absolute values (complex modulus for complex input)."""
    return Matrix(np.abs(A.to_numpy()))


def conjugate_elements(A: Matrix) -> Matrix:
    if A.is_strict and not np.iscomplexobj(A._data):
        return A
    return map_elements(np.conj, A)


def scale(A: Matrix, c) -> Matrix:
    return Matrix(A.to_numpy() * c)
