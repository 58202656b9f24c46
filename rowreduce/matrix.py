# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix predicates and the small utilities the row-reduction engine is
built on: validation, identity, transpose, products and augmentation.

A matrix is anything `np.asarray` turns into a non-empty, rectangular,
2-D array of integers or floats. Every function returns a fresh float
array and leaves its inputs untouched.
"""

import numpy as np

from .exceptions import DimensionMismatchError, InvalidShapeError
from .utils import numeric_array


def is_matrix(value, *values) -> bool:
    """Return True if every argument is a non-empty numeric matrix."""
    for candidate in (value, *values):
        arr = numeric_array(candidate)
        if arr is None or arr.ndim != 2 or 0 in arr.shape:
            return False
    return True


def is_square(value) -> bool:
    if not is_matrix(value):
        return False
    m, n = np.shape(value)
    return m == n


def as_matrix(A, name: str = "A") -> np.ndarray:
    """
    Validate A and return an owned float64 copy of it.

    Raises
    ------
    InvalidShapeError : if A is ragged, empty, not 2-D or not numeric.
    """
    arr = numeric_array(A)
    if arr is None:
        raise InvalidShapeError(
            f"{name} must be a rectangular matrix of numbers"
        )
    if arr.ndim != 2 or 0 in arr.shape:
        raise InvalidShapeError(
            f"{name} must be a non-empty 2-D matrix, got shape {arr.shape}",
            shape=arr.shape,
        )
    return arr.astype(float, copy=True)


def as_square_matrix(A, name: str = "A") -> np.ndarray:
    A = as_matrix(A, name)
    m, n = A.shape
    if m != n:
        raise InvalidShapeError(
            f"{name} must be square, got a {m}x{n} matrix", shape=A.shape
        )
    return A


def identity(n: int) -> np.ndarray:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise InvalidShapeError(f"identity size must be a positive integer, got {n!r}")
    return np.eye(int(n), dtype=float)


def transpose(A) -> np.ndarray:
    return as_matrix(A).T.copy()


def multiply(A, B, *more) -> np.ndarray:
    """
    Matrix product A @ B @ ..., evaluated left to right.

    Raises
    ------
    DimensionMismatchError : if the column count of one operand does not
        match the row count of the next.
    """
    R = as_matrix(A)
    for pos, M in enumerate((B, *more), start=2):
        M = as_matrix(M, name=f"argument #{pos}")
        if R.shape[1] != M.shape[0]:
            raise DimensionMismatchError(
                f"cannot multiply a {R.shape[0]}x{R.shape[1]} matrix by "
                f"a {M.shape[0]}x{M.shape[1]} matrix",
                shapes=(R.shape, M.shape),
            )
        R = R @ M
    return R


def augment(A, B) -> np.ndarray:
    """Return the augmented matrix (A | B)."""
    A = as_matrix(A, "A")
    B = as_matrix(B, "B")
    if A.shape[0] != B.shape[0]:
        raise DimensionMismatchError(
            f"cannot augment a matrix with {A.shape[0]} rows by one with "
            f"{B.shape[0]} rows",
            shapes=(A.shape, B.shape),
        )
    return np.hstack((A, B))


def swap_rows(A, i: int, j: int) -> np.ndarray:
    R = as_matrix(A)
    m = R.shape[0]
    for idx in (i, j):
        if not 0 <= idx < m:
            raise IndexError(f"row index {idx} out of range for {m} rows")
    R[[i, j]] = R[[j, i]]
    return R
