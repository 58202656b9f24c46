# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector operations
"""

from functools import reduce

import numpy as np

from .exceptions import DimensionMismatchError, InvalidShapeError
from .matrix import as_matrix
from .utils import numeric_array


def is_vector(value, *values) -> bool:
    """Return True if every argument is a 1-D sequence of numbers."""
    for candidate in (value, *values):
        arr = numeric_array(candidate)
        if arr is None or arr.ndim != 1:
            # np.asarray([]) is float64, so the empty list passes
            return False
    return True


def as_vector(v, name: str = "v") -> np.ndarray:
    arr = numeric_array(v)
    if arr is None or arr.ndim != 1:
        raise InvalidShapeError(
            f"{name} must be a 1-D sequence of numbers",
            shape=None if arr is None else arr.shape,
        )
    return arr.astype(float, copy=True)


def _same_length(*vectors):
    vs = [as_vector(v, name=f"argument #{i}") for i, v in enumerate(vectors, 1)]
    n = len(vs[0])
    for v in vs[1:]:
        if len(v) != n:
            raise DimensionMismatchError(
                "lengths of vectors are not equal",
                shapes=tuple(u.shape for u in vs),
            )
    return vs


def add(v, w, *more) -> np.ndarray:
    return reduce(np.add, _same_length(v, w, *more))


def subtract(v, w, *more) -> np.ndarray:
    """v - w - ..., folded left to right."""
    return reduce(np.subtract, _same_length(v, w, *more))


def hadamard_product(v, w, *more) -> np.ndarray:
    """Componentwise product of two or more vectors."""
    return reduce(np.multiply, _same_length(v, w, *more))


def scale(v, k: float) -> np.ndarray:
    return as_vector(v) * k


def divide(v, k: float) -> np.ndarray:
    if k == 0:
        raise ZeroDivisionError("cannot divide a vector by zero")
    return as_vector(v) / k


def dot_product(v, w) -> float:
    v, w = _same_length(v, w)
    return float(v @ w)


def length(v) -> float:
    """Euclidean length of v."""
    return float(np.linalg.norm(as_vector(v)))


def transform(x, A, *more) -> np.ndarray:
    """
    Apply the linear transformations A, then each of `more`, to x.

    Raises
    ------
    DimensionMismatchError : if a matrix's column count does not match the
        length of the vector it is applied to.
    """
    x = as_vector(x, "x")
    for pos, M in enumerate((A, *more), start=2):
        M = as_matrix(M, name=f"argument #{pos}")
        if M.shape[1] != len(x):
            raise DimensionMismatchError(
                f"the column count of argument #{pos} must match the length "
                f"of the vector but they are {M.shape[1]} and {len(x)}",
                shapes=(M.shape, x.shape),
            )
        x = M @ x
    return x
