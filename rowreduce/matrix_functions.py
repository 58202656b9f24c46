# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .elimination import reduced_row_echelon_form, row_echelon_form
from .exceptions import NotInvertibleError
from .matrix import as_square_matrix, augment, identity
from .utils import EPS, check_eps, is_zero, swap_sign

logger = logging.getLogger(__name__)


def _det(A: np.ndarray, eps: float) -> float:
    """Determinant of an already validated square float matrix."""
    n = A.shape[0]
    if n == 1:
        d = float(A[0, 0])
    elif n == 2:
        d = float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])
    elif n == 3:
        # cofactor expansion along the first row
        d = float(
            A[0, 0] * (A[1, 1] * A[2, 2] - A[1, 2] * A[2, 1])
            - A[0, 1] * (A[1, 0] * A[2, 2] - A[1, 2] * A[2, 0])
            + A[0, 2] * (A[1, 0] * A[2, 1] - A[1, 1] * A[2, 0])
        )
    else:
        U, swaps = row_echelon_form(A, eps)
        d = swap_sign(swaps) * float(np.prod(np.diag(U)))
    # adding 0.0 turns -0.0 into 0.0
    return d + 0.0


def determinant(A, eps: float = EPS) -> float:
    """
    Calculate the determinant of n-by-n matrix A.

    Up to 3x3 the closed-form cofactor expansion is used; larger
    matrices go through elimination, where every row swap flips the sign
    and the echelon form's diagonal product gives the magnitude.
    """
    eps = check_eps(eps)
    A = as_square_matrix(A)
    return _det(A, eps)


def is_singular(A, eps: float = EPS) -> bool:
    """True if det(A) is zero within eps."""
    eps = check_eps(eps)
    return is_zero(determinant(A, eps), eps)


def is_invertible(A, eps: float = EPS) -> bool:
    return not is_singular(A, eps)


def invert(A, eps: float = EPS) -> np.ndarray:
    """
    Inverse of a non-singular square matrix A.

    1x1 and 2x2 use the adjugate formula. Larger matrices are augmented
    with the identity, (A | I), and driven to reduced row-echelon form;
    the row operations that turn A into I turn I into A^{-1}, which is
    then the right half of the result.

    Raises
    ------
    InvalidShapeError  : if A is not a square numeric matrix.
    NotInvertibleError : if det(A) is zero within eps.
    """
    eps = check_eps(eps)
    A = as_square_matrix(A)
    n = A.shape[0]

    d = _det(A, eps)
    if is_zero(d, eps):
        logger.debug(f"invert(): rejecting singular {n}x{n} matrix, det={d}")
        raise NotInvertibleError(
            f"matrix is singular (det={d}, eps={eps})", determinant=d, eps=eps
        )

    if n == 1:
        return np.array([[1.0 / A[0, 0]]])
    if n == 2:
        adjugate = np.array(
            [
                [A[1, 1], -A[0, 1]],
                [-A[1, 0], A[0, 0]],
            ]
        )
        return adjugate / d

    R = reduced_row_echelon_form(augment(A, identity(n)), eps)
    # a pivot lost to the tolerance leaves the left half short of I
    if not np.allclose(R[:, :n], np.eye(n), rtol=0.0, atol=eps):
        logger.debug(
            f"invert(): left half of (A | I) did not reduce to I for {n}x{n} matrix"
        )
        raise NotInvertibleError(
            f"matrix is numerically singular under eps={eps} (det={d})",
            determinant=d,
            eps=eps,
        )
    return R[:, n:].copy()
