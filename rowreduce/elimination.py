# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import enum
import logging
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .matrix import as_matrix
from .utils import EPS, check_eps, is_zero, snap_zeros

logger = logging.getLogger(__name__)


class Strategy(enum.Enum):
    """Row-echelon reduction strategies, in the order they are tried."""

    PARTIAL_PIVOT = "partial_pivot"
    SCAN_AND_SWAP = "scan_and_swap"


class EliminationPass(NamedTuple):
    """
    Outcome of one reduction strategy.

    When `retry` is set the pass could not finish, `matrix` and `swaps`
    are meaningless, and reduction must restart on the original input with
    the named strategy.
    """

    matrix: np.ndarray
    swaps: int
    retry: Optional[Strategy] = None


def _eliminate_below(R: np.ndarray, row: int, col: int, eps: float) -> None:
    """Clear column `col` beneath the pivot R[row, col]."""
    factors = R[row + 1 :, col] / R[row, col]
    R[row + 1 :, col:] -= factors[:, None] * R[row, col:]
    snap_zeros(R[row + 1 :, col], eps)


def _partial_pivot(A: np.ndarray, eps: float) -> EliminationPass:
    """
    Gaussian elimination with partial pivoting.

    Expects a pivot on the diagonal of every one of the first min(m, n)
    columns. The first column without one ends the pass with a request to
    retry using SCAN_AND_SWAP.
    """
    R = A.copy()
    m, n = R.shape
    swaps = 0

    for k in range(min(m, n)):
        # The largest candidate in the column makes the most stable pivot
        i_max = k + int(np.abs(R[k:, k]).argmax())
        if is_zero(R[i_max, k], eps):
            return EliminationPass(R, swaps, retry=Strategy.SCAN_AND_SWAP)

        if i_max != k:
            R[[k, i_max]] = R[[i_max, k]]
            swaps += 1

        _eliminate_below(R, k, k, eps)

    return EliminationPass(R, swaps)


def _scan_and_swap(A: np.ndarray, eps: float) -> EliminationPass:
    """
    Row reduction that pivots only to get away from a zero.

    For each column the first row at or below the current one holding a
    non-zero entry is moved up. Columns without one are skipped and the
    current row stays put, so rank-deficient input ends with fewer pivots
    than rows.
    """
    R = A.copy()
    m, n = R.shape
    swaps = 0

    row = 0
    for col in range(n):
        if row == m:
            break

        pivot_row = next(
            (i for i in range(row, m) if not is_zero(R[i, col], eps)), None
        )
        if pivot_row is None:
            continue

        if pivot_row != row:
            R[[row, pivot_row]] = R[[pivot_row, row]]
            swaps += 1

        _eliminate_below(R, row, col, eps)
        row += 1

    # rows without a pivot hold only the residue of skipped columns
    snap_zeros(R[row:], eps)
    return EliminationPass(R, swaps)


_STRATEGIES = {
    Strategy.PARTIAL_PIVOT: _partial_pivot,
    Strategy.SCAN_AND_SWAP: _scan_and_swap,
}


def row_echelon_form(A, eps: float = EPS) -> Tuple[np.ndarray, int]:
    """
    Row-echelon form of an m by n matrix A.

    Partial pivoting is tried first. If some column has no usable pivot
    on the diagonal, the work so far is thrown away and A is reduced
    again from scratch by scanning for any non-zero pivot.

    Parameters
    ----------
    A   : (m, n) array_like
        Numeric matrix. Never modified.
    eps : float
        Magnitudes below eps count as zero.

    Returns
    -------
    R     : (m, n) ndarray
        Row-echelon form of A (not reduced).
    swaps : int
        Number of row interchanges performed; the determinant of A is
        (-1)**swaps times the product of R's diagonal when A is square.
    """
    eps = check_eps(eps)
    A = as_matrix(A)

    strategy = Strategy.PARTIAL_PIVOT
    while True:
        result = _STRATEGIES[strategy](A, eps)
        if result.retry is None:
            return result.matrix, result.swaps
        logger.debug(
            f"{strategy.value} found no usable pivot; restarting with {result.retry.value}"
        )
        strategy = result.retry


def reduced_row_echelon_form(A, eps: float = EPS) -> np.ndarray:
    """
    Return the reduced row-echelon form of A.

    Every pivot is scaled to 1 and is the only non-zero entry in its
    column. Entries within eps of zero are snapped to exactly 0.0, so
    applying this to its own output gives the same matrix back.

    Parameters
    ----------
    A   : (m, n) array_like
    eps : float

    Returns
    -------
    R : (m, n) ndarray  (RREF)
    """
    eps = check_eps(eps)
    R, _swaps = row_echelon_form(A, eps)
    m, n = R.shape

    row = col = 0
    while row < m and col < n:
        piv_val = R[row, col]
        if is_zero(piv_val, eps):
            col += 1
            continue

        R[row] /= piv_val  # scale pivot row → 1
        R[row, col] = 1.0

        # zero out entries above the pivot
        for i in range(row):
            factor = R[i, col]
            if not is_zero(factor, eps):
                R[i] -= factor * R[row]
                R[i, col] = 0.0

        row += 1
        col += 1

    # zero out tiny noise
    return snap_zeros(R, eps)


def rank(A, eps: float = EPS) -> int:
    """Matrix rank is the number of pivot columns"""
    R = reduced_row_echelon_form(A, eps)
    return int(np.count_nonzero(np.any(R != 0.0, axis=1)))
