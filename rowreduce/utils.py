# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math
from numbers import Real

import numpy as np

from .exceptions import InvalidToleranceError

EPS: float = 1e-11


def is_zero(x: float, eps: float = EPS) -> bool:
    """Return True if |x| is below the zero tolerance."""
    return abs(x) < eps


def numeric_array(value):
    """Return value as an ndarray of int/float dtype, or None."""
    try:
        arr = np.asarray(value)
    except (TypeError, ValueError):
        # ragged nested sequences
        return None
    if np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating):
        return arr
    return None


def snap_zeros(A: np.ndarray, eps: float = EPS) -> np.ndarray:
    """Set every entry of A within eps of zero to exactly 0.0, in place."""
    A[np.abs(A) < eps] = 0.0
    return A


def check_eps(eps) -> float:
    if isinstance(eps, bool) or not isinstance(eps, (Real, np.floating)):
        raise InvalidToleranceError(f"eps must be a real number, got {type(eps)}")
    eps = float(eps)
    if not math.isfinite(eps) or eps <= 0.0:
        raise InvalidToleranceError(f"eps must be finite and > 0, got {eps}")
    return eps


def swap_sign(swaps: int) -> float:
    """Return +1 or -1 depending on the parity of the row swap count."""
    return -1.0 if swaps & 1 else 1.0


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    U = np.triu(rng.uniform(low, high, size=(n, n)))
    # keep the diagonal away from zero
    diag = rng.uniform(1.0, high if high > 1.0 else 2.0, size=n)
    signs = rng.choice([-1.0, 1.0], size=n)
    U[np.diag_indices(n)] = signs * diag
    return np.asarray(U)
