# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
rowreduce
=========

Dense row-reduction on small numeric matrices: echelon forms,
determinants and inverses, with an explicit zero tolerance.

Public API
~~~~~~~~~~
- Row reduction
    - `row_echelon_form`, `reduced_row_echelon_form`, `rank`
- Matrix functions
    - `determinant`, `invert`, `is_singular`, `is_invertible`
- Matrix utilities
    - `is_matrix`, `is_square`, `identity`, `transpose`, `multiply`,
      `augment`, `swap_rows`
- Vector operations
    - `is_vector`, `add`, `subtract`, `scale`, `divide`, `dot_product`,
      `hadamard_product`, `length`, `transform`
- Tolerance
    - `EPS`, `is_zero`

Every engine function takes an optional `eps` (default `EPS = 1e-11`);
magnitudes below it are treated as zero.

Example
-------
>>> import rowreduce as rr
>>> rr.determinant([[4, 7], [2, 6]])
10.0
>>> rr.invert([[4, 7], [2, 6]])
array([[ 0.6, -0.7],
       [-0.2,  0.4]])
"""

from importlib.metadata import version as _pkg_version

from .elimination import (
    Strategy,
    rank,
    reduced_row_echelon_form,
    row_echelon_form,
)
from .exceptions import (
    DimensionMismatchError,
    InvalidShapeError,
    InvalidToleranceError,
    NotInvertibleError,
    RowReduceError,
)
from .matrix import (
    augment,
    identity,
    is_matrix,
    is_square,
    multiply,
    swap_rows,
    transpose,
)
from .matrix_functions import (
    determinant,
    invert,
    is_invertible,
    is_singular,
)
from .utils import EPS, is_zero
from .vector import (
    add,
    divide,
    dot_product,
    hadamard_product,
    is_vector,
    length,
    scale,
    subtract,
    transform,
)

__all__ = [
    "row_echelon_form",
    "reduced_row_echelon_form",
    "rank",
    "Strategy",
    "determinant",
    "invert",
    "is_singular",
    "is_invertible",
    "is_matrix",
    "is_square",
    "identity",
    "transpose",
    "multiply",
    "augment",
    "swap_rows",
    "is_vector",
    "add",
    "subtract",
    "scale",
    "divide",
    "dot_product",
    "hadamard_product",
    "length",
    "transform",
    "EPS",
    "is_zero",
    "RowReduceError",
    "InvalidShapeError",
    "DimensionMismatchError",
    "NotInvertibleError",
    "InvalidToleranceError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show rowreduce”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library code never configures logging; applications opt in.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
