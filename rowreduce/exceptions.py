# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for rowreduce.

Every error raised on purpose by the package derives from `RowReduceError`.
Shape problems also derive from `ValueError` and singular matrices from
`ArithmeticError`, so callers catching the builtins keep working.
"""

from typing import Optional, Tuple


class RowReduceError(Exception):
    """Base exception for all rowreduce errors."""


class InvalidShapeError(RowReduceError, ValueError):
    """
    Input is not a well-formed numeric matrix or vector, or is not square
    where a square matrix is required.

    Attributes:
        shape: Shape of the offending input, if it could be determined
    """

    def __init__(self, message: str, shape: Optional[Tuple[int, ...]] = None):
        super().__init__(message)
        self.shape = shape


class DimensionMismatchError(RowReduceError, ValueError):
    """
    Operands have incompatible shapes.

    Attributes:
        shapes: Shapes of the operands involved
    """

    def __init__(self, message: str, shapes: Tuple[Tuple[int, ...], ...] = ()):
        super().__init__(message)
        self.shapes = shapes


class NotInvertibleError(RowReduceError, ArithmeticError):
    """
    Matrix is singular under the zero tolerance and has no inverse.

    Attributes:
        determinant: The determinant that was found to be zero
        eps: Tolerance the determinant was tested against
    """

    def __init__(
        self,
        message: str,
        determinant: Optional[float] = None,
        eps: Optional[float] = None,
    ):
        super().__init__(message)
        self.determinant = determinant
        self.eps = eps


class InvalidToleranceError(RowReduceError, ValueError):
    """The zero tolerance is not a finite number greater than zero."""
