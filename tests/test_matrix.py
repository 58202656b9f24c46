# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from rowreduce.exceptions import DimensionMismatchError, InvalidShapeError
from rowreduce.matrix import (
    as_matrix,
    augment,
    identity,
    is_matrix,
    is_square,
    multiply,
    swap_rows,
    transpose,
)


def test_is_matrix():
    assert is_matrix([[1, 2], [3, 4]])
    assert is_matrix([[1.5]], np.zeros((2, 3)))
    assert not is_matrix([[1, 2], [3]])
    assert not is_matrix([1, 2, 3])
    assert not is_matrix([[]])
    assert not is_matrix([[1, "2"]])
    assert not is_matrix([[1, 2]], [[1], [2, 3]])
    assert not is_matrix("matrix")


def test_is_square():
    assert is_square([[1, 2], [3, 4]])
    assert not is_square([[1, 2, 3], [4, 5, 6]])
    assert not is_square([1])


def test_as_matrix_copies():
    A = np.array([[1, 2], [3, 4]])
    M = as_matrix(A)
    assert M.dtype == float
    M[0, 0] = 99.0
    assert A[0, 0] == 1


def test_identity():
    np.testing.assert_array_equal(identity(3), np.eye(3))
    with pytest.raises(InvalidShapeError):
        identity(0)
    with pytest.raises(InvalidShapeError):
        identity(2.5)


def test_transpose():
    np.testing.assert_array_equal(
        transpose([[3, 5, 7], [11, 13, 17]]),
        [
            [3, 11],
            [5, 13],
            [7, 17],
        ],
    )


@pytest.mark.parametrize(
    "expected, A, B",
    [
        (
            [[2, 0], [1, -2]],
            [[0, 2], [1, 0]],
            [[1, -2], [1, 0]],
        ),
        (
            [[3, 2340], [0, 1000]],
            [[2, 3, 4], [1, 0, 0]],
            [[0, 1000], [1, 100], [0, 10]],
        ),
        (
            [[-5, -11, -17], [-11, -25, -39], [-17, -39, -61]],
            [[-1, -2], [-3, -4], [-5, -6]],
            [[1, 3, 5], [2, 4, 6]],
        ),
    ],
)
def test_multiply(expected, A, B):
    np.testing.assert_array_equal(multiply(A, B), expected)


def test_multiply_chain_and_mismatch():
    A = [[1, 2], [3, 4]]
    np.testing.assert_array_equal(multiply(A, identity(2), A), [[7, 10], [15, 22]])
    with pytest.raises(DimensionMismatchError):
        multiply([[1, 2, 3]], [[1, 2, 3]])


def test_augment():
    np.testing.assert_array_equal(
        augment([[1, 2], [3, 4]], identity(2)),
        [
            [1, 2, 1, 0],
            [3, 4, 0, 1],
        ],
    )
    with pytest.raises(DimensionMismatchError):
        augment([[1, 2], [3, 4]], identity(3))


def test_swap_rows():
    A = [[1, 2], [3, 4], [5, 6]]
    np.testing.assert_array_equal(swap_rows(A, 0, 2), [[5, 6], [3, 4], [1, 2]])
    assert A[0] == [1, 2]
    with pytest.raises(IndexError):
        swap_rows(A, 0, 3)
