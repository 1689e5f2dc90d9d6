"""Weight matrix and value vector validation."""

import math

import numpy as np
import pytest

from tsp_cs.problem import (
    DiagonalNotZeroError,
    DisconnectedEdgeError,
    InvalidWeightError,
    NotSquareError,
    SizeMismatchError,
    TSPCSError,
    check_values,
    check_weights,
)


class TestCheckWeights:

    def test_accepts_fully_connected_matrix(self, unit_weights):
        check_weights(unit_weights)

    def test_accepts_list_of_lists(self):
        check_weights([[0, 2.5], [3.0, 0]])

    def test_accepts_single_city(self):
        check_weights([[0]])

    def test_ragged_matrix_is_not_square(self):
        with pytest.raises(NotSquareError):
            check_weights([[0, 1, 1], [1, 0], [1, 1, 0]])

    def test_rectangular_matrix_is_not_square(self):
        with pytest.raises(NotSquareError):
            check_weights(np.ones((2, 3)))

    def test_non_zero_diagonal(self):
        with pytest.raises(DiagonalNotZeroError):
            check_weights([[0, 1], [1, 0.5]])

    def test_zero_off_diagonal_is_disconnected(self):
        with pytest.raises(DisconnectedEdgeError):
            check_weights([[0, 1, 0], [1, 0, 1], [1, 1, 0]])

    def test_nan_weight(self):
        with pytest.raises(InvalidWeightError):
            check_weights([[0, 1], [math.nan, 0]])

    def test_nan_on_diagonal_is_diagonal_error(self):
        with pytest.raises(DiagonalNotZeroError):
            check_weights([[math.nan, 1], [1, 0]])

    def test_first_violation_in_row_major_order_wins(self):
        # Row 0 has a zero edge, row 1 a bad diagonal
        with pytest.raises(DisconnectedEdgeError):
            check_weights([[0, 0, 1], [1, 7, 1], [1, 1, 0]])

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            check_weights([[1]])
        assert issubclass(NotSquareError, TSPCSError)


class TestCheckValues:

    def test_matching_sizes(self, unit_weights):
        check_values(unit_weights, [1, 2, 3])

    def test_size_mismatch(self, unit_weights):
        with pytest.raises(SizeMismatchError):
            check_values(unit_weights, [1, 2])
