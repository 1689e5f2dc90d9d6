"""
Graph Validation
================

Checks that a weight matrix and a value vector describe a legal TSP-CS instance:
a fully connected graph without self-loops, with one value per city.

Usage:
    check_weights(weights)
    check_values(weights, values)
"""

import logging

from .errors import (
    DiagonalNotZeroError,
    DisconnectedEdgeError,
    InvalidWeightError,
    NotSquareError,
    SizeMismatchError,
)

logger = logging.getLogger(__name__)


def check_weights(matrix):
    """
    Check that an adjacency matrix can define a TSP-CS instance.

    The matrix is scanned row by row and the first violation found is raised.
    Rows are read as plain sequences so ragged input is reported instead of
    failing inside numpy.

    Args:
        matrix: Square matrix of edge weights (list of lists or 2D array)

    Raises:
        NotSquareError: If a row length differs from the number of rows
        DiagonalNotZeroError: If a main diagonal element is not zero
        DisconnectedEdgeError: If an off-diagonal element is zero
        InvalidWeightError: If an off-diagonal element is NaN
    """
    n_cols = len(matrix)

    for i in range(n_cols):
        row = matrix[i]
        n_rows = len(row)
        if n_rows != n_cols:
            raise NotSquareError(f"adjacency matrix is not square (row {i} has {n_rows} entries, expected {n_cols})")

        for j in range(n_rows):
            weight = row[j]
            if i == j:
                if weight != 0:
                    raise DiagonalNotZeroError(f"main diagonal elements must all be zeros (found {weight} at [{i}][{j}])")
                continue
            if weight == 0:
                raise DisconnectedEdgeError(f"adjacency matrix contains zero values (at [{i}][{j}])")
            if weight != weight:
                raise InvalidWeightError(f"adjacency matrix contains NaN values (at [{i}][{j}])")

    logger.debug(f"Weight matrix validated: {n_cols} cities, fully connected")


def check_values(matrix, values):
    """Check that there is exactly one value per city."""
    if len(values) != len(matrix):
        raise SizeMismatchError(
            f"Size of weight matrix ({len(matrix)}) and values vector ({len(values)}) must be equal"
        )
