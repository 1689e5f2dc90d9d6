"""
Problem Errors
==============

Exceptions raised while building or evaluating a TSP-CS problem instance.

Construction-time errors (bad weight matrix or value vector) abort the creation
of the problem. Evaluation-time errors signal a chromosome or tour that does not
fit the instance, which points to a bug upstream in the search engine.
All of them are ValueErrors so callers can catch them generically.
"""


class TSPCSError(ValueError):
    """Base class for all TSP-CS problem errors."""


class NotSquareError(TSPCSError):
    """The weight matrix has a row whose length differs from the number of rows."""


class DiagonalNotZeroError(TSPCSError):
    """A main diagonal entry of the weight matrix is not zero."""


class DisconnectedEdgeError(TSPCSError):
    """An off-diagonal weight is zero, so the graph is not fully connected."""


class InvalidWeightError(TSPCSError):
    """An off-diagonal weight is NaN."""


class SizeMismatchError(TSPCSError):
    """Two inputs that must describe the same number of cities disagree."""


class InvalidChromosomeError(TSPCSError):
    """A chromosome cannot be decoded into a tour."""


class InvalidBudgetError(TSPCSError):
    """The maximum path length is not a positive number."""
