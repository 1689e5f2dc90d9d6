"""
City-Selection TSP Problem Definition
=====================================

This module defines the TSPCSProblem class, the City-Selection Travelling
Salesman Problem (TSP-CS) as a pymoo problem.

A salesman is given a fully connected graph of cities, a value for each city
and a maximum path length. A chromosome encodes a Hamiltonian cycle; its
fitness is the value of the best contiguous stretch of that cycle whose length
fits the budget. Shorter stretches are preferred among equally valuable ones.

The problem provides:
- Validation of the weight matrix and value vector at construction
- Decoding of FULL, RANDOMKEYS and CITIES chromosomes into tours
- The best-subsequence search and the scalar fitness built on it
- Per-encoding feasibility constraints

Usage:
    problem = TSPCSProblem(
        weights=weight_matrix,
        values=city_values,
        max_path_length=25.0,
        encoding=Encoding.RANDOMKEYS
    )

    res = minimize(problem, GA(pop_size=50), ('n_gen', 100))
    best = problem.find_city_subsequence(problem.decode(res.X))
"""

import logging

import numpy as np
from pymoo.core.problem import ElementwiseProblem

from .constraints import compute_constraints
from .decoding import decode
from .encoding import Encoding, chromosome_layout, compute_dimensions
from .errors import InvalidBudgetError, InvalidChromosomeError, SizeMismatchError
from .graph import check_values, check_weights
from .subsequence import find_city_subsequence

logger = logging.getLogger(__name__)


class TSPCSProblem(ElementwiseProblem):
    """
    City-Selection Travelling Salesman Problem.

    Fitness is minimised: the collected value is negated, offset so the value
    term stays non-negative, and the unused budget is added as a bonus in [0, 1]
    that can only break ties between equally valuable sub-paths.

    The instance data never changes after construction and every evaluation is
    a pure function of it and the chromosome, so one problem can be shared by
    concurrent evaluations.

    Attributes:
        weights (np.ndarray): Read-only n x n edge weights
        values (np.ndarray): Read-only value of each city
        max_path_length (float): Budget on the length of the selected sub-path
        min_value (float): Smallest city value
        encoding (Encoding): Chromosome encoding
        dimensions (Dimensions): Total and inequality constraint counts
    """

    def __init__(self, weights, values, max_path_length, encoding=Encoding.RANDOMKEYS, **kwargs):
        """
        Construct a City-Selection TSP.

        Args:
            weights: Square matrix of edge weights, zero on the diagonal and
                non-zero everywhere else
            values: Value of each city
            max_path_length (float): Maximum path length allowed for the salesman
            encoding (Encoding or str): Chromosome encoding
            **kwargs: Forwarded to pymoo's ElementwiseProblem (e.g. elementwise_runner)

        Raises:
            NotSquareError, DiagonalNotZeroError, DisconnectedEdgeError,
            InvalidWeightError: If the weight matrix is not a legal graph
            SizeMismatchError: If values does not have one entry per city
            InvalidBudgetError: If max_path_length is not strictly positive
        """
        check_weights(weights)
        check_values(weights, values)
        if len(weights) == 0:
            raise SizeMismatchError("A TSP-CS instance needs at least one city")
        # The remaining budget bonus is scaled by max_path_length
        if not max_path_length > 0:
            raise InvalidBudgetError(f"max_path_length must be positive, got {max_path_length}")

        self._weights = np.array(weights, dtype=float)
        self._values = np.array(values, dtype=float)
        self._weights.flags.writeable = False
        self._values.flags.writeable = False

        self._max_path_length = float(max_path_length)
        self._min_value = float(np.min(self._values))
        self._encoding = Encoding.parse(encoding)
        self._n_cities = len(self._values)
        self._dimensions = compute_dimensions(self._n_cities, self._encoding)

        layout = chromosome_layout(self._n_cities, self._encoding)
        n_ieq = self._dimensions.inequality
        n_eq = self._dimensions.total - n_ieq

        super().__init__(
            n_var=layout.n_var,
            n_obj=1,
            n_ieq_constr=n_ieq,
            n_eq_constr=n_eq,
            xl=layout.xl,
            xu=layout.xu,
            vtype=layout.vtype,
            **kwargs,
        )

        logger.info(
            f"Created TSP-CS problem: {self._n_cities} cities, max path length {self._max_path_length}, "
            f"{self._encoding.name} encoding ({layout.n_var} variables, {n_eq} equality / {n_ieq} inequality constraints)"
        )

    @classmethod
    def default(cls):
        """
        Naive 3-city symmetric instance.

        Weight matrix [[0,1,1], [1,0,1], [1,1,0]], values [1,1,1], maximum path
        length 1 and RANDOMKEYS encoding.
        """
        weights = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
        return cls(weights, [1.0, 1.0, 1.0], 1.0, Encoding.RANDOMKEYS)

    @property
    def weights(self):
        return self._weights

    @property
    def values(self):
        return self._values

    @property
    def max_path_length(self):
        return self._max_path_length

    @property
    def min_value(self):
        return self._min_value

    @property
    def n_cities(self):
        return self._n_cities

    @property
    def encoding(self):
        return self._encoding

    @property
    def dimensions(self):
        return self._dimensions

    def name(self):
        return "City-selection Travelling Salesman Problem (TSP-CS)"

    def distance(self, i, j):
        return self._weights[i, j]

    def decode(self, x):
        """Decode a chromosome into a tour of city ids."""
        return decode(x, self._n_cities, self._encoding)

    def find_city_subsequence(self, tour):
        """
        Best sub-path of a tour satisfying the max path length.

        See subsequence.find_city_subsequence() for details.
        """
        return find_city_subsequence(tour, self._weights, self._values, self._max_path_length)

    def fitness(self, x):
        """
        Scalar fitness of a chromosome (lower is better).

        Args:
            x: Chromosome in the problem's encoding

        Returns:
            float: -(value + (1 - min_value) * n + remaining_budget / max_path_length)

        Raises:
            InvalidChromosomeError: If the chromosome cannot be decoded
        """
        best = self.find_city_subsequence(self.decode(x))
        return -(
            best.value
            + (1 - self._min_value) * self._n_cities
            + best.remaining_budget / self._max_path_length
        )

    def constraint_parts(self, x):
        """Equality and inequality constraint values as two arrays."""
        x = np.asarray(x)
        if x.ndim != 1 or len(x) != self.n_var:
            raise InvalidChromosomeError(
                f"{self._encoding.name} chromosome for {self._n_cities} cities must have {self.n_var} entries, got shape {x.shape}"
            )
        return compute_constraints(x, self._n_cities, self._encoding)

    def constraints(self, x):
        """
        Constraint vector of a chromosome.

        The first dimensions.total - dimensions.inequality entries are
        equalities (satisfied at 0), the rest inequalities (satisfied when <= 0).
        """
        equalities, inequalities = self.constraint_parts(x)
        return np.concatenate([equalities, inequalities])

    def _evaluate(self, x, out, *args, **kwargs):
        out["F"] = self.fitness(x)

        equalities, inequalities = self.constraint_parts(x)
        if self.n_eq_constr > 0:
            out["H"] = equalities
        if self.n_ieq_constr > 0:
            out["G"] = inequalities
