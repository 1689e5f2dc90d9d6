"""
Feasibility Constraints
=======================

Constraint vectors for each chromosome encoding. Equality constraints are
satisfied when equal to 0, inequality constraints when <= 0 (pymoo's H and G).

FULL chromosomes use the integer linear programming formulation of the TSP
(see http://en.wikipedia.org/wiki/Travelling_salesman_problem#Integer_linear_programming_formulation):
- degree equalities, every city has exactly one outgoing and one incoming arc
- Miller-Tucker-Zemlin inequalities, which forbid cycles that skip city 0

RANDOMKEYS chromosomes always decode to a permutation and carry no constraint.
CITIES chromosomes carry a single equality, 0 when they are a permutation.
"""

import numpy as np

from .encoding import Encoding, compute_idx


def degree_constraints(x, n_cities):
    """
    Degree equalities of a FULL chromosome.

    Returns:
        np.ndarray: 2 * n_cities values; entry i is the number of arcs leaving
            city i minus 1, entry n_cities + i the number of arcs entering it minus 1
    """
    c = np.zeros(2 * n_cities)
    for i in range(n_cities):
        for j in range(n_cities):
            if i == j:
                continue
            c[i] += x[compute_idx(i, j, n_cities)]
            c[i + n_cities] += x[compute_idx(j, i, n_cities)]
    return c - 1


def mtz_ranks(x, n_cities):
    """
    Visiting rank of each city when following the selected arcs from city 0.

    At each step the current city gets rank step + 1 and the walk moves to the
    first city j with x[i, j] == 1. When no arc is selected the walk stays put,
    so cities never reached keep rank 0.

    Args:
        x: FULL chromosome
        n_cities (int): Number of cities

    Returns:
        np.ndarray: Integer rank per city
    """
    u = np.zeros(n_cities, dtype=int)
    current_city = 0
    next_city = 0
    for step in range(n_cities):
        u[current_city] = step + 1
        for j in range(n_cities):
            if j == current_city:
                continue
            if x[compute_idx(current_city, j, n_cities)] == 1:
                next_city = j
                break
        current_city = next_city
    return u


def subtour_constraints(x, n_cities, u=None):
    """
    MTZ subtour elimination inequalities.

    For every ordered pair (i, j) of distinct cities other than city 0, row major:
    u[i] - u[j] + (n + 1) * x[i, j] - n <= 0

    Args:
        x: FULL chromosome
        n_cities (int): Number of cities
        u: Ranks from mtz_ranks(), computed when omitted

    Returns:
        np.ndarray: (n_cities - 1) * (n_cities - 2) values
    """
    if u is None:
        u = mtz_ranks(x, n_cities)

    g = []
    for i in range(1, n_cities):
        for j in range(1, n_cities):
            if i == j:
                continue
            g.append(u[i] - u[j] + (n_cities + 1) * x[compute_idx(i, j, n_cities)] - n_cities)
    return np.array(g, dtype=float)


def permutation_constraint(x, n_cities):
    """0.0 if x is a permutation of range(n_cities), 1.0 otherwise."""
    x = np.asarray(x)
    is_permutation = len(x) == n_cities and np.array_equal(np.sort(x), np.arange(n_cities))
    return np.array([0.0 if is_permutation else 1.0])


def _full_constraints(x, n_cities):
    return degree_constraints(x, n_cities), subtour_constraints(x, n_cities)


def _randomkeys_constraints(x, n_cities):
    return np.zeros(0), np.zeros(0)


def _cities_constraints(x, n_cities):
    return permutation_constraint(x, n_cities), np.zeros(0)


_CONSTRAINTS = {
    Encoding.FULL: _full_constraints,
    Encoding.RANDOMKEYS: _randomkeys_constraints,
    Encoding.CITIES: _cities_constraints,
}


def compute_constraints(x, n_cities, encoding):
    """
    Constraint values of a chromosome.

    Args:
        x: Chromosome
        n_cities (int): Number of cities
        encoding (Encoding): Encoding of x

    Returns:
        tuple: (equalities, inequalities) as numpy arrays, sized as reported by
            compute_dimensions()
    """
    x = np.asarray(x)
    return _CONSTRAINTS[Encoding.parse(encoding)](x, n_cities)
