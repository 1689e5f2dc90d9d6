import numpy as np
import pytest

from tsp_cs.problem import compute_idx


def full_chromosome(tour, n_cities):
    """FULL chromosome selecting the arcs of a cyclic tour."""
    x = np.zeros(n_cities * (n_cities - 1), dtype=int)
    for k in range(len(tour)):
        x[compute_idx(tour[k], tour[(k + 1) % len(tour)], n_cities)] = 1
    return x


@pytest.fixture
def unit_weights():
    return np.array([[0, 1, 1], [1, 0, 1], [1, 1, 0]], dtype=float)


@pytest.fixture
def line_instance():
    """5 cities on a line, weight |i - j|, distinct values."""
    n = 5
    weights = np.array([[abs(i - j) for j in range(n)] for i in range(n)], dtype=float)
    values = np.array([1.0, 5.0, 2.0, 4.0, 3.0])
    return weights, values
