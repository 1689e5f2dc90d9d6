"""
Best City Subsequence
=====================

Core of the TSP-CS fitness: given a tour (a Hamiltonian cycle), find the
contiguous stretch of it that collects the most value while its length stays
within the travel budget.

The tour is read cyclically and scanned with two pointers. The right pointer
extends the window while the budget lasts; the left pointer then releases
edges until the window fits again. Both pointers only move forward, so the
scan is linear in the number of cities.

Ties in value go to the window with more budget left (the shorter path). Ties
in both keep the window found first.
"""

from collections import namedtuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .errors import SizeMismatchError


class SubsequenceResult(BaseModel):
    """Best window of a tour found by find_city_subsequence()."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Total value of the cities in the window.")
    remaining_budget: float = Field(..., description="Max path length minus the length of the window.")
    start: int = Field(..., description="Tour position of the first city in the window.")
    end: int = Field(..., description="Tour position of the last city in the window (inclusive).")

    def positions(self, n_cities):
        """Tour positions covered by the window, in visiting order."""
        size = (self.end - self.start) % n_cities + 1
        return [(self.start + k) % n_cities for k in range(size)]


# Scan state. left/right are unbounded counters, positions are taken mod n.
_Window = namedtuple("_Window", ["left", "right", "value", "remaining"])


def _extend(window, tour, weights, values, n):
    """Move the right end one city forward."""
    right = window.right
    edge = weights[tour[right % n], tour[(right + 1) % n]]
    return _Window(
        window.left,
        right + 1,
        window.value + values[tour[(right + 1) % n]],
        window.remaining - edge,
    )


def _shrink(window, tour, weights, values, n):
    """Drop the leftmost city and give its edge back to the budget."""
    left = window.left
    edge = weights[tour[left % n], tour[(left + 1) % n]]
    return _Window(
        left + 1,
        window.right,
        window.value - values[tour[left % n]],
        window.remaining + edge,
    )


def _wrapped(window, n):
    return window.left % n == window.right % n


def _improves(candidate, best):
    if candidate.value > best.value:
        return True
    return candidate.value == best.value and candidate.remaining > best.remaining


def find_city_subsequence(tour, weights, values, max_path_length):
    """
    Compute the best sub-path of a tour satisfying the max path length.

    The tour is expected to be a permutation of range(n). Any other sequence of
    valid city ids of the right length is scanned as is and gives a result that
    has no meaning as a path.

    Args:
        tour: Sequence of n city ids (CITIES encoding of a Hamiltonian cycle)
        weights (np.ndarray): n x n edge weights
        values (np.ndarray): Value of each city
        max_path_length (float): Budget on the total length of the sub-path

    Returns:
        SubsequenceResult: Value, remaining budget and tour positions of the
            first and last city of the best window

    Raises:
        SizeMismatchError: If the tour length is not equal to the number of cities

    Example:
        >>> w = np.array([[0, 1, 1], [1, 0, 1], [1, 1, 0]])
        >>> find_city_subsequence([0, 1, 2], w, np.ones(3), 1.0).value
        2.0
    """
    tour = np.asarray(tour, dtype=int)
    weights = np.asarray(weights, dtype=float)
    values = np.asarray(values, dtype=float)
    n_cities = len(values)

    if len(tour) != n_cities:
        raise SizeMismatchError(f"tour dimension ({len(tour)}) must be equal to the city number ({n_cities})")

    window = _Window(0, 0, values[tour[0]], float(max_path_length))
    best = window
    extending = True

    while True:
        while extending:
            window = _extend(window, tour, weights, values, n_cities)
            if window.remaining < 0 or _wrapped(window, n_cities):
                extending = False
            elif _improves(window, best):
                best = window

        # Every city is in the window, nothing left to gain
        if _wrapped(window, n_cities):
            break

        window = _shrink(window, tour, weights, values, n_cities)
        if window.remaining >= 0:
            extending = True
            if _improves(window, best):
                best = window

        if window.left == n_cities:
            break

    return SubsequenceResult(
        value=float(best.value),
        remaining_budget=float(best.remaining),
        start=best.left % n_cities,
        end=best.right % n_cities,
    )
