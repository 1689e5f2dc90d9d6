"""
Chromosome Encodings
====================

The three chromosome representations a TSP-CS problem understands and the sizes
that depend on them:

- FULL: one binary variable per directed arc between distinct cities
- RANDOMKEYS: one continuous sort key per city, the rank order is the tour
- CITIES: the chromosome is the tour itself

compute_dimensions() gives the shape of the constraint vector (total count and
how many of those are inequalities). chromosome_layout() gives the decision
vector length and bounds handed to pymoo.
"""

import enum
from collections import namedtuple

import numpy as np


class Encoding(enum.Enum):
    FULL = "FULL"
    RANDOMKEYS = "RANDOMKEYS"
    CITIES = "CITIES"

    @classmethod
    def parse(cls, value):
        """Accept an Encoding or its name (case insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(f"Unknown encoding '{value}'. Options: {', '.join(e.name for e in cls)}") from None


Dimensions = namedtuple("Dimensions", ["total", "inequality"])

ChromosomeLayout = namedtuple("ChromosomeLayout", ["n_var", "xl", "xu", "vtype"])


# 2n degree equalities + (n-1)(n-2) subtour inequalities = n(n-1) + 2
_DIMENSIONS = {
    Encoding.FULL: lambda n: Dimensions(n * (n - 1) + 2, (n - 1) * (n - 2)),
    Encoding.RANDOMKEYS: lambda n: Dimensions(0, 0),
    Encoding.CITIES: lambda n: Dimensions(1, 0),
}

_LAYOUTS = {
    Encoding.FULL: lambda n: ChromosomeLayout(n * (n - 1), 0, 1, int),
    Encoding.RANDOMKEYS: lambda n: ChromosomeLayout(n, 0.0, 1.0, float),
    Encoding.CITIES: lambda n: ChromosomeLayout(n, 0, max(n - 1, 0), int),
}


def compute_dimensions(n_cities, encoding):
    """
    Compute the constraint dimensions for a number of cities and an encoding.

    Args:
        n_cities (int): Number of cities in the instance
        encoding (Encoding): Chromosome encoding

    Returns:
        Dimensions: (total, inequality) where the first total - inequality
            constraints are equalities

    Example:
        >>> compute_dimensions(4, Encoding.FULL)
        Dimensions(total=14, inequality=6)
    """
    return _DIMENSIONS[Encoding.parse(encoding)](int(n_cities))


def chromosome_length(n_cities, encoding):
    """Number of decision variables of a chromosome."""
    return _LAYOUTS[Encoding.parse(encoding)](int(n_cities)).n_var


def chromosome_layout(n_cities, encoding):
    """
    Decision vector description for pymoo.

    Returns:
        ChromosomeLayout: n_var, lower bound array, upper bound array and
            variable type
    """
    layout = _LAYOUTS[Encoding.parse(encoding)](int(n_cities))
    xl = np.full(layout.n_var, layout.xl)
    xu = np.full(layout.n_var, layout.xu)
    return ChromosomeLayout(layout.n_var, xl, xu, layout.vtype)


def compute_idx(i, j, n):
    """
    Position of the arc variable (i, j) in a FULL chromosome.

    Arcs are laid out row by row with the diagonal skipped, so row i holds the
    n - 1 arcs leaving city i.

    Example:
        >>> [compute_idx(1, j, 3) for j in (0, 2)]
        [2, 3]
    """
    if i == j or not (0 <= i < n and 0 <= j < n):
        raise ValueError(f"Invalid arc ({i}, {j}) for {n} cities")
    return i * (n - 1) + j - (1 if j > i else 0)
