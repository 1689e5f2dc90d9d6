"""
Tour Decoding
=============

Turns a chromosome into a tour, the ordered list of city ids visited.

- FULL chromosomes are walked arc by arc starting from city 0
- RANDOMKEYS chromosomes are ranked, the order of the sorted keys is the tour
- CITIES chromosomes already are the tour, rounded and clipped to valid ids
"""

import logging

import numpy as np

from .encoding import Encoding, chromosome_length, compute_idx
from .errors import InvalidChromosomeError

logger = logging.getLogger(__name__)


def full2cities(x, n_cities):
    """
    Decode a FULL chromosome by following the selected arcs from city 0.

    From each city the first arc (in increasing target order) whose variable
    equals 1 is taken.

    Args:
        x: Arc selection vector of length n_cities * (n_cities - 1)
        n_cities (int): Number of cities

    Returns:
        np.ndarray: Tour of n_cities city ids starting with 0

    Raises:
        InvalidChromosomeError: If a city has no selected outgoing arc or the
            selected arcs close a cycle before every city is visited
    """
    tour = np.zeros(n_cities, dtype=int)
    visited = np.zeros(n_cities, dtype=bool)
    current_city = 0

    for step in range(n_cities):
        if visited[current_city]:
            logger.debug(f"FULL chromosome revisits city {current_city} at step {step}")
            raise InvalidChromosomeError(
                f"Selected arcs return to city {current_city} after {step} of {n_cities} cities"
            )
        tour[step] = current_city
        visited[current_city] = True

        if step == n_cities - 1:
            break

        next_city = None
        for j in range(n_cities):
            if j == current_city:
                continue
            if x[compute_idx(current_city, j, n_cities)] == 1:
                next_city = j
                break

        if next_city is None:
            logger.debug(f"FULL chromosome stops at city {current_city} at step {step}")
            raise InvalidChromosomeError(f"City {current_city} has no selected outgoing arc")
        current_city = next_city

    return tour


def randomkeys2cities(x):
    """Rank order of the keys, ties resolved by position."""
    return np.argsort(np.asarray(x, dtype=float), kind="stable")


def cities2cities(x, n_cities):
    # Ids are clipped into range but not checked for being a permutation, the
    # CITIES constraint reports that
    return np.clip(np.rint(np.asarray(x, dtype=float)).astype(int), 0, n_cities - 1)


_DECODERS = {
    Encoding.FULL: lambda x, n: full2cities(x, n),
    Encoding.RANDOMKEYS: lambda x, n: randomkeys2cities(x),
    Encoding.CITIES: lambda x, n: cities2cities(x, n),
}


def decode(x, n_cities, encoding):
    """
    Decode a chromosome into a tour.

    Args:
        x: Chromosome
        n_cities (int): Number of cities
        encoding (Encoding): Encoding of x

    Returns:
        np.ndarray: Tour of city ids

    Raises:
        InvalidChromosomeError: If the chromosome length does not match the
            encoding or the chromosome cannot be decoded
    """
    encoding = Encoding.parse(encoding)
    x = np.asarray(x)
    expected = chromosome_length(n_cities, encoding)
    if x.ndim != 1 or len(x) != expected:
        logger.debug(f"Rejected {encoding.name} chromosome of shape {x.shape}")
        raise InvalidChromosomeError(
            f"{encoding.name} chromosome for {n_cities} cities must have {expected} entries, got shape {x.shape}"
        )
    return _DECODERS[encoding](x, n_cities)
