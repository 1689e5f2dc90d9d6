"""Chromosome to tour decoding."""

import logging

import numpy as np
import pytest

from conftest import full_chromosome
from tsp_cs.problem import (
    Encoding,
    InvalidChromosomeError,
    compute_idx,
    decode,
    full2cities,
    randomkeys2cities,
)


class TestFull2Cities:

    def test_follows_selected_arcs_from_city_zero(self):
        x = full_chromosome([0, 3, 1, 2], 4)
        assert list(full2cities(x, 4)) == [0, 3, 1, 2]

    def test_tour_not_starting_at_zero_is_rotated(self):
        x = full_chromosome([2, 0, 1], 3)
        assert list(full2cities(x, 3)) == [0, 1, 2]

    def test_single_city(self):
        assert list(full2cities(np.zeros(0), 1)) == [0]

    def test_missing_outgoing_arc(self):
        x = full_chromosome([0, 1, 2, 3], 4)
        x[compute_idx(1, 2, 4)] = 0
        with pytest.raises(InvalidChromosomeError, match="no selected outgoing arc"):
            full2cities(x, 4)

    def test_subtour(self):
        # Two 2-cycles: 0 <-> 1 and 2 <-> 3
        x = np.zeros(12, dtype=int)
        for i, j in [(0, 1), (1, 0), (2, 3), (3, 2)]:
            x[compute_idx(i, j, 4)] = 1
        with pytest.raises(InvalidChromosomeError, match="return to city 0"):
            full2cities(x, 4)

    def test_rejection_is_logged(self, caplog):
        x = full_chromosome([0, 1, 2, 3], 4)
        x[compute_idx(1, 2, 4)] = 0
        with caplog.at_level(logging.DEBUG, logger="tsp_cs.problem.decoding"):
            with pytest.raises(InvalidChromosomeError):
                full2cities(x, 4)
        assert "stops at city 1" in caplog.text


class TestRandomKeys2Cities:

    def test_rank_order(self):
        assert list(randomkeys2cities([0.7, 0.1, 0.4])) == [1, 2, 0]

    def test_ties_keep_position_order(self):
        assert list(randomkeys2cities([0.5, 0.5, 0.1])) == [2, 0, 1]

    def test_always_a_permutation(self):
        rng = np.random.default_rng(3)
        for _ in range(20):
            tour = randomkeys2cities(rng.random(9))
            assert sorted(tour) == list(range(9))


class TestDecode:

    def test_cities_is_identity(self):
        assert list(decode([2, 0, 1], 3, Encoding.CITIES)) == [2, 0, 1]

    def test_cities_rounds_floats(self):
        assert list(decode([1.9999, 0.0, 1.0], 3, Encoding.CITIES)) == [2, 0, 1]

    def test_cities_keeps_non_permutation(self):
        assert list(decode([0, 0, 2], 3, "CITIES")) == [0, 0, 2]

    def test_cities_clips_out_of_range_ids(self):
        assert list(decode([0, 5, -1], 3, Encoding.CITIES)) == [0, 2, 0]

    def test_dispatches_full(self):
        x = full_chromosome([0, 2, 1], 3)
        assert list(decode(x, 3, Encoding.FULL)) == [0, 2, 1]

    def test_dispatches_randomkeys(self):
        assert list(decode([0.3, 0.2, 0.1], 3, Encoding.RANDOMKEYS)) == [2, 1, 0]

    @pytest.mark.parametrize("encoding, length", [
        (Encoding.FULL, 5),
        (Encoding.RANDOMKEYS, 4),
        (Encoding.CITIES, 2),
    ])
    def test_wrong_length(self, encoding, length):
        with pytest.raises(InvalidChromosomeError):
            decode(np.zeros(length), 3, encoding)
