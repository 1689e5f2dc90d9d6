"""
TSP-CS Optimizer
================

This module provides the command line entry point: it generates a random
City-Selection TSP instance from the configuration, solves it with pymoo's
genetic algorithm and reports the best sub-path found.

Usage:
    # Basic usage with the packaged configuration
    tsp-cs

    # Custom configuration and seed
    tsp-cs --config ./config.json --seed 7

    # Or import and run programmatically
    from tsp_cs.main import main
    results = main(config_path="./config.json", seed=42)

The configuration path can also be given with the TSP_CS_CONFIG environment
variable (a .env file in the working directory is loaded).
"""

import os
import logging
import argparse
from datetime import datetime

import numpy as np
from dotenv import load_dotenv
from pymoo.algorithms.soo.nonconvex.ga import GA
from pymoo.operators.crossover.ox import OrderCrossover
from pymoo.operators.mutation.inversion import InversionMutation
from pymoo.operators.sampling.rnd import PermutationRandomSampling
from pymoo.optimize import minimize

from .problem import Encoding, TSPCSProblem
from .utils.config import DEFAULT_CONFIG_PATH, load_config


def setup_logging():
    """
    Configure application logging.

    Sets up both file and console logging with timestamps and appropriate
    log levels. Log files are stored in the 'log' directory with filenames
    that include the current timestamp.
    """
    # Create logs directory if it doesn't exist
    os.makedirs("log", exist_ok=True)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(f"log/tsp_cs_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"),
            logging.StreamHandler()
        ]
    )


def generate_instance(n_cities, weight_range, value_range, seed=None):
    """
    Generate a random symmetric TSP-CS instance.

    Args:
        n_cities (int): Number of cities
        weight_range (list): [low, high] for the edge weights, low > 0
        value_range (list): [low, high] for the city values
        seed (int, optional): Random seed

    Returns:
        tuple: (weights, values) as numpy arrays
    """
    rng = np.random.default_rng(seed)
    upper = np.triu(rng.uniform(weight_range[0], weight_range[1], size=(n_cities, n_cities)), k=1)
    weights = upper + upper.T
    values = rng.uniform(value_range[0], value_range[1], size=n_cities)
    return weights, values


def build_algorithm(encoding, pop_size):
    """GA configured with operators that suit the chromosome encoding."""
    if encoding == Encoding.CITIES:
        return GA(
            pop_size=pop_size,
            sampling=PermutationRandomSampling(),
            crossover=OrderCrossover(),
            mutation=InversionMutation(),
            eliminate_duplicates=True
        )
    return GA(pop_size=pop_size, eliminate_duplicates=True)


def main(config_path=DEFAULT_CONFIG_PATH, seed=None):
    """
    Run the TSP-CS optimization process.

    Args:
        config_path (str): Path to the JSON configuration file
        seed (int, optional): Overrides the SEED of the configuration

    Returns:
        dict or None: Optimization results including:
            - problem: The TSPCSProblem instance
            - tour: Decoded tour of the best chromosome
            - best: SubsequenceResult of that tour
            - fitness: Fitness of the best chromosome
            Returns None if optimization fails
    """
    setup_logging()
    logger = logging.getLogger(__name__)
    config = load_config(config_path)

    seed = config.SEED if seed is None else seed

    if config.ENCODING == Encoding.FULL:
        # Random arc selections almost never decode to a tour
        logger.error("FULL encoding needs a constrained solver; use RANDOMKEYS or CITIES with the GA driver")
        return None

    try:
        logger.info(f"Generating instance: {config.N_CITIES} cities, seed {seed}")
        weights, values = generate_instance(config.N_CITIES, config.WEIGHT_RANGE, config.VALUE_RANGE, seed)

        problem = TSPCSProblem(weights, values, config.MAX_PATH_LENGTH, config.ENCODING)

        logger.info(f"Starting GA: population {config.POP_SIZE}, {config.N_GEN} generations")
        res = minimize(
            problem,
            build_algorithm(config.ENCODING, config.POP_SIZE),
            ('n_gen', config.N_GEN),
            seed=seed,
            verbose=False
        )

        if res.X is None:
            logger.error("No feasible solution found")
            return None

        tour = problem.decode(res.X)
        best = problem.find_city_subsequence(tour)
        cities = [int(tour[p]) for p in best.positions(problem.n_cities)]

        logger.info(f"Best fitness: {float(np.ravel(res.F)[0]):.4f}")
        logger.info(f"Selected cities: {cities}")
        logger.info(f"Collected value: {best.value:.4f}")
        logger.info(f"Path length: {problem.max_path_length - best.remaining_budget:.4f} of {problem.max_path_length}")

        return {
            "problem": problem,
            "tour": tour,
            "best": best,
            "fitness": float(np.ravel(res.F)[0])
        }

    except Exception as e:
        logger.error(f"An error occurred during optimization: {e}", exc_info=True)
        return None


def cli():
    load_dotenv()

    parser = argparse.ArgumentParser(description='Solve a random City-Selection TSP instance with a genetic algorithm')
    parser.add_argument('--config', default=os.getenv("TSP_CS_CONFIG", DEFAULT_CONFIG_PATH), help='Path to JSON configuration file')
    parser.add_argument('--seed', type=int, default=None, help='Random seed (overrides SEED in the configuration)')

    args = parser.parse_args()

    results = main(config_path=args.config, seed=args.seed)
    return 0 if results is not None else 1


if __name__ == "__main__":
    raise SystemExit(cli())
