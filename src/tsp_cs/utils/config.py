"""
Configuration Handler
====================

This module provides utilities for loading and validating configuration settings
from JSON files. It gracefully handles errors and provides helpful error messages.

Usage:
    config = load_config("path/to/config.json")

    # Access configuration values
    n_cities = config.N_CITIES
    encoding = config.ENCODING
"""

import os
import json
import logging
import sys
from typing import List

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..problem.encoding import Encoding

logger = logging.getLogger("load_config")

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "config.json")


class SolverConfig(BaseModel):
    N_CITIES: int = Field(20, ge=1, description="Number of cities of the generated instance.")
    MAX_PATH_LENGTH: float = Field(..., gt=0, description="Budget on the length of the selected sub-path.")
    ENCODING: Encoding = Field(Encoding.RANDOMKEYS, description="Chromosome encoding: FULL, RANDOMKEYS or CITIES.")
    POP_SIZE: int = Field(50, ge=2, description="GA population size.")
    N_GEN: int = Field(100, ge=1, description="Number of GA generations.")
    SEED: int = Field(42, description="Seed for instance generation and the GA.")
    WEIGHT_RANGE: List[float] = Field([1.0, 10.0], min_length=2, max_length=2, description="Edge weights are drawn uniformly from this range.")
    VALUE_RANGE: List[float] = Field([0.0, 10.0], min_length=2, max_length=2, description="City values are drawn uniformly from this range.")

    @field_validator("ENCODING", mode="before")
    @classmethod
    def parse_encoding(cls, value):
        return Encoding.parse(value)

    @field_validator("WEIGHT_RANGE")
    @classmethod
    def positive_weights(cls, value):
        # Zero weights would disconnect the graph
        if value[0] <= 0 or value[1] < value[0]:
            raise ValueError(f"WEIGHT_RANGE must be an increasing pair of positive numbers, got {value}")
        return value


def load_config(config_path=DEFAULT_CONFIG_PATH):
    """
    Load and validate configuration settings from a JSON file.

    This function attempts to load the specified configuration file, providing
    helpful error messages if the file is missing, invalid, or inaccessible.
    The program will exit with status code 1 if configuration cannot be loaded.

    Args:
        config_path (str): Path to the JSON configuration file
                         (default: the config.json shipped with the package)

    Returns:
        SolverConfig: Validated configuration parameters

    Raises:
        SystemExit: If the configuration file cannot be loaded

    Example:
        # Load with default path
        config = load_config()

        # Load with custom path
        config = load_config("./config/settings.json")
    """

    # Try to load configuration from file
    if not os.path.exists(config_path):
        logger.error(f"Error: Configuration file {config_path} not found.")
        logger.error("The program requires a valid configuration file to run.")
        sys.exit(1)

    try:
        with open(config_path, 'r') as f:
            config = SolverConfig(**json.load(f))

        logger.info(f"Configuration loaded from {config_path}")
        return config

    except json.JSONDecodeError as e:
        logger.warning(f"Error parsing configuration file {config_path}: {e}")
        sys.exit(1)
    except ValidationError as e:
        logger.warning(f"Invalid configuration in {config_path}: {e}")
        sys.exit(1)
    except IOError as e:
        logger.warning(f"Error reading configuration file {config_path}: {e}")
        sys.exit(1)
