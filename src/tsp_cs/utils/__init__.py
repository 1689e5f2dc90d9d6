# Import key utility functions and classes
from .config import load_config, SolverConfig, DEFAULT_CONFIG_PATH

# Specify which symbols to export when using "from utils import *"
__all__ = [
    'load_config',
    'SolverConfig',
    'DEFAULT_CONFIG_PATH'
]
