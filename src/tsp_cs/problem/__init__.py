# Import key problem-related modules
from .tsp_cs_problem import TSPCSProblem
from .encoding import Encoding, Dimensions, compute_dimensions, chromosome_length, compute_idx
from .graph import check_weights, check_values
from .decoding import decode, full2cities, randomkeys2cities
from .subsequence import SubsequenceResult, find_city_subsequence
from .constraints import (
    compute_constraints,
    degree_constraints,
    mtz_ranks,
    subtour_constraints,
    permutation_constraint
)
from .errors import (
    TSPCSError,
    NotSquareError,
    DiagonalNotZeroError,
    DisconnectedEdgeError,
    InvalidWeightError,
    SizeMismatchError,
    InvalidChromosomeError,
    InvalidBudgetError
)

# Specify which symbols to export when using "from problem import *"
__all__ = [
    # Problem Definition
    'TSPCSProblem',

    # Encodings
    'Encoding',
    'Dimensions',
    'compute_dimensions',
    'chromosome_length',
    'compute_idx',

    # Validation
    'check_weights',
    'check_values',

    # Decoding and search
    'decode',
    'full2cities',
    'randomkeys2cities',
    'SubsequenceResult',
    'find_city_subsequence',

    # Constraints
    'compute_constraints',
    'degree_constraints',
    'mtz_ranks',
    'subtour_constraints',
    'permutation_constraint',

    # Errors
    'TSPCSError',
    'NotSquareError',
    'DiagonalNotZeroError',
    'DisconnectedEdgeError',
    'InvalidWeightError',
    'SizeMismatchError',
    'InvalidChromosomeError',
    'InvalidBudgetError',
]
