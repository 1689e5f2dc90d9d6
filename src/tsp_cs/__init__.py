"""
TSP-CS: City-Selection Travelling Salesman Problem for evolutionary search.
"""

from .problem import TSPCSProblem, Encoding, SubsequenceResult, find_city_subsequence

__all__ = [
    'TSPCSProblem',
    'Encoding',
    'SubsequenceResult',
    'find_city_subsequence',
]

__version__ = "0.1.0"
