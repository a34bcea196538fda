"""Core engine package.

This package contains the engines for path finding, solvability checking,
complexity scoring, and board generation.
"""
from .path_finder import PathFinder, InvalidSelectionError
from .solvability import SolvabilityChecker
from .complexity import ComplexityScorer, PathShapeStats
from .generator import BoardGenerator
from .matching import try_match, is_cleared

__all__ = [
    "PathFinder",
    "InvalidSelectionError",
    "SolvabilityChecker",
    "ComplexityScorer",
    "PathShapeStats",
    "BoardGenerator",
    "try_match",
    "is_cleared",
]
