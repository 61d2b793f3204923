"""
Core infrastructure for rankstats.

This module provides shared abstractions and utilities used by the
distribution and multiple-testing submodules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from rankstats.core.result import Result
from rankstats.core.exceptions import (
    RankStatsError,
    ValidationError,
    DimensionError,
    NumericalError,
    ComputationTooExpensiveError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "RankStatsError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "ComputationTooExpensiveError",
]
