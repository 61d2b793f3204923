"""
Compute helpers shared across rankstats.

    timing: Timer and timed() for execution timing
    tolerances: Tolerance tiers for numerical comparison
"""

from rankstats.core.compute.timing import Timer, timed
from rankstats.core.compute.tolerances import (
    ToleranceTier,
    EXACT_COUNTS,
    CROSS_METHOD,
    REFERENCE,
    FLOAT_COUNTS,
    select_tolerance,
)

__all__ = [
    "Timer",
    "timed",
    "ToleranceTier",
    "EXACT_COUNTS",
    "CROSS_METHOD",
    "REFERENCE",
    "FLOAT_COUNTS",
    "select_tolerance",
]
