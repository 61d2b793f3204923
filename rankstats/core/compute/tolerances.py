"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different comparisons rankstats
makes:
- Exact counts: integer arithmetic, compared exactly
- Cross-method: the same probability from two algorithms
- Reference: agreement with R / published tables

Used by the test suite and by select_tolerance() callers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer counts (n <= 62): no rounding at all
EXACT_COUNTS = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact_counts',
    description='Integer subset counts, bit-for-bit equal',
)

# Probabilities from two different algorithms for the same (T, n)
CROSS_METHOD = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='cross_method',
    description='Recursive, enumeration and shift algorithms agree',
)

# Published tables and R's p.adjust() output
REFERENCE = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='reference',
    description='Matches R and literature values to machine precision',
)

# Float64 counts (n > 62): ratios only, counts no longer exact
FLOAT_COUNTS = ToleranceTier(
    rtol=1e-12,
    atol=0.0,
    name='float_counts',
    description='Float64 subset counts beyond the int64 range',
)


def select_tolerance(exact: bool) -> ToleranceTier:
    """Select the tolerance tier for a distribution computed with or without exact integer counts."""
    if exact:
        return EXACT_COUNTS
    return FLOAT_COUNTS
