"""
Exception hierarchy for rankstats.

All exceptions inherit from RankStatsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Out-of-support arguments (e.g. a rank sum above n(n+1)/2) are not
      errors; they have a well-defined probability of zero
"""


class RankStatsError(Exception):
    """Base exception for all rankstats errors."""
    pass


class ValidationError(RankStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: unknown method
    names, non-positive sample sizes, p-values outside [0, 1].
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a vector argument (e.g. a set of p-values) is not 1-D.
    """
    pass


class NumericalError(RankStatsError):
    """
    Numerical computation failed.

    Base class for errors arising during computation rather than from
    malformed input.
    """
    pass


class ComputationTooExpensiveError(NumericalError):
    """
    Requested exact computation exceeds its sample-size cap.

    The recursive and enumeration algorithms grow as 2**n. Rather than hang,
    they refuse sample sizes above a configurable cap.

    Attributes:
        method: Name of the algorithm that was refused
        n: Requested sample size
        max_n: The cap that was exceeded
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        n: int | None = None,
        max_n: int | None = None,
    ):
        super().__init__(message)
        self.method = method
        self.n = n
        self.max_n = max_n
