"""
Generic result container for rankstats computations.

The Result class provides a standardized envelope that the distribution and
multiple-testing solutions wrap. Domains define their own parameter payloads.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, sample size, dtype)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (counts, probabilities, adjusted p)
        info: Structured metadata (method, n, dtype)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=RankSumParams(n=4, counts=counts),
        ...     info={'method': 'shift', 'exact': True},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='shift'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
