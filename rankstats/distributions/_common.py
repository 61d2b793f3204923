"""
Common types for the exact rank-sum distributions.

Defines the RankSumMethod enum, the per-method sample-size caps and the
RankSumParams payload carried inside Result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class RankSumMethod(str, Enum):
    """Algorithm used to build the signed-rank null distribution."""
    RECURSIVE = "recursive"
    ENUMERATE = "enumerate"
    SHIFT = "shift"
    MEMOIZED = "memoized"


DEFAULT_RANK_SUM_METHOD = RankSumMethod.SHIFT

# Largest n each algorithm accepts by default. The recursive and enumeration
# algorithms are O(2**n); memoized recursion is bounded by its cache size
# (about n * n(n+1)/2 entries). None means uncapped.
METHOD_MAX_N: dict[RankSumMethod, int | None] = {
    RankSumMethod.RECURSIVE: 20,
    RankSumMethod.ENUMERATE: 20,
    RankSumMethod.MEMOIZED: 100,
    RankSumMethod.SHIFT: None,
}

# The recursive and memoized counters recurse n frames deep; past this size
# they would exhaust the interpreter stack, so max_n cannot lift it.
RECURSION_HARD_MAX_N = 300
RECURSIVE_METHODS = frozenset({RankSumMethod.RECURSIVE, RankSumMethod.MEMOIZED})

# Sentinel for "use METHOD_MAX_N"; None is a meaningful override (no cap).
USE_DEFAULT_CAP: Any = object()

# 2**n must fit in int64 for counts to stay exact integers.
MAX_EXACT_INT_N = 62

VALID_ALTERNATIVES = ("two.sided", "less", "greater")


def max_rank_sum(n: int) -> int:
    """Largest attainable sum of a subset of 1..n."""
    return n * (n + 1) // 2


def count_dtype(n: int) -> type:
    """int64 while 2**n fits, float64 beyond."""
    return np.int64 if n <= MAX_EXACT_INT_N else np.float64


@dataclass(frozen=True)
class RankSumParams:
    """
    Parameter payload for a signed-rank null distribution.

    Attributes
    ----------
    n : int
        Number of ranks.
    counts : ndarray
        counts[t] = number of subsets of 1..n summing to t, t = 0..n(n+1)/2.
    pmf : ndarray
        counts / counts.sum().
    cdf : ndarray
        Cumulative sum of pmf; cdf[-1] == 1.
    """
    n: int
    counts: NDArray[Any]
    pmf: NDArray[np.floating[Any]]
    cdf: NDArray[np.floating[Any]]
