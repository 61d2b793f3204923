"""
Exact null distribution of the Wilcoxon signed-rank statistic.

Under H0 each rank 1..n enters the sum independently with probability 1/2,
so P(S = t) = (number of subsets of 1..n summing to t) / 2**n. Four ways to
obtain those subset counts:

- recursive: McCornack (1965) recurrence, no memoization. O(2**n) per value;
  kept as a reference oracle.
- memoized: the same recurrence with a per-call cache.
- enumerate: all 2**n inclusion vectors, tabulated. Brute-force cross-check.
- shift: Streitberg & Rohmel (1987) shift algorithm. Builds the coefficients
  of prod_{i=1..n} (1 + x**i) in O(n * n(n+1)/2).

All functions here assume validated inputs; see solvers.py for the
public entry points.

References:
    McCornack, R. L. (1965). Extended tables of the Wilcoxon matched pair
    signed rank statistic. JASA, 60(311), 864-871.

    Streitberg, B., & Rohmel, J. (1987). Exakte Verteilungen fur Rang- und
    Randomisierungstests im allgemeinen c-Stichprobenproblem. EDV in
    Medizin und Biologie, 18(1), 12-19.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rankstats.core.exceptions import DimensionError, ValidationError
from rankstats.distributions._common import (
    RankSumMethod,
    count_dtype,
    max_rank_sum,
)


def srf(x: int, y: int) -> int:
    """
    Sum-of-ranks frequency: number of subsets of 1..y summing to x.

    Plain recursion, exponential in y. Requires y >= 1.
    """
    if x < 0:
        return 0
    if x > y * (y + 1) // 2:
        return 0
    if y == 1:
        # x is 0 or 1 here
        return 1
    # rank y is either in the subset or not
    return srf(x - y, y - 1) + srf(x, y - 1)


def memoized_counter(n: int) -> Callable[[int], int]:
    """
    Build a memoized subset counter for ranks 1..n.

    The cache lives in the returned closure, so repeated queries within one
    call share work while nothing persists between calls.
    """
    cache: dict[tuple[int, int], int] = {}

    def count(x: int, y: int) -> int:
        if x < 0 or x > y * (y + 1) // 2:
            return 0
        if y == 1:
            return 1
        key = (x, y)
        hit = cache.get(key)
        if hit is None:
            hit = count(x - y, y - 1) + count(x, y - 1)
            cache[key] = hit
        return hit

    return lambda x: count(x, n)


def enumerate_counts(n: int) -> NDArray[np.int64]:
    """
    Tabulate the sums of all 2**n inclusion vectors over ranks 1..n.

    Bit j of the vector index says whether rank j+1 is included.
    """
    index = np.arange(2 ** n, dtype=np.int64)
    sums = np.zeros(2 ** n, dtype=np.int64)
    for rank in range(1, n + 1):
        sums += ((index >> (rank - 1)) & 1) * rank
    return np.bincount(sums, minlength=max_rank_sum(n) + 1)


def rotate_add(freq: ArrayLike, shift: int) -> NDArray[Any]:
    """
    Add a rotated copy of a frequency vector to itself.

    The rotated copy is the last `shift` elements followed by the first
    len(freq) - shift elements; entries leaving the end wrap to the front
    rather than being dropped.

    Parameters
    ----------
    freq : array-like
        1-D frequency vector of fixed length.
    shift : int
        Non-negative rotation amount.

    Returns
    -------
    ndarray
        freq + rotate(freq, shift), same length and dtype as freq.

    Examples
    --------
    >>> rotate_add([1, 2, 3, 0], 1)
    array([1, 3, 5, 3])
    >>> rotate_add([0, 0, 5], 1)
    array([5, 0, 5])
    """
    arr = np.asarray(freq)
    if arr.ndim != 1:
        raise DimensionError(
            f"freq: expected 1D array, got {arr.ndim}D with shape {arr.shape}"
        )
    if shift < 0:
        raise ValidationError(f"shift: must be >= 0, got {shift}")
    return arr + np.roll(arr, shift)


def shift_counts(n: int) -> NDArray[Any]:
    """
    Subset counts for every sum 0..n(n+1)/2 via the shift algorithm.

    Starts from the empty product (1 at sum 0) and, for i = 1..n, adds a
    copy rotated by i. Before step i the highest non-zero sum is i(i-1)/2,
    so the rotation never carries a non-zero entry past the end.
    """
    freq = np.zeros(max_rank_sum(n) + 1, dtype=count_dtype(n))
    freq[0] = 1
    for i in range(1, n + 1):
        freq = rotate_add(freq, i)
    return freq


def compute_counts(n: int, method: RankSumMethod) -> NDArray[Any]:
    """Subset counts for every sum 0..n(n+1)/2 using the given algorithm."""
    if method is RankSumMethod.SHIFT:
        return shift_counts(n)
    if method is RankSumMethod.ENUMERATE:
        return enumerate_counts(n)

    support = range(max_rank_sum(n) + 1)
    if method is RankSumMethod.RECURSIVE:
        values = [srf(t, n) for t in support]
    else:
        count = memoized_counter(n)
        values = [count(t) for t in support]
    return np.array(values, dtype=count_dtype(n))


def count_at(t: int, n: int, method: RankSumMethod) -> tuple[Any, Any]:
    """
    Count of subsets summing to t, with its normalizer.

    Returns (count, total) where total is 2**n for the recurrence-based
    algorithms and the observed sum of frequencies for the tabulating ones.
    """
    if method is RankSumMethod.RECURSIVE:
        return srf(t, n), 2 ** n
    if method is RankSumMethod.MEMOIZED:
        return memoized_counter(n)(t), 2 ** n

    counts = compute_counts(n, method)
    return counts[t], counts.sum()


def cumulative_count_at(t: int, n: int, method: RankSumMethod) -> tuple[Any, Any]:
    """
    Count of subsets summing to at most t, with its normalizer.

    t must lie in 0..n(n+1)/2.
    """
    if method is RankSumMethod.RECURSIVE:
        return sum(srf(i, n) for i in range(t + 1)), 2 ** n
    if method is RankSumMethod.MEMOIZED:
        count = memoized_counter(n)
        return sum(count(i) for i in range(t + 1)), 2 ** n

    counts = compute_counts(n, method)
    return counts[: t + 1].sum(), counts.sum()
