"""
Exact null distribution of the Mann-Whitney U statistic.

f(u; n1, n2) counts the orderings of n1 + n2 distinct observations that
give U = u:

    f(u; n1, n2) = 0                                    if u < 0 or u > n1*n2
                 = 1                                    if n1 == 1 or n2 == 1
                 = f(u; n1, n2 - 1) + f(u - n2; n1 - 1, n2)   otherwise

Dividing by C(n1 + n2, n1) gives the probability. To convert a rank-sum
W of the first sample: U = W - n1(n1 + 1)/2.

References:
    Mann, H. B., & Whitney, D. R. (1947). On a test of whether one of two
    random variables is stochastically larger than the other. Annals of
    Mathematical Statistics, 18(1), 50-60.

    Dinneen, L. C., & Blakesley, B. C. (1973). Algorithm AS 62: A generator
    for the sampling distribution of the Mann-Whitney U statistic. JRSS C,
    22(2), 269-273.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.special import comb

# C(n1 + n2, n1) above this no longer fits int64 counts
_INT64_MAX = np.iinfo(np.int64).max


def mww_total(n1: int, n2: int) -> int:
    """Number of distinct orderings, C(n1 + n2, n1), as an exact int."""
    return int(comb(n1 + n2, n1, exact=True))


def mww_count_recursive(u: int, n1: int, n2: int) -> int:
    """Count of orderings with U = u, by memoized recursion."""
    cache: dict[tuple[int, int, int], int] = {}

    def count(u: int, i: int, j: int) -> int:
        if u < 0 or u > i * j:
            return 0
        if i == 1 or j == 1:
            return 1
        key = (u, i, j)
        hit = cache.get(key)
        if hit is None:
            hit = count(u, i, j - 1) + count(u - j, i - 1, j)
            cache[key] = hit
        return hit

    return count(u, n1, n2)


def mww_table(n1: int, n2: int) -> NDArray[Any]:
    """
    Counts for every U = 0..n1*n2, built bottom-up.

    table[i][j] has length i*j + 1. Row and column 1 are all ones; every
    other cell is the (i, j-1) cell plus the (i-1, j) cell moved up by j.
    """
    dtype = np.int64 if mww_total(n1, n2) <= _INT64_MAX else np.float64

    prev_row: list[NDArray[Any]] = []
    row: list[NDArray[Any]] = []
    for i in range(1, n1 + 1):
        row = []
        for j in range(1, n2 + 1):
            if i == 1 or j == 1:
                row.append(np.ones(i * j + 1, dtype=dtype))
                continue
            cell = np.zeros(i * j + 1, dtype=dtype)
            left = row[j - 2]       # (i, j-1), length i*(j-1) + 1
            above = prev_row[j - 1]  # (i-1, j), length (i-1)*j + 1
            cell[: left.size] += left
            cell[j: j + above.size] += above
            row.append(cell)
        prev_row = row
    return row[n2 - 1]
