"""
Exact null distributions of rank statistics.

Public API:
    rank_sum_pmf(T, n)            - P(S = T), signed-rank statistic
    rank_sum_cdf(T, n)            - P(S <= T)
    rank_sum_counts(n)            - subset counts for every rank sum
    rank_sum_distribution(n)      - full distribution (RankSumSolution)
    signed_rank_p_value(V, n)     - exact signed-rank p-value
    rotate_add(freq, shift)       - one step of the shift algorithm
    mww_count(u, n1, n2)          - Mann-Whitney U counts
    mww_frequencies(u, n1, n2)
    mww_pmf(u, n1, n2)
    mww_cdf(u, n1, n2)
"""

from rankstats.distributions.solvers import (
    rank_sum_pmf,
    rank_sum_cdf,
    rank_sum_counts,
    rank_sum_distribution,
    signed_rank_p_value,
    mww_count,
    mww_frequencies,
    mww_pmf,
    mww_cdf,
)
from rankstats.distributions._signed_rank import rotate_add
from rankstats.distributions._common import (
    RankSumMethod,
    RankSumParams,
    DEFAULT_RANK_SUM_METHOD,
    METHOD_MAX_N,
)
from rankstats.distributions.solution import RankSumSolution

__all__ = [
    "rank_sum_pmf",
    "rank_sum_cdf",
    "rank_sum_counts",
    "rank_sum_distribution",
    "signed_rank_p_value",
    "rotate_add",
    "mww_count",
    "mww_frequencies",
    "mww_pmf",
    "mww_cdf",
    "RankSumMethod",
    "RankSumParams",
    "DEFAULT_RANK_SUM_METHOD",
    "METHOD_MAX_N",
    "RankSumSolution",
]
