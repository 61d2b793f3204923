"""
Public entry points for the exact rank-sum distributions.

    rank_sum_pmf(T, n)           - P(S = T) for the signed-rank statistic
    rank_sum_cdf(T, n)           - P(S <= T)
    rank_sum_counts(n)           - subset counts for every sum
    rank_sum_distribution(n)     - full distribution as RankSumSolution
    signed_rank_p_value(V, n)    - exact p-value for an observed V
    mww_count / mww_frequencies / mww_pmf / mww_cdf
                                 - Mann-Whitney U distribution

Rank sums outside the support are not errors: pmf is 0 there, cdf is 0
below and 1 above. Invalid sample sizes and unknown methods raise
ValidationError; sample sizes above a method's cap raise
ComputationTooExpensiveError.
"""

from __future__ import annotations

import math
import warnings
from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import NDArray

from rankstats.core.compute.timing import Timer
from rankstats.core.exceptions import ComputationTooExpensiveError, ValidationError
from rankstats.core.result import Result
from rankstats.core.validation import check_choice, check_sample_size
from rankstats.distributions import _mann_whitney, _signed_rank
from rankstats.distributions._common import (
    DEFAULT_RANK_SUM_METHOD,
    MAX_EXACT_INT_N,
    METHOD_MAX_N,
    USE_DEFAULT_CAP,
    VALID_ALTERNATIVES,
    RECURSION_HARD_MAX_N,
    RECURSIVE_METHODS,
    RankSumMethod,
    RankSumParams,
    max_rank_sum,
)
from rankstats.distributions.solution import RankSumSolution


def _resolve(n: Any, method: Any, max_n: Any) -> tuple[int, RankSumMethod]:
    """Validate n and method, and enforce the method's size cap."""
    n = check_sample_size(n, "n")
    method = check_choice(method, RankSumMethod, "method")

    cap = METHOD_MAX_N[method] if max_n is USE_DEFAULT_CAP else max_n
    if method in RECURSIVE_METHODS and (cap is None or cap > RECURSION_HARD_MAX_N):
        cap = RECURSION_HARD_MAX_N
    if cap is not None and n > cap:
        hint = (
            "this is the recursion ceiling"
            if cap == RECURSION_HARD_MAX_N and method in RECURSIVE_METHODS
            else "or pass a larger max_n"
        )
        raise ComputationTooExpensiveError(
            f"method {method.value!r}: n={n} exceeds max_n={cap}. "
            f"Use method='shift' ({hint}).",
            method=method.value,
            n=n,
            max_n=cap,
        )

    if n > MAX_EXACT_INT_N:
        warnings.warn(_float_counts_message(n), RuntimeWarning, stacklevel=3)
    return n, method


def _float_counts_message(n: int) -> str:
    return (
        f"n={n} exceeds {MAX_EXACT_INT_N}; subset counts are held as "
        f"float64 and are no longer exact integers"
    )


def _as_real(value: Any, name: str) -> float:
    """A real scalar; NaN is rejected, +-Inf is kept (it lies outside every support)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    value = float(value)
    if math.isnan(value):
        raise ValidationError(f"{name}: expected a real number, got NaN")
    return value


def rank_sum_pmf(
    T: Any,
    n: Any,
    method: RankSumMethod | str = DEFAULT_RANK_SUM_METHOD,
    *,
    max_n: int | None = USE_DEFAULT_CAP,
) -> float:
    """
    Probability that the signed-rank statistic equals T.

    Parameters
    ----------
    T : int
        Rank sum. Negative, non-integer or above n(n+1)/2 gives 0.
    n : int
        Number of ranks, >= 1.
    method : str or RankSumMethod
        "shift" (default), "recursive", "enumerate" or "memoized".
    max_n : int or None
        Override the method's sample-size cap; None disables it. The
        recursive and memoized methods stay capped at RECURSION_HARD_MAX_N.

    Returns
    -------
    float in [0, 1]
    """
    n, method = _resolve(n, method, max_n)
    t = _as_real(T, "T")
    if t < 0 or t > max_rank_sum(n) or not t.is_integer():
        return 0.0

    count, total = _signed_rank.count_at(int(t), n, method)
    return float(count / total)


def rank_sum_cdf(
    T: Any,
    n: Any,
    method: RankSumMethod | str = DEFAULT_RANK_SUM_METHOD,
    *,
    max_n: int | None = USE_DEFAULT_CAP,
) -> float:
    """
    Probability that the signed-rank statistic is at most T.

    Parameters
    ----------
    T : int
        Rank sum. Below 0 gives 0, at or above n(n+1)/2 gives 1. A
        non-integer T is floored (no mass between integers).
    n : int
        Number of ranks, >= 1.
    method : str or RankSumMethod
        "shift" (default), "recursive", "enumerate" or "memoized".
    max_n : int or None
        Override the method's sample-size cap; None disables it. The
        recursive and memoized methods stay capped at RECURSION_HARD_MAX_N.

    Returns
    -------
    float in [0, 1]
    """
    n, method = _resolve(n, method, max_n)
    t = _as_real(T, "T")
    if t < 0:
        return 0.0
    top = max_rank_sum(n)
    if t > top:
        return 1.0

    count, total = _signed_rank.cumulative_count_at(math.floor(t), n, method)
    return float(count / total)


def rank_sum_counts(
    n: Any,
    method: RankSumMethod | str = DEFAULT_RANK_SUM_METHOD,
    *,
    max_n: int | None = USE_DEFAULT_CAP,
) -> NDArray[Any]:
    """
    Number of subsets of 1..n with each sum 0..n(n+1)/2.

    These are the coefficients of prod_{i=1..n} (1 + x**i); they sum to
    2**n. int64 for n <= 62, float64 beyond.
    """
    n, method = _resolve(n, method, max_n)
    return _signed_rank.compute_counts(n, method)


def rank_sum_distribution(
    n: Any,
    method: RankSumMethod | str = DEFAULT_RANK_SUM_METHOD,
    *,
    max_n: int | None = USE_DEFAULT_CAP,
) -> RankSumSolution:
    """
    Full signed-rank null distribution for n ranks.

    Returns
    -------
    RankSumSolution with counts, pmf and cdf over 0..n(n+1)/2.
    """
    n, method = _resolve(n, method, max_n)

    timer = Timer()
    timer.start()
    with timer.section('counts'):
        counts = _signed_rank.compute_counts(n, method)
    with timer.section('normalize'):
        total = counts.sum()
        pmf = counts / total
        cdf = np.cumsum(counts) / total
    timer.stop()

    exact = np.issubdtype(counts.dtype, np.integer)
    warning_msgs = () if exact else (_float_counts_message(n),)
    result = Result(
        params=RankSumParams(n=n, counts=counts, pmf=pmf, cdf=cdf),
        info={'method': method.value, 'n': n, 'exact': bool(exact)},
        timing=timer.result(),
        backend_name=method.value,
        warnings=warning_msgs,
    )
    return RankSumSolution(_result=result)


def signed_rank_p_value(
    statistic: Any,
    n: Any,
    alternative: str = "two.sided",
    method: RankSumMethod | str = DEFAULT_RANK_SUM_METHOD,
) -> float:
    """
    Exact p-value of the Wilcoxon signed-rank statistic V (sum of positive ranks).

    less:      P(S <= V)
    greater:   P(S >= V), computed as P(S <= n(n+1)/2 - V) by symmetry
    two.sided: min(1, 2 * min(less, greater))

    Valid only without ties or zero differences; callers fall back to the
    normal approximation otherwise.
    """
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    n = check_sample_size(n, "n")
    v = _as_real(statistic, "statistic")

    p_less = rank_sum_cdf(v, n, method)
    p_greater = rank_sum_cdf(max_rank_sum(n) - v, n, method)

    if alternative == "less":
        return p_less
    if alternative == "greater":
        return p_greater
    return min(1.0, 2.0 * min(p_less, p_greater))


# --- Mann-Whitney U ---


def _check_mww_args(u: Any, n1: Any, n2: Any) -> tuple[float, int, int]:
    n1 = check_sample_size(n1, "n1")
    n2 = check_sample_size(n2, "n2")
    return _as_real(u, "u"), n1, n2


def mww_count(u: Any, n1: Any, n2: Any) -> int:
    """
    Number of orderings of n1 + n2 distinct values giving U = u.

    Zero outside 0..n1*n2 or for non-integer u.
    """
    u, n1, n2 = _check_mww_args(u, n1, n2)
    if not u.is_integer():
        return 0
    return _mann_whitney.mww_count_recursive(int(u), n1, n2)


def mww_frequencies(u: Any, n1: Any, n2: Any) -> NDArray[Any]:
    """
    Counts for U = 0..u (u floored, clipped to n1*n2).

    Pass u = n1*n2 to get the whole distribution. Empty for u < 0.
    """
    u, n1, n2 = _check_mww_args(u, n1, n2)
    table = _mann_whitney.mww_table(n1, n2)
    if u < 0:
        return table[:0]
    return table[: math.floor(min(u, n1 * n2)) + 1]


def mww_pmf(u: Any, n1: Any, n2: Any) -> float:
    """P(U = u) under H0."""
    u, n1, n2 = _check_mww_args(u, n1, n2)
    if not u.is_integer():
        return 0.0
    count = _mann_whitney.mww_count_recursive(int(u), n1, n2)
    return float(count / _mann_whitney.mww_total(n1, n2))


def mww_cdf(u: Any, n1: Any, n2: Any) -> float:
    """P(U <= u) under H0."""
    u, n1, n2 = _check_mww_args(u, n1, n2)
    if u < 0:
        return 0.0
    if u >= n1 * n2:
        return 1.0
    table = _mann_whitney.mww_table(n1, n2)
    below = table[: math.floor(u) + 1]
    return float(below.sum().item() / _mann_whitney.mww_total(n1, n2))
