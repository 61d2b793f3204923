"""
Multiple testing correction.

Implements ten methods: none, bonferroni, sidak, holm, holm-sidak,
hochberg, hommel (Wright 1992), hommel-original (Hommel 1988), bh, by.
The bonferroni, holm, hochberg, hommel, bh and by results match R's
p.adjust().

This is a standalone utility function (no Design/Backend pipeline).
Each stepwise method sorts a private copy of the p-values, scans it with
a running max or min, and scatters the result back to caller order.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray, ArrayLike

from rankstats.core.validation import (
    check_1d,
    check_array,
    check_choice,
    check_open_unit_interval,
    check_probabilities,
)
from rankstats.multitest._common import (
    DEFAULT_ADJUST_METHOD,
    DEFAULT_ALPHA,
    METHOD_ALIASES,
    AdjustMethod,
)


def p_adjust(
    p: ArrayLike,
    method: AdjustMethod | str = DEFAULT_ADJUST_METHOD,
    alpha: float = DEFAULT_ALPHA,
) -> NDArray[np.floating]:
    """
    Adjust p-values for multiple comparisons.

    Parameters
    ----------
    p : array-like
        1-D vector of p-values in [0, 1]. NaN marks a missing test.
    method : str or AdjustMethod
        One of "none", "bonferroni", "sidak", "holm" (default),
        "holm-sidak", "hochberg", "hommel", "hommel-original", "bh", "by".
        "BH"/"fdr" and "BY" are accepted as aliases.
    alpha : float
        Significance level in (0, 1). Only "hommel-original" uses it.

    Returns
    -------
    ndarray
        Adjusted p-values, same length and order as input, in [0, 1].
        NaN positions in input produce NaN in output and do not count
        towards the number of tests.

    Raises
    ------
    ValidationError
        Unknown method, alpha outside (0, 1) or a p-value outside [0, 1].
    DimensionError
        p is not 1-D.
    """
    p_arr, method, alpha = validate_inputs(p, method, alpha)
    return adjust_validated(p_arr, method, alpha)


def validate_inputs(
    p: ArrayLike,
    method: AdjustMethod | str,
    alpha: float,
) -> tuple[NDArray[np.floating], AdjustMethod, float]:
    """Check p, method and alpha once; returns (float64 p, AdjustMethod, alpha)."""
    method = check_choice(method, AdjustMethod, "method", aliases=METHOD_ALIASES)
    alpha = check_open_unit_interval(alpha, "alpha")

    p_arr = check_array(p, "p").astype(np.float64)
    check_1d(p_arr, "p")
    check_probabilities(p_arr, "p")
    return p_arr, method, alpha


def adjust_validated(
    p_arr: NDArray[np.floating],
    method: AdjustMethod,
    alpha: float,
) -> NDArray[np.floating]:
    """p_adjust() on inputs already passed through validate_inputs()."""
    if len(p_arr) == 0:
        return np.array([], dtype=np.float64)

    result = p_arr.copy()
    if method is AdjustMethod.NONE:
        return result

    # Work only with non-NaN values
    valid_idx = np.where(~np.isnan(p_arr))[0]
    if len(valid_idx) == 0:
        return result
    pv = p_arr[valid_idx]

    if method is AdjustMethod.BONFERRONI:
        adjusted = _bonferroni(pv)
    elif method is AdjustMethod.SIDAK:
        adjusted = _sidak(pv)
    elif method is AdjustMethod.HOLM:
        adjusted = _holm(pv)
    elif method is AdjustMethod.HOLM_SIDAK:
        adjusted = _holm_sidak(pv)
    elif method is AdjustMethod.HOCHBERG:
        adjusted = _hochberg(pv)
    elif method is AdjustMethod.HOMMEL:
        adjusted = _hommel(pv)
    elif method is AdjustMethod.HOMMEL_ORIGINAL:
        adjusted = _hommel_original(pv, alpha)
    elif method is AdjustMethod.BH:
        adjusted = _bh(pv)
    else:
        adjusted = _by(pv)

    result[valid_idx] = np.clip(adjusted, 0.0, 1.0)
    return result


def _unsort(sorted_values: NDArray, order: NDArray[np.intp]) -> NDArray:
    result = np.empty(len(order), dtype=np.float64)
    result[order] = sorted_values
    return result


def _ascending(pv: NDArray) -> NDArray[np.intp]:
    # stable, so equal p-values keep their relative order
    return np.argsort(pv, kind="stable")


def _bonferroni(pv: NDArray) -> NDArray:
    """min(1, k * p). Order-independent."""
    return np.minimum(1.0, pv * len(pv))


def _sidak(pv: NDArray) -> NDArray:
    """min(1, 1 - (1 - p)**k). Order-independent."""
    return np.minimum(1.0, 1.0 - (1.0 - pv) ** len(pv))


def _holm(pv: NDArray) -> NDArray:
    """Holm's step-down method (controls FWER, no assumptions)."""
    k = len(pv)
    order = _ascending(pv)
    sorted_p = pv[order]

    # Multiply by (k + 1 - i), i 1-based
    multipliers = np.arange(k, 0, -1, dtype=np.float64)
    stepwise = np.minimum(1.0, sorted_p * multipliers)

    # Running max from the smallest p-value up
    return _unsort(np.maximum.accumulate(stepwise), order)


def _holm_sidak(pv: NDArray) -> NDArray:
    """Holm step-down with the Sidak transform at each step."""
    k = len(pv)
    order = _ascending(pv)
    sorted_p = pv[order]

    exponents = np.arange(k, 0, -1, dtype=np.float64)
    stepwise = np.minimum(1.0, 1.0 - (1.0 - sorted_p) ** exponents)

    return _unsort(np.maximum.accumulate(stepwise), order)


def _hochberg(pv: NDArray) -> NDArray:
    """Hochberg's step-up method (controls FWER, needs independence/PRDS)."""
    k = len(pv)
    order = np.argsort(-pv, kind="stable")  # descending
    sorted_p = pv[order]

    # Largest p gets multiplier 1, second largest 2, ...
    multipliers = np.arange(1, k + 1, dtype=np.float64)
    stepwise = np.minimum(1.0, sorted_p * multipliers)

    # Running min from the largest p-value down
    return _unsort(np.minimum.accumulate(stepwise), order)


def _step_up_from_top(stepwise: NDArray) -> NDArray:
    """Running min taken from the last (largest) entry back to the first."""
    return np.minimum.accumulate(stepwise[::-1])[::-1]


def _bh(pv: NDArray) -> NDArray:
    """Benjamini-Hochberg (controls FDR, needs independence/PRDS)."""
    k = len(pv)
    order = _ascending(pv)
    sorted_p = pv[order]

    ranks = np.arange(1, k + 1, dtype=np.float64)
    stepwise = np.minimum(1.0, sorted_p * k / ranks)

    return _unsort(_step_up_from_top(stepwise), order)


def _by(pv: NDArray) -> NDArray:
    """Benjamini-Yekutieli (controls FDR under arbitrary dependence)."""
    k = len(pv)
    # Correction factor: C(k) = sum(1/i for i in 1..k)
    ck = np.sum(1.0 / np.arange(1, k + 1, dtype=np.float64))

    order = _ascending(pv)
    sorted_p = pv[order]

    ranks = np.arange(1, k + 1, dtype=np.float64)
    stepwise = np.minimum(1.0, sorted_p * k * ck / ranks)

    return _unsort(_step_up_from_top(stepwise), order)


def _hommel(pv: NDArray) -> NDArray:
    """
    Hommel's method via Wright's (1992) algorithm.

    Does not need alpha. With p sorted ascending and a = p:

        for m = k, k-1, ..., 2:
            for i > k - m:   c_i = m * p_i / (m + i - k);  c_min = min(c_i)
                             a_i = max(a_i, c_min)
            for i <= k - m:  a_i = max(a_i, min(c_min, m * p_i))

    Indices are 1-based as in the paper.
    """
    k = len(pv)
    order = _ascending(pv)
    sorted_p = pv[order]
    adjusted = sorted_p.copy()
    i = np.arange(1, k + 1)

    for m in range(k, 1, -1):
        upper = i > k - m
        c = m * sorted_p[upper] / (m + i[upper] - k)
        c_min = c.min()
        adjusted[upper] = np.maximum(adjusted[upper], c_min)

        lower = ~upper
        adjusted[lower] = np.maximum(
            adjusted[lower], np.minimum(c_min, m * sorted_p[lower])
        )

    return _unsort(adjusted, order)


def _hommel_original(pv: NDArray, alpha: float) -> NDArray:
    """
    Hommel's (1988) procedure at a fixed alpha.

    Finds the largest i in 1..k with p_(k-i+j) > j * alpha / i for every
    j = 1..i. If it exists every p-value is multiplied by it, otherwise all
    adjusted values are 1.
    """
    k = len(pv)
    sorted_p = np.sort(pv)

    i_hommel = _largest_hommel_set(sorted_p, alpha)
    if i_hommel is None:
        return np.ones(k, dtype=np.float64)
    return np.minimum(1.0, pv * i_hommel)


def _largest_hommel_set(sorted_p: NDArray, alpha: float) -> int | None:
    k = len(sorted_p)
    largest = None
    for i in range(1, k + 1):
        j = np.arange(1, i + 1)
        # p_(k-i+j) in 1-based indexing
        tail = sorted_p[k - i + j - 1]
        if np.all(tail > j * alpha / i):
            largest = i
    return largest
