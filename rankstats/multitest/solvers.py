"""
Multiple testing entry point returning a full solution object.

p_adjust() returns a bare array; multitest() wraps the same computation
with rejection decisions and metadata.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from rankstats.core.compute.timing import timed
from rankstats.core.result import Result
from rankstats.multitest._common import (
    DEFAULT_ADJUST_METHOD,
    DEFAULT_ALPHA,
    AdjustMethod,
    MultiTestParams,
    error_rate,
)
from rankstats.multitest._p_adjust import adjust_validated, validate_inputs
from rankstats.multitest.solution import MultiTestSolution


def multitest(
    p: ArrayLike,
    method: AdjustMethod | str = DEFAULT_ADJUST_METHOD,
    alpha: float = DEFAULT_ALPHA,
) -> MultiTestSolution:
    """
    Adjust p-values and decide which hypotheses to reject.

    Parameters
    ----------
    p : array-like
        1-D vector of p-values in [0, 1]. NaN marks a missing test.
    method : str or AdjustMethod
        Adjustment method; see p_adjust().
    alpha : float
        Rejection threshold applied to the adjusted p-values, and the
        level used by "hommel-original".

    Returns
    -------
    MultiTestSolution
    """
    raw, method, alpha = validate_inputs(p, method, alpha)

    with timed() as timer:
        adjusted = adjust_validated(raw, method, alpha)
    missing = np.isnan(adjusted)

    warnings_list: list[str] = []
    n_missing = int(np.sum(missing))
    if n_missing > 0:
        warnings_list.append(
            f"{n_missing} NaN p-value(s) excluded from the number of tests"
        )

    params = MultiTestParams(
        p_values=raw,
        adjusted=adjusted,
        reject=~missing & (adjusted <= alpha),
        alpha=alpha,
        n_tests=int(np.sum(~missing)),
    )
    result = Result(
        params=params,
        info={'method': method.value, 'error_rate': error_rate(method)},
        timing=timer.result(),
        backend_name=method.value,
        warnings=tuple(warnings_list),
    )
    return MultiTestSolution(_result=result)
