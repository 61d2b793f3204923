"""
Common types for multiple testing correction.

Defines the AdjustMethod enum, accepted aliases and the MultiTestParams
payload carried inside Result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class AdjustMethod(str, Enum):
    """p-value adjustment procedure."""
    NONE = "none"
    BONFERRONI = "bonferroni"
    SIDAK = "sidak"
    HOLM = "holm"
    HOLM_SIDAK = "holm-sidak"
    HOCHBERG = "hochberg"
    HOMMEL = "hommel"
    HOMMEL_ORIGINAL = "hommel-original"
    BH = "bh"
    BY = "by"


DEFAULT_ADJUST_METHOD = AdjustMethod.HOLM
DEFAULT_ALPHA = 0.05

# R's p.adjust() spellings
METHOD_ALIASES: dict[str, AdjustMethod] = {
    "BH": AdjustMethod.BH,
    "fdr": AdjustMethod.BH,
    "BY": AdjustMethod.BY,
}

# Which error rate each method controls
FWER_METHODS = frozenset({
    AdjustMethod.BONFERRONI,
    AdjustMethod.SIDAK,
    AdjustMethod.HOLM,
    AdjustMethod.HOLM_SIDAK,
    AdjustMethod.HOCHBERG,
    AdjustMethod.HOMMEL,
    AdjustMethod.HOMMEL_ORIGINAL,
})
FDR_METHODS = frozenset({AdjustMethod.BH, AdjustMethod.BY})


def error_rate(method: AdjustMethod) -> str:
    """'FWER', 'FDR' or 'none'."""
    if method in FWER_METHODS:
        return "FWER"
    if method in FDR_METHODS:
        return "FDR"
    return "none"


@dataclass(frozen=True)
class MultiTestParams:
    """
    Parameter payload for a multiple testing correction.

    Attributes
    ----------
    p_values : ndarray
        Raw p-values in caller order.
    adjusted : ndarray
        Adjusted p-values, same order. NaN where the input was NaN.
    reject : ndarray of bool
        adjusted <= alpha. False where the input was NaN.
    alpha : float
        Significance level used for `reject` (and by hommel-original).
    n_tests : int
        Number of non-NaN p-values, the k of every formula.
    """
    p_values: NDArray[np.floating[Any]]
    adjusted: NDArray[np.floating[Any]]
    reject: NDArray[np.bool_]
    alpha: float
    n_tests: int
