"""
Multiple testing correction module.

Public API:
    p_adjust(p, method)     - adjusted p-values (Holm, BH, Hommel, etc.)
    multitest(p, method)    - adjusted p-values plus reject decisions
"""

from rankstats.multitest._p_adjust import p_adjust
from rankstats.multitest.solvers import multitest
from rankstats.multitest._common import (
    AdjustMethod,
    MultiTestParams,
    DEFAULT_ADJUST_METHOD,
    DEFAULT_ALPHA,
)
from rankstats.multitest.solution import MultiTestSolution

__all__ = [
    "p_adjust",
    "multitest",
    "AdjustMethod",
    "MultiTestParams",
    "DEFAULT_ADJUST_METHOD",
    "DEFAULT_ALPHA",
    "MultiTestSolution",
]
