"""
rankstats: exact rank-statistic distributions and multiple testing.

Submodules:
    distributions: Exact signed-rank and Mann-Whitney U null distributions
    multitest: p-value adjustment (Bonferroni, Holm, Hommel, BH, ...)
    core: Exceptions, validation and result containers
"""

__version__ = "0.1.0"

from rankstats import distributions
from rankstats import multitest
from rankstats.distributions import rank_sum_pmf, rank_sum_cdf
from rankstats.multitest import p_adjust

__all__ = [
    "__version__",
    "distributions",
    "multitest",
    "rank_sum_pmf",
    "rank_sum_cdf",
    "p_adjust",
]
