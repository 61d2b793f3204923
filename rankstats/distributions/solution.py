"""
Rank-sum distribution solution types.

RankSumSolution wraps Result[RankSumParams] and provides accessors plus a
tabular summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from rankstats.core.compute.tolerances import ToleranceTier, select_tolerance
from rankstats.core.result import Result
from rankstats.distributions._common import RankSumParams


@dataclass
class RankSumSolution:
    """
    User-facing signed-rank null distribution.

    Wraps Result[RankSumParams]. The support is 0..n(n+1)/2; pmf and cdf
    are indexed by the rank sum itself.
    """
    _result: Result[RankSumParams]

    @property
    def n(self) -> int:
        """Number of ranks."""
        return self._result.params.n

    @property
    def max_sum(self) -> int:
        """Largest attainable rank sum, n(n+1)/2."""
        return self.n * (self.n + 1) // 2

    @property
    def support(self) -> NDArray[np.integer[Any]]:
        """Rank sums 0..n(n+1)/2."""
        return np.arange(self.max_sum + 1)

    @property
    def counts(self) -> NDArray[Any]:
        """Number of subsets of 1..n with each rank sum."""
        return self._result.params.counts

    @property
    def pmf(self) -> NDArray[np.floating[Any]]:
        """P(S = t) for every t in the support."""
        return self._result.params.pmf

    @property
    def cdf(self) -> NDArray[np.floating[Any]]:
        """P(S <= t) for every t in the support."""
        return self._result.params.cdf

    @property
    def mean(self) -> float:
        """E[S] = n(n+1)/4."""
        return self.n * (self.n + 1) / 4.0

    @property
    def variance(self) -> float:
        """Var[S] = n(n+1)(2n+1)/24."""
        return self.n * (self.n + 1) * (2 * self.n + 1) / 24.0

    @property
    def exact(self) -> bool:
        """True when counts are exact integers."""
        return bool(self._result.info.get('exact', True))

    @property
    def tolerance(self) -> ToleranceTier:
        """Tolerance tier for comparing these counts with another method's."""
        return select_tolerance(self.exact)

    # --- Metadata ---

    @property
    def method(self) -> str:
        return self._result.backend_name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self, max_rows: int = 20) -> str:
        """
        Format the distribution as a table.

        Produces output like:
            Signed-rank null distribution (n = 4, method = shift)

               T  count        pmf        cdf
               0      1  0.0625000  0.0625000
               1      1  0.0625000  0.1250000
             ...

        Only the lower tail is shown when the support exceeds max_rows; the
        distribution is symmetric about n(n+1)/4.
        """
        lines = [
            f"Signed-rank null distribution (n = {self.n}, method = {self.method})",
            "",
            f"{'T':>5}  {'count':>12}  {'pmf':>10}  {'cdf':>10}",
        ]
        shown = min(self.max_sum + 1, max_rows)
        for t in range(shown):
            lines.append(
                f"{t:>5}  {self.counts[t]:>12.6g}  "
                f"{self.pmf[t]:>10.7f}  {self.cdf[t]:>10.7f}"
            )
        if shown < self.max_sum + 1:
            lines.append(f"  ... ({self.max_sum + 1 - shown} more rows)")
        lines.append("")
        lines.append(f"mean = {self.mean:g}, variance = {self.variance:g}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"RankSumSolution(n={self.n}, method={self.method!r})"
