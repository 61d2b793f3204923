"""
Multiple testing solution types.

MultiTestSolution wraps Result[MultiTestParams] and provides a per-test
summary() table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from rankstats.core.result import Result
from rankstats.multitest._common import MultiTestParams


@dataclass
class MultiTestSolution:
    """
    User-facing multiple testing correction results.

    Wraps Result[MultiTestParams]. All arrays follow the caller's order.
    """
    _result: Result[MultiTestParams]

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Raw p-values."""
        return self._result.params.p_values

    @property
    def adjusted(self) -> NDArray[np.floating[Any]]:
        """Adjusted p-values."""
        return self._result.params.adjusted

    @property
    def reject(self) -> NDArray[np.bool_]:
        """True where the adjusted p-value is at most alpha."""
        return self._result.params.reject

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def n_tests(self) -> int:
        """Number of non-NaN p-values."""
        return self._result.params.n_tests

    @property
    def n_rejected(self) -> int:
        return int(np.sum(self.reject))

    @property
    def method(self) -> str:
        return self._result.backend_name

    @property
    def error_rate(self) -> str:
        """'FWER', 'FDR' or 'none'."""
        return self._result.info['error_rate']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """
        Format as a per-test table.

        Produces output like:
            p-value adjustment: holm (controls FWER), alpha = 0.05

             test       raw  adjusted  reject
                1    0.0100    0.0400     yes
                2    0.0400    0.0900      no

            1 of 4 hypotheses rejected
        """
        if self.error_rate == "none":
            header = f"p-value adjustment: {self.method}, alpha = {self.alpha:g}"
        else:
            header = (
                f"p-value adjustment: {self.method} "
                f"(controls {self.error_rate}), alpha = {self.alpha:g}"
            )
        lines = [
            header,
            "",
            f"{'test':>5}  {'raw':>8}  {'adjusted':>8}  {'reject':>6}",
        ]
        for idx, (raw, adj, rej) in enumerate(
            zip(self.p_values, self.adjusted, self.reject), start=1
        ):
            flag = "yes" if rej else "no"
            lines.append(f"{idx:>5}  {raw:>8.4f}  {adj:>8.4f}  {flag:>6}")
        lines.append("")
        lines.append(f"{self.n_rejected} of {self.n_tests} hypotheses rejected")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MultiTestSolution(method={self.method!r}, "
            f"n_tests={self.n_tests}, n_rejected={self.n_rejected})"
        )
