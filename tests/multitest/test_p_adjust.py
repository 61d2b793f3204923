"""
Tests for p_adjust().

R reference values (bonferroni, holm, hochberg, hommel, BH, BY) computed
with R's p.adjust(); sidak, holm-sidak and hommel-original values worked
by hand from Sidak (1967), SAS PROC MULTTEST and Hommel (1988).
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from rankstats.core.compute.tolerances import REFERENCE
from rankstats.core.exceptions import DimensionError, ValidationError
from rankstats.multitest import AdjustMethod, p_adjust

RTOL = REFERENCE.rtol

ALL_METHODS = [m.value for m in AdjustMethod]
ADJUSTING_METHODS = [m for m in ALL_METHODS if m != "none"]


# --- Reference values ---

PV1 = np.array([0.001, 0.01, 0.05, 0.1, 0.5, 0.9])

R_HOLM_1 = np.array([0.006, 0.05, 0.2, 0.3, 1.0, 1.0])
R_HOCHBERG_1 = np.array([0.006, 0.05, 0.2, 0.3, 0.9, 0.9])
R_HOMMEL_1 = np.array([0.006, 0.05, 0.2, 0.3, 0.9, 0.9])
R_BH_1 = np.array([0.006, 0.03, 0.1, 0.15, 0.6, 0.9])
R_BY_1 = np.array([0.0147, 0.0735, 0.245, 0.3675, 1.0, 1.0])
R_BONFERRONI_1 = np.array([0.006, 0.06, 0.3, 0.6, 1.0, 1.0])

SIDAK_1 = 1.0 - (1.0 - PV1) ** 6
HOLM_SIDAK_1 = np.array([
    1.0 - 0.999 ** 6,
    1.0 - 0.99 ** 5,
    1.0 - 0.95 ** 4,
    0.271,
    0.75,
    0.9,
])
# Largest qualifying set has size 4 at alpha = 0.05
HOMMEL_ORIGINAL_1 = np.array([0.004, 0.04, 0.2, 0.4, 1.0, 1.0])

PV2 = np.array([0.01, 0.04, 0.03, 0.005])

R_HOLM_2 = np.array([0.03, 0.06, 0.06, 0.02])
R_BH_2 = np.array([0.02, 0.04, 0.04, 0.02])
R_BONFERRONI_2 = np.array([0.04, 0.16, 0.12, 0.02])


class TestPAdjustMethods:
    """Each method against its reference values."""

    def test_holm(self):
        assert_allclose(p_adjust(PV1, method="holm"), R_HOLM_1, rtol=RTOL)

    def test_hochberg(self):
        assert_allclose(p_adjust(PV1, method="hochberg"), R_HOCHBERG_1, rtol=RTOL)

    def test_hommel(self):
        assert_allclose(p_adjust(PV1, method="hommel"), R_HOMMEL_1, rtol=RTOL)

    def test_bh(self):
        assert_allclose(p_adjust(PV1, method="bh"), R_BH_1, rtol=RTOL)

    def test_by(self):
        assert_allclose(p_adjust(PV1, method="by"), R_BY_1, rtol=RTOL)

    def test_bonferroni(self):
        assert_allclose(p_adjust(PV1, method="bonferroni"), R_BONFERRONI_1, rtol=RTOL)

    def test_sidak(self):
        assert_allclose(p_adjust(PV1, method="sidak"), SIDAK_1, rtol=RTOL)

    def test_holm_sidak(self):
        assert_allclose(p_adjust(PV1, method="holm-sidak"), HOLM_SIDAK_1, rtol=RTOL)

    def test_hommel_original(self):
        assert_allclose(
            p_adjust(PV1, method="hommel-original", alpha=0.05),
            HOMMEL_ORIGINAL_1, rtol=RTOL,
        )

    def test_none(self):
        result = p_adjust(PV1, method="none")
        assert_array_equal(result, PV1)

    def test_holm_set2(self):
        assert_allclose(p_adjust(PV2, method="holm"), R_HOLM_2, rtol=RTOL)

    def test_bh_set2(self):
        assert_allclose(p_adjust(PV2, method="bh"), R_BH_2, rtol=RTOL)

    def test_bonferroni_set2(self):
        assert_allclose(p_adjust(PV2, method="bonferroni"), R_BONFERRONI_2, rtol=RTOL)

    def test_bonferroni_unsorted_example(self):
        result = p_adjust([0.01, 0.04, 0.03, 0.20], method="bonferroni")
        assert_allclose(result, [0.04, 0.16, 0.12, 0.80], rtol=RTOL)


class TestAliases:
    """R's p.adjust() spellings are accepted."""

    def test_upper_case_bh(self):
        assert_allclose(p_adjust(PV1, method="BH"), R_BH_1, rtol=RTOL)

    def test_fdr_alias(self):
        assert_allclose(p_adjust(PV1, method="fdr"), R_BH_1, rtol=RTOL)

    def test_upper_case_by(self):
        assert_allclose(p_adjust(PV1, method="BY"), R_BY_1, rtol=RTOL)

    def test_enum_member(self):
        assert_allclose(p_adjust(PV1, method=AdjustMethod.HOLM), R_HOLM_1, rtol=RTOL)

    def test_default_is_holm(self):
        assert_allclose(p_adjust(PV1), p_adjust(PV1, method="holm"))


class TestHommelOriginal:
    """Hommel (1988) applies one multiplier to every p-value."""

    def test_largest_set_not_first(self):
        """i = 1, 2 and 3 all qualify; the largest wins."""
        result = p_adjust([0.04, 0.045, 0.2], method="hommel-original")
        assert_allclose(result, [0.12, 0.135, 0.6], rtol=RTOL)

    def test_no_qualifying_set(self):
        """Every p-value at or below alpha: all adjusted values are 1."""
        result = p_adjust([0.01, 0.02], method="hommel-original", alpha=0.05)
        assert_array_equal(result, [1.0, 1.0])

    def test_alpha_changes_result(self):
        p = [0.001, 0.01, 0.05, 0.1, 0.5, 0.9]
        strict = p_adjust(p, method="hommel-original", alpha=0.01)
        loose = p_adjust(p, method="hommel-original", alpha=0.05)
        assert not np.allclose(strict, loose)

    def test_alpha_ignored_by_others(self):
        for method in ("holm", "hommel", "bh"):
            assert_array_equal(
                p_adjust(PV1, method=method, alpha=0.01),
                p_adjust(PV1, method=method, alpha=0.2),
            )


class TestInvariants:
    """Properties every method must satisfy."""

    @pytest.mark.parametrize("method", ADJUSTING_METHODS)
    def test_monotone_inflation(self, method, p_vector):
        adjusted = p_adjust(p_vector, method=method)
        assert np.all(adjusted >= p_vector - 1e-15)
        assert np.all(adjusted <= 1.0)

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_same_length(self, method, p_vector):
        assert p_adjust(p_vector, method=method).shape == p_vector.shape

    @pytest.mark.parametrize("method", ["holm", "holm-sidak"])
    def test_step_down_non_decreasing(self, method, p_vector):
        adjusted = p_adjust(p_vector, method=method)
        order = np.argsort(p_vector, kind="stable")
        assert np.all(np.diff(adjusted[order]) >= -1e-15)

    @pytest.mark.parametrize("method", ["hochberg", "hommel", "bh", "by"])
    def test_step_up_non_decreasing(self, method, p_vector):
        adjusted = p_adjust(p_vector, method=method)
        order = np.argsort(p_vector, kind="stable")
        assert np.all(np.diff(adjusted[order]) >= -1e-15)

    def test_bh_never_exceeds_bonferroni(self, p_vector):
        bh = p_adjust(p_vector, method="bh")
        bonf = p_adjust(p_vector, method="bonferroni")
        assert np.all(bh <= bonf + 1e-15)

    def test_holm_never_exceeds_bonferroni(self, p_vector):
        holm = p_adjust(p_vector, method="holm")
        bonf = p_adjust(p_vector, method="bonferroni")
        assert np.all(holm <= bonf + 1e-15)

    def test_hochberg_never_exceeds_holm(self, p_vector):
        hoch = p_adjust(p_vector, method="hochberg")
        holm = p_adjust(p_vector, method="holm")
        assert np.all(hoch <= holm + 1e-15)

    def test_hommel_never_exceeds_hochberg(self, p_vector):
        hommel = p_adjust(p_vector, method="hommel")
        hoch = p_adjust(p_vector, method="hochberg")
        assert np.all(hommel <= hoch + 1e-15)

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_permutation_equivariant(self, method, rng, p_vector):
        perm = rng.permutation(len(p_vector))
        original = p_adjust(p_vector, method=method)
        permuted = p_adjust(p_vector[perm], method=method)
        assert_allclose(permuted, original[perm], rtol=0, atol=1e-15)

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_equal_inputs_equal_outputs(self, method, p_vector):
        adjusted = p_adjust(p_vector, method=method)
        for value in np.unique(p_vector):
            group = adjusted[p_vector == value]
            assert np.ptp(group) <= 1e-15

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_ties_get_equal_adjustment(self, method):
        adjusted = p_adjust([0.02, 0.01, 0.02, 0.3], method=method)
        assert adjusted[0] == adjusted[2]

    def test_input_not_modified(self):
        p = np.array([0.3, 0.01, 0.2])
        p_adjust(p, method="hommel")
        assert_array_equal(p, [0.3, 0.01, 0.2])


class TestPAdjustEdgeCases:
    """Edge cases and validation."""

    @pytest.mark.parametrize("method", ADJUSTING_METHODS)
    def test_single_pvalue(self, method):
        """A single test needs no correction (hommel-original with p > alpha)."""
        result = p_adjust([0.3], method=method)
        assert result[0] == pytest.approx(0.3, rel=1e-12)

    def test_single_significant_hommel_original(self):
        assert p_adjust([0.01], method="hommel-original")[0] == 1.0

    def test_empty_array(self):
        result = p_adjust([], method="holm")
        assert len(result) == 0

    def test_all_ones(self):
        result = p_adjust([1.0, 1.0, 1.0], method="bonferroni")
        assert_allclose(result, [1.0, 1.0, 1.0])

    def test_all_zeros(self):
        result = p_adjust([0.0, 0.0, 0.0], method="bh")
        assert_allclose(result, [0.0, 0.0, 0.0])

    def test_nan_preserved(self):
        result = p_adjust([0.01, np.nan, 0.05], method="holm")
        assert not np.isnan(result[0])
        assert np.isnan(result[1])
        assert not np.isnan(result[2])

    def test_nan_excluded_from_k(self):
        result = p_adjust([0.01, np.nan, 0.02], method="bonferroni")
        assert_allclose(result[[0, 2]], [0.02, 0.04], rtol=RTOL)

    def test_all_nan(self):
        result = p_adjust([np.nan, np.nan], method="holm")
        assert np.all(np.isnan(result))

    def test_clipping(self):
        result = p_adjust([0.5, 0.5, 0.5], method="bonferroni")
        assert np.all(result <= 1.0)

    def test_invalid_method(self):
        with pytest.raises(ValidationError, match="method must be one of"):
            p_adjust([0.05], method="invalid")

    @pytest.mark.parametrize("p", [[0.5, 1.2], [-0.1, 0.3], [np.inf]])
    def test_out_of_range_p(self, p):
        with pytest.raises(ValidationError):
            p_adjust(p, method="holm")

    @pytest.mark.parametrize("alpha", [0.0, 1.0, 1.5])
    def test_invalid_alpha(self, alpha):
        with pytest.raises(ValidationError):
            p_adjust([0.01, 0.02], method="hommel-original", alpha=alpha)

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            p_adjust([[0.01, 0.02], [0.03, 0.04]])

    def test_returns_float_array(self):
        result = p_adjust([0, 1], method="none")
        assert result.dtype == np.float64
