"""
test_relative.py
================
Unit tests for model_eval.metrics.relative: errors relative to the
naive always-predict-the-mean model.

Location in project:
    model_eval/
    └── tests/
        └── test_relative.py
"""

import math

import numpy as np
import pytest

ZERO_TO_TEN   = list(range(0, 11))
TWO_TO_TWELVE = list(range(2, 13))
HALF_STEPS    = [0, 0.5, 1, 1.5, 2]


class TestRelativeAbsoluteError:

    def test_constant_offset(self):
        from model_eval.metrics import rae
        assert rae(ZERO_TO_TEN, list(range(30, 41))) == pytest.approx(11)

    def test_identical_is_zero(self):
        from model_eval.metrics import rae
        assert rae(HALF_STEPS, HALF_STEPS) == 0.0

    def test_single_miss(self):
        from model_eval.metrics import rae
        assert rae([1, 2, 3, 4], [1, 2, 3, 5]) == pytest.approx(0.25)

    def test_remove_missing(self):
        from model_eval.metrics import rae
        out = rae(ZERO_TO_TEN + [6, None], list(range(30, 41)) + [None, 5], remove_missing=True)
        assert out == pytest.approx(11)


class TestRelativeSquaredError:

    def test_constant_offset(self):
        from model_eval.metrics import rse
        assert rse(ZERO_TO_TEN, TWO_TO_TWELVE) == pytest.approx(0.4)

    def test_identical_is_zero(self):
        from model_eval.metrics import rse
        assert rse(HALF_STEPS, HALF_STEPS) == 0.0

    def test_single_miss(self):
        from model_eval.metrics import rse
        assert rse([1, 2, 3, 4], [1, 2, 3, 5]) == pytest.approx(0.2)

    def test_remove_missing(self):
        from model_eval.metrics import rse
        assert rse(ZERO_TO_TEN + [None], TWO_TO_TWELVE + [6], remove_missing=True) == pytest.approx(0.4)

    def test_baseline_uses_filtered_actual(self):
        from model_eval.metrics import rse
        # The unpaired actual value 1000 must not shift the baseline mean
        out = rse(ZERO_TO_TEN + [1000], TWO_TO_TWELVE + [None], remove_missing=True)
        assert out == pytest.approx(0.4)

    def test_constant_actual_is_nan(self):
        from model_eval.metrics import rse
        assert math.isnan(rse([3, 3, 3], [3, 3, 3]))

    def test_constant_actual_with_errors_is_inf(self):
        from model_eval.metrics import rse
        assert rse([3, 3, 3], [1, 2, 3]) == float("inf")

    def test_missing_without_removal_is_nan(self):
        from model_eval.metrics import rse
        assert math.isnan(rse([1, 2, None], [1, 2, 3]))


class TestRootRelativeSquaredError:

    def test_constant_offset(self):
        from model_eval.metrics import rrse
        assert rrse(ZERO_TO_TEN, TWO_TO_TWELVE) == pytest.approx(math.sqrt(0.4))

    def test_identical_is_zero(self):
        from model_eval.metrics import rrse
        assert rrse(HALF_STEPS, HALF_STEPS) == 0.0

    def test_single_miss(self):
        from model_eval.metrics import rrse
        assert rrse([1, 2, 3, 4], [1, 2, 3, 5]) == pytest.approx(math.sqrt(0.2))

    def test_remove_missing(self):
        from model_eval.metrics import rrse
        assert rrse(ZERO_TO_TEN + [None], TWO_TO_TWELVE + [6], remove_missing=True) == pytest.approx(math.sqrt(0.4))


class TestExplainedVariation:

    def test_constant_offset(self):
        from model_eval.metrics import explained_variation
        assert explained_variation(ZERO_TO_TEN, TWO_TO_TWELVE) == pytest.approx(0.6)

    def test_identical_is_one(self):
        from model_eval.metrics import explained_variation
        assert explained_variation(HALF_STEPS, HALF_STEPS) == 1.0

    def test_single_miss(self):
        from model_eval.metrics import explained_variation
        assert explained_variation([1, 2, 3, 4], [1, 2, 3, 5]) == pytest.approx(0.8)

    def test_predicting_the_mean_is_zero(self):
        from model_eval.metrics import explained_variation
        assert explained_variation([1, 2, 3], [2, 2, 2]) == pytest.approx(0.0)

    def test_worse_than_mean_is_negative(self):
        from model_eval.metrics import explained_variation
        assert explained_variation([1, 2, 3], [3, 2, 1]) < 0

    def test_remove_missing(self):
        from model_eval.metrics import explained_variation
        out = explained_variation(ZERO_TO_TEN + [None], TWO_TO_TWELVE + [3], remove_missing=True)
        assert out == pytest.approx(0.6)


class TestRelativeConsistency:

    @pytest.fixture
    def pair(self):
        rng = np.random.default_rng(11)
        actual    = rng.uniform(0, 100, size=40)
        predicted = actual * 0.9 + rng.normal(0, 5, size=40)
        return actual, predicted

    def test_rse_plus_explained_variation_is_one(self, pair):
        from model_eval.metrics import explained_variation, rse
        assert rse(*pair) + explained_variation(*pair) == pytest.approx(1.0)

    def test_rrse_is_root_of_rse(self, pair):
        from model_eval.metrics import rrse, rse
        assert rrse(*pair) == pytest.approx(math.sqrt(rse(*pair)))

    def test_rse_is_ratio_of_sse(self, pair):
        from model_eval.metrics import rse, sse
        actual, predicted = pair
        baseline = np.full_like(actual, actual.mean())
        assert rse(*pair) == pytest.approx(sse(actual, predicted) / sse(actual, baseline))

    def test_consistent_under_missing_removal(self, pair):
        from model_eval.metrics import explained_variation, rse
        actual, predicted = (x.copy() for x in pair)
        actual[5]     = np.nan
        predicted[12] = np.nan
        total = rse(actual, predicted, remove_missing=True) + explained_variation(
            actual, predicted, remove_missing=True
        )
        assert total == pytest.approx(1.0)

    def test_explained_variation_matches_sklearn_r2(self, pair):
        from sklearn.metrics import r2_score
        from model_eval.metrics import explained_variation
        assert explained_variation(*pair) == pytest.approx(r2_score(*pair))
