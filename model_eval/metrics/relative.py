"""
metrics/relative.py
===================
Errors relative to a naive baseline model that always predicts the
mean of actual.

    rse                 → sse(a, p) / sse(a, baseline)
    rrse                → sqrt(rse)
    rae                 → sum(ae(a, p)) / sum(ae(a, baseline))
    explained_variation → 1 - rse   (coefficient of determination)

All four filter missing values once, up front, and then build the
baseline from the filtered actual values. The numerator and the
denominator therefore always see the same positions, which keeps the
metrics consistent with each other (rse + explained_variation == 1).

A constant actual sequence has zero baseline error, so the ratio is
0/0 → nan (or x/0 → inf when the predictions are off).
"""

from __future__ import annotations

import numpy as np

from model_eval.inputs import filter_missing
from model_eval.metrics.regression import ae, se


def rse(actual, predicted, remove_missing: bool = False) -> float:
    """
    Relative squared error.

    Squared error of the predictions divided by the squared error of a
    model that predicts mean(actual) for every observation.
    """
    a, p = filter_missing(actual, predicted, remove_missing)
    baseline = _baseline(a)
    return _ratio(np.sum(se(a, p)), np.sum(se(a, baseline)))


def rrse(actual, predicted, remove_missing: bool = False) -> float:
    """Root relative squared error, sqrt(rse)."""
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(rse(actual, predicted, remove_missing)))


def rae(actual, predicted, remove_missing: bool = False) -> float:
    """
    Relative absolute error.

    Total absolute error of the predictions divided by the total absolute
    error of a model that predicts mean(actual) for every observation.
    """
    a, p = filter_missing(actual, predicted, remove_missing)
    baseline = _baseline(a)
    return _ratio(np.sum(ae(a, p)), np.sum(ae(a, baseline)))


def explained_variation(actual, predicted, remove_missing: bool = False) -> float:
    """
    Share of the variation in actual explained by predicted.

    1 means perfect predictions, 0 means no better than predicting the
    mean, and negative values mean worse than that naive model.
    """
    return 1 - rse(actual, predicted, remove_missing)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _baseline(a: np.ndarray) -> np.ndarray:
    """mean(a) repeated once per position."""
    if a.size == 0:
        return np.empty(0)
    return np.full(a.shape, np.mean(a))


def _ratio(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
