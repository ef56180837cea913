"""
metrics/regression.py
=====================
Elementwise and aggregate regression metrics.

Elementwise metrics return one value per (actual, predicted) pair:

    se   → squared error           (a - p)^2
    ae   → absolute error          |a - p|
    ape  → absolute percent error  |a - p| / |a|
    sle  → squared log error       (ln(1 + a) - ln(1 + p))^2

Aggregate metrics reduce an elementwise metric to a single float:

    sse, mse, rmse         ← se
    mae, mdae              ← ae
    mape                   ← ape
    msle, rmsle            ← sle
    smape, bias, percent_bias

Numeric policy
--------------
Nothing here raises on awkward numbers. Division by zero, logs of
non-positive values and 0/0 produce inf / -inf / nan exactly as IEEE
arithmetic would, and those values flow into the aggregates. Missing
values (nan) are only skipped when the caller passes remove_missing=True;
the reductions themselves never skip anything.
"""

from __future__ import annotations

import numpy as np

from model_eval.inputs import filter_missing


# ---------------------------------------------------------------------------
# Elementwise metrics
# ---------------------------------------------------------------------------

def se(actual, predicted, remove_missing: bool = False) -> np.ndarray:
    """Elementwise squared difference between actual and predicted."""
    a, p = filter_missing(actual, predicted, remove_missing)
    return (a - p) ** 2


def ae(actual, predicted, remove_missing: bool = False) -> np.ndarray:
    """Elementwise absolute difference between actual and predicted."""
    a, p = filter_missing(actual, predicted, remove_missing)
    return np.abs(a - p)


def ape(
    actual,
    predicted,
    remove_missing: bool = False,
    drop_zero_actual: bool = False,
) -> np.ndarray:
    """
    Elementwise absolute percent error, |actual - predicted| / |actual|.

    Where actual is 0 the result is inf (predicted != 0) or nan
    (predicted == 0). Set drop_zero_actual=True to remove those
    positions before computing.
    """
    a, p = filter_missing(actual, predicted, remove_missing)
    if drop_zero_actual:
        a, p = _drop_zero_actual(a, p)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.abs(a - p) / np.abs(a)


def sle(actual, predicted, remove_missing: bool = False) -> np.ndarray:
    """
    Elementwise squared log error, (ln(1 + actual) - ln(1 + predicted))^2.

    One is added before taking logs so zero-valued elements are fine.
    Values below -1 are not guarded against and give nan.
    """
    a, p = filter_missing(actual, predicted, remove_missing)
    with np.errstate(divide="ignore", invalid="ignore"):
        return (np.log1p(a) - np.log1p(p)) ** 2


# ---------------------------------------------------------------------------
# Squared error family
# ---------------------------------------------------------------------------

def sse(actual, predicted, remove_missing: bool = False) -> float:
    """Sum of squared errors."""
    return _sum(se(actual, predicted, remove_missing))


def mse(actual, predicted, remove_missing: bool = False) -> float:
    """Mean squared error."""
    return _mean(se(actual, predicted, remove_missing))


def rmse(actual, predicted, remove_missing: bool = False) -> float:
    """Root mean squared error, sqrt(mse)."""
    return _sqrt(mse(actual, predicted, remove_missing))


# ---------------------------------------------------------------------------
# Absolute error family
# ---------------------------------------------------------------------------

def mae(actual, predicted, remove_missing: bool = False) -> float:
    """Mean absolute error."""
    return _mean(ae(actual, predicted, remove_missing))


def mdae(actual, predicted, remove_missing: bool = False) -> float:
    """Median absolute error."""
    return _median(ae(actual, predicted, remove_missing))


def mape(
    actual,
    predicted,
    remove_missing: bool = False,
    drop_zero_actual: bool = False,
) -> float:
    """
    Mean absolute percent error, the average of ape(actual, predicted).

    Returns inf or nan if any retained actual value is 0. Because of that
    instability near zero, smape is often preferred.
    """
    return _mean(ape(actual, predicted, remove_missing, drop_zero_actual))


def smape(
    actual,
    predicted,
    remove_missing: bool = False,
    drop_both_zero: bool = False,
) -> float:
    """
    Symmetric mean absolute percent error.

    Defined as 2 * mean(|a - p| / (|a| + |p|)). Symmetric in its
    arguments, bounded above by 2 (reached when one side is 0 or the
    signs differ) and nan only where actual and predicted are both 0.

    Parameters
    ----------
    actual         : Ground truth values.
    predicted      : Predicted values.
    remove_missing : Drop pairs where either value is missing.
    drop_both_zero : Drop pairs where actual and predicted are both 0.
    """
    a, p = filter_missing(actual, predicted, remove_missing)
    if drop_both_zero:
        keep = ~((a == 0) & (p == 0))
        a, p = a[keep], p[keep]
    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = np.abs(a - p) / (np.abs(a) + np.abs(p))
    return 2 * _mean(ratios)


# ---------------------------------------------------------------------------
# Log error family
# ---------------------------------------------------------------------------

def msle(actual, predicted, remove_missing: bool = False) -> float:
    """Mean squared log error."""
    return _mean(sle(actual, predicted, remove_missing))


def rmsle(actual, predicted, remove_missing: bool = False) -> float:
    """Root mean squared log error, sqrt(msle)."""
    return _sqrt(msle(actual, predicted, remove_missing))


# ---------------------------------------------------------------------------
# Bias
# ---------------------------------------------------------------------------

def bias(actual, predicted, remove_missing: bool = False) -> float:
    """
    Average amount by which actual exceeds predicted, mean(a - p).

    An unbiased model scores close to zero. Over- and under-predictions
    cancel out, unlike mae.
    """
    a, p = filter_missing(actual, predicted, remove_missing)
    return _mean(a - p)


def percent_bias(
    actual,
    predicted,
    remove_missing: bool = False,
    drop_zero_actual: bool = False,
) -> float:
    """
    Average of (actual - predicted) / |actual|.

    Gives -inf, inf or nan if any retained actual value is 0.
    """
    a, p = filter_missing(actual, predicted, remove_missing)
    if drop_zero_actual:
        a, p = _drop_zero_actual(a, p)
    with np.errstate(divide="ignore", invalid="ignore"):
        return _mean((a - p) / np.abs(a))


# ---------------------------------------------------------------------------
# Reductions
# ---------------------------------------------------------------------------

def _drop_zero_actual(a: np.ndarray, p: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    # nan != 0, so missing actuals are kept and still propagate
    keep = a != 0
    return a[keep], p[keep]


def _sum(values: np.ndarray) -> float:
    return float(np.sum(values))


def _mean(values: np.ndarray) -> float:
    """Mean that returns nan for an empty array instead of warning."""
    if values.size == 0:
        return float("nan")
    with np.errstate(invalid="ignore", over="ignore"):
        return float(np.mean(values))


def _median(values: np.ndarray) -> float:
    if values.size == 0:
        return float("nan")
    return float(np.median(values))


def _sqrt(value: float) -> float:
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(value))
