"""
metrics/classification.py
=========================
Binary classification metrics.

    auc         → area under the ROC curve, via the Mann-Whitney U statistic
    ll          → elementwise log loss
    log_loss    → mean log loss
    precision   → share of predicted positives that are actual positives
    recall      → share of actual positives that were predicted positive
    fbeta_score → weighted harmonic mean of precision and recall

Input contract
--------------
actual holds 1 for the positive class and 0 for the negative class.
predicted is a score (auc), a probability of the positive class
(ll, log_loss) or a 0/1 prediction (precision, recall, fbeta_score).
Booleans are accepted and treated as 0/1.
"""

from __future__ import annotations

import math
import numbers
import warnings

import numpy as np
import pandas as pd

from model_eval.config import DEFAULT_BETA
from model_eval.inputs import filter_missing, prepare
from model_eval.metrics.regression import _mean


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------

def auc(actual, predicted, remove_missing: bool = False) -> float:
    """
    Area under the receiver operating characteristic curve.

    The AUC equals the probability that a randomly chosen positive
    observation has a higher predicted value than a randomly chosen
    negative one. That probability is the normalised Mann-Whitney U
    statistic, so the ROC curve itself is never built:

        U   = sum(rank(predicted)[actual == 1]) - n_pos * (n_pos + 1) / 2
        AUC = U / (n_pos * n_neg)

    Ties in predicted share the average rank of their group. Every value
    of actual other than 1 counts as negative.

    Parameters
    ----------
    actual         : Ground truth 0/1 labels.
    predicted      : Scores; larger means more likely positive.
    remove_missing : Drop pairs with a missing value before ranking.
                     Otherwise any missing value gives nan.

    Returns
    -------
    AUC in [0, 1]; 0.5 is no better than random. nan (with a warning)
    when actual contains only one class.
    """
    a, p = filter_missing(actual, predicted, remove_missing)
    if np.isnan(a).any() or np.isnan(p).any():
        return float("nan")

    is_pos = a == 1
    n_pos  = float(np.count_nonzero(is_pos))
    n_neg  = len(a) - n_pos

    if n_pos == 0 or n_neg == 0:
        warnings.warn(
            f"[auc] actual contains only one class "
            f"({int(n_pos)} positive, {int(n_neg)} negative); AUC is undefined."
        )
        return float("nan")

    ranks = pd.Series(p).rank(method="average").to_numpy()
    u = ranks[is_pos].sum() - n_pos * (n_pos + 1) / 2
    return float(u / (n_pos * n_neg))


# ---------------------------------------------------------------------------
# Log loss
# ---------------------------------------------------------------------------

def ll(actual, predicted, remove_missing: bool = False) -> np.ndarray:
    """
    Elementwise log loss, -(a * ln(p) + (1 - a) * ln(1 - p)).

    The loss is exactly 0 wherever actual == predicted, which settles the
    0 * ln(0) cases for perfect predictions. Any other position where the
    formula is undefined is scored inf. Missing inputs that were not
    removed stay nan.
    """
    a, p = filter_missing(actual, predicted, remove_missing)
    missing = np.isnan(a) | np.isnan(p)

    with np.errstate(divide="ignore", invalid="ignore"):
        score = -(a * np.log(p) + (1 - a) * np.log(1 - p))

    score[a == p] = 0.0
    score[np.isnan(score) & ~missing] = np.inf
    return score


def log_loss(actual, predicted, remove_missing: bool = False) -> float:
    """Mean log loss over all pairs."""
    return _mean(ll(actual, predicted, remove_missing))


# ---------------------------------------------------------------------------
# Threshold metrics
# ---------------------------------------------------------------------------

def precision(actual, predicted, remove_missing: bool = False) -> float:
    """
    Proportion of predicted positives (predicted == 1) that are actually
    positive (actual == 1).
    """
    a, p = prepare(actual, predicted)
    return _selected_mean(a, selector=p, remove_missing=remove_missing)


def recall(actual, predicted, remove_missing: bool = False) -> float:
    """
    Proportion of actual positives (actual == 1) that were predicted
    positive (predicted == 1).
    """
    a, p = prepare(actual, predicted)
    return _selected_mean(p, selector=a, remove_missing=remove_missing)


def fbeta_score(
    actual,
    predicted,
    beta: float = DEFAULT_BETA,
    remove_missing: bool = False,
) -> float:
    """
    Weighted harmonic mean of precision and recall.

        F_beta = (1 + beta^2) * P * R / (beta^2 * P + R)

    Parameters
    ----------
    actual         : Ground truth 0/1 labels.
    predicted      : Predicted 0/1 labels.
    beta           : Non-negative weight. 1 gives the plain harmonic mean
                     (F1); below 1 leans toward precision, above 1 toward
                     recall.
    remove_missing : Skip missing values when averaging.

    Raises
    ------
    ValueError if beta is negative or not finite.
    """
    if not isinstance(beta, numbers.Real) or isinstance(beta, bool):
        raise ValueError(f"beta must be a real number (got {beta!r})")
    if beta < 0 or not math.isfinite(beta):
        raise ValueError(f"beta must be a non-negative finite number (got {beta})")

    prec = precision(actual, predicted, remove_missing)
    rec  = recall(actual, predicted, remove_missing)
    b2   = beta ** 2

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(1 + b2) * prec * rec / (b2 * prec + rec))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _selected_mean(
    values: np.ndarray,
    selector: np.ndarray,
    remove_missing: bool,
) -> float:
    """
    Mean of values at the positions where selector == 1.

    A missing selector cannot say whether its position belongs to the
    selection, so it contributes a missing value. Missing values are
    skipped only when remove_missing is True; otherwise they make the
    result nan. An empty selection gives nan.
    """
    unknown = np.isnan(selector)
    picked  = np.where(unknown, np.nan, values)[(selector == 1) | unknown]
    if remove_missing:
        picked = picked[~np.isnan(picked)]
    return _mean(picked)
