"""
model_eval
==========
Regression and binary-classification evaluation metrics over paired
numeric sequences: a ground-truth "actual" sequence and a "predicted"
sequence of the same length.

Metric families
---------------
    elementwise  : se, ae, ape, sle, ll
                   one value per (actual, predicted) pair
    aggregate    : sse, mse, rmse, mae, mdae, mape, smape, msle, rmsle,
                   bias, percent_bias, log_loss
    relative     : rse, rrse, rae, explained_variation
                   errors relative to always predicting mean(actual)
    ranking      : auc
    threshold    : precision, recall, fbeta_score

Quickstart
----------
    from model_eval import rmse, mape, auc, evaluate

    rmse([1, 2, 3, 4], [1, 2, 3, 5])               # 0.5
    mape([1, 2, 3], [2, 3, 4])                      # 0.6111...
    auc([1, 1, 1, 0, 0, 0],
        [0.9, 0.8, 0.4, 0.5, 0.3, 0.2])            # 0.8888...

    # Missing values are nan (None is accepted too). They propagate
    # unless you ask for them to be dropped:
    mse([1, 2, None], [1, 3, 4])                    # nan
    mse([1, 2, None], [1, 3, 4], remove_missing=True)  # 0.5

    # Whole DataFrame at once:
    results = evaluate(df, task="regression")      # df: [actual, predicted]

Numeric policy
--------------
Metrics never raise on awkward numbers: division by zero, logs of
non-positive values and 0/0 give inf / -inf / nan. The only input error
is a length mismatch between actual and predicted, which raises
LengthMismatchError instead of silently recycling the shorter sequence.

Setup
-----
    pip install -e ".[dev]"

Optionally point MODEL_EVAL_SUITE at a metric suite YAML file to change
which metrics evaluate() computes by default (see model_eval.suite). The
variable is read once, when model_eval is first imported, so set it before
the import. To switch suites inside a running session pass suite_path to
evaluate() instead.
"""

from model_eval.inputs import LengthMismatchError, filter_missing, missing_mask
from model_eval.metrics import (
    ae,
    ape,
    auc,
    bias,
    explained_variation,
    fbeta_score,
    ll,
    log_loss,
    mae,
    mape,
    mdae,
    mse,
    msle,
    percent_bias,
    precision,
    rae,
    recall,
    rmse,
    rmsle,
    rrse,
    rse,
    se,
    sle,
    smape,
    sse,
)
from model_eval.suite import MetricSpec, Suite, load_suite
from model_eval.evaluate import evaluate

__all__ = [
    "LengthMismatchError",
    "filter_missing",
    "missing_mask",
    "ae",
    "ape",
    "auc",
    "bias",
    "explained_variation",
    "fbeta_score",
    "ll",
    "log_loss",
    "mae",
    "mape",
    "mdae",
    "mse",
    "msle",
    "percent_bias",
    "precision",
    "rae",
    "recall",
    "rmse",
    "rmsle",
    "rrse",
    "rse",
    "se",
    "sle",
    "smape",
    "sse",
    "MetricSpec",
    "Suite",
    "load_suite",
    "evaluate",
]

__version__ = "0.1.0"
