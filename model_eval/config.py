"""
config.py
=========
Central configuration for the model_eval library.

Default column names, the metric catalogue, per-metric option names and
report rounding live here. If a metric is added or gains a new option,
this is the file that tells the suite loader and evaluate() about it.
"""

from __future__ import annotations

import os
from pathlib import Path


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# Users can point MODEL_EVAL_SUITE at a YAML suite file so evaluate()
# picks it up without passing suite_path every time.
# Example: export MODEL_EVAL_SUITE=suites/forecasting.yaml
# Read once at import time; later changes to the variable are not seen.
SUITE_ENV_VAR = "MODEL_EVAL_SUITE"

_suite_env = os.environ.get(SUITE_ENV_VAR)
DEFAULT_SUITE_PATH = Path(_suite_env) if _suite_env else None


# ---------------------------------------------------------------------------
# DataFrame columns
# ---------------------------------------------------------------------------

DEFAULT_ACTUAL_COL    = "actual"
DEFAULT_PREDICTED_COL = "predicted"


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

# Applied to values returned by evaluate() only; metric functions never round
ROUND_DIGITS = 6


# ---------------------------------------------------------------------------
# Metric catalogue
# ---------------------------------------------------------------------------

DEFAULT_BETA = 1.0

# One output value per input pair; not usable in a suite or evaluate()
ELEMENTWISE_METRICS = {"se", "ae", "ape", "sle", "ll"}

REGRESSION_METRICS = [
    "bias",
    "percent_bias",
    "sse",
    "mse",
    "rmse",
    "mae",
    "mdae",
    "mape",
    "smape",
    "msle",
    "rmsle",
    "rse",
    "rrse",
    "rae",
    "explained_variation",
]

CLASSIFICATION_METRICS = [
    "auc",
    "log_loss",
    "precision",
    "recall",
    "fbeta_score",
]

TASK_METRICS: dict[str, list[str]] = {
    "regression":     REGRESSION_METRICS,
    "classification": CLASSIFICATION_METRICS,
}

VALID_TASKS = set(TASK_METRICS)

# Metrics computed by evaluate() when neither metrics nor a suite is given
DEFAULT_METRICS: dict[str, list[str]] = {
    "regression":     ["bias", "mae", "rmse", "mape", "smape", "explained_variation"],
    "classification": ["auc", "log_loss", "precision", "recall", "fbeta_score"],
}

# Keyword options accepted by each metric on top of remove_missing
METRIC_FLAGS: dict[str, set[str]] = {
    **{name: set() for name in REGRESSION_METRICS + CLASSIFICATION_METRICS},
    "mape":         {"drop_zero_actual"},
    "percent_bias": {"drop_zero_actual"},
    "smape":        {"drop_both_zero"},
    "fbeta_score":  {"beta"},
}
