"""
evaluate.py
===========
DataFrame-level entry point for the model_eval library.

Most users hold their ground truth and predictions side by side in a
pandas DataFrame. evaluate() pulls the two columns out, runs the
requested aggregate metrics over them and returns a results dict.

Typical usage
-------------
    from model_eval import evaluate

    # df has columns: [actual, predicted]
    results = evaluate(df, task="regression")

    # Pick the metrics explicitly
    results = evaluate(
        df,
        task="regression",
        metrics=["rmse", {"name": "mape", "drop_zero_actual": True}],
        remove_missing=True,
    )

    # Or pin them in a suite file
    results = evaluate(df, task="classification", suite_path="suites/churn.yaml")
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

import numpy as np

from model_eval import config
from model_eval.config import (
    DEFAULT_ACTUAL_COL,
    DEFAULT_METRICS,
    DEFAULT_PREDICTED_COL,
    ROUND_DIGITS,
    VALID_TASKS,
)
from model_eval.inputs import as_sequence
from model_eval.metrics import get_metric
from model_eval.suite import MetricSpec, load_suite, to_metric_spec

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def evaluate(
    predictions_df: "pd.DataFrame",
    task: str = "regression",
    metrics: "list[str | dict | MetricSpec] | None" = None,
    actual_col: str = DEFAULT_ACTUAL_COL,
    predicted_col: str = DEFAULT_PREDICTED_COL,
    remove_missing: bool | None = None,
    suite_path: "str | Path | None" = None,
    verbose: bool = True,
) -> dict:
    """
    Compute aggregate metrics over the actual/predicted columns of a DataFrame.

    Parameters
    ----------
    predictions_df : DataFrame with one row per observation, holding the
                     ground truth in actual_col and the model output in
                     predicted_col. Missing values may be NaN / None / pd.NA.

    task           : "regression" or "classification".

    metrics        : Metrics to compute. Each entry is a metric name, a
                     {"name": ..., <option>: ...} mapping, or a MetricSpec.
                     If None, the suite from suite_path is used, then the
                     suite named by the MODEL_EVAL_SUITE environment variable
                     (when its task matches), then DEFAULT_METRICS[task].

    actual_col     : Column holding the ground truth.
    predicted_col  : Column holding the predictions.

    remove_missing : Drop rows where either column is missing before
                     scoring. If None, the suite's setting is used
                     (False when there is no suite).

    suite_path     : Optional path to a suite YAML file (see suite.py).

    verbose        : Print a summary table to stdout.

    Returns
    -------
    {
        "task":           str,
        "metrics":        {label: float},   # rounded to ROUND_DIGITS
        "n_evaluated":    int,              # rows that entered the metrics
        "n_missing":      int,              # rows with a missing value
        "remove_missing": bool,
    }

    The label is the metric name, followed by its options when any were
    given, e.g. "fbeta_score(beta=0.5)".
    """
    # --- Validate inputs ---
    _validate_task(task)
    _validate_predictions_df(predictions_df)
    _require_columns(predictions_df, [actual_col, predicted_col])

    specs, suite_remove_missing = _resolve_metrics(task, metrics, suite_path)
    if remove_missing is None:
        remove_missing = suite_remove_missing

    actual    = as_sequence(predictions_df[actual_col],    actual_col)
    predicted = as_sequence(predictions_df[predicted_col], predicted_col)

    n_missing = int(np.count_nonzero(np.isnan(actual) | np.isnan(predicted)))
    if n_missing and not remove_missing:
        warnings.warn(
            f"[evaluate] {n_missing} row(s) have a missing value in "
            f"'{actual_col}' or '{predicted_col}'. Most metrics will be NaN; "
            f"pass remove_missing=True to exclude those rows."
        )

    # --- Score ---
    values: dict[str, float] = {}
    for spec in specs:
        metric = get_metric(spec.name)
        value  = metric(actual, predicted, remove_missing=remove_missing, **spec.options)
        values[_label(spec)] = round(value, ROUND_DIGITS)

    results = {
        "task":           task,
        "metrics":        values,
        "n_evaluated":    len(actual) - n_missing if remove_missing else len(actual),
        "n_missing":      n_missing,
        "remove_missing": bool(remove_missing),
    }

    if verbose:
        _print_summary(results)
    return results


# ---------------------------------------------------------------------------
# Metric selection
# ---------------------------------------------------------------------------

def _resolve_metrics(
    task: str,
    metrics: "list[str | dict | MetricSpec] | None",
    suite_path: "str | Path | None",
) -> tuple[list[MetricSpec], bool]:
    """
    Decide which metrics to compute.

    Returns (specs, remove_missing default taken from the suite).
    """
    if metrics is not None:
        if not metrics:
            raise ValueError("metrics must contain at least one metric name.")
        return [to_metric_spec(m, task) for m in metrics], False

    if suite_path is not None:
        suite = load_suite(suite_path)
        if suite.task != task:
            raise ValueError(
                f"Metric suite {suite_path} is for task '{suite.task}', "
                f"but evaluate() was called with task='{task}'."
            )
        return suite.metrics, suite.remove_missing

    # Environment suite only applies when it matches the requested task
    if config.DEFAULT_SUITE_PATH is not None:
        suite = load_suite(config.DEFAULT_SUITE_PATH)
        if suite.task == task:
            return suite.metrics, suite.remove_missing

    return [MetricSpec(name=name) for name in DEFAULT_METRICS[task]], False


def _label(spec: MetricSpec) -> str:
    if not spec.options:
        return spec.name
    opts = ", ".join(f"{k}={v}" for k, v in sorted(spec.options.items()))
    return f"{spec.name}({opts})"


# ---------------------------------------------------------------------------
# Console summary
# ---------------------------------------------------------------------------

def _print_summary(results: dict) -> None:
    """Print a human-readable summary of the results to stdout."""
    print(f"\n{'─' * 50}")
    print(f"  model_eval — {results['task']}")
    print(f"{'─' * 50}")
    print(f"  Rows evaluated : {results['n_evaluated']}")
    print(f"  Rows missing   : {results['n_missing']}")
    width = max(len(label) for label in results["metrics"])
    for label, value in results["metrics"].items():
        print(f"  {label:<{width}} : {value:.4f}")
    print(f"{'─' * 50}\n")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _require_columns(df: "pd.DataFrame", cols: list[str]) -> None:
    """Raise a clear error if any required columns are missing."""
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(
            f"predictions_df is missing required column(s): {missing}. "
            f"Available columns: {list(df.columns)}"
        )


def _validate_task(task: str) -> None:
    if task not in VALID_TASKS:
        raise ValueError(
            f"Unknown task '{task}'. Valid options: {sorted(VALID_TASKS)}"
        )


def _validate_predictions_df(df: "pd.DataFrame") -> None:
    if not hasattr(df, "columns"):
        raise TypeError(
            "predictions_df must be a pandas DataFrame."
        )
    if len(df) == 0:
        raise ValueError("predictions_df is empty.")
