"""
suite.py
========
Load a metric suite (the list of aggregate metrics evaluate() should
compute) from a YAML file.

A suite lets a project pin its evaluation setup in version control
instead of repeating metric names and options in every script.

Example suite file
------------------
    task: regression          # or classification
    remove_missing: true      # optional, default false
    metrics:
      - rmse
      - mae
      - name: mape
        drop_zero_actual: true
      - name: smape
        drop_both_zero: true

Each metrics entry is either a bare metric name or a mapping with a
"name" key plus the options that metric accepts (see METRIC_FLAGS in
config.py).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from model_eval.config import (
    ELEMENTWISE_METRICS,
    METRIC_FLAGS,
    TASK_METRICS,
    VALID_TASKS,
)


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass
class MetricSpec:
    """One aggregate metric plus the keyword options to call it with."""
    name:    str
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class Suite:
    """A task and the metrics to compute for it."""
    task:           str
    metrics:        list[MetricSpec]
    remove_missing: bool = False


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_suite(path: str | Path) -> Suite:
    """
    Read and validate a suite YAML file.

    Parameters
    ----------
    path : Path to the suite file.

    Returns
    -------
    Suite with one MetricSpec per entry, in file order.

    Raises
    ------
    FileNotFoundError : If path does not exist.
    ValueError        : If the file is not a mapping, or names an unknown
                        task, metric or option (see parse_suite).
    """
    resolved = Path(path)
    if not resolved.exists():
        raise FileNotFoundError(
            f"Metric suite not found: {resolved}\n"
            f"Pass the path to a suite YAML file, or unset the "
            f"MODEL_EVAL_SUITE environment variable to use the defaults."
        )
    with resolved.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(
            f"Metric suite {resolved} must be a YAML mapping with "
            f"'task' and 'metrics' keys (got {type(raw).__name__})."
        )
    return parse_suite(raw)


def parse_suite(raw: dict[str, Any]) -> Suite:
    """
    Build a Suite from an already-loaded mapping.

    Validation rules:
      - task must be one of VALID_TASKS
      - metrics must be a non-empty list
      - every metric must be an aggregate metric of that task
        (elementwise metrics such as se cannot be summarised by evaluate())
      - every option must be listed for that metric in METRIC_FLAGS
      - remove_missing, when given, must be a YAML boolean
    """
    task = raw.get("task")
    if task not in VALID_TASKS:
        raise ValueError(
            f"Unknown task '{task}' in metric suite. "
            f"Valid options: {sorted(VALID_TASKS)}"
        )

    entries = raw.get("metrics")
    if not isinstance(entries, list) or not entries:
        raise ValueError("Metric suite must contain a non-empty 'metrics' list.")

    metrics = [to_metric_spec(entry, task) for entry in entries]

    remove_missing = raw.get("remove_missing", False)
    if not isinstance(remove_missing, bool):
        raise ValueError(
            f"Invalid remove_missing {remove_missing!r} in metric suite. "
            f"Valid options: [True, False]"
        )

    return Suite(
        task=task,
        metrics=metrics,
        remove_missing=remove_missing,
    )


def to_metric_spec(entry: str | dict | MetricSpec, task: str) -> MetricSpec:
    """
    Normalise a suite entry to a validated MetricSpec.

    Accepts a metric name, a {"name": ..., <option>: ...} mapping, or an
    existing MetricSpec (which is validated but otherwise left as is).
    """
    if isinstance(entry, MetricSpec):
        spec = entry
    elif isinstance(entry, str):
        spec = MetricSpec(name=entry)
    elif isinstance(entry, dict) and "name" in entry:
        options = {k: v for k, v in entry.items() if k != "name"}
        spec = MetricSpec(name=str(entry["name"]), options=options)
    else:
        raise ValueError(
            f"Invalid metric entry {entry!r}: expected a metric name or a "
            f"mapping with a 'name' key."
        )

    _validate_spec(spec, task)
    return spec


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------

def _validate_spec(spec: MetricSpec, task: str) -> None:
    if spec.name in ELEMENTWISE_METRICS:
        raise ValueError(
            f"'{spec.name}' is an elementwise metric and cannot be used in a "
            f"suite. Use one of its aggregates instead (e.g. mse for se)."
        )
    if spec.name not in TASK_METRICS[task]:
        raise ValueError(
            f"Unknown {task} metric '{spec.name}'. "
            f"Valid options: {sorted(TASK_METRICS[task])}"
        )

    allowed = METRIC_FLAGS[spec.name]
    unknown = sorted(set(spec.options) - allowed)
    if unknown:
        raise ValueError(
            f"Metric '{spec.name}' does not accept option(s) {unknown}. "
            f"Accepted options: {sorted(allowed) or 'none'}"
        )
