"""
conftest.py
===========
Shared pytest fixtures for the model_eval test suite.

All tests run on small synthetic data; no external files are needed.
Run with:
    pytest tests/ -v

Location in project:
    model_eval/
    └── tests/
        └── conftest.py
"""

import textwrap

import numpy as np
import pandas as pd
import pytest


# ---------------------------------------------------------------------------
# Session-level: ignore a suite configured in the developer's shell
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def no_env_suite(monkeypatch):
    """Make evaluate() fall back to DEFAULT_METRICS unless a test opts in."""
    from model_eval import config
    monkeypatch.setattr(config, "DEFAULT_SUITE_PATH", None)


# ---------------------------------------------------------------------------
# DataFrames
# ---------------------------------------------------------------------------

@pytest.fixture
def regression_df():
    """Eleven clean rows: actual 0..10, predicted 2..12."""
    return pd.DataFrame({
        "actual":    np.arange(0, 11, dtype=float),
        "predicted": np.arange(2, 13, dtype=float),
    })


@pytest.fixture
def regression_df_with_missing(regression_df):
    """regression_df plus two rows with a missing value on one side."""
    extra = pd.DataFrame({
        "actual":    [np.nan, 6.0],
        "predicted": [3.0,    None],
    })
    return pd.concat([regression_df, extra], ignore_index=True)


@pytest.fixture
def classification_df():
    return pd.DataFrame({
        "actual":    [1, 1, 1, 0, 0, 0],
        "predicted": [0.9, 0.8, 0.4, 0.5, 0.3, 0.2],
    })


@pytest.fixture
def label_df():
    """0/1 predictions: precision 0.5, recall 2/3."""
    return pd.DataFrame({
        "actual":    [1, 1, 1, 0, 0, 0],
        "predicted": [1, 0, 1, 1, 1, 0],
    })


# ---------------------------------------------------------------------------
# Suite files
# ---------------------------------------------------------------------------

@pytest.fixture
def write_suite(tmp_path):
    """Factory: write YAML text to a temporary suite file and return its path."""
    def _write(text: str, name: str = "suite.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def regression_suite(write_suite):
    return write_suite("""
        task: regression
        remove_missing: true
        metrics:
          - rmse
          - name: mape
            drop_zero_actual: true
          - explained_variation
    """)
