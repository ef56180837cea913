"""
inputs.py
=========
Input handling shared by every metric in model_eval.

Each metric receives an (actual, predicted) pair and passes it through
this module before doing any arithmetic. It handles:
  - Coercing lists, tuples, scalars, numpy arrays and pandas Series to
    1-D float64 numpy arrays (None / pd.NA become nan)
  - Rejecting pairs of unequal length with LengthMismatchError
  - Building the missing-value mask and, when asked, dropping the
    masked positions from both sequences

Missing values are represented by nan throughout the library. A float64
numpy array passed in may come back as the same object, so nothing in
the library writes to the arrays returned here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from collections.abc import Sequence


class LengthMismatchError(ValueError):
    """Raised when actual and predicted do not have the same length."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def as_sequence(values: "Sequence[float] | float", name: str = "values") -> np.ndarray:
    """
    Coerce values to a 1-D float64 numpy array.

    Parameters
    ----------
    values : Scalar or 1-D array-like of numbers. None, pd.NA and nan
             are all treated as missing and become nan.
    name   : Argument name used in error messages.

    Returns
    -------
    1-D numpy array of dtype float64. A scalar becomes a length-1 array.

    Raises
    ------
    TypeError  : If values contains something that is not a number.
    ValueError : If values has more than one dimension.
    """
    if isinstance(values, (pd.Series, pd.Index)):
        try:
            arr = values.to_numpy(dtype=float, na_value=np.nan)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"{name} must contain only numbers (got dtype {values.dtype})") from exc
    else:
        if values is pd.NA:
            values = np.nan
        elif isinstance(values, (list, tuple)):
            values = [np.nan if v is pd.NA else v for v in values]
        try:
            arr = np.asarray(values, dtype=float)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"{name} must contain only numbers: {exc}") from exc

    if arr.ndim > 1:
        raise ValueError(
            f"{name} must be one-dimensional (got shape {arr.shape})"
        )
    return np.atleast_1d(arr)


def check_lengths(actual: np.ndarray, predicted: np.ndarray) -> None:
    """Raise LengthMismatchError if the two sequences differ in length."""
    if len(actual) != len(predicted):
        raise LengthMismatchError(
            f"actual and predicted must be the same length "
            f"(got {len(actual)} vs {len(predicted)})"
        )


def prepare(actual, predicted) -> tuple[np.ndarray, np.ndarray]:
    """Coerce both sequences and check they pair up one-to-one."""
    a = as_sequence(actual,    "actual")
    p = as_sequence(predicted, "predicted")
    check_lengths(a, p)
    return a, p


def missing_mask(actual, predicted) -> np.ndarray:
    """
    Boolean mask, True wherever actual or predicted is missing.

    Both inputs are coerced and length-checked first.
    """
    a, p = prepare(actual, predicted)
    return np.isnan(a) | np.isnan(p)


def filter_missing(
    actual,
    predicted,
    remove_missing: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Return the (actual, predicted) positions a metric should operate on.

    Parameters
    ----------
    actual         : Ground truth values.
    predicted      : Predicted values, paired one-to-one with actual.
    remove_missing : If True, drop every position where either value is
                     missing. If False, keep everything and let missing
                     values propagate through the arithmetic as nan.

    Returns
    -------
    (actual, predicted) as compact float64 arrays of equal length.
    """
    a, p = prepare(actual, predicted)
    if not remove_missing:
        return a, p

    keep = ~(np.isnan(a) | np.isnan(p))
    return a[keep], p[keep]
