"""
metrics/
========
Metric functions, grouped by family.

Every function takes (actual, predicted, ...) as plain sequences or
numpy arrays and returns either a numpy array (elementwise metrics) or
a float (aggregate metrics). No pandas DataFrames, no file I/O.

    regression.py     → se, ae, ape, sle and their sums / means / medians / roots,
                        smape, bias, percent_bias
    relative.py       → rse, rrse, rae, explained_variation
    classification.py → auc, ll, log_loss, precision, recall, fbeta_score
"""

from model_eval.metrics.regression import (
    ae,
    ape,
    bias,
    mae,
    mape,
    mdae,
    mse,
    msle,
    percent_bias,
    rmse,
    rmsle,
    se,
    sle,
    smape,
    sse,
)
from model_eval.metrics.relative import (
    explained_variation,
    rae,
    rrse,
    rse,
)
from model_eval.metrics.classification import (
    auc,
    fbeta_score,
    ll,
    log_loss,
    precision,
    recall,
)

__all__ = [
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
]


def get_metric(name: str):
    """Look up a metric function by name; raises ValueError if unknown."""
    if name not in __all__:
        raise ValueError(
            f"Unknown metric '{name}'. Valid options: {sorted(__all__)}"
        )
    return globals()[name]
