"""Regression quality metrics for a fitted model."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import polars as pl
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from taxi_fare.model import TaxiFareModel
from taxi_fare.schema import LABEL_COLUMN, SCORE_COLUMN


@dataclass(frozen=True)
class RegressionMetrics:
    r_squared: float
    rms: float
    mean_absolute_error: float
    mean_squared_error: float


def compute_metrics(labels: np.ndarray, scores: np.ndarray) -> RegressionMetrics:
    """Compare predicted scores against true labels.

    Args:
        labels: Ground-truth values.
        scores: Predicted values, same length as ``labels``.

    Returns:
        R², root-mean-square error, MAE and MSE.
    """
    mse = float(mean_squared_error(labels, scores))
    return RegressionMetrics(
        r_squared=float(r2_score(labels, scores)),
        rms=float(np.sqrt(mse)),
        mean_absolute_error=float(mean_absolute_error(labels, scores)),
        mean_squared_error=mse,
    )


def evaluate(model: TaxiFareModel, test_df: pl.DataFrame) -> RegressionMetrics:
    scored = model.transform(test_df)
    if LABEL_COLUMN not in scored.columns:
        raise ValueError(
            f"Test data has no '{model.config.label_column}' column to evaluate against"
        )
    return compute_metrics(
        scored[LABEL_COLUMN].to_numpy(), scored[SCORE_COLUMN].to_numpy()
    )


def format_number(value: float) -> str:
    """Round to at most two decimals and drop trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_metrics_banner(metrics: RegressionMetrics) -> str:
    return "\n".join([
        "",
        "*************************************************",
        "*       Model quality metrics evaluation         ",
        "*------------------------------------------------",
        f"*       R2 Score:      {format_number(metrics.r_squared)}",
        f"*       RMS loss:      {format_number(metrics.rms)}",
    ])
