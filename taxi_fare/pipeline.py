"""Composition of the fare regression pipeline."""

from __future__ import annotations

import lightgbm as lgb
import polars as pl
from sklearn.compose import ColumnTransformer
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder

from taxi_fare.config import Config
from taxi_fare.schema import LABEL_COLUMN


def alias_label(df: pl.DataFrame, config: Config) -> pl.DataFrame:
    """Copy the ground-truth column to ``Label`` when it is present."""
    if config.label_column not in df.columns:
        return df
    return df.with_columns(pl.col(config.label_column).alias(LABEL_COLUMN))


def build_pipeline(config: Config) -> Pipeline:
    """Build the unfitted feature chain and regressor.

    Each categorical column gets its own one-hot encoder whose vocabulary is
    learned at fit time; unseen categories encode as all zeros. Numeric
    columns pass through unchanged. The outputs are concatenated in
    ``config.feature_columns`` order.
    """
    transformers = []
    for column in config.feature_columns:
        if column in config.categorical_columns:
            encoder = OneHotEncoder(handle_unknown="ignore", sparse_output=False)
            transformers.append((column, encoder, [column]))
        else:
            transformers.append((column, "passthrough", [column]))

    features = ColumnTransformer(transformers, remainder="drop")
    regressor = lgb.LGBMRegressor(
        random_state=config.random_seed,
        deterministic=True,
        verbosity=-1,
    )
    return Pipeline([("features", features), ("regressor", regressor)])
