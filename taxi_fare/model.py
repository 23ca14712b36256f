"""Fitted model handle and its on-disk persistence."""

from __future__ import annotations

import logging
import pickle
from typing import IO, Union

import numpy as np
import polars as pl
from sklearn.pipeline import Pipeline

from taxi_fare.config import Config
from taxi_fare.pipeline import alias_label
from taxi_fare.schema import SCORE_COLUMN

logger = logging.getLogger("TaxiFare")

Sink = Union[str, IO[bytes]]


class TaxiFareModel:
    """Immutable fitted transform graph.

    Wraps a fitted scikit-learn pipeline together with the configuration it
    was trained under. ``transform`` appends ``Label`` (when the ground truth
    column is present) and ``Score`` to a trip frame.

    Args:
        pipeline: Fitted feature chain and regressor.
        config: Configuration used at fit time.
    """

    def __init__(self, pipeline: Pipeline, config: Config) -> None:
        self._pipeline = pipeline
        self._config = config

    @property
    def config(self) -> Config:
        return self._config

    def transform(self, df: pl.DataFrame) -> pl.DataFrame:
        X = df.select(self._config.feature_columns).to_pandas()
        scores = np.asarray(self._pipeline.predict(X), dtype=np.float64)
        return alias_label(df, self._config).with_columns(
            pl.Series(SCORE_COLUMN, scores)
        )

    def save(self, sink: Sink) -> None:
        """Serialize to ``sink``, a path (overwritten) or a writable binary file."""
        if hasattr(sink, "write"):
            pickle.dump(self, sink)
            return
        with open(sink, "wb") as f:
            pickle.dump(self, f)
        logger.info("Model saved to %s", sink)

    @classmethod
    def load(cls, source: Sink) -> TaxiFareModel:
        """Deserialize a model written by ``save``.

        Raises:
            FileNotFoundError: If ``source`` is a path that does not exist.
            TypeError: If the file holds something other than a model.
        """
        if hasattr(source, "read"):
            model = pickle.load(source)
        else:
            with open(source, "rb") as f:
                model = pickle.load(f)
            logger.info("Model loaded from %s", source)

        if not isinstance(model, cls):
            raise TypeError(f"Expected {cls.__name__}, got {type(model).__name__}")
        return model
