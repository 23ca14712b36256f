from __future__ import annotations

import logging

import polars as pl

from taxi_fare.config import Config
from taxi_fare.evaluator import RegressionMetrics, evaluate
from taxi_fare.loader import TripLoader
from taxi_fare.model import TaxiFareModel
from taxi_fare.pipeline import alias_label, build_pipeline
from taxi_fare.schema import LABEL_COLUMN

logger = logging.getLogger("TaxiFare")


class ModelTrainer:
    def __init__(self, config: Config, loader: TripLoader | None = None) -> None:
        self._config = config
        self._loader = loader or TripLoader(config)

    def fit(self, train_df: pl.DataFrame) -> TaxiFareModel:
        df = alias_label(train_df, self._config)
        X = df.select(self._config.feature_columns).to_pandas()
        y = df[LABEL_COLUMN].to_numpy()

        logger.info("Fitting pipeline on %d rows", df.height)
        pipeline = build_pipeline(self._config)
        pipeline.fit(X, y)
        logger.info("Fitting complete")

        return TaxiFareModel(pipeline, self._config)

    def train(self) -> TaxiFareModel:
        train_df = self._loader.load(self._config.train_data_path)
        model = self.fit(train_df)
        model.save(self._config.model_path)
        return model

    def evaluate(self, model: TaxiFareModel) -> RegressionMetrics:
        path = self._config.test_data_path
        test_df = self._loader.load(path)
        if test_df.is_empty():
            raise ValueError(f"{path}: no rows to evaluate against")

        metrics = evaluate(model, test_df)
        logger.info(
            "Test metrics: R2=%.4f, RMS=%.4f, MAE=%.4f, MSE=%.4f",
            metrics.r_squared, metrics.rms,
            metrics.mean_absolute_error, metrics.mean_squared_error,
        )
        return metrics
