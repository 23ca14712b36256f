"""Run orchestration: optional train and evaluate, then predict."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable

from taxi_fare.config import Config
from taxi_fare.evaluator import RegressionMetrics
from taxi_fare.model import TaxiFareModel
from taxi_fare.predictor import predict_one
from taxi_fare.schema import TaxiTrip, TaxiTripFarePrediction
from taxi_fare.trainer import ModelTrainer

logger = logging.getLogger("TaxiFare")


@dataclass
class RunResult:
    prediction: TaxiTripFarePrediction
    metrics: RegressionMetrics | None = None


def model_artifact_exists(path: str) -> bool:
    return os.path.isfile(path)


def warn_if_stale(config: Config) -> None:
    """Log a warning when the training data is newer than the saved model.

    Only file modification times are compared; neither file is opened.
    """
    if not os.path.exists(config.train_data_path):
        return
    if os.path.getmtime(config.train_data_path) > os.path.getmtime(config.model_path):
        logger.warning(
            "Training data %s changed after %s was saved; rerun with --retrain to refresh it",
            config.train_data_path, config.model_path,
        )


def train_and_evaluate(
    config: Config, trainer: ModelTrainer | None = None
) -> RegressionMetrics:
    trainer = trainer or ModelTrainer(config)
    model = trainer.train()
    return trainer.evaluate(model)


def run(
    config: Config,
    trip: TaxiTrip,
    model_exists: Callable[[str], bool] = model_artifact_exists,
    trainer: ModelTrainer | None = None,
) -> RunResult:
    """Train and evaluate when no model is on disk, then predict ``trip``.

    The model is always read back from ``config.model_path`` for the
    prediction, even right after training.
    """
    metrics = None
    if config.retrain or not model_exists(config.model_path):
        metrics = train_and_evaluate(config, trainer)
    else:
        logger.info("Model found at %s, skipping training", config.model_path)
        warn_if_stale(config)

    model = TaxiFareModel.load(config.model_path)
    return RunResult(prediction=predict_one(model, trip), metrics=metrics)
