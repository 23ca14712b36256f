from __future__ import annotations

import pytest

from taxi_fare.config import Config
from tests.data_utils import generate_synthetic_data
from taxi_fare.loader import TripLoader
from taxi_fare.trainer import ModelTrainer


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "Data"
    generate_synthetic_data(str(path), n_train=600, n_test=150, seed=7)
    return path


@pytest.fixture
def config(data_dir) -> Config:
    return Config(data_dir=str(data_dir))


@pytest.fixture
def train_df(config):
    return TripLoader(config).load(config.train_data_path)


@pytest.fixture
def holdout_df(config):
    return TripLoader(config).load(config.test_data_path)


@pytest.fixture
def fitted_model(config, train_df):
    return ModelTrainer(config).fit(train_df)
