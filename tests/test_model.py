import io
import os
import pickle

import numpy as np
import pytest

from taxi_fare.model import TaxiFareModel
from taxi_fare.trainer import ModelTrainer


def test_transform_adds_label_and_score(fitted_model, holdout_df):
    scored = fitted_model.transform(holdout_df)
    assert scored.height == holdout_df.height
    assert "Label" in scored.columns
    assert "Score" in scored.columns


def test_save_load_preserves_predictions(fitted_model, holdout_df, config):
    fitted_model.save(config.model_path)
    loaded = TaxiFareModel.load(config.model_path)

    np.testing.assert_allclose(
        loaded.transform(holdout_df)["Score"].to_numpy(),
        fitted_model.transform(holdout_df)["Score"].to_numpy(),
        rtol=1e-6,
    )


def test_save_overwrites_existing_file(fitted_model, config):
    with open(config.model_path, "wb") as f:
        f.write(b"stale")
    fitted_model.save(config.model_path)
    assert isinstance(TaxiFareModel.load(config.model_path), TaxiFareModel)


def test_save_and_load_with_file_objects(fitted_model, holdout_df):
    buffer = io.BytesIO()
    fitted_model.save(buffer)
    buffer.seek(0)
    loaded = TaxiFareModel.load(buffer)
    assert loaded.transform(holdout_df.head(3))["Score"].len() == 3


def test_fit_is_deterministic(config, train_df):
    trainer = ModelTrainer(config)
    first, second = io.BytesIO(), io.BytesIO()
    trainer.fit(train_df).save(first)
    trainer.fit(train_df).save(second)
    assert first.getvalue() == second.getvalue()


def test_training_twice_writes_identical_artifacts(config):
    trainer = ModelTrainer(config)
    trainer.train()
    with open(config.model_path, "rb") as f:
        first = f.read()
    os.remove(config.model_path)

    trainer.train()
    with open(config.model_path, "rb") as f:
        assert f.read() == first


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TaxiFareModel.load(str(tmp_path / "Model.zip"))


def test_load_rejects_other_objects(tmp_path):
    path = tmp_path / "Model.zip"
    path.write_bytes(pickle.dumps({"not": "a model"}))
    with pytest.raises(TypeError):
        TaxiFareModel.load(str(path))


def test_load_truncated_file_raises(fitted_model, config):
    fitted_model.save(config.model_path)
    with open(config.model_path, "rb") as f:
        data = f.read()
    with open(config.model_path, "wb") as f:
        f.write(data[: len(data) // 2])

    with pytest.raises((pickle.UnpicklingError, EOFError)):
        TaxiFareModel.load(config.model_path)
