"""Pipeline configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Config:
    """Central configuration for training, evaluation and prediction.

    Built once at process start and handed to every stage.

    Args:
        data_dir: Directory holding the CSV files and the model artifact.
        train_file: Training CSV file name inside ``data_dir``.
        test_file: Held-out evaluation CSV file name inside ``data_dir``.
        model_file: Serialized model file name inside ``data_dir``.
        separator: CSV field separator.
        has_header: Whether the CSV files carry a header row.
        label_column: Ground-truth column aliased as the training label.
        categorical_columns: Columns one-hot encoded independently.
        feature_columns: Columns concatenated into the feature vector, in order.
        random_seed: Reproducibility seed passed to the regressor.
        retrain: Train and evaluate even when a model file already exists.
        default_vendor_id: Vendor used for CLI predictions.
        default_rate_code: Rate code used for CLI predictions.
        default_payment_type: Payment type used for CLI predictions.
    """

    data_dir: str = field(default_factory=lambda: os.path.join(os.getcwd(), "Data"))
    train_file: str = "taxi-fare-train.csv"
    test_file: str = "taxi-fare-test.csv"
    model_file: str = "Model.zip"

    # CSV format
    separator: str = ","
    has_header: bool = True

    # Features
    label_column: str = "FareAmount"
    categorical_columns: list[str] = field(default_factory=lambda: [
        "VendorId",
        "RateCode",
        "PaymentType",
    ])
    feature_columns: list[str] = field(default_factory=lambda: [
        "VendorId",
        "RateCode",
        "PassengerCount",
        "TripTime",
        "TripDistance",
        "PaymentType",
    ])

    random_seed: int = 0
    retrain: bool = False

    # Fixed trip attributes for command line predictions
    default_vendor_id: str = "VTS"
    default_rate_code: str = "1"
    default_payment_type: str = "CRD"

    @property
    def train_data_path(self) -> str:
        return os.path.join(self.data_dir, self.train_file)

    @property
    def test_data_path(self) -> str:
        return os.path.join(self.data_dir, self.test_file)

    @property
    def model_path(self) -> str:
        return os.path.join(self.data_dir, self.model_file)

    @property
    def numeric_columns(self) -> list[str]:
        return [c for c in self.feature_columns if c not in self.categorical_columns]
