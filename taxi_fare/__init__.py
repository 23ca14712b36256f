from taxi_fare.config import Config
from taxi_fare.loader import TripLoader
from taxi_fare.model import TaxiFareModel
from taxi_fare.predictor import PredictionEngine
from taxi_fare.trainer import ModelTrainer

__all__ = ["Config", "TripLoader", "TaxiFareModel", "PredictionEngine", "ModelTrainer"]
