"""Single-record fare scoring."""

from __future__ import annotations

from taxi_fare.evaluator import format_number
from taxi_fare.model import TaxiFareModel
from taxi_fare.schema import SCORE_COLUMN, TaxiTrip, TaxiTripFarePrediction


class PredictionEngine:
    """Scores one ``TaxiTrip`` at a time against a loaded model."""

    def __init__(self, model: TaxiFareModel) -> None:
        self._model = model

    def predict(self, trip: TaxiTrip) -> TaxiTripFarePrediction:
        scored = self._model.transform(trip.to_frame())
        return TaxiTripFarePrediction(fare_amount=float(scored[SCORE_COLUMN][0]))


def predict_one(model: TaxiFareModel, trip: TaxiTrip) -> TaxiTripFarePrediction:
    return PredictionEngine(model).predict(trip)


def format_fare(prediction: TaxiTripFarePrediction) -> str:
    return f"Predicted fare: ${format_number(prediction.fare_amount)}"
