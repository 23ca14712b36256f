import math

from taxi_fare.predictor import PredictionEngine, format_fare, predict_one
from taxi_fare.schema import TaxiTrip, TaxiTripFarePrediction


def _trip(**overrides) -> TaxiTrip:
    values = dict(
        vendor_id="VTS",
        rate_code="1",
        passenger_count=1,
        trip_time=1140,
        trip_distance=3.75,
        payment_type="CRD",
    )
    values.update(overrides)
    return TaxiTrip(**values)


def test_trip_frame_matches_schema():
    df = _trip().to_frame()
    assert df.height == 1
    assert df["FareAmount"][0] == 0.0
    assert df["TripDistance"][0] == 3.75


def test_predict_one_is_finite_and_non_negative(fitted_model):
    prediction = predict_one(fitted_model, _trip())
    assert math.isfinite(prediction.fare_amount)
    assert prediction.fare_amount >= 0


def test_longer_trips_cost_more(fitted_model):
    engine = PredictionEngine(fitted_model)
    short = engine.predict(_trip(trip_time=300, trip_distance=1.0))
    long = engine.predict(_trip(trip_time=2400, trip_distance=12.0))
    assert long.fare_amount > short.fare_amount


def test_engine_matches_batch_transform(fitted_model):
    trip = _trip()
    scored = fitted_model.transform(trip.to_frame())
    assert PredictionEngine(fitted_model).predict(trip).fare_amount == scored["Score"][0]


def test_format_fare():
    assert format_fare(TaxiTripFarePrediction(15.5)) == "Predicted fare: $15.5"
    assert format_fare(TaxiTripFarePrediction(12.3456)) == "Predicted fare: $12.35"
