"""Record types and the fixed CSV schema of the taxi fare dataset."""

from __future__ import annotations

from dataclasses import dataclass

import polars as pl

LABEL_COLUMN = "Label"
SCORE_COLUMN = "Score"


@dataclass(frozen=True)
class ColumnSpec:
    """One loaded column: target name, dtype and source field index."""

    name: str
    dtype: type[pl.DataType]
    index: int


TAXI_TRIP_SCHEMA: tuple[ColumnSpec, ...] = (
    ColumnSpec("VendorId", pl.Utf8, 0),
    ColumnSpec("RateCode", pl.Utf8, 1),
    ColumnSpec("PassengerCount", pl.Float32, 2),
    ColumnSpec("TripTime", pl.Float32, 3),  # seconds
    ColumnSpec("TripDistance", pl.Float32, 4),  # miles
    ColumnSpec("PaymentType", pl.Utf8, 5),
    ColumnSpec("FareAmount", pl.Float32, 6),  # dollars
)


@dataclass
class TaxiTrip:
    """A single trip description. ``fare_amount`` is 0 when predicting."""

    vendor_id: str
    rate_code: str
    passenger_count: float
    trip_time: float
    trip_distance: float
    payment_type: str
    fare_amount: float = 0.0

    def to_frame(self) -> pl.DataFrame:
        """Return the trip as a one-row frame typed like ``TAXI_TRIP_SCHEMA``."""
        values = {
            "VendorId": self.vendor_id,
            "RateCode": self.rate_code,
            "PassengerCount": float(self.passenger_count),
            "TripTime": float(self.trip_time),
            "TripDistance": float(self.trip_distance),
            "PaymentType": self.payment_type,
            "FareAmount": float(self.fare_amount),
        }
        return pl.DataFrame(
            {spec.name: [values[spec.name]] for spec in TAXI_TRIP_SCHEMA},
            schema={spec.name: spec.dtype for spec in TAXI_TRIP_SCHEMA},
        )


@dataclass
class TaxiTripFarePrediction:
    fare_amount: float
