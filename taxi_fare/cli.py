"""Command line entry point: ``taxi-fare PASSENGER_COUNT TRIP_TIME TRIP_DISTANCE``."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from taxi_fare.app import run
from taxi_fare.config import Config
from taxi_fare.evaluator import format_metrics_banner
from taxi_fare.predictor import format_fare
from taxi_fare.schema import TaxiTrip

app = typer.Typer(help="Taxi fare prediction", add_completion=False)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.command(context_settings={"ignore_unknown_options": True})
def predict(
    passenger_count: int = typer.Argument(..., help="Number of passengers."),
    trip_time: int = typer.Argument(..., help="Trip duration in seconds."),
    trip_distance: float = typer.Argument(..., help="Trip distance in miles."),
    vendor_id: Optional[str] = typer.Option(None, help="Vendor code (default VTS)."),
    rate_code: Optional[str] = typer.Option(None, help="Rate code (default 1)."),
    payment_type: Optional[str] = typer.Option(None, help="Payment type (default CRD)."),
    data_dir: Optional[str] = typer.Option(
        None, help="Directory with the CSV files and Model.zip."
    ),
    retrain: bool = typer.Option(False, help="Train and evaluate even if a model exists."),
) -> None:
    """Predict the fare of one trip, training a model first if none is saved."""
    _configure_logging()

    config = Config(retrain=retrain)
    if data_dir is not None:
        config.data_dir = data_dir

    trip = TaxiTrip(
        vendor_id=config.default_vendor_id if vendor_id is None else vendor_id,
        rate_code=config.default_rate_code if rate_code is None else rate_code,
        passenger_count=passenger_count,
        trip_time=trip_time,
        trip_distance=trip_distance,
        payment_type=(
            config.default_payment_type if payment_type is None else payment_type
        ),
    )

    result = run(config, trip)
    if result.metrics is not None:
        typer.echo(format_metrics_banner(result.metrics))
    typer.echo(format_fare(result.prediction))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
