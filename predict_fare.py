"""Taxi fare prediction from the command line.

Trains a gradient-boosted regression pipeline on ``Data/taxi-fare-train.csv``
the first time it runs, reports its quality on ``Data/taxi-fare-test.csv``,
and saves it to ``Data/Model.zip``. Every run then predicts the fare of the
trip given as ``PASSENGER_COUNT TRIP_TIME TRIP_DISTANCE``.
"""

from taxi_fare.cli import main

if __name__ == "__main__":
    main()
