from taxi_fare.cli import main

main()
