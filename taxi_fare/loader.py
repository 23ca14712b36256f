"""CSV loading against the fixed taxi trip schema."""

from __future__ import annotations

import logging
import os

import polars as pl

from taxi_fare.config import Config
from taxi_fare.schema import TAXI_TRIP_SCHEMA, ColumnSpec

logger = logging.getLogger("TaxiFare")


class TripLoader:
    """Reads delimited trip files into typed, columnar frames.

    Every field is read as text first and then cast strictly to the declared
    dtype, so a value that does not parse raises instead of becoming null.

    Args:
        config: Pipeline configuration.
        schema: Columns to extract, by source field index.
    """

    def __init__(
        self, config: Config, schema: tuple[ColumnSpec, ...] = TAXI_TRIP_SCHEMA
    ) -> None:
        self._config = config
        self._schema = schema

    def load(self, path: str) -> pl.DataFrame:
        """Load one CSV file.

        Args:
            path: CSV file path.

        Returns:
            DataFrame with one column per schema entry, named and typed by it.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            ValueError: If the file has too few fields or a field is empty.
            polars.exceptions.InvalidOperationError: If a field does not parse.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Data file not found: {path}")

        raw = pl.read_csv(
            path,
            separator=self._config.separator,
            has_header=self._config.has_header,
            infer_schema_length=0,
        )

        width = max(spec.index for spec in self._schema) + 1
        if raw.width < width:
            raise ValueError(
                f"{path}: expected at least {width} columns, found {raw.width}"
            )

        df = raw.select([
            self._column_expr(raw.columns[spec.index], spec) for spec in self._schema
        ])

        null_counts = df.null_count().row(0, named=True)
        missing = [name for name, count in null_counts.items() if count]
        if missing:
            raise ValueError(f"{path}: missing values in columns {missing}")

        logger.info("Loaded %s: %d rows, %d columns", path, df.height, df.width)
        return df

    @staticmethod
    def _column_expr(source: str, spec: ColumnSpec) -> pl.Expr:
        expr = pl.col(source)
        if spec.dtype != pl.Utf8:
            expr = expr.str.strip_chars().cast(spec.dtype, strict=True)
        return expr.alias(spec.name)
