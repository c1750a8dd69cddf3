"""CSV ingestion job for player performance records.

Bulk-loads performance rows from a CSV export into `player_performance`
without going through the API, so the classifier is NOT retrained per row.
Once the load finishes, call `POST /api/performance/train` on the running API
(or run the training job) to train on the new data.

Key steps:
- read the CSV with pandas
- normalize camelCase headers (`strikeRate`) to column names (`strike_rate`)
- validate required columns, numeric values and labels
- append into the table
"""

import argparse
import logging
import sys

import pandas as pd

from common.logging import configure_logging
from player_ai import db
from player_ai.features import FEATURE_COLS, METRIC_KEYS
from player_ai.models import PlayerPerformance
from player_ai.settings import get_settings

logger = logging.getLogger("ingest")

TABLE_COLS = FEATURE_COLS + ["label"]
_HEADER_ALIASES = {camel: col for col, camel in METRIC_KEYS.items()}


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename camelCase headers to table column names and drop extras.

    Raises:
        ValueError: If a required column is missing.
    """
    df = df.rename(columns=lambda c: _HEADER_ALIASES.get(str(c).strip(), str(c).strip()))
    missing = [c for c in TABLE_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing expected columns in CSV: {missing}")
    return df[TABLE_COLS]


def load_records(path: str) -> pd.DataFrame:
    """Read and validate a performance CSV.

    Returns:
        pandas.DataFrame: Rows with the table's columns and dtypes.

    Raises:
        ValueError: On missing columns, non-numeric values, negative metrics,
            fractional fielding stats or labels outside {0, 1}.
    """
    df = _normalize_columns(pd.read_csv(path))

    numeric = df.apply(pd.to_numeric, errors="coerce")
    bad_rows = numeric[numeric.isna().any(axis=1)].index.tolist()
    if bad_rows:
        raise ValueError(f"Non-numeric or empty values in rows: {bad_rows}")

    if (numeric[FEATURE_COLS] < 0).any().any():
        raise ValueError("Metrics must be non-negative")

    if not numeric["label"].isin([0, 1]).all():
        raise ValueError("Labels must be 0 or 1")

    fractional = numeric[numeric["fielding_stats"] % 1 != 0].index.tolist()
    if fractional:
        raise ValueError(f"Fielding stats must be whole numbers in rows: {fractional}")

    return numeric.astype(
        {
            "average": float,
            "strike_rate": float,
            "bowling_average": float,
            "economy_rate": float,
            "fielding_stats": int,
            "label": int,
        }
    )


def run(path: str, engine=None) -> int:
    """Load `path` into the database.

    Args:
        path: CSV file to ingest.
        engine: Optional SQLAlchemy engine; defaults to the one built from DATABASE_URL.

    Returns:
        int: Number of rows loaded.

    Raises:
        ValueError: If the CSV fails validation. Nothing is written in that case.
    """
    engine = engine or db.engine
    db.Base.metadata.create_all(bind=engine)

    df = load_records(path)
    with engine.begin() as conn:
        df.to_sql(PlayerPerformance.__tablename__, conn, if_exists="append", index=False)

    logger.info("loaded %d rows from %s", len(df), path)
    logger.info("classifier not retrained; POST /api/performance/train to pick up the new rows")
    return len(df)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load player performance records from a CSV file.")
    parser.add_argument("csv_path")
    args = parser.parse_args(argv)

    try:
        run(args.csv_path)
    except ValueError as exc:
        logger.error("ingestion failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    sys.exit(main())
