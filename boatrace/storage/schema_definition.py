"""PyArrow schemas for race Parquet output."""

import pyarrow as pa

TRAJECTORY_COLUMNS = ["vehicle_id", "propulsion", "day", "distance", "arrived"]
MEAN_SERIES_COLUMNS = ["day", "wind_only_mean", "wind_or_solar_mean"]


def build_trajectory_schema() -> pa.Schema:
    """Long-format schema: one row per boat per recorded day."""
    return pa.schema([
        pa.field("vehicle_id", pa.int32()),
        pa.field("propulsion", pa.string()),
        pa.field("day", pa.int32()),
        pa.field("distance", pa.int32()),
        pa.field("arrived", pa.bool_()),
    ])


def build_mean_series_schema() -> pa.Schema:
    return pa.schema([
        pa.field("day", pa.int32()),
        pa.field("wind_only_mean", pa.float64()),
        pa.field("wind_or_solar_mean", pa.float64()),
    ])


TRAJECTORY_SCHEMA = build_trajectory_schema()
MEAN_SERIES_SCHEMA = build_mean_series_schema()
