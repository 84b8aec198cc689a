"""Write race trajectories and mean distance series to Parquet files."""

from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from boatrace.fleet.fleet import Fleet
from boatrace.storage.schema_definition import (
    MEAN_SERIES_COLUMNS,
    MEAN_SERIES_SCHEMA,
    TRAJECTORY_COLUMNS,
    TRAJECTORY_SCHEMA,
)


class ParquetWriter:
    """Writes completed race output to Parquet files."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def write_trajectories(self, fleet: Fleet, label: str) -> Path:
        """Write every boat's distance history of a fleet.

        Args:
            fleet: Completed fleet.
            label: File suffix, e.g. "wind_only" or "shared_wind_only".

        Returns:
            Path to the written Parquet file.
        """
        rows = []
        for vehicle_id, vehicle in enumerate(fleet):
            # arrived only holds from the day the boat crossed the line
            last_day = len(vehicle.history) - 1
            for day, distance in enumerate(vehicle.history):
                rows.append({
                    "vehicle_id": vehicle_id,
                    "propulsion": vehicle.propulsion.value,
                    "day": day,
                    "distance": distance,
                    "arrived": vehicle.arrived and day == last_day,
                })

        df = pd.DataFrame(rows, columns=TRAJECTORY_COLUMNS)
        return self._write(df, TRAJECTORY_SCHEMA, f"trajectories_{label}.parquet")

    def write_mean_series(self, df: pd.DataFrame) -> Path:
        """Write the per-day mean distance table from ``summarize_race``."""
        df = df[MEAN_SERIES_COLUMNS]
        return self._write(df, MEAN_SERIES_SCHEMA, "mean_distance.parquet")

    def _write(self, df: pd.DataFrame, schema: pa.Schema, filename: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / filename

        table = pa.Table.from_pandas(df, schema=schema, preserve_index=False)
        pq.write_table(table, output_path, compression="snappy")

        return output_path
