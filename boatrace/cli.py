"""Command-line interface for the boat race simulator."""

import logging
import sys
from pathlib import Path

import click

from boatrace.config.constants import (
    DEFAULT_FLEET_SIZE,
    DEFAULT_SEED,
    REPORT_DAYS,
    SAMPLE_SCALE,
)
from boatrace.config.schema import RaceConfig
from boatrace.reporting.ensemble import days_taken_summary, summarize_race
from boatrace.simulation.driver import RaceSimulator
from boatrace.storage.parquet_writer import ParquetWriter
from boatrace.validation.history_checks import check_fleet


@click.command()
@click.option("--boats", default=DEFAULT_FLEET_SIZE, type=click.IntRange(min=1),
              help="Boats per fleet.")
@click.option("--seed", default=DEFAULT_SEED, help="RNG seed (<= 0 for unseeded).")
@click.option("--mode", type=click.Choice(["independent", "shared"]), default="independent",
              help="Independent weather per boat, or one shared weather per boat index.")
@click.option("--sample-scale", default=SAMPLE_SCALE, type=click.IntRange(min=1),
              help="Report on boats // scale sampled boats.")
@click.option("--days", default=REPORT_DAYS, type=click.IntRange(min=1),
              help="Length of the mean distance series.")
@click.option("--max-days", default=None, type=click.IntRange(min=1),
              help="Stop the race after this many days.")
@click.option("--output-dir", default=None, help="Write Parquet output to this directory.")
@click.option("--validate", is_flag=True, help="Check every boat history after the race.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def main(boats, seed, mode, sample_scale, days, max_days, output_dir, validate, verbose):
    """Monte Carlo race between wind-only and wind-or-solar boats."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)

    config = RaceConfig(seed=seed)
    simulator = RaceSimulator(config, max_days=max_days)

    result = simulator.run(boats, shared_weather=(mode == "shared"))
    if not result.converged:
        logger.error(f"Race did not finish within {max_days} days")
        sys.exit(1)

    for name, stats in days_taken_summary(result).items():
        logger.info(
            f"{name}: mean {stats['mean']:.2f} days "
            f"(median {stats['median']:.1f}, min {stats['min']}, max {stats['max']})"
        )

    if validate:
        reports = [check_fleet(fleet) for fleet in result.fleets]
        if not all(r.passed for r in reports):
            sys.exit(1)

    n_sample = max(boats // sample_scale, 1)
    series = summarize_race(result, n_sample, simulator.rng, n_days=days)
    final = series.iloc[-1]
    logger.info(
        f"Day {int(final['day'])} mean distance over {n_sample} sampled boats: "
        f"wind_only {final['wind_only_mean']:.1f}, "
        f"wind_or_solar {final['wind_or_solar_mean']:.1f}"
    )

    if output_dir is not None:
        writer = ParquetWriter(Path(output_dir))
        writer.write_trajectories(result.wind_only, f"{mode}_wind_only")
        writer.write_trajectories(result.wind_or_solar, f"{mode}_wind_or_solar")
        path = writer.write_mean_series(series)
        logger.info(f"Output written to {path.parent}")

    logger.info("Done.")


if __name__ == "__main__":
    main()
