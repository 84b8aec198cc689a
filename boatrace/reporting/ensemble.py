"""Ensemble statistics over completed races."""

import logging
from typing import Dict, List, Sequence, Tuple

import numpy as np
import pandas as pd

from boatrace.config.constants import REPORT_DAYS
from boatrace.fleet.fleet import Fleet
from boatrace.fleet.vehicle import Vehicle
from boatrace.simulation.driver import RaceResult

logger = logging.getLogger(__name__)


def collect_sample(
    fleet_a: Fleet,
    fleet_b: Fleet,
    n: int,
    rng: np.random.Generator,
) -> Tuple[List[Vehicle], List[Vehicle]]:
    """Sample ``n`` boats with replacement from each fleet."""
    if n <= 0:
        raise ValueError(f"Sample size must be positive, got {n}")
    if len(fleet_a) == 0 or len(fleet_b) == 0:
        raise ValueError("Cannot sample from an empty fleet")
    idx_a = rng.integers(0, len(fleet_a), size=n)
    idx_b = rng.integers(0, len(fleet_b), size=n)
    return [fleet_a[int(i)] for i in idx_a], [fleet_b[int(i)] for i in idx_b]


def get_dist(vehicle: Vehicle, index: int) -> int:
    """Distance on day ``index`` (0-based), held flat past the recorded history."""
    if index < 0:
        raise ValueError(f"Day index must be non-negative, got {index}")
    if index >= len(vehicle.history):
        return vehicle.history[-1]
    return vehicle.history[index]


def mean_distance_series(vehicles: Sequence[Vehicle], n_days: int = REPORT_DAYS) -> np.ndarray:
    """Mean distance across ``vehicles`` for days 0..n_days-1."""
    if len(vehicles) == 0:
        raise ValueError("Need at least one boat to average")
    return np.array([
        np.mean([get_dist(v, day) for v in vehicles]) for day in range(n_days)
    ])


def days_taken(fleet: Fleet) -> np.ndarray:
    """Recorded days per boat (history length, day 0 included)."""
    return np.array([v.days_taken for v in fleet], dtype=np.int64)


def days_taken_summary(result: RaceResult) -> Dict[str, Dict[str, float]]:
    """Mean/median/min/max days taken for each fleet of a race."""
    summary = {}
    for name, fleet in (("wind_only", result.wind_only), ("wind_or_solar", result.wind_or_solar)):
        days = days_taken(fleet)
        summary[name] = {
            "mean": float(days.mean()),
            "median": float(np.median(days)),
            "min": int(days.min()),
            "max": int(days.max()),
        }
    return summary


def summarize_race(
    result: RaceResult,
    sample_size: int,
    rng: np.random.Generator,
    n_days: int = REPORT_DAYS,
) -> pd.DataFrame:
    """Mean distance per day over a random sample of each fleet.

    Returns:
        DataFrame with columns day, wind_only_mean, wind_or_solar_mean.
    """
    sample_a, sample_b = collect_sample(result.wind_only, result.wind_or_solar, sample_size, rng)
    logger.debug(f"Summarizing {sample_size} sampled boats per fleet over {n_days} days")
    return pd.DataFrame({
        "day": np.arange(n_days, dtype=np.int32),
        "wind_only_mean": mean_distance_series(sample_a, n_days),
        "wind_or_solar_mean": mean_distance_series(sample_b, n_days),
    })
