"""Tests for ensemble reporting."""

import numpy as np
import pytest

from boatrace.config.schema import Propulsion, RaceConfig
from boatrace.fleet.vehicle import Vehicle
from boatrace.reporting.ensemble import (
    collect_sample,
    days_taken,
    days_taken_summary,
    get_dist,
    mean_distance_series,
    summarize_race,
)
from boatrace.simulation.driver import RaceSimulator


@pytest.fixture(scope="module")
def race():
    return RaceSimulator(RaceConfig(seed=17)).run(30)


def _boat(profile, history, arrived=True):
    return Vehicle(profile=profile, finish_line=300, history=list(history), arrived=arrived)


class TestGetDist:
    def test_within_history(self, short_wind_only_profile):
        boat = _boat(short_wind_only_profile, [0, 150, 300])
        assert get_dist(boat, 0) == 0
        assert get_dist(boat, 2) == 300

    def test_flat_past_history(self, short_wind_only_profile):
        boat = _boat(short_wind_only_profile, [0, 150, 300])
        assert get_dist(boat, len(boat.history)) == 300
        assert get_dist(boat, len(boat.history) + 5) == 300

    def test_negative_index_rejected(self, short_wind_only_profile):
        with pytest.raises(ValueError):
            get_dist(_boat(short_wind_only_profile, [0]), -1)


class TestMeanDistanceSeries:
    def test_holds_finished_boats_flat(self, short_wind_only_profile):
        boats = [
            _boat(short_wind_only_profile, [0, 150, 300]),
            _boat(short_wind_only_profile, [0, 0, 150, 300]),
        ]
        series = mean_distance_series(boats, n_days=5)
        np.testing.assert_allclose(series, [0.0, 75.0, 225.0, 300.0, 300.0])

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            mean_distance_series([], n_days=3)


class TestCollectSample:
    def test_samples_each_fleet(self, race, rng):
        sample_a, sample_b = collect_sample(race.wind_only, race.wind_or_solar, 12, rng)
        assert len(sample_a) == len(sample_b) == 12
        assert all(b.propulsion is Propulsion.WIND_ONLY for b in sample_a)
        assert all(b.propulsion is Propulsion.WIND_OR_SOLAR for b in sample_b)

    def test_samples_come_from_fleet(self, race, rng):
        sample_a, _ = collect_sample(race.wind_only, race.wind_or_solar, 5, rng)
        ids = {id(b) for b in race.wind_only}
        assert all(id(b) in ids for b in sample_a)

    def test_invalid_size(self, race, rng):
        with pytest.raises(ValueError):
            collect_sample(race.wind_only, race.wind_or_solar, 0, rng)


class TestSummaries:
    def test_days_taken(self, race):
        days = days_taken(race.wind_only)
        assert days.shape == (30,)
        assert days.max() - 1 <= race.days

    def test_days_taken_summary(self, race):
        summary = days_taken_summary(race)
        assert set(summary) == {"wind_only", "wind_or_solar"}
        for stats in summary.values():
            assert stats["min"] <= stats["median"] <= stats["max"]
            assert stats["min"] <= stats["mean"] <= stats["max"]

    def test_summarize_race(self, race, rng):
        df = summarize_race(race, sample_size=10, rng=rng, n_days=40)
        assert list(df.columns) == ["day", "wind_only_mean", "wind_or_solar_mean"]
        assert len(df) == 40
        assert df["wind_only_mean"].iloc[0] == 0
        assert df["wind_only_mean"].is_monotonic_increasing
        assert df["wind_or_solar_mean"].is_monotonic_increasing
