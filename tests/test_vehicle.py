"""Tests for the per-day boat advance rule."""

import pytest

from boatrace.config.schema import Propulsion, PropulsionProfile, Weather
from boatrace.fleet.vehicle import Vehicle

WINDY = Weather(windy=True, sunny=False)
WINDY_SUNNY = Weather(windy=True, sunny=True)
CALM_SUNNY = Weather(windy=False, sunny=True)
CALM_CLOUDY = Weather(windy=False, sunny=False)


class TestWindOnly:
    @pytest.fixture
    def boat(self, short_wind_only_profile):
        return Vehicle(profile=short_wind_only_profile, finish_line=300)

    def test_starts_at_zero(self, boat):
        assert boat.history == [0]
        assert not boat.arrived
        assert boat.days_taken == 1

    def test_two_windy_days_finish(self, boat):
        assert boat.advance(WINDY) == 1
        assert boat.advance(WINDY) == 1
        assert boat.history == [0, 150, 300]
        assert boat.arrived

    def test_frozen_after_arrival(self, boat):
        boat.advance(WINDY)
        boat.advance(WINDY)
        for weather in (WINDY, CALM_SUNNY, CALM_CLOUDY):
            assert boat.advance(weather) == 0
        assert boat.history == [0, 150, 300]
        assert boat.arrived

    def test_sun_does_not_move_wind_only(self, boat):
        boat.advance(CALM_SUNNY)
        boat.advance(CALM_CLOUDY)
        assert boat.history == [0, 0, 0]
        assert not boat.arrived

    def test_overshoot_is_not_clamped(self):
        profile = PropulsionProfile(propulsion=Propulsion.WIND_ONLY, wind_gain=192)
        boat = Vehicle(profile=profile, finish_line=300)
        boat.advance(WINDY)
        boat.advance(WINDY_SUNNY)
        assert boat.history == [0, 192, 384]
        assert boat.arrived
        assert boat.distance == 384


class TestWindOrSolar:
    @pytest.fixture
    def profile(self):
        return PropulsionProfile(
            propulsion=Propulsion.WIND_OR_SOLAR, wind_gain=120, solar_gain=120,
        )

    def test_solar_then_wind_finishes(self, profile):
        boat = Vehicle(profile=profile, finish_line=130)
        boat.advance(CALM_SUNNY)
        assert boat.history == [0, 120]
        assert not boat.arrived
        boat.advance(WINDY_SUNNY)
        assert boat.history == [0, 120, 240]
        assert boat.arrived

    def test_wind_has_priority_over_sun(self, wind_or_solar_profile):
        boat = Vehicle(profile=wind_or_solar_profile, finish_line=10_000)
        boat.advance(WINDY_SUNNY)
        boat.advance(WINDY)
        assert boat.history == [0, 144, 288]

    def test_solar_only_when_calm(self, wind_or_solar_profile):
        boat = Vehicle(profile=wind_or_solar_profile, finish_line=10_000)
        boat.advance(CALM_SUNNY)
        boat.advance(CALM_CLOUDY)
        assert boat.history == [0, 120, 120]

    def test_no_progress_day_recorded(self, wind_or_solar_profile):
        boat = Vehicle(profile=wind_or_solar_profile, finish_line=10_000)
        for _ in range(3):
            assert boat.advance(CALM_CLOUDY) == 1
        assert boat.history == [0, 0, 0, 0]


class TestHistoryGrowth:
    def test_one_entry_per_day_until_arrival(self, wind_only_profile, rng):
        from boatrace.simulation.weather import WeatherGenerator

        boat = Vehicle(profile=wind_only_profile, finish_line=1000)
        gen = WeatherGenerator(rng)
        calls = 0
        while not boat.arrived:
            before = len(boat.history)
            boat.advance(gen.draw())
            calls += 1
            assert len(boat.history) == before + 1
        assert len(boat.history) == calls + 1
        assert boat.history[0] == 0
        steps = {b - a for a, b in zip(boat.history, boat.history[1:])}
        assert steps <= {0, 192}
