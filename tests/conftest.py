"""Shared test fixtures."""

import numpy as np
import pytest

from boatrace.config.schema import (
    Propulsion,
    PropulsionProfile,
    RaceConfig,
    create_propulsion_profile,
)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def config():
    return RaceConfig()


@pytest.fixture
def short_config():
    """Short course so races finish in a handful of days."""
    return RaceConfig(
        wind_gain_wind_only=150,
        wind_gain_wind_or_solar=150,
        solar_gain_wind_or_solar=100,
        finish_line=300,
    )


@pytest.fixture
def wind_only_profile(config):
    return create_propulsion_profile(Propulsion.WIND_ONLY, config)


@pytest.fixture
def wind_or_solar_profile(config):
    return create_propulsion_profile(Propulsion.WIND_OR_SOLAR, config)


@pytest.fixture
def short_wind_only_profile():
    return PropulsionProfile(propulsion=Propulsion.WIND_ONLY, wind_gain=150)
