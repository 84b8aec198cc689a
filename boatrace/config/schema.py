"""Dataclasses for weather, propulsion profiles and race configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from boatrace.config.constants import (
    DEFAULT_SEED,
    FINISH_LINE,
    SOLAR_GAIN_WIND_OR_SOLAR,
    SUNNY_DISTRIBUTION,
    WIND_GAIN_WIND_ONLY,
    WIND_GAIN_WIND_OR_SOLAR,
    WINDY_DISTRIBUTION,
)


@dataclass(frozen=True)
class Weather:
    """Weather for one boat on one day."""

    windy: bool
    sunny: bool


class Propulsion(Enum):
    """Propulsion rule deciding which weather moves a boat."""

    WIND_ONLY = "wind_only"
    WIND_OR_SOLAR = "wind_or_solar"


@dataclass(frozen=True)
class PropulsionProfile:
    """Per-variant daily gains (km)."""

    propulsion: Propulsion
    wind_gain: int
    solar_gain: int = 0       # ignored for WIND_ONLY

    def allowed_steps(self) -> Tuple[int, ...]:
        if self.propulsion is Propulsion.WIND_OR_SOLAR:
            return (0, self.wind_gain, self.solar_gain)
        return (0, self.wind_gain)


@dataclass(frozen=True)
class RaceConfig:
    """Race configuration.

    Distributions are finite marginals sampled uniformly, so
    ``(True, True, False, True)`` means 75% of days are windy.
    """

    wind_gain_wind_only: int = WIND_GAIN_WIND_ONLY
    wind_gain_wind_or_solar: int = WIND_GAIN_WIND_OR_SOLAR
    solar_gain_wind_or_solar: int = SOLAR_GAIN_WIND_OR_SOLAR
    finish_line: int = FINISH_LINE
    windy_distribution: Tuple[bool, ...] = WINDY_DISTRIBUTION
    sunny_distribution: Tuple[bool, ...] = SUNNY_DISTRIBUTION
    seed: Optional[int] = DEFAULT_SEED

    def validate(self) -> None:
        if self.finish_line <= 0:
            raise ValueError(f"finish_line must be positive, got {self.finish_line}")
        gains = {
            "wind_gain_wind_only": self.wind_gain_wind_only,
            "wind_gain_wind_or_solar": self.wind_gain_wind_or_solar,
            "solar_gain_wind_or_solar": self.solar_gain_wind_or_solar,
        }
        for name, value in gains.items():
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if len(self.windy_distribution) == 0:
            raise ValueError("windy_distribution must not be empty")
        if len(self.sunny_distribution) == 0:
            raise ValueError("sunny_distribution must not be empty")

    @property
    def seeded(self) -> bool:
        return self.seed is not None and self.seed > 0

    def can_finish(self, propulsion: Propulsion) -> bool:
        """Whether ``propulsion`` has a nonzero chance of progress on any day.

        A False here means a race with that variant never terminates.
        """
        profile = create_propulsion_profile(propulsion, self)
        can_wind = any(self.windy_distribution) and profile.wind_gain > 0
        if propulsion is Propulsion.WIND_ONLY:
            return can_wind
        can_sun = (
            any(self.sunny_distribution)
            and not all(self.windy_distribution)
            and profile.solar_gain > 0
        )
        return can_wind or can_sun


def create_propulsion_profile(
    propulsion: Propulsion, config: RaceConfig
) -> PropulsionProfile:
    """Build the gain profile of a variant from the race configuration."""
    if propulsion is Propulsion.WIND_ONLY:
        return PropulsionProfile(
            propulsion=Propulsion.WIND_ONLY,
            wind_gain=config.wind_gain_wind_only,
        )
    else:
        return PropulsionProfile(
            propulsion=Propulsion.WIND_OR_SOLAR,
            wind_gain=config.wind_gain_wind_or_solar,
            solar_gain=config.solar_gain_wind_or_solar,
        )
