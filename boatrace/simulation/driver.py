"""Race driver: runs the wind-only and wind-or-solar fleets until both arrive.

Random draw order (fixed for reproducibility under a seed):
    independent mode -> per day, every wind-only boat in index order draws
                        its own weather, then every wind-or-solar boat
    shared mode      -> per day, n weathers are drawn first; weather i is
                        applied to boat i of both fleets
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from boatrace.config.constants import PROGRESS_LOG_INTERVAL
from boatrace.config.schema import Propulsion, RaceConfig, create_propulsion_profile
from boatrace.fleet.fleet import Fleet
from boatrace.fleet.fleet_factory import create_fleet
from boatrace.simulation.weather import WeatherGenerator

logger = logging.getLogger(__name__)

INDEPENDENT = "independent"
SHARED = "shared"


class ConvergenceError(RuntimeError):
    """Raised when a capped race stops before every boat arrived."""


@dataclass
class RaceResult:
    wind_only: Fleet
    wind_or_solar: Fleet
    days: int                 # ticks simulated, day 0 excluded
    mode: str                 # "independent" or "shared"
    converged: bool

    @property
    def fleets(self) -> Tuple[Fleet, Fleet]:
        return self.wind_only, self.wind_or_solar


class RaceSimulator:
    """Monte Carlo race between a wind-only and a wind-or-solar fleet."""

    def __init__(
        self,
        config: Optional[RaceConfig] = None,
        rng: Optional[np.random.Generator] = None,
        weather=None,
        max_days: Optional[int] = None,
    ):
        """
        Args:
            config: Gains, finish line, weather marginals and seed.
            rng: Random generator; built from ``config.seed`` when omitted.
            weather: Weather source with ``draw``/``draw_many``; defaults to a
                WeatherGenerator over the configured marginals.
            max_days: Optional cap on simulated days. None (default) runs until
                both fleets arrive, which never happens under a degenerate
                configuration.
        """
        self.config = config or RaceConfig()
        self.config.validate()
        if max_days is not None and max_days <= 0:
            raise ValueError(f"max_days must be positive, got {max_days}")
        self.max_days = max_days

        if rng is None:
            rng = np.random.default_rng(self.config.seed if self.config.seeded else None)
        self.rng = rng
        if weather is None:
            weather = WeatherGenerator(
                self.rng,
                self.config.windy_distribution,
                self.config.sunny_distribution,
            )
        self.weather = weather

        for propulsion in Propulsion:
            if not self.config.can_finish(propulsion):
                logger.warning(
                    f"{propulsion.value} boats can never reach the finish line "
                    f"under this configuration; uncapped races will not end"
                )

    def _new_fleets(self, n: int) -> Tuple[Fleet, Fleet]:
        finish = self.config.finish_line
        wind_only = create_fleet(
            n, create_propulsion_profile(Propulsion.WIND_ONLY, self.config), finish,
        )
        wind_or_solar = create_fleet(
            n, create_propulsion_profile(Propulsion.WIND_OR_SOLAR, self.config), finish,
        )
        return wind_only, wind_or_solar

    def run(self, n: int, shared_weather: bool = False) -> RaceResult:
        """Race ``n`` boats of each variant until both fleets have arrived.

        Fleets that finish early keep receiving (no-op) advance calls until the
        other fleet arrives too.
        """
        mode = SHARED if shared_weather else INDEPENDENT
        wind_only, wind_or_solar = self._new_fleets(n)
        logger.info(f"Starting {mode}-weather race: {n} boats per fleet")

        days = 0
        while not (wind_only.all_arrived() and wind_or_solar.all_arrived()):
            if self.max_days is not None and days >= self.max_days:
                logger.warning(
                    f"Race stopped after {days} days: "
                    f"{wind_only.n_arrived()}/{n} wind-only and "
                    f"{wind_or_solar.n_arrived()}/{n} wind-or-solar boats arrived"
                )
                return RaceResult(wind_only, wind_or_solar, days, mode, converged=False)

            if shared_weather:
                weathers = self.weather.draw_many(n)
                wind_only.advance_all(weathers)
                wind_or_solar.advance_all(weathers)
            else:
                wind_only.advance_all(generator=self.weather)
                wind_or_solar.advance_all(generator=self.weather)
            days += 1

            if days % PROGRESS_LOG_INTERVAL == 0:
                logger.debug(
                    f"Day {days}: {wind_only.n_arrived()}/{n} wind-only, "
                    f"{wind_or_solar.n_arrived()}/{n} wind-or-solar arrived"
                )

        logger.info(f"All boats arrived after {days} days ({mode} weather)")
        return RaceResult(wind_only, wind_or_solar, days, mode, converged=True)

    def simulate(self, n: int) -> Tuple[Fleet, Fleet]:
        """Independent weather for every boat of every fleet.

        Returns:
            (wind_only, wind_or_solar) fleets, every boat arrived.
        """
        return self._completed(self.run(n, shared_weather=False))

    def parallel_simulate(self, n: int) -> Tuple[Fleet, Fleet]:
        """Shared daily weather: boat ``i`` of both fleets sees the same weather.

        Returns:
            (wind_only, wind_or_solar) fleets, every boat arrived.
        """
        return self._completed(self.run(n, shared_weather=True))

    @staticmethod
    def _completed(result: RaceResult) -> Tuple[Fleet, Fleet]:
        if not result.converged:
            raise ConvergenceError(
                f"Race did not finish within {result.days} days ({result.mode} weather)"
            )
        return result.fleets
