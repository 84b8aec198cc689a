"""A single boat and its per-day advance rule."""

from dataclasses import dataclass, field
from typing import List

from boatrace.config.schema import Propulsion, PropulsionProfile, Weather


@dataclass
class Vehicle:
    profile: PropulsionProfile
    finish_line: int
    history: List[int] = field(default_factory=lambda: [0])  # distance per day, day 0 first
    arrived: bool = False

    @property
    def propulsion(self) -> Propulsion:
        return self.profile.propulsion

    @property
    def distance(self) -> int:
        return self.history[-1]

    @property
    def days_taken(self) -> int:
        """Recorded days, including day 0."""
        return len(self.history)

    def advance(self, weather: Weather) -> int:
        """Advance one day under ``weather``.

        Every call before arrival records exactly one history entry, including
        the step that crosses the finish line (which may overshoot it). After
        arrival the boat is frozen.

        Returns:
            1 if a day was recorded, 0 if the boat had already arrived.
        """
        if self.arrived:
            return 0

        if self.propulsion is Propulsion.WIND_ONLY:
            gain = self.profile.wind_gain if weather.windy else 0
        elif self.propulsion is Propulsion.WIND_OR_SOLAR:
            if weather.windy:
                gain = self.profile.wind_gain
            elif weather.sunny:
                gain = self.profile.solar_gain
            else:
                gain = 0
        else:
            raise ValueError(f"Unknown propulsion: {self.propulsion}")

        if gain:
            new_dist = self.history[-1] + gain
            if new_dist >= self.finish_line:
                self.arrived = True
            self.history.append(new_dist)
        else:
            self.history.append(self.history[-1])
        return 1
