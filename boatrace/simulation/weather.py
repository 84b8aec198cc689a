"""Daily weather sources."""

from typing import List, Sequence

import numpy as np

from boatrace.config.constants import SUNNY_DISTRIBUTION, WINDY_DISTRIBUTION
from boatrace.config.schema import Weather


class WeatherGenerator:
    """Draws independent windy/sunny marginals from finite outcome sets.

    Windy is drawn before sunny on every call, so the draw order under a fixed
    seed is reproducible. No correlation between the two fields is modelled.
    """

    def __init__(
        self,
        rng: np.random.Generator,
        windy_distribution: Sequence[bool] = WINDY_DISTRIBUTION,
        sunny_distribution: Sequence[bool] = SUNNY_DISTRIBUTION,
    ):
        if len(windy_distribution) == 0 or len(sunny_distribution) == 0:
            raise ValueError("Weather distributions must not be empty")
        self.rng = rng
        self.windy = np.asarray(windy_distribution, dtype=bool)
        self.sunny = np.asarray(sunny_distribution, dtype=bool)

    @property
    def windy_probability(self) -> float:
        return float(self.windy.mean())

    @property
    def sunny_probability(self) -> float:
        return float(self.sunny.mean())

    def draw(self) -> Weather:
        windy = bool(self.rng.choice(self.windy))
        sunny = bool(self.rng.choice(self.sunny))
        return Weather(windy=windy, sunny=sunny)

    def draw_many(self, n: int) -> List[Weather]:
        return [self.draw() for _ in range(n)]


class ScriptedWeather:
    """Replays a fixed weather sequence in order (deterministic override)."""

    def __init__(self, sequence: Sequence[Weather]):
        self.sequence = list(sequence)
        self.position = 0

    @property
    def remaining(self) -> int:
        return len(self.sequence) - self.position

    def draw(self) -> Weather:
        if self.position >= len(self.sequence):
            raise IndexError(
                f"Scripted weather exhausted after {len(self.sequence)} draws"
            )
        weather = self.sequence[self.position]
        self.position += 1
        return weather

    def draw_many(self, n: int) -> List[Weather]:
        return [self.draw() for _ in range(n)]
