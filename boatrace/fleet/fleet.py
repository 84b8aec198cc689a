"""Fleet of same-variant boats advanced together."""

from typing import Iterator, List, Optional, Sequence

from boatrace.config.schema import Propulsion, Weather
from boatrace.fleet.vehicle import Vehicle


class Fleet:
    """Fixed-size, ordered collection of boats sharing one propulsion rule."""

    def __init__(self, vehicles: List[Vehicle], propulsion: Propulsion):
        for v in vehicles:
            if v.propulsion is not propulsion:
                raise ValueError(
                    f"Fleet of {propulsion.value} cannot hold a {v.propulsion.value} boat"
                )
        self.vehicles = vehicles
        self.propulsion = propulsion

    def __len__(self) -> int:
        return len(self.vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self.vehicles)

    def __getitem__(self, index: int) -> Vehicle:
        return self.vehicles[index]

    def advance_all(
        self,
        weathers: Optional[Sequence[Weather]] = None,
        generator=None,
    ) -> int:
        """Advance every boat one day.

        With ``weathers`` (shared mode) boat ``i`` gets ``weathers[i]``.
        Without it (independent mode) each boat draws its own weather from
        ``generator`` in index order; arrived boats still draw so the number
        of draws per day is fixed.

        Returns:
            Number of boats that recorded a day.
        """
        if weathers is not None:
            if len(weathers) != len(self.vehicles):
                raise ValueError(
                    f"Got {len(weathers)} weathers for a fleet of {len(self.vehicles)}"
                )
            return sum(v.advance(w) for v, w in zip(self.vehicles, weathers))

        if generator is None:
            raise ValueError("Independent weather mode needs a weather generator")
        steps = 0
        for v in self.vehicles:
            steps += v.advance(generator.draw())
        return steps

    def all_arrived(self) -> bool:
        """True iff every boat arrived; an empty fleet counts as arrived."""
        return all(v.arrived for v in self.vehicles)

    def n_arrived(self) -> int:
        return sum(1 for v in self.vehicles if v.arrived)
