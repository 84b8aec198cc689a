"""Fleet factory: n fresh boats of one variant at the start line."""

import numbers

from boatrace.config.schema import PropulsionProfile
from boatrace.fleet.fleet import Fleet
from boatrace.fleet.vehicle import Vehicle


def create_fleet(n: int, profile: PropulsionProfile, finish_line: int) -> Fleet:
    """Create ``n`` boats with ``history=[0]`` and ``arrived=False``.

    Args:
        n: Number of boats, must be positive.
        profile: Gains shared by every boat of the fleet.
        finish_line: Distance at which a boat arrives.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n <= 0:
        raise ValueError(f"Fleet size must be a positive integer, got {n!r}")

    vehicles = [Vehicle(profile=profile, finish_line=finish_line) for _ in range(n)]
    return Fleet(vehicles, profile.propulsion)
