"""Post-race validation of boat distance histories."""

import logging
from dataclasses import dataclass, field
from typing import List

from boatrace.fleet.fleet import Fleet
from boatrace.fleet.vehicle import Vehicle

logger = logging.getLogger(__name__)


@dataclass
class HistoryViolation:
    vehicle_id: int
    check: str
    message: str


@dataclass
class HistoryReport:
    propulsion: str
    n_vehicles: int
    violations: List[HistoryViolation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations

    def summary(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        lines = [
            f"[{status}] {self.propulsion}: {self.n_vehicles} boats, "
            f"{len(self.violations)} violations"
        ]
        for v in self.violations:
            lines.append(f"  boat {v.vehicle_id} {v.check}: {v.message}")
        return "\n".join(lines)


def _check_vehicle(vehicle_id: int, vehicle: Vehicle) -> List[HistoryViolation]:
    violations = []
    history = vehicle.history

    if not history or history[0] != 0:
        violations.append(HistoryViolation(
            vehicle_id, "start", f"history must start at 0, got {history[:1]}",
        ))
        return violations

    allowed = set(vehicle.profile.allowed_steps())
    for day in range(1, len(history)):
        step = history[day] - history[day - 1]
        if step not in allowed:
            violations.append(HistoryViolation(
                vehicle_id, "step", f"day {day} moved {step}, allowed {sorted(allowed)}",
            ))

    # Only the last entry may sit at or beyond the finish line
    crossed = [d for d, dist in enumerate(history) if dist >= vehicle.finish_line]
    if crossed and crossed[0] != len(history) - 1:
        violations.append(HistoryViolation(
            vehicle_id, "frozen",
            f"{len(history) - 1 - crossed[0]} entries recorded after crossing on day {crossed[0]}",
        ))

    reached = history[-1] >= vehicle.finish_line
    if vehicle.arrived != reached:
        violations.append(HistoryViolation(
            vehicle_id, "arrived",
            f"arrived={vehicle.arrived} but final distance is {history[-1]}",
        ))

    return violations


def check_fleet(fleet: Fleet) -> HistoryReport:
    """Validate every boat history of a fleet.

    Checks:
    - history starts at 0
    - each daily step is 0 or a gain allowed for the propulsion
    - nothing is recorded after the finish line is crossed
    - the arrived flag matches the final distance
    """
    report = HistoryReport(propulsion=fleet.propulsion.value, n_vehicles=len(fleet))
    for vehicle_id, vehicle in enumerate(fleet):
        report.violations.extend(_check_vehicle(vehicle_id, vehicle))

    if report.passed:
        logger.info(f"All history checks passed for {report.propulsion}")
    else:
        logger.warning(report.summary())
    return report
