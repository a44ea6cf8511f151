"""Summary statistics over the parked vehicles."""

from dataclasses import dataclass, field
from typing import Dict, Iterable

from .vehicle import Vehicle
from .vehicle_type import VehicleType


def _empty_counts() -> Dict[str, int]:
    return {kind.value: 0 for kind in VehicleType}


@dataclass
class Summary:
    """Totals for the dashboard. Unrecognized types count only in total."""

    total: int = 0
    total_charge: float = 0.0
    average_charge: float = 0.0
    count_by_type: Dict[str, int] = field(default_factory=_empty_counts)


def summarize(records: Iterable[Vehicle]) -> Summary:
    """Accumulate counts and charges in a single pass."""
    summary = Summary()
    for record in records:
        summary.total += 1
        summary.total_charge += record.charge
        kind = record.kind
        if kind is not None:
            summary.count_by_type[kind.value] += 1
    if summary.total > 0:
        summary.average_charge = summary.total_charge / summary.total
    return summary
