"""Vehicle record for a parked vehicle."""

from dataclasses import dataclass
from typing import Dict, Optional

from .charges import compute_charge
from .vehicle_type import VehicleType


@dataclass(frozen=True)
class Vehicle:
    """A parked vehicle with its frozen parking charge."""

    id: int
    plate: str
    vehicle_type: str
    duration_hours: float
    charge: float

    @classmethod
    def create(
        cls,
        id: int,
        plate: str,
        vehicle_type: str,
        duration_hours: float,
        rates: Optional[Dict[VehicleType, float]] = None,
    ) -> "Vehicle":
        """Build a record, computing the charge from type and duration."""
        charge = compute_charge(vehicle_type, duration_hours, rates)
        return cls(id, plate, vehicle_type, duration_hours, charge)

    @property
    def kind(self) -> Optional[VehicleType]:
        """Recognized vehicle category, or None for free-text types."""
        return VehicleType.classify(self.vehicle_type)
