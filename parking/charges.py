"""Parking charge calculation."""

import logging
from typing import Dict, Optional

from .vehicle_type import VehicleType

logger = logging.getLogger(__name__)

# Per-hour rates
DEFAULT_RATES: Dict[VehicleType, float] = {
    VehicleType.CAR: 2.0,
    VehicleType.BIKE: 1.0,
    VehicleType.TRUCK: 3.0,
}

# Unrecognized types are billed as this
FALLBACK_TYPE = VehicleType.CAR


def rate_for(vehicle_type: str, rates: Optional[Dict[VehicleType, float]] = None) -> float:
    """
    Look up the hourly rate for a free-text vehicle type.

    Unrecognized types fall back to the car rate and log a warning.
    """
    rates = rates or DEFAULT_RATES
    kind = VehicleType.classify(vehicle_type)
    if kind is None:
        logger.warning(
            "Unknown vehicle type '%s'. Default charge applied as %s rate.",
            vehicle_type,
            FALLBACK_TYPE.value.capitalize(),
        )
        kind = FALLBACK_TYPE
    return rates.get(kind, DEFAULT_RATES[kind])


def compute_charge(
    vehicle_type: str,
    duration_hours: float,
    rates: Optional[Dict[VehicleType, float]] = None,
) -> float:
    """Charge = hourly rate x duration. Not rounded; rounding is for display only."""
    return rate_for(vehicle_type, rates) * duration_hours
