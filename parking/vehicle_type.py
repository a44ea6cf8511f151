"""VehicleType enum for the recognized vehicle categories."""

from enum import Enum
from typing import Optional


class VehicleType(Enum):
    """Vehicle categories with their own hourly rate."""

    CAR = "car"
    BIKE = "bike"
    TRUCK = "truck"

    @classmethod
    def classify(cls, text: Optional[str]) -> Optional["VehicleType"]:
        """Match free-text type case-insensitively, or None if unrecognized."""
        if text is None:
            return None
        try:
            return cls(text.lower())
        except ValueError:
            return None
